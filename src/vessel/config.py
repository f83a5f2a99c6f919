"""Configuration: a frozen Settings schema resolved from the environment.

Resolution precedence, lowest to highest:

- field defaults on ``Settings``
- ``VESSEL_*`` environment variables (a ``.env`` file is honored)
- the innermost active ``config_scope``
- explicit ``resolve_config(**overrides)`` arguments

Environment values are read once and cached; call ``reset_env_cache`` after
changing ``os.environ`` at runtime.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vessel.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "VESSEL_"


class Settings(BaseModel):
    """Validated library settings.

    Attributes:
        validate_callbacks: Check callbacks and container arguments on every
            combinator call and raise ``ContractViolationError`` on misuse.
            Off by default to keep combinators cheap.
        repr_max_length: Longest payload repr shown by ``repr(container)``
            before truncation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    validate_callbacks: bool = Field(default=False)
    repr_max_length: int = Field(default=120, ge=8)


def load_env() -> dict[str, str]:
    """Collect ``VESSEL_*`` variables keyed by their Settings field name.

    Unknown names are skipped so that unrelated tooling sharing the prefix
    does not break resolution. Values stay strings; pydantic coerces them.
    """
    values: dict[str, str] = {}
    for key, raw in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name not in Settings.model_fields:
            log.debug("Ignoring unknown environment variable %s", key)
            continue
        values[field_name] = raw.strip()
    return values


def _validate(values: Mapping[str, Any], *, origin: str) -> Settings:
    try:
        return Settings.model_validate(dict(values))
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        hint = None
        if origin == "environment":
            hint = f"Check the {ENV_PREFIX}{field.upper()} environment variable."
        elif err.get("type") == "extra_forbidden":
            known = ", ".join(sorted(Settings.model_fields))
            hint = f"Known settings: {known}."
        raise ConfigurationError(
            f"Invalid {origin} setting {field!r}: {err.get('msg')}", hint=hint
        ) from e


@cache
def _env_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    settings = _validate(load_env(), origin="environment")
    log.debug("Resolved settings from environment: %r", settings)
    return settings


def reset_env_cache() -> None:
    """Forget cached environment settings so the next resolution re-reads them."""
    _env_settings.cache_clear()
    _lenient_env_settings.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "vessel_settings", default=None
)


def current_settings() -> Settings:
    """Return the active Settings without raising.

    Used on the combinator and repr paths, which must not fail. An invalid
    environment falls back to the defaults and is reported once as a warning;
    ``resolve_config()`` still raises for it.
    """
    return _AMBIENT.get() or _lenient_env_settings()


@cache
def _lenient_env_settings() -> Settings:
    try:
        return _env_settings()
    except ConfigurationError as e:
        log.warning("Ignoring invalid environment settings: %s (%s)", e, e.hint)
        return Settings()


def resolve_config(**overrides: Any) -> Settings:
    """Return the effective Settings for the current context.

    Args:
        **overrides: Field values that win over every other source.

    Raises:
        ConfigurationError: If a value fails validation or names an unknown
            setting.
    """
    base = _AMBIENT.get() or _env_settings()
    if not overrides:
        return base
    return _validate({**base.model_dump(), **overrides}, origin="override")


@contextmanager
def config_scope(**overrides: Any) -> Generator[Settings]:
    """Apply settings overrides for the duration of a ``with`` block.

    Scopes nest, and each sees the settings of its enclosing scope as its
    base. The ambient value lives in a ``ContextVar``, so threads and asyncio
    tasks started outside the block are unaffected.

    Example:
        with config_scope(validate_callbacks=True):
            Present(1).flat_map(lambda v: v + 1)  # raises ContractViolationError
    """
    cfg = resolve_config(**overrides)
    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)


__all__ = [
    "ENV_PREFIX",
    "Settings",
    "config_scope",
    "current_settings",
    "load_env",
    "reset_env_cache",
    "resolve_config",
]

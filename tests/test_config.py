"""Settings resolution: defaults, environment, scopes, and overrides."""

from __future__ import annotations

import asyncio
import logging
import os

from pydantic import ValidationError
import pytest

from vessel import (
    Absent,
    ConfigurationError,
    Present,
    Result,
    Settings,
    Success,
    config_scope,
    resolve_config,
)
from vessel.config import current_settings, load_env, reset_env_cache

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    cfg = resolve_config()
    assert cfg.validate_callbacks is False
    assert cfg.repr_max_length == 120


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        resolve_config().repr_max_length = 10  # type: ignore[misc]


def test_environment_values_are_coerced(monkeypatch) -> None:
    monkeypatch.setenv("VESSEL_VALIDATE_CALLBACKS", "true")
    monkeypatch.setenv("VESSEL_REPR_MAX_LENGTH", "32")
    reset_env_cache()

    cfg = resolve_config()
    assert cfg.validate_callbacks is True
    assert cfg.repr_max_length == 32


def test_environment_is_cached_until_reset(monkeypatch) -> None:
    assert resolve_config().repr_max_length == 120
    monkeypatch.setenv("VESSEL_REPR_MAX_LENGTH", "40")
    assert resolve_config().repr_max_length == 120
    reset_env_cache()
    assert resolve_config().repr_max_length == 40


def test_unknown_environment_variables_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("VESSEL_SOMETHING_ELSE", "1")
    assert "something_else" not in load_env()
    assert resolve_config() == Settings()


def test_invalid_environment_value_names_variable(monkeypatch) -> None:
    monkeypatch.setenv("VESSEL_REPR_MAX_LENGTH", "3")
    reset_env_cache()

    with pytest.raises(ConfigurationError) as exc:
        resolve_config()
    assert "repr_max_length" in str(exc.value)
    assert exc.value.hint is not None
    assert "VESSEL_REPR_MAX_LENGTH" in exc.value.hint


def test_invalid_boolean_rejected(monkeypatch) -> None:
    monkeypatch.setenv("VESSEL_VALIDATE_CALLBACKS", "sometimes")
    reset_env_cache()

    with pytest.raises(ConfigurationError):
        resolve_config()


def test_explicit_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("VESSEL_REPR_MAX_LENGTH", "32")
    reset_env_cache()

    assert resolve_config(repr_max_length=64).repr_max_length == 64


def test_unknown_override_rejected_with_hint() -> None:
    with pytest.raises(ConfigurationError) as exc:
        resolve_config(strictness=3)
    assert exc.value.hint is not None
    assert "validate_callbacks" in exc.value.hint


def test_scope_applies_and_restores() -> None:
    with config_scope(repr_max_length=16) as cfg:
        assert cfg.repr_max_length == 16
        assert resolve_config().repr_max_length == 16
        with config_scope(validate_callbacks=True) as inner:
            assert inner.repr_max_length == 16
            assert inner.validate_callbacks is True
        assert resolve_config().validate_callbacks is False
    assert resolve_config().repr_max_length == 120


def test_scope_restores_after_exception() -> None:
    with pytest.raises(RuntimeError), config_scope(repr_max_length=16):
        raise RuntimeError("inside scope")
    assert resolve_config().repr_max_length == 120


def test_scope_is_isolated_per_task() -> None:
    async def outside() -> int:
        return resolve_config().repr_max_length

    async def main() -> tuple[int, int]:
        task = asyncio.create_task(outside())
        with config_scope(repr_max_length=16):
            inside = resolve_config().repr_max_length
            return inside, await task

    assert asyncio.run(main()) == (16, 120)


def test_repr_truncation_follows_settings() -> None:
    with config_scope(repr_max_length=10):
        assert repr(Present("x" * 50)) == "Present('xxxxxx...)"
    assert repr(Present("x" * 5)) == "Present('xxxxx')"


def test_invalid_environment_does_not_break_combinators(
    monkeypatch, caplog
) -> None:
    caplog.set_level(logging.WARNING, logger="vessel.config")
    monkeypatch.setenv("VESSEL_REPR_MAX_LENGTH", "3")
    reset_env_cache()

    assert Present(1).map(str) == Present("1")
    assert Absent().map(str).is_absent()
    assert Success(1).map(str) == Success("1")
    assert Result.combine([Success(1), Success(2)]).unwrap() == [1, 2]
    assert repr(Present(1)) == "Present(1)"
    assert current_settings() == Settings()
    assert any("VESSEL_REPR_MAX_LENGTH" in r.getMessage() for r in caplog.records)

    with pytest.raises(ConfigurationError):
        resolve_config()


@pytest.mark.allow_dotenv
def test_dotenv_in_working_directory_is_read(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("VESSEL_REPR_MAX_LENGTH=16\n")
    monkeypatch.chdir(tmp_path)
    reset_env_cache()

    try:
        assert resolve_config().repr_max_length == 16
    finally:
        os.environ.pop("VESSEL_REPR_MAX_LENGTH", None)

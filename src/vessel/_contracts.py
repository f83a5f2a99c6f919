"""Internal contract helpers shared by the container modules.

Holds the ``Container`` base that gives both unions their common ``match``
dispatch capability, the opt-in callback validation used by every combinator,
and repr formatting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import typing

from vessel.config import current_settings
from vessel.errors import ContractViolationError


class Container(ABC):
    """Shared base of ``Option`` and ``Result``.

    ``variants`` names the two handler keywords accepted by ``match``.
    """

    __slots__ = ()

    variants: typing.ClassVar[tuple[str, str]]

    @abstractmethod
    def match(self, **handlers: typing.Callable[..., typing.Any]) -> typing.Any:
        """Dispatch to the handler named after the active variant."""


def validation_enabled() -> bool:
    return current_settings().validate_callbacks


def _require(
    *, condition: bool, message: str, operation: str, hint: str | None = None
) -> None:
    """Centralized contract check with the operation name as context."""
    if not condition:
        raise ContractViolationError(f"{operation}: {message}", hint=hint)


def check_callable(func: typing.Any, operation: str) -> None:
    """Reject a non-callable callback when validation is enabled."""
    if validation_enabled():
        _require(
            condition=callable(func),
            message=f"expected a callable, got {type(func).__name__}",
            operation=operation,
        )


def check_kind(
    value: typing.Any, kind: type[Container], operation: str, *, what: str = "argument"
) -> None:
    """Reject a value of the wrong container kind when validation is enabled."""
    if validation_enabled():
        _require(
            condition=isinstance(value, kind),
            message=f"{what} must be {kind.__name__}, got {type(value).__name__}",
            operation=operation,
            hint=f"Wrap plain values with the {kind.__name__} factories first.",
        )


def check_handlers(handlers: typing.Mapping[str, typing.Any], operation: str) -> None:
    """Reject non-callable match handlers when validation is enabled."""
    if validation_enabled():
        for name, handler in handlers.items():
            _require(
                condition=callable(handler),
                message=f"handler {name!r} is not callable",
                operation=operation,
            )


def payload_repr(value: typing.Any) -> str:
    """Return ``repr(value)`` truncated to the configured length."""
    text = repr(value)
    limit = current_settings().repr_max_length
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."

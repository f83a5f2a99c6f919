"""Exception hierarchy for vessel."""

from __future__ import annotations

from typing import Any


class VesselError(Exception):
    """Base exception for all vessel errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigurationError(VesselError):
    """Configuration validation or resolution failed."""


class ContractViolationError(VesselError, TypeError):
    """A callback or argument broke the combinator contract.

    Only raised when callback validation is enabled, or when ``match`` is
    handed something that is not a container.
    """


class UnwrapError(VesselError):
    """A forced extraction was attempted on the wrong variant."""


class EmptyValueError(UnwrapError):
    """``unwrap()`` was called on an absent Option."""

    def __init__(self, message: str = "Called unwrap on an absent value") -> None:
        super().__init__(
            message,
            hint="Use unwrap_or() or match() when the value may be absent.",
        )


class ExpectationError(UnwrapError):
    """``expect()`` or ``expect_err()`` met the wrong variant.

    The message is exactly the one supplied by the caller.
    """

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class UnwrapOnFailureError(UnwrapError):
    """``unwrap()`` was called on a failed Result."""

    def __init__(self, error: Any) -> None:
        super().__init__(
            f"Called unwrap on a failure value: {error}",
            hint="Use unwrap_or_else() or match() to handle the failure branch.",
        )
        self.error = error


class UnwrapErrOnSuccessError(UnwrapError):
    """``unwrap_err()`` was called on a successful Result."""

    def __init__(self, value: Any) -> None:
        super().__init__("Called unwrap_err on a success value")
        self.value = value


class FaultError(VesselError):
    """Normalized wrapper for a captured fault that is not an ``Exception``.

    Produced only by ``Result.from_throwable``; ``fault`` keeps the original.
    """

    def __init__(self, fault: BaseException) -> None:
        super().__init__(str(fault))
        self.fault = fault
        self.__cause__ = fault

"""Free-function form of the containers' exhaustive ``match`` dispatch.

Useful where a method call is awkward, e.g. inside ``map()`` or
``functools.partial`` pipelines::

    labels = map(partial(match, present=str, absent=lambda: "-"), options)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from vessel._contracts import Container
from vessel.errors import ContractViolationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from vessel.option import Option
    from vessel.result import Result


@overload
def match[T, U](
    value: Option[T], /, *, present: Callable[[T], U], absent: Callable[[], U]
) -> U: ...


@overload
def match[T, E, U](
    value: Result[T, E], /, *, success: Callable[[T], U], failure: Callable[[E], U]
) -> U: ...


def match(value: Any, /, **handlers: Callable[..., Any]) -> Any:
    """Dispatch ``value`` to the handler named after its active variant.

    Delegates to ``value.match(**handlers)``; the container's own signature
    decides which handler names are accepted, so a handler set shaped for the
    other container type raises ``TypeError``.

    Raises:
        ContractViolationError: If ``value`` is not an Option or Result.
        TypeError: If a handler is missing or an unexpected one is given.
    """
    if not isinstance(value, Container):
        raise ContractViolationError(
            f"match: expected an Option or Result, got {type(value).__name__}",
            hint="Wrap plain values with Option.from_nullable() or Success() first.",
        )
    expected = set(value.variants)
    if set(handlers) != expected:
        missing = sorted(expected - set(handlers))
        unexpected = sorted(set(handlers) - expected)
        raise TypeError(
            f"match takes handlers {sorted(expected)} for this value; "
            f"missing {missing}, unexpected {unexpected}"
        )
    return value.match(**handlers)


__all__ = ["match"]

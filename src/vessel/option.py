"""Option: an explicit, immutable stand-in for "value or nothing".

``Option[T]`` is a closed union of two private variants. Build instances with
the ``Present`` and ``Absent`` factories or ``Option.from_nullable``; the
concrete classes are not part of the public surface.

Example:
    name = Option.from_nullable(user.get("name"))
    greeting = name.map(lambda n: f"Hello, {n}").unwrap_or("Hello, stranger")
"""

from __future__ import annotations

from abc import abstractmethod
import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn

from vessel._contracts import (
    Container,
    check_callable,
    check_handlers,
    check_kind,
    payload_repr,
)
from vessel.errors import EmptyValueError, ExpectationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


class Option[T](Container):
    """Either a present value or the absence of one.

    A present ``None``, ``0``, ``False`` or ``""`` is still present: absence is
    a state of the container, never a property of the payload.
    """

    __slots__ = ()

    variants: ClassVar[tuple[str, str]] = ("present", "absent")

    @abstractmethod
    def is_present(self) -> bool:
        """Return True if a value is held."""

    @abstractmethod
    def is_absent(self) -> bool:
        """Return True if no value is held."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value.

        Raises:
            EmptyValueError: If the option is absent.
        """

    @abstractmethod
    def expect(self, message: str) -> T:
        """Return the value, or raise ``ExpectationError(message)`` if absent."""

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if absent."""

    @abstractmethod
    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the value, or ``fn()`` if absent. ``fn`` is not called otherwise."""

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to a present value and wrap the outcome."""

    @abstractmethod
    def flat_map[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Apply ``fn`` to a present value and return its Option as-is."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep a present value only if ``predicate`` accepts it."""

    @abstractmethod
    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` if this option is present, else absent."""

    @abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return this option if present, else ``other``."""

    @abstractmethod
    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Return this option if present, else ``fn()``."""

    @abstractmethod
    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever of ``self`` and ``other`` is present, if exactly one is."""

    @abstractmethod
    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two present values as ``(self_value, other_value)``."""

    @abstractmethod
    def inspect(self, fn: Callable[[T], Any]) -> Option[T]:
        """Call ``fn`` with a present value for its side effect; return self."""

    @abstractmethod
    def match[U](self, *, present: Callable[[T], U], absent: Callable[[], U]) -> U:
        """Exhaustive dispatch: ``present(value)`` or ``absent()``.

        Example:
            Present(42).match(present=lambda v: f"got {v}", absent=lambda: "nothing")
        """

    @abstractmethod
    def to_optional(self) -> T | None:
        """Return the value, or ``None`` if absent. For interop at API boundaries."""

    def to_nullable(self) -> T | None:
        """Alias of ``to_optional``; Python has a single nullish sentinel."""
        return self.to_optional()

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @staticmethod
    def from_nullable[V](value: V | None) -> Option[V]:
        """Wrap ``value``, treating only ``None`` as absent.

        Falsy values (``0``, ``False``, ``""``) and NaN are present.
        """
        return Absent() if value is None else Present(value)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class _Present[T](Option[T]):
    value: T

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        check_callable(fn, "unwrap_or_else")
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        check_callable(fn, "map")
        return _Present(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        check_callable(fn, "flat_map")
        out = fn(self.value)
        check_kind(out, Option, "flat_map", what="callback result")
        return out

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        check_callable(predicate, "filter")
        return self if predicate(self.value) else _ABSENT

    def and_[U](self, other: Option[U]) -> Option[U]:
        check_kind(other, Option, "and_")
        return other

    def or_(self, other: Option[T]) -> Option[T]:
        check_kind(other, Option, "or_")
        return self

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        check_callable(fn, "or_else")
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        check_kind(other, Option, "xor")
        return self if other.is_absent() else _ABSENT

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        check_kind(other, Option, "zip")
        if other.is_absent():
            return _ABSENT
        return _Present((self.value, other.unwrap()))

    def inspect(self, fn: Callable[[T], Any]) -> Option[T]:
        check_callable(fn, "inspect")
        fn(self.value)
        return self

    def match[U](self, *, present: Callable[[T], U], absent: Callable[[], U]) -> U:
        check_handlers({"present": present, "absent": absent}, "match")
        return present(self.value)

    def to_optional(self) -> T | None:
        return self.value

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Present({payload_repr(self.value)})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class _Absent(Option[Any]):
    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise EmptyValueError

    def expect(self, message: str) -> NoReturn:
        raise ExpectationError(message)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, fn: Callable[[], T]) -> T:
        check_callable(fn, "unwrap_or_else")
        return fn()

    def map(self, fn: Callable[[Any], Any]) -> Option[Any]:
        check_callable(fn, "map")
        return self

    def flat_map(self, fn: Callable[[Any], Option[Any]]) -> Option[Any]:
        check_callable(fn, "flat_map")
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Option[Any]:
        check_callable(predicate, "filter")
        return self

    def and_(self, other: Option[Any]) -> Option[Any]:
        check_kind(other, Option, "and_")
        return self

    def or_(self, other: Option[Any]) -> Option[Any]:
        check_kind(other, Option, "or_")
        return other

    def or_else(self, fn: Callable[[], Option[Any]]) -> Option[Any]:
        check_callable(fn, "or_else")
        out = fn()
        check_kind(out, Option, "or_else", what="callback result")
        return out

    def xor(self, other: Option[Any]) -> Option[Any]:
        check_kind(other, Option, "xor")
        return other if other.is_present() else self

    def zip(self, other: Option[Any]) -> Option[Any]:
        check_kind(other, Option, "zip")
        return self

    def inspect(self, fn: Callable[[Any], Any]) -> Option[Any]:
        check_callable(fn, "inspect")
        return self

    def match[U](self, *, present: Callable[[Any], U], absent: Callable[[], U]) -> U:
        check_handlers({"present": present, "absent": absent}, "match")
        return absent()

    def to_optional(self) -> None:
        return None

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "Absent()"


_ABSENT: Option[Any] = _Absent()


def Present[T](value: T) -> Option[T]:  # noqa: N802
    """Create an Option holding ``value`` (which may itself be falsy or None)."""
    return _Present(value)


def Absent() -> Option[Any]:  # noqa: N802
    """Return the empty Option. Every call returns the same instance."""
    return _ABSENT


__all__ = ["Absent", "Option", "Present"]

"""Result: explicit success-or-failure values instead of raised exceptions.

``Result[T, E]`` is a closed union of two private variants built with the
``Success`` and ``Failure`` factories. ``Result.from_throwable`` is the
boundary where raised exceptions become values; ``Result.combine`` collects
a sequence of results into one.

Example:
    parsed = Result.from_throwable(lambda: json.loads(raw))
    config = parsed.map(normalize).unwrap_or({})
"""

from __future__ import annotations

from abc import abstractmethod
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn

from vessel._contracts import (
    Container,
    check_callable,
    check_handlers,
    check_kind,
    payload_repr,
)
from vessel.errors import (
    ExpectationError,
    FaultError,
    UnwrapErrOnSuccessError,
    UnwrapOnFailureError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

log = logging.getLogger(__name__)


class Result[T, E = str](Container):
    """Either a success value or a failure error; never both."""

    __slots__ = ()

    variants: ClassVar[tuple[str, str]] = ("success", "failure")

    @abstractmethod
    def is_success(self) -> bool:
        """Return True for a success."""

    @abstractmethod
    def is_failure(self) -> bool:
        """Return True for a failure."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapOnFailureError: If this is a failure. The message embeds
                ``str(error)`` and an exception payload is chained as the cause.
        """

    @abstractmethod
    def unwrap_err(self) -> E:
        """Return the failure error.

        Raises:
            UnwrapErrOnSuccessError: If this is a success.
        """

    @abstractmethod
    def expect(self, message: str) -> T:
        """Return the success value, or raise ``ExpectationError(message)``."""

    @abstractmethod
    def expect_err(self, message: str) -> E:
        """Return the failure error, or raise ``ExpectationError(message)``."""

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value, or ``default`` for a failure."""

    @abstractmethod
    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the success value, or ``fn(error)`` for a failure."""

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value; failures pass through untouched."""

    @abstractmethod
    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure error; successes pass through untouched."""

    @abstractmethod
    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Return ``fn(value)`` for a success, else the already-built ``default``."""

    @abstractmethod
    def map_or_else[U](
        self, error_fn: Callable[[E], U], success_fn: Callable[[T], U]
    ) -> U:
        """Return ``success_fn(value)`` or ``error_fn(error)``; exactly one runs."""

    @abstractmethod
    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step; its Result is returned as-is."""

    @abstractmethod
    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` for a success, else this failure."""

    @abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return this success, else ``other``."""

    @abstractmethod
    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return this success, else ``fn(error)``."""

    @abstractmethod
    def inspect(self, fn: Callable[[T], Any]) -> Result[T, E]:
        """Call ``fn(value)`` on a success for its side effect; return self."""

    @abstractmethod
    def inspect_err(self, fn: Callable[[E], Any]) -> Result[T, E]:
        """Call ``fn(error)`` on a failure for its side effect; return self."""

    @abstractmethod
    def match[U](
        self, *, success: Callable[[T], U], failure: Callable[[E], U]
    ) -> U:
        """Exhaustive dispatch: ``success(value)`` or ``failure(error)``."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @staticmethod
    def from_throwable[V](
        fn: Callable[[], V],
        *,
        catch: tuple[type[BaseException], ...] = (Exception,),
    ) -> Result[V, Exception]:
        """Call ``fn`` and capture an exception it raises as a failure.

        Args:
            fn: Zero-argument callable to invoke.
            catch: Exception types to capture. Anything else propagates.

        Returns:
            ``Success(fn())``, or ``Failure(exc)`` for a captured ``Exception``.
            A captured fault outside the ``Exception`` hierarchy (possible only
            when ``catch`` is widened, e.g. to ``SystemExit``) is normalized to
            a ``FaultError`` carrying ``str(fault)`` as its message.
        """
        check_callable(fn, "from_throwable")
        try:
            value = fn()
        except catch as exc:
            log.debug(
                "from_throwable captured %s from %r", type(exc).__name__, fn
            )
            error = exc if isinstance(exc, Exception) else FaultError(exc)
            return _Failure(error)
        return _Success(value)

    @staticmethod
    def combine[V, X](results: Iterable[Result[V, X]]) -> Result[list[V], X]:
        """Collect results left to right into ``Success([values...])``.

        The first failure is returned as soon as it is seen; later elements
        are not consumed. An empty input yields ``Success([])``.
        """
        values: list[V] = []
        for idx, result in enumerate(results):
            check_kind(result, Result, "combine", what=f"element {idx}")
            if result.is_failure():
                log.debug("combine short-circuited at index %d", idx)
                return result  # type: ignore[return-value]
            values.append(result.unwrap())
        return _Success(values)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class _Success[T, E](Result[T, E]):
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapErrOnSuccessError(self.value)

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> NoReturn:
        raise ExpectationError(message, payload=self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        check_callable(fn, "unwrap_or_else")
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        check_callable(fn, "map")
        return _Success(fn(self.value))

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        check_callable(fn, "map_err")
        return _Success(self.value)

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        check_callable(fn, "map_or")
        return fn(self.value)

    def map_or_else[U](
        self, error_fn: Callable[[E], U], success_fn: Callable[[T], U]
    ) -> U:
        check_callable(error_fn, "map_or_else")
        check_callable(success_fn, "map_or_else")
        return success_fn(self.value)

    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        check_callable(fn, "flat_map")
        out = fn(self.value)
        check_kind(out, Result, "flat_map", what="callback result")
        return out

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        check_kind(other, Result, "and_")
        return other

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        check_kind(other, Result, "or_")
        return _Success(self.value)

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        check_callable(fn, "or_else")
        return _Success(self.value)

    def inspect(self, fn: Callable[[T], Any]) -> Result[T, E]:
        check_callable(fn, "inspect")
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[E], Any]) -> Result[T, E]:
        check_callable(fn, "inspect_err")
        return self

    def match[U](
        self, *, success: Callable[[T], U], failure: Callable[[E], U]
    ) -> U:
        check_handlers({"success": success, "failure": failure}, "match")
        return success(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Success({payload_repr(self.value)})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class _Failure[T, E](Result[T, E]):
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapOnFailureError(self.error) from _as_cause(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, message: str) -> NoReturn:
        raise ExpectationError(message, payload=self.error) from _as_cause(self.error)

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        check_callable(fn, "unwrap_or_else")
        return fn(self.error)

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        check_callable(fn, "map")
        return _Failure(self.error)

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        check_callable(fn, "map_err")
        return _Failure(fn(self.error))

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        check_callable(fn, "map_or")
        return default

    def map_or_else[U](
        self, error_fn: Callable[[E], U], success_fn: Callable[[T], U]
    ) -> U:
        check_callable(error_fn, "map_or_else")
        check_callable(success_fn, "map_or_else")
        return error_fn(self.error)

    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        check_callable(fn, "flat_map")
        return _Failure(self.error)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        check_kind(other, Result, "and_")
        return _Failure(self.error)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        check_kind(other, Result, "or_")
        return other

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        check_callable(fn, "or_else")
        out = fn(self.error)
        check_kind(out, Result, "or_else", what="callback result")
        return out

    def inspect(self, fn: Callable[[T], Any]) -> Result[T, E]:
        check_callable(fn, "inspect")
        return self

    def inspect_err(self, fn: Callable[[E], Any]) -> Result[T, E]:
        check_callable(fn, "inspect_err")
        fn(self.error)
        return self

    def match[U](
        self, *, success: Callable[[T], U], failure: Callable[[E], U]
    ) -> U:
        check_handlers({"success": success, "failure": failure}, "match")
        return failure(self.error)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return f"Failure({payload_repr(self.error)})"


def _as_cause(error: object) -> BaseException | None:
    return error if isinstance(error, BaseException) else None


def Success[T](value: T) -> Result[T, Any]:  # noqa: N802
    """Create a successful Result holding ``value``."""
    return _Success(value)


def Failure[E](error: E) -> Result[Any, E]:  # noqa: N802
    """Create a failed Result holding ``error``."""
    return _Failure(error)


__all__ = ["Failure", "Result", "Success"]

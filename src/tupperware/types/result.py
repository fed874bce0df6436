"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import field
from typing import Any, NoReturn, final

from tupperware._config import get_settings
from tupperware._internal.equality import same_value, value_hash
from tupperware._internal.inspection import check_inspected
from tupperware._internal.sealed import Sealed, variant
from tupperware.errors import UnwrapOnErrError, UnwrapOnOkError
from tupperware.types.option import Nothing, Option, of

__all__ = ['Err', 'Ok', 'Result', 'err', 'ok']


class Result[T, E](Sealed, ABC):
    """The outcome of a computation: :class:`Ok` with a value or :class:`Err` with an error.

    Like Option, the hierarchy is closed to its two variants. ``get_ok`` and
    ``get_err`` bridge a Result into the Option family.

    Examples:
        >>> ok(5).map(lambda x: x * 2).unwrap()
        10
        >>> err('bad').map_err(str.upper).unwrap_err()
        'BAD'
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool:
        """Return True if the result is Ok. Counts as inspecting the result."""

    @abstractmethod
    def is_err(self) -> bool:
        """Return True if the result is Err. Counts as inspecting the result."""

    @abstractmethod
    def get_ok(self) -> Option[T]:
        """Convert to Option: the Ok value wrapped with :func:`of`, or Nothing for Err."""

    @abstractmethod
    def get_err(self) -> Option[E]:
        """Convert to Option: the error wrapped with :func:`of`, or Nothing for Ok."""

    @abstractmethod
    def unwrap(self, message: str | None = None) -> T:
        """Return the Ok value.

        Args:
            message: Detail for the error raised on Err.

        Raises:
            UncheckedUnwrapError: Strict discipline is on and the result was never inspected.
            UnwrapOnErrError: The result is Err. When the error is an exception
                it is chained as the cause.
        """

    @abstractmethod
    def unwrap_err(self, message: str | None = None) -> E:
        """Return the Err error.

        Raises:
            UncheckedUnwrapError: Strict discipline is on and the result was never inspected.
            UnwrapOnOkError: The result is Ok.
        """

    def expect(self, message: str) -> T:
        """Return the Ok value, failing with ``message`` on Err."""
        return self.unwrap(message)

    def expect_err(self, message: str) -> E:
        """Return the Err error, failing with ``message`` on Ok."""
        return self.unwrap_err(message)

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the Ok value, or ``default`` on Err."""

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Return the Ok value, or ``f(error)`` on Err.

        ``f`` is never called on Ok.
        """

    @abstractmethod
    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the Ok value; Err passes through and ``f`` is not called."""

    @abstractmethod
    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error; Ok passes through and ``f`` is not called."""

    @abstractmethod
    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the Ok value, or return ``default`` on Err."""

    @abstractmethod
    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the Ok value, or ``default(error)`` on Err."""

    @abstractmethod
    def flat_map[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning function on Ok; Err passes through unchanged.

        Also known as and_then or bind.

        Examples:
            >>> half = lambda x: ok(x // 2) if x % 2 == 0 else err(f'{x} is odd')
            >>> ok(8).flat_map(half).flat_map(half)
            Ok(value=2)
            >>> ok(6).flat_map(half).flat_map(half)
            Err(error='3 is odd')
        """

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for :meth:`flat_map`."""
        return self.flat_map(f)

    @abstractmethod
    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if this is Ok, else this Err."""

    @abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return this result if it is Ok, else ``other``."""

    @abstractmethod
    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err with ``f(error)``; Ok is returned as is and ``f`` is not called."""

    @abstractmethod
    def match[U, F](self, *, ok: Callable[[T], U], err: Callable[[E], F]) -> U | F:
        """Call exactly one of ``ok`` (with the value) or ``err`` (with the error)."""

    @abstractmethod
    def clone(self) -> Result[T, E]:
        """Return a new, independent result of the same variant (shallow)."""

    @abstractmethod
    def equals(self, other: Result[Any, Any]) -> bool:
        """Return True if both are the same variant holding the same payload.

        Payloads compare by identity, except scalars which compare by value.
        """

    @abstractmethod
    def has_value(self, value: Any) -> bool:
        """Return True if the payload present (value or error) is ``value``."""

    @abstractmethod
    def contains(self, predicate: Callable[[Any], bool]) -> bool:
        """Return ``predicate(payload)`` for whichever payload is present."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if isinstance(self, Ok):
            return hash((Ok, value_hash(self.value)))
        return hash((Err, value_hash(self.error)))


@final
@variant
class Ok[T](Result[T, Any]):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> str(Ok(42))
        'Ok( 42 )'
    """

    value: T
    _inspected: bool = field(default=False, init=False, repr=False, compare=False)

    def _mark_inspected(self) -> None:
        object.__setattr__(self, '_inspected', True)

    def __str__(self) -> str:
        return f'Ok( {self.value} )'

    def is_ok(self) -> bool:
        self._mark_inspected()
        return True

    def is_err(self) -> bool:
        self._mark_inspected()
        return False

    def get_ok(self) -> Option[T]:
        return of(self.value)

    def get_err(self) -> Nothing:
        return Nothing()

    def unwrap(self, message: str | None = None) -> T:  # noqa: ARG002
        check_inspected(self._inspected)
        return self.value

    def unwrap_err(self, message: str | None = None) -> NoReturn:
        check_inspected(self._inspected)
        raise UnwrapOnOkError(message)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err[F](self, f: Callable[[Any], F]) -> Ok[T]:  # noqa: ARG002
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[U](self, default: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def flat_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        return other

    def or_[F](self, other: Result[T, F]) -> Ok[T]:  # noqa: ARG002
        return self

    def or_else[F](self, f: Callable[[Any], Result[T, F]]) -> Ok[T]:  # noqa: ARG002
        return self

    def match[U, F](self, *, ok: Callable[[T], U], err: Callable[[Any], F]) -> U | F:  # noqa: ARG002
        return ok(self.value)

    def clone(self) -> Ok[T]:
        return Ok(self.value)

    def equals(self, other: Result[Any, Any]) -> bool:
        return isinstance(other, Ok) and same_value(self.value, other.value)

    def has_value(self, value: Any) -> bool:
        return same_value(self.value, value)

    def contains(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)


@final
@variant
class Err[E](Result[Any, E]):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('something went wrong').unwrap_or(0)
        0
        >>> str(Err('boom'))
        'Err( boom )'
    """

    error: E
    _inspected: bool = field(default=False, init=False, repr=False, compare=False)

    def _mark_inspected(self) -> None:
        object.__setattr__(self, '_inspected', True)

    def __str__(self) -> str:
        return f'Err( {self.error} )'

    def is_ok(self) -> bool:
        self._mark_inspected()
        return False

    def is_err(self) -> bool:
        self._mark_inspected()
        return True

    def get_ok(self) -> Nothing:
        return Nothing()

    def get_err(self) -> Option[E]:
        return of(self.error)

    def unwrap(self, message: str | None = None) -> NoReturn:
        check_inspected(self._inspected)
        if message is None:
            message = f'Called unwrap on an Err value: {self.error!r}'
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapOnErrError(message) from cause

    def unwrap_err(self, message: str | None = None) -> E:  # noqa: ARG002
        check_inspected(self._inspected)
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def map[U](self, f: Callable[[Any], U]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default(self.error)

    def flat_map[U](self, f: Callable[[Any], Result[U, E]]) -> Err[E]:  # noqa: ARG002
        return self

    def and_[U](self, other: Result[U, E]) -> Err[E]:  # noqa: ARG002
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return f(self.error)

    def match[U, F](self, *, ok: Callable[[Any], U], err: Callable[[E], F]) -> U | F:  # noqa: ARG002
        return err(self.error)

    def clone(self) -> Err[E]:
        return Err(self.error)

    def equals(self, other: Result[Any, Any]) -> bool:
        return isinstance(other, Err) and same_value(self.error, other.error)

    def has_value(self, value: Any) -> bool:
        return same_value(self.error, value)

    def contains(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self.error)


def ok[T](value: T) -> Result[T, Any]:
    """Create an Ok.

    With the ``reject_none`` setting on, ``ok(None)`` returns
    ``Err(TypeError(...))`` instead.
    """
    if value is None and get_settings().reject_none:
        return Err(TypeError('Cannot create an Ok containing None.'))
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Create an Err.

    With the ``reject_none`` setting on, ``err(None)`` returns
    ``Err(TypeError(...))`` instead.
    """
    if error is None and get_settings().reject_none:
        return Err(TypeError('Cannot create an Err containing None.'))
    return Err(error)

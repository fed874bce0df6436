"""Validation type: Success[T] | Failure[E] for collecting every failed check.

Where ``Result.flat_map`` stops at the first error, ``Validation.assert_``
keeps going and concatenates the failures of every check, left to right::

    name_ok.assert_(age_ok).assert_(email_ok)

Validation is built on Option only; it never wraps a Result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, final

from tupperware._internal.sealed import Sealed, variant
from tupperware.errors import InvalidArgumentError
from tupperware.types.option import Nothing, Option, Some, of

__all__ = ['Failure', 'Success', 'Validation', 'assert_all', 'failure', 'success']


class Validation[T, E](Sealed, ABC):
    """A checked value: :class:`Success` or :class:`Failure` with a non-empty error list."""

    __slots__ = ()

    @abstractmethod
    def is_success(self) -> bool: ...

    @abstractmethod
    def is_failure(self) -> bool: ...

    @abstractmethod
    def get_success(self) -> Option[T]:
        """The success value wrapped with :func:`of`, or Nothing for Failure."""

    @abstractmethod
    def get_failure(self) -> Option[list[E]]:
        """Some(errors) for Failure, Nothing for Success."""

    @abstractmethod
    def assert_(self, other: Validation[T, E]) -> Validation[T, E]:
        """Combine two validations, accumulating failures.

        * Success.assert_(other) is ``other``.
        * Failure.assert_(Failure) is a new Failure with both error lists, left first.
        * Failure.assert_(Success) is a new Failure with the left errors.

        Examples:
            >>> failure('a').assert_(failure('b')).assert_(failure('c')).get_failure().unwrap()
            ['a', 'b', 'c']
            >>> success(1).assert_(success(2)).get_success().unwrap()
            2
        """

    @abstractmethod
    def flat_map[U](self, f: Callable[[T], Validation[U, E]]) -> Validation[U, E]:
        """Chain a Validation-returning function on Success.

        Fail-fast: a Failure is returned unchanged and ``f`` is not called.
        """

    @abstractmethod
    def or_(self, other: Validation[T, E]) -> Validation[T, E]:
        """Return this validation if it is a Success, else ``other``."""

    @abstractmethod
    def or_else(self, f: Callable[[list[E]], Validation[T, E]]) -> Validation[T, E]:
        """Return this validation if it is a Success, else ``f(errors)``."""

    @abstractmethod
    def map_success[U](self, f: Callable[[T], U]) -> Validation[U, E]:
        """Transform the success value; a Failure passes through."""

    @abstractmethod
    def map_failure[F](self, f: Callable[[list[E]], F]) -> Validation[T, F]:
        """Replace the error list with ``[f(errors)]``; a Success passes through."""

    @abstractmethod
    def match[U, V](self, *, success: Callable[[T], U], failure: Callable[[list[E]], V]) -> U | V:
        """Call exactly one of ``success`` (with the value) or ``failure`` (with the errors)."""


@final
@variant
class Success[T](Validation[T, Any]):
    """Successful variant of Validation."""

    value: T

    def __str__(self) -> str:
        return f'Success( {self.value} )'

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get_success(self) -> Option[T]:
        return of(self.value)

    def get_failure(self) -> Nothing:
        return Nothing()

    def assert_[E](self, other: Validation[T, E]) -> Validation[T, E]:
        return other

    def flat_map[U, E](self, f: Callable[[T], Validation[U, E]]) -> Validation[U, E]:
        return f(self.value)

    def or_(self, other: Validation[T, Any]) -> Success[T]:  # noqa: ARG002
        return self

    def or_else(self, f: Callable[[list[Any]], Validation[T, Any]]) -> Success[T]:  # noqa: ARG002
        return self

    def map_success[U](self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self.value))

    def map_failure[F](self, f: Callable[[list[Any]], F]) -> Success[T]:  # noqa: ARG002
        return self

    def match[U, V](self, *, success: Callable[[T], U], failure: Callable[[list[Any]], V]) -> U | V:  # noqa: ARG002
        return success(self.value)


@final
@variant
class Failure[E](Validation[Any, E]):
    """Failed variant of Validation holding an ordered, non-empty sequence of errors.

    ``errors`` may be any iterable other than a string; it is stored as a
    tuple. Callbacks and :meth:`get_failure` receive a fresh list copy.
    Use :func:`failure` to build one from a single error.

    Raises:
        InvalidArgumentError: If ``errors`` is empty or is a str/bytes.
    """

    errors: tuple[E, ...]

    def __post_init__(self) -> None:
        if isinstance(self.errors, str | bytes):
            raise InvalidArgumentError('Failure takes a collection of errors; use failure() for a single one')
        errors = tuple(self.errors)
        if not errors:
            raise InvalidArgumentError('A Failure needs at least one error')
        object.__setattr__(self, 'errors', errors)

    def __str__(self) -> str:
        return f'Failure( {list(self.errors)} )'

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get_success(self) -> Nothing:
        return Nothing()

    def get_failure(self) -> Some[list[E]]:
        return Some(list(self.errors))

    def assert_[T](self, other: Validation[T, E]) -> Failure[E]:
        return other.get_failure().match(
            some=lambda errors: Failure((*self.errors, *errors)),
            none=lambda: Failure(self.errors),
        )

    def flat_map[U](self, f: Callable[[Any], Validation[U, E]]) -> Failure[E]:  # noqa: ARG002
        return self

    def or_[T](self, other: Validation[T, E]) -> Validation[T, E]:
        return other

    def or_else[T](self, f: Callable[[list[E]], Validation[T, E]]) -> Validation[T, E]:
        return f(list(self.errors))

    def map_success[U](self, f: Callable[[Any], U]) -> Failure[E]:  # noqa: ARG002
        return self

    def map_failure[F](self, f: Callable[[list[E]], F]) -> Failure[F]:
        return failure(f(list(self.errors)))

    def match[U, V](self, *, success: Callable[[Any], U], failure: Callable[[list[E]], V]) -> U | V:  # noqa: ARG002
        return failure(list(self.errors))


def success[T](value: T) -> Validation[T, Any]:
    """Create a Success."""
    return Success(value)


def failure[E](error: E) -> Validation[Any, E]:
    """Create a Failure holding the single error ``error``."""
    return Failure([error])


def assert_all[T, E](first: Validation[T, E], *rest: Validation[T, E]) -> Validation[T, E]:
    """Fold :meth:`Validation.assert_` over the validations, left to right.

    Examples:
        >>> assert_all(success(1), failure('a'), failure('b')).get_failure().unwrap()
        ['a', 'b']
    """
    combined = first
    for validation in rest:
        combined = combined.assert_(validation)
    return combined

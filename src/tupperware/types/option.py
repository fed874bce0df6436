"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import field
from typing import Any, NoReturn, final

from tupperware._internal.equality import same_value, value_hash
from tupperware._internal.inspection import check_inspected
from tupperware._internal.sealed import Sealed, variant
from tupperware._logging import DiagnosticSink, get_diagnostic_sink
from tupperware.errors import (
    ForceUnwrapOnNoneError,
    InvalidArgumentError,
    UnwrapOnNoneError,
)

__all__ = ['Nothing', 'Option', 'Some', 'from_nullable', 'none', 'of', 'some']

FORCE_UNWRAP_WARNING = 'tupperware:force_unwrap_warning'


class Option[T](Sealed, ABC):
    """An optional value: either :class:`Some` holding a value, or :class:`Nothing`.

    Both variants expose the same API, so code that receives an Option can
    transform and combine it without branching on ``None``.

    The hierarchy is closed: only ``Some`` and ``Nothing`` exist.

    Examples:
        >>> of({'user': 'ian'}.get('user')).map(lambda u: f'Hello, {u}').unwrap_or('Hi')
        'Hello, ian'
        >>> of({}.get('user')).map(lambda u: f'Hello, {u}').unwrap_or('Hi')
        'Hi'
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """Return True if this option is a Some.

        Counts as inspecting the option for the strict unwrap discipline.
        """

    @abstractmethod
    def is_none(self) -> bool:
        """Return True if this option is Nothing.

        Counts as inspecting the option for the strict unwrap discipline.
        """

    @abstractmethod
    def unwrap(self, message: str | None = None) -> T:
        """Return the contained value.

        With ``strict_unwrap`` enabled, the option must first have been
        inspected with :meth:`is_some` or :meth:`is_none`.

        Args:
            message: Detail for the error raised on Nothing.

        Raises:
            UncheckedUnwrapError: Strict discipline is on and the option was never inspected.
            UnwrapOnNoneError: The option is Nothing.
        """

    def expect(self, message: str) -> T:
        """Return the contained value, failing with ``message`` on Nothing."""
        return self.unwrap(message)

    @abstractmethod
    def force_unwrap(self, message: str | None = None, *, sink: DiagnosticSink | None = None) -> T:
        """Return the contained value without the strict-discipline check.

        A ``force_unwrap`` warning is always emitted, on Some as well as on
        Nothing, to ``sink`` or to the process-wide diagnostic sink.

        Raises:
            ForceUnwrapOnNoneError: The option is Nothing.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the contained value, or ``default`` on Nothing."""

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value, or call ``f`` on Nothing.

        ``f`` is never called on Some.
        """

    @abstractmethod
    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Transform the contained value.

        The result of ``f`` is re-wrapped with :func:`of`, so a function that
        returns None produces Nothing.

        Examples:
            >>> some(2).map(lambda x: x * 2)
            Some(value=4)
            >>> some(2).map(lambda x: None)
            Nothing()
        """

    @abstractmethod
    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or return ``default`` on Nothing."""

    @abstractmethod
    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or call ``default`` on Nothing."""

    @abstractmethod
    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` if this is Some, else Nothing."""

    @abstractmethod
    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that itself returns an Option.

        Also known as and_then or bind. The returned Option is not re-wrapped.

        Examples:
            >>> square = lambda x: some(x * x)
            >>> some(2).flat_map(square).flat_map(square)
            Some(value=16)
        """

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for :meth:`flat_map`."""
        return self.flat_map(f)

    @abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return this option if it is Some, else ``other``."""

    @abstractmethod
    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return this option if it is Some, else call ``f``.

        ``f`` is never called on Some.
        """

    @abstractmethod
    def ap[U](self, f: Option[Callable[[T], U]]) -> Option[U]:
        """Apply a function held in an Option to this option's value.

        Examples:
            >>> some(2).ap(some(lambda x: x + 3))
            Some(value=5)
            >>> some(2).ap(none())
            Nothing()
        """

    @abstractmethod
    def match[U, V](self, *, some: Callable[[T], U], none: Callable[[], V]) -> U | V:
        """Call exactly one of ``some`` (with the value) or ``none`` and return its result."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` holds.

        Returns this very instance when the predicate holds, otherwise Nothing.
        """

    @abstractmethod
    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` with the value for its side effect; do nothing on Nothing."""

    @abstractmethod
    def clone(self) -> Option[T]:
        """Return a new, independent option of the same variant (shallow)."""

    @abstractmethod
    def equals(self, other: Option[Any]) -> bool:
        """Return True if both are Nothing, or both are Some with the same value.

        Values compare by identity, except scalars which compare by value.
        """

    @abstractmethod
    def has_value(self, value: Any) -> bool:
        """Return True if this is Some and its value is ``value``."""

    @abstractmethod
    def contains(self, predicate: Callable[[T], bool]) -> bool:
        """Return ``predicate(value)`` for Some, False for Nothing."""

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return ``[value]`` for Some, ``[]`` for Nothing."""

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if isinstance(self, Some):
            return hash((Some, value_hash(self.value)))
        return hash(Nothing)


def _warn_force_unwrap(variant: str, sink: DiagnosticSink | None) -> None:
    if sink is None:
        sink = get_diagnostic_sink()
    sink.warning(
        'force_unwrap',
        code=FORCE_UNWRAP_WARNING,
        variant=variant,
        detail=f'Called force_unwrap on a `{variant}` value. This is not recommended usage.',
    )


@final
@variant
class Some[T](Option[T]):
    """Some variant of Option containing a value of type T.

    The value is never None; use :func:`of` to turn a nullable value into an
    Option.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> str(Some(42))
        'Some( 42 )'
    """

    value: T
    _inspected: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError('Cannot create a Some of a None value')

    def _mark_inspected(self) -> None:
        # The only mutation a Some ever sees.
        object.__setattr__(self, '_inspected', True)

    def __str__(self) -> str:
        return f'Some( {self.value} )'

    def is_some(self) -> bool:
        self._mark_inspected()
        return True

    def is_none(self) -> bool:
        self._mark_inspected()
        return False

    def unwrap(self, message: str | None = None) -> T:  # noqa: ARG002
        check_inspected(self._inspected)
        return self.value

    def force_unwrap(self, message: str | None = None, *, sink: DiagnosticSink | None = None) -> T:  # noqa: ARG002
        _warn_force_unwrap('Some', sink)
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        return of(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def and_[U](self, other: Option[U]) -> Option[U]:
        return other

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def or_(self, other: Option[T]) -> Option[T]:  # noqa: ARG002
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:  # noqa: ARG002
        return self

    def ap[U](self, f: Option[Callable[[T], U]]) -> Option[U]:
        if isinstance(f, Some):
            return of(f.value(self.value))
        return Nothing()

    def match[U, V](self, *, some: Callable[[T], U], none: Callable[[], V]) -> U | V:  # noqa: ARG002
        return some(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if predicate(self.value):
            return self
        return Nothing()

    def for_each(self, f: Callable[[T], Any]) -> None:
        f(self.value)

    def clone(self) -> Some[T]:
        return Some(self.value)

    def equals(self, other: Option[Any]) -> bool:
        return isinstance(other, Some) and same_value(self.value, other.value)

    def has_value(self, value: Any) -> bool:
        return same_value(self.value, value)

    def contains(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def to_list(self) -> list[T]:
        return [self.value]


@final
@variant
class Nothing(Option[Any]):
    """Nothing variant of Option representing the absence of a value.

    Examples:
        >>> Nothing().unwrap_or(0)
        0
        >>> str(Nothing())
        'None()'
    """

    _inspected: bool = field(default=False, init=False, repr=False, compare=False)

    def _mark_inspected(self) -> None:
        object.__setattr__(self, '_inspected', True)

    def __str__(self) -> str:
        return 'None()'

    def is_some(self) -> bool:
        self._mark_inspected()
        return False

    def is_none(self) -> bool:
        self._mark_inspected()
        return True

    def unwrap(self, message: str | None = None) -> NoReturn:
        check_inspected(self._inspected)
        raise UnwrapOnNoneError(message)

    def force_unwrap(self, message: str | None = None, *, sink: DiagnosticSink | None = None) -> NoReturn:
        _warn_force_unwrap('None', sink)
        raise ForceUnwrapOnNoneError(message)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        return f()

    def map[U](self, f: Callable[[Any], U]) -> Nothing:  # noqa: ARG002
        return Nothing()

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[Any], U]) -> U:  # noqa: ARG002
        return default()

    def and_[U](self, other: Option[U]) -> Nothing:  # noqa: ARG002
        return Nothing()

    def flat_map[U](self, f: Callable[[Any], Option[U]]) -> Nothing:  # noqa: ARG002
        return Nothing()

    def or_[T](self, other: Option[T]) -> Option[T]:
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def ap[U](self, f: Option[Callable[[Any], U]]) -> Nothing:  # noqa: ARG002
        return Nothing()

    def match[U, V](self, *, some: Callable[[Any], U], none: Callable[[], V]) -> U | V:  # noqa: ARG002
        return none()

    def filter(self, predicate: Callable[[Any], bool]) -> Nothing:  # noqa: ARG002
        return Nothing()

    def for_each(self, f: Callable[[Any], Any]) -> None:
        return

    def clone(self) -> Nothing:
        return Nothing()

    def equals(self, other: Option[Any]) -> bool:
        return isinstance(other, Nothing)

    def has_value(self, value: Any) -> bool:  # noqa: ARG002
        return False

    def contains(self, predicate: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        return False

    def to_list(self) -> list[Any]:
        return []


def of[T](value: T | None = None) -> Option[T]:
    """Wrap a nullable value: Some(value), or Nothing if ``value`` is None.

    Never raises.

    Examples:
        >>> of(1)
        Some(value=1)
        >>> of(None)
        Nothing()
        >>> of()
        Nothing()
    """
    if value is None:
        return Nothing()
    return Some(value)


def from_nullable[T](value: T | None = None) -> Option[T]:
    """Alias for :func:`of`."""
    return of(value)


def some[T](value: T) -> Option[T]:
    """Create a Some.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    return Some(value)


def none(value: object = None) -> Option[Any]:
    """Create a Nothing.

    Accepts an argument only so that passing a real value by mistake is caught.

    Raises:
        InvalidArgumentError: If ``value`` is not None.
    """
    if value is not None:
        raise InvalidArgumentError('Cannot create a None of a non-None value')
    return Nothing()

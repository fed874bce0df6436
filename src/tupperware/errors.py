"""Exceptions raised when a container is used against its contract.

Every violation is raised immediately, at the call site. Each class carries a
stable ``code`` that prefixes its message.
"""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    'ForceUnwrapOnNoneError',
    'InvalidArgumentError',
    'TupperwareError',
    'UncheckedUnwrapError',
    'UnwrapError',
    'UnwrapOnErrError',
    'UnwrapOnNoneError',
    'UnwrapOnOkError',
]


class TupperwareError(Exception):
    """Base class for every error raised by tupperware."""

    code: ClassVar[str] = 'tupperware:error'
    default_detail: ClassVar[str] = 'tupperware error'

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(f'{self.code}: {self.detail}')


class InvalidArgumentError(TupperwareError, ValueError):
    """A constructor was given an argument that violates its variant's invariant."""

    code = 'tupperware:invalid_argument'
    default_detail = 'Invalid argument'


class UnwrapError(TupperwareError, RuntimeError):
    """Base class for unwrap-family failures."""

    code = 'tupperware:unwrap'
    default_detail = 'Called unwrap on the wrong variant'


class UncheckedUnwrapError(UnwrapError):
    """unwrap was called before the variant was inspected (strict discipline only)."""

    code = 'tupperware:unchecked_unwrap'
    default_detail = (
        'Called unwrap without first checking if it was safe to do so. Check the variant '
        'with is_some()/is_none() or is_ok()/is_err() first, or use unwrap_or() instead.'
    )


class UnwrapOnNoneError(UnwrapError):
    """unwrap was called on a None option."""

    code = 'tupperware:unwrap_on_none'
    default_detail = 'Called unwrap on a None value.'


class UnwrapOnErrError(UnwrapError):
    """unwrap was called on an Err result."""

    code = 'tupperware:unwrap_on_err'
    default_detail = 'Called unwrap on an Err value.'


class UnwrapOnOkError(UnwrapError):
    """unwrap_err was called on an Ok result."""

    code = 'tupperware:unwrap_on_ok'
    default_detail = 'Called unwrap_err on an Ok value.'


class ForceUnwrapOnNoneError(UnwrapError):
    """force_unwrap was called on a None option."""

    code = 'tupperware:force_unwrap_on_none'
    default_detail = 'Called force_unwrap on a None value.'


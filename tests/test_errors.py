"""Tests for the error taxonomy."""

import pytest
from hypothesis import given
from strategies import error_messages

from tupperware import (
    ForceUnwrapOnNoneError,
    InvalidArgumentError,
    TupperwareError,
    UncheckedUnwrapError,
    UnwrapError,
    UnwrapOnErrError,
    UnwrapOnNoneError,
    UnwrapOnOkError,
    err,
    none,
    ok,
    some,
)

ALL_ERRORS = [
    TupperwareError,
    InvalidArgumentError,
    UnwrapError,
    UncheckedUnwrapError,
    UnwrapOnNoneError,
    UnwrapOnErrError,
    UnwrapOnOkError,
    ForceUnwrapOnNoneError,
]


class TestErrorHierarchy:
    """Tests for base classes and codes."""

    @pytest.mark.parametrize('error_cls', ALL_ERRORS)
    def test_all_derive_from_base(self, error_cls):
        assert issubclass(error_cls, TupperwareError)

    @pytest.mark.parametrize('error_cls', ALL_ERRORS)
    def test_codes_are_namespaced(self, error_cls):
        assert error_cls.code.startswith('tupperware:')

    def test_codes_are_unique(self):
        codes = [error_cls.code for error_cls in ALL_ERRORS]
        assert len(codes) == len(set(codes))

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)

    @pytest.mark.parametrize(
        'error_cls',
        [UncheckedUnwrapError, UnwrapOnNoneError, UnwrapOnErrError, UnwrapOnOkError, ForceUnwrapOnNoneError],
    )
    def test_unwrap_errors_are_runtime_errors(self, error_cls):
        assert issubclass(error_cls, UnwrapError)
        assert issubclass(error_cls, RuntimeError)


class TestErrorMessages:
    """Tests for detail and message formatting."""

    def test_default_detail(self):
        exc = UnwrapOnNoneError()
        assert exc.detail == 'Called unwrap on a None value.'
        assert str(exc) == 'tupperware:unwrap_on_none: Called unwrap on a None value.'

    def test_custom_detail(self):
        exc = UnwrapOnOkError('wanted an error')
        assert exc.detail == 'wanted an error'
        assert str(exc) == 'tupperware:unwrap_on_ok: wanted an error'

    def test_raised_from_operations(self):
        with pytest.raises(UnwrapOnNoneError):
            none().unwrap()
        with pytest.raises(UnwrapOnErrError):
            err('e').unwrap()
        with pytest.raises(UnwrapOnOkError):
            ok(1).unwrap_err()
        with pytest.raises(InvalidArgumentError):
            some(None)

    def test_catchable_as_base(self):
        with pytest.raises(TupperwareError):
            none().unwrap()

    def test_unwrap_error_keeps_exception_cause(self):
        cause = KeyError('port')
        with pytest.raises(UnwrapOnErrError) as excinfo:
            err(cause).unwrap()
        assert excinfo.value.__cause__ is cause
        assert excinfo.value.code == 'tupperware:unwrap_on_err'

    @given(error_messages)
    def test_detail_is_kept_verbatim(self, detail):
        exc = UnwrapOnErrError(detail)
        assert exc.detail == detail
        assert str(exc) == f'tupperware:unwrap_on_err: {detail}'

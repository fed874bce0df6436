"""Tests for the strict unwrap discipline."""

import pytest

from tupperware import (
    ForceUnwrapOnNoneError,
    UncheckedUnwrapError,
    UnwrapOnErrError,
    UnwrapOnNoneError,
    err,
    none,
    ok,
    some,
)


class TestDeterministicDefault:
    """Without strict_unwrap, unwrap only depends on the variant."""

    def test_some_unwrap_without_check(self):
        assert some(1).unwrap() == 1

    def test_ok_unwrap_without_check(self):
        assert ok(1).unwrap() == 1


@pytest.mark.usefixtures('strict')
class TestStrictOption:
    """Option.unwrap under strict_unwrap."""

    def test_unwrap_before_check_raises(self):
        with pytest.raises(UncheckedUnwrapError, match='without first checking'):
            some(1).unwrap()

    def test_nothing_unwrap_before_check_raises_unchecked(self):
        with pytest.raises(UncheckedUnwrapError):
            none().unwrap()

    def test_is_some_unlocks_unwrap(self):
        opt = some(1)
        assert opt.is_some() is True
        assert opt.unwrap() == 1

    def test_is_none_unlocks_unwrap(self):
        opt = some(1)
        assert opt.is_none() is False
        assert opt.unwrap() == 1

    def test_nothing_after_check_raises_none_error(self):
        opt = none()
        assert opt.is_none() is True
        with pytest.raises(UnwrapOnNoneError):
            opt.unwrap()

    def test_inspection_is_per_instance(self):
        checked = some(1)
        checked.is_some()
        with pytest.raises(UncheckedUnwrapError):
            checked.clone().unwrap()

    def test_expect_follows_unwrap(self):
        with pytest.raises(UncheckedUnwrapError):
            some(1).expect('needed')

    def test_force_unwrap_skips_the_check(self, sink):
        assert some(1).force_unwrap(sink=sink) == 1
        with pytest.raises(ForceUnwrapOnNoneError):
            none().force_unwrap(sink=sink)

    def test_safe_accessors_are_unaffected(self):
        assert some(1).unwrap_or(0) == 1
        assert none().unwrap_or_else(lambda: 2) == 2
        assert some(1).map(lambda x: x + 1).match(some=lambda v: v, none=lambda: 0) == 2


@pytest.mark.usefixtures('strict')
class TestStrictResult:
    """Result.unwrap and unwrap_err under strict_unwrap."""

    def test_unwrap_before_check_raises(self):
        with pytest.raises(UncheckedUnwrapError):
            ok(1).unwrap()

    def test_unwrap_err_before_check_raises(self):
        with pytest.raises(UncheckedUnwrapError):
            err('e').unwrap_err()

    def test_is_ok_unlocks_unwrap(self):
        result = ok(1)
        assert result.is_ok() is True
        assert result.unwrap() == 1

    def test_is_err_unlocks_unwrap_err(self):
        result = err('e')
        assert result.is_err() is True
        assert result.unwrap_err() == 'e'

    def test_err_after_check_raises_err_error(self):
        result = err('e')
        result.is_ok()
        with pytest.raises(UnwrapOnErrError):
            result.unwrap()

    def test_safe_accessors_are_unaffected(self):
        assert err('e').unwrap_or(3) == 3
        assert ok(1).get_ok().is_some() is True

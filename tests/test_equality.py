"""Tests for payload comparison."""

import pytest
from hypothesis import given
from strategies import present_values

from tupperware import same_value
from tupperware._internal.equality import value_hash


class TestSameValue:
    """Scalars by value, everything else by identity."""

    @pytest.mark.parametrize(
        ('a', 'b'),
        [(1, 1), (1, 1.0), ('a', 'a'), (b'x', b'x'), (True, True), (2.5, 2.5)],
    )
    def test_equal_scalars(self, a, b):
        assert same_value(a, b) is True

    @pytest.mark.parametrize(
        ('a', 'b'),
        [(1, 2), (True, 1), (False, 0), ('1', 1), ('a', b'a'), ([1], [1]), ({}, {})],
    )
    def test_different_values(self, a, b):
        assert same_value(a, b) is False

    def test_same_object(self):
        payload = [1, 2]
        assert same_value(payload, payload) is True

    def test_none(self):
        assert same_value(None, None) is True
        assert same_value(None, 0) is False

    @given(present_values)
    def test_reflexive(self, value):
        assert same_value(value, value) is True


class TestValueHash:
    """value_hash agrees with same_value."""

    def test_scalars_hash_by_value(self):
        assert value_hash(1) == value_hash(1.0)
        assert value_hash('abc') == value_hash('abc')

    def test_unhashable_objects_hash_by_identity(self):
        payload = [1]
        assert value_hash(payload) == id(payload)

"""Shallow payload comparison shared by Option and Result."""

from __future__ import annotations

from typing import Any

__all__ = ['same_value', 'value_hash']

_SCALARS = (bool, int, float, complex, str, bytes)


def same_value(a: Any, b: Any) -> bool:
    """Compare two payloads the way ``equals`` and ``has_value`` do.

    Scalars compare by value, everything else by identity. Containers are
    never compared element-wise, and a bool never equals a number.

    Examples:
        >>> same_value(1, 1.0)
        True
        >>> same_value([1], [1])
        False
        >>> same_value(True, 1)
        False
    """
    if a is b:
        return True
    if not (isinstance(a, _SCALARS) and isinstance(b, _SCALARS)):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, str | bytes) or isinstance(b, str | bytes):
        return type(a) is type(b) and a == b
    return a == b


def value_hash(value: Any) -> int:
    """Hash consistent with :func:`same_value`."""
    if isinstance(value, _SCALARS):
        return hash(value)
    return id(value)

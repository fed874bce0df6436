"""Support for the strict unwrap discipline."""

from __future__ import annotations

from tupperware._config import get_settings
from tupperware.errors import UncheckedUnwrapError

__all__ = ['check_inspected']


def check_inspected(inspected: bool) -> None:  # noqa: FBT001
    """Raise UncheckedUnwrapError if strict unwrap is on and the variant was never inspected."""
    if not inspected and get_settings().strict_unwrap:
        raise UncheckedUnwrapError

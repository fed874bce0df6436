"""Library settings: Settings struct, environment loading, and initialization."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterator, Mapping
from typing import Any

import msgspec

from tupperware._logging import configure_logging
from tupperware.errors import InvalidArgumentError

__all__ = [
    'Settings',
    'get_settings',
    'init',
    'load_settings',
    'override_settings',
]

ENV_PREFIX = 'TUPPERWARE_'


class Settings(msgspec.Struct, frozen=True, kw_only=True):
    """Settings for the tupperware library.

    Attributes:
        strict_unwrap: Require is_some()/is_none() (or is_ok()/is_err()) on an
            instance before unwrap() is allowed on it.
        reject_none: Make ok(None) and err(None) produce Err(TypeError).
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON rather than console output.
    """

    strict_unwrap: bool = False
    reject_none: bool = False
    log_level: str | None = None
    json_logs: bool = True


_settings: Settings | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``TUPPERWARE_*`` environment variables.

    Values are strings in the environment; msgspec converts them to the
    field types in lax mode, so booleans may be spelled "true"/"false" or "1"/"0".

    Raises:
        InvalidArgumentError: If a variable cannot be converted.
    """
    if environ is None:
        environ = os.environ
    fields = set(Settings.__struct_fields__)
    raw: dict[str, Any] = {}
    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name in fields:
            raw[name] = value
    return _convert(raw)


def _convert(raw: Mapping[str, Any]) -> Settings:
    try:
        return msgspec.convert(raw, type=Settings, strict=False)
    except msgspec.ValidationError as exc:
        raise InvalidArgumentError(f'Invalid tupperware settings: {exc}') from exc


def _merge(base: Settings, overrides: Mapping[str, Any]) -> Settings:
    unknown = sorted(set(overrides) - set(Settings.__struct_fields__))
    if unknown:
        raise InvalidArgumentError(f'Unknown tupperware settings: {", ".join(unknown)}')
    raw = msgspec.structs.asdict(base)
    raw.update(overrides)
    return _convert(raw)


def init(environ: Mapping[str, str] | None = None, **overrides: Any) -> Settings:
    """Initialize tupperware from the environment plus explicit overrides.

    Args:
        environ: Mapping to read ``TUPPERWARE_*`` variables from. Defaults to os.environ.
        **overrides: Settings fields that take precedence over the environment.

    Returns:
        The Settings that were installed.

    Raises:
        InvalidArgumentError: If an override is not a Settings field or a value cannot be converted.

    Example:
        ```python
        import tupperware

        tupperware.init(strict_unwrap=True, log_level='INFO')
        ```
    """
    global _settings  # noqa: PLW0603

    _settings = _merge(load_settings(environ), overrides)

    if _settings.log_level is not None:
        configure_logging(_settings.log_level, json_output=_settings.json_logs)

    return _settings


def get_settings() -> Settings:
    """Get the current settings, loading them from the environment on first use."""
    global _settings  # noqa: PLW0603

    if _settings is None:
        _settings = load_settings()
    return _settings


@contextlib.contextmanager
def override_settings(**overrides: Any) -> Iterator[Settings]:
    """Temporarily replace selected settings.

    Overrides are checked and converted the same way as in :func:`init`.

    Raises:
        InvalidArgumentError: If an override is not a Settings field or a value cannot be converted.

    Example:
        ```python
        with override_settings(strict_unwrap=True):
            ...
        ```
    """
    global _settings  # noqa: PLW0603

    previous = _settings
    _settings = _merge(get_settings(), overrides)
    try:
        yield _settings
    finally:
        _settings = previous

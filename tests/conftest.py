"""Pytest configuration and shared fixtures for tupperware tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile('tupperware', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('tupperware')


class RecordingSink:
    """Diagnostic sink that keeps every warning it receives."""

    def __init__(self) -> None:
        self.records: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **fields: Any) -> None:
        self.records.append((event, fields))


@pytest.fixture(autouse=True)
def reset_state():
    """Start every test with default settings, the default sink and no log hooks."""
    import tupperware._config as config_module
    from tupperware import Settings, clear_log_hooks, set_diagnostic_sink

    config_module._settings = Settings()
    set_diagnostic_sink(None)
    clear_log_hooks()
    yield
    config_module._settings = None
    set_diagnostic_sink(None)
    clear_log_hooks()


@pytest.fixture
def sink() -> RecordingSink:
    """A fresh recording diagnostic sink."""
    return RecordingSink()


@pytest.fixture
def strict():
    """Enable the strict unwrap discipline for one test."""
    from tupperware import override_settings

    with override_settings(strict_unwrap=True) as current:
        yield current


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from tupperware import some

    return some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from tupperware import none

    return none()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from tupperware import ok

    return ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from tupperware import err

    return err(ValueError('test error'))

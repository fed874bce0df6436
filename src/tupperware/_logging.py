"""Structured logging and the diagnostic sink used by ``force_unwrap``.

The library never configures logging on import. ``configure_logging`` is an
opt-in helper (also called by ``init`` when a log level is set) that routes
structlog and stdlib records through one structlog ``ProcessorFormatter``.
Warnings the library emits itself go to a replaceable diagnostic sink so
they can be captured or silenced without touching global logging.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'DiagnosticSink',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_diagnostic_sink',
    'get_logger',
    'remove_log_hook',
    'set_diagnostic_sink',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []
_handler: logging.Handler | None = None


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S110
            pass  # a failing hook must not break logging
    return event_dict


def _pre_chain() -> list[Any]:
    # Runs for structlog events and for foreign stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send structlog and stdlib logging to stderr through structlog renderers.

    Calling it again replaces the handler installed by the previous call;
    handlers added to the root logger by anyone else are left in place.

    Args:
        level: Root logger level name, case-insensitive. Unknown names fall back to INFO.
        json_output: Render JSON lines rather than console output (coloured on a TTY).
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, bound to ``name`` when given."""
    return structlog.get_logger(name)


class DiagnosticSink(Protocol):
    """Receiver for library warnings.

    structlog loggers satisfy it, as does any object with a compatible
    ``warning`` method.
    """

    def warning(self, event: str, **fields: Any) -> Any: ...


_sink: DiagnosticSink | None = None


def get_diagnostic_sink() -> DiagnosticSink:
    """Return the process-wide sink, the ``tupperware`` logger unless replaced."""
    if _sink is None:
        return get_logger('tupperware')
    return _sink


def set_diagnostic_sink(sink: DiagnosticSink | None) -> None:
    """Install a process-wide diagnostic sink. ``None`` restores the default."""
    global _sink  # noqa: PLW0603
    _sink = sink


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event dict once logging is configured."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()

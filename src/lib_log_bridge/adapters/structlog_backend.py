"""Default structlog backend used when the host does not bring its own logger.

Purpose
-------
Build a ready structlog logger that renders bridged records either for humans
(``ConsoleRenderer`` with Rich tracebacks) or as JSON lines.

Contents
--------
* :data:`RENDERERS` - accepted renderer names.
* :func:`expand_error_field` - structlog processor rendering an ``error`` field.
* :func:`build_structlog_backend` - factory returning the bound logger.

System Role
-----------
Concrete :class:`~lib_log_bridge.application.ports.StructuredLoggerPort`
assembled by :func:`lib_log_bridge.runtime.install` and the ``demo`` command.
Encoding and output belong to structlog; this module only chooses processors.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

from lib_log_bridge.domain import ERROR_KEY, LogLevel

RENDERERS = ("console", "json")


def expand_error_field(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Let the renderer print the traceback of an exception carried in ``error``.

    The exception is copied to ``exc_info`` (unless one is already present and
    only when it was actually raised) and ``error`` is replaced by its message.

    Examples
    --------
    >>> expand_error_field(None, 'info', {'error': ValueError('my martini is shaken')})
    {'error': 'my martini is shaken'}
    >>> expand_error_field(None, 'info', {'error': None})
    {'error': None}
    """
    error = event_dict.get(ERROR_KEY)
    if isinstance(error, BaseException):
        if error.__traceback__ is not None and "exc_info" not in event_dict:
            event_dict["exc_info"] = error
        event_dict[ERROR_KEY] = str(error) or type(error).__name__
    return event_dict


def build_structlog_backend(
    *,
    renderer: str = "console",
    min_level: LogLevel = LogLevel.DEBUG,
    stream: TextIO | None = None,
    colors: bool = False,
) -> Any:
    """Return a structlog bound logger writing to ``stream``.

    Parameters
    ----------
    renderer:
        ``"console"`` or ``"json"``.
    min_level:
        Backend threshold; entries below it are dropped by structlog.
    stream:
        Text stream for output; defaults to :data:`sys.stdout` at call time.
    colors:
        Enable ANSI colours in console output.

    Raises
    ------
    ValueError
        When ``renderer`` is unknown.
    """
    name = renderer.strip().lower()
    if name not in RENDERERS:
        raise ValueError(f"Unknown renderer: {renderer!r} (expected one of {', '.join(RENDERERS)})")

    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        expand_error_field,
    ]
    if name == "json":
        processors.extend([structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer(sort_keys=True)])
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=colors,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False),
            )
        )

    return structlog.wrap_logger(
        structlog.PrintLogger(file=stream if stream is not None else sys.stdout),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level.value),
        cache_logger_on_first_use=True,
    )


__all__ = ["RENDERERS", "build_structlog_backend", "expand_error_field"]

"""Convenience helpers built on top of the bridge: metadata banner and demo run.

Purpose
-------
Give the CLI and quick-start docs something to call that exercises the whole
path (stdlib logger → :class:`BridgeHandler` → structlog renderer) without the
host wiring anything itself.

Contents
--------
* :func:`summary_info` - metadata banner used by ``lib_log_bridge info``.
* :func:`demo` - emit one record per level plus field and error samples.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from .adapters import BridgeHandler, build_structlog_backend, set_report_caller
from .domain import LogLevel

DEMO_LOGGER_NAME = "bridge.demo"


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def demo(
    *,
    renderer: str = "console",
    report_caller: bool = True,
    stream: TextIO | None = None,
    colors: bool = False,
) -> dict[str, Any]:
    """Route sample records through a temporary bridge.

    Parameters
    ----------
    renderer:
        ``"console"`` or ``"json"`` for the structlog backend.
    report_caller:
        Whether the stdlib records call sites during the demo.
    stream:
        Output stream; defaults to :data:`sys.stdout` at call time.
    colors:
        ANSI colours for the console renderer.

    Returns
    -------
    dict[str, Any]
        ``renderer``, ``report_caller``, the number of ``records`` forwarded, and
        the diagnostic ``events`` observed.

    Side Effects
    ------------
    Temporarily attaches a handler to the ``bridge.demo`` logger and toggles the
    stdlib caller lookup; both are restored before returning.
    """
    events: list[tuple[str, dict[str, Any]]] = []

    def _record(event_name: str, payload: dict[str, Any]) -> None:
        events.append((event_name, payload))

    backend = build_structlog_backend(
        renderer=renderer,
        stream=stream if stream is not None else sys.stdout,
        colors=colors,
    )
    handler = BridgeHandler(backend, diagnostic=_record)
    demo_logger = logging.getLogger(DEMO_LOGGER_NAME)
    previous_level = demo_logger.level
    previous_propagate = demo_logger.propagate
    demo_logger.setLevel(logging.DEBUG)
    demo_logger.propagate = False
    demo_logger.addHandler(handler)
    previous_report_caller = set_report_caller(report_caller)
    try:
        for level in LogLevel:
            demo_logger.log(level.to_python_level(), "%s sample", level.severity, extra={"sample": level.severity})
        demo_logger.info("I am batman", extra={"Name": "James Bond"})
        try:
            raise RuntimeError("my martini is shaken")
        except RuntimeError:
            demo_logger.exception("I am batman")
    finally:
        set_report_caller(previous_report_caller)
        demo_logger.removeHandler(handler)
        demo_logger.setLevel(previous_level)
        demo_logger.propagate = previous_propagate
        handler.close()

    forwarded = sum(1 for name, _ in events if name == "forwarded")
    return {
        "renderer": renderer,
        "report_caller": report_caller,
        "records": forwarded,
        "events": events,
    }


__all__ = ["DEMO_LOGGER_NAME", "demo", "summary_info"]

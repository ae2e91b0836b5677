"""Port describing the structured backend logger the bridge writes into.

Purpose
-------
Keep the application layer independent of a concrete structlog wrapper class:
anything exposing ``log(level, event, **kw)`` qualifies, which covers
``structlog.make_filtering_bound_logger`` classes and
``structlog.stdlib.BoundLogger``.

Contents
--------
* :class:`StructuredLoggerPort` - runtime-checkable protocol.
* :data:`DiagnosticHook` - callback type receiving bridge telemetry.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

DiagnosticHook = Callable[[str, dict[str, Any]], None]


@runtime_checkable
class StructuredLoggerPort(Protocol):
    """Already configured structured logger accepting numeric levels."""

    def log(self, level: int, event: str, **kw: Any) -> Any:
        """Write ``event`` at ``level`` with ``kw`` as structured context."""


__all__ = ["DiagnosticHook", "StructuredLoggerPort"]

"""Diagnostic emitter shared by the bridge use cases."""

from __future__ import annotations

import logging
from typing import Any, Callable

from lib_log_bridge.application.ports import DiagnosticHook

logger = logging.getLogger(__name__)


def build_diagnostic_emitter(diagnostic: DiagnosticHook | None) -> Callable[[str, dict[str, Any]], None]:
    """Wrap ``diagnostic`` so that hook failures never reach the caller.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append((name, payload)))
    >>> emit("forwarded", {"logger": "app"})
    >>> seen
    [('forwarded', {'logger': 'app'})]
    >>> build_diagnostic_emitter(None)("forwarded", {})
    """

    def emit(event_name: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(event_name, payload)
        except Exception:  # noqa: BLE001 - diagnostics must never break logging
            logger.debug("diagnostic hook failed for %s", event_name, exc_info=True)

    return emit


__all__ = ["build_diagnostic_emitter"]

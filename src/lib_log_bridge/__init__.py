"""Public package surface of the stdlib-logging → structlog bridge.

Typical use::

    import logging
    import structlog
    import lib_log_bridge

    logging.getLogger().addHandler(lib_log_bridge.new_bridge_handler(structlog.get_logger()))

or let :func:`install` build a default structlog backend and attach it.
"""

from __future__ import annotations

from .adapters import (
    BridgeHandler,
    MissingBackendError,
    build_structlog_backend,
    new_bridge_handler,
    report_caller_enabled,
    set_report_caller,
)
from .domain import CallSite, FieldKind, ForwardedEntry, LogLevel, StructuredField, translate_level
from .lib_log_bridge import demo, summary_info
from .runtime import BridgeConfig, current_handler, install, is_installed, uninstall

__all__ = [
    "BridgeConfig",
    "BridgeHandler",
    "CallSite",
    "FieldKind",
    "ForwardedEntry",
    "LogLevel",
    "MissingBackendError",
    "StructuredField",
    "build_structlog_backend",
    "current_handler",
    "demo",
    "install",
    "is_installed",
    "new_bridge_handler",
    "report_caller_enabled",
    "set_report_caller",
    "summary_info",
    "translate_level",
    "uninstall",
]

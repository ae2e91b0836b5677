"""Adapters connecting the bridge to stdlib logging and structlog."""

from __future__ import annotations

from .handler import BridgeHandler, MissingBackendError, new_bridge_handler, report_caller_enabled, set_report_caller
from .structlog_backend import RENDERERS, build_structlog_backend, expand_error_field

__all__ = [
    "BridgeHandler",
    "MissingBackendError",
    "RENDERERS",
    "build_structlog_backend",
    "expand_error_field",
    "new_bridge_handler",
    "report_caller_enabled",
    "set_report_caller",
]

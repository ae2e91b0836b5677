"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from lib_log_bridge.adapters import BridgeHandler

from ._settings import BridgeSettings


@dataclass(slots=True)
class BridgeRuntime:
    """Aggregate of what :func:`lib_log_bridge.install` changed, for undoing it."""

    handler: BridgeHandler
    target: logging.Logger
    settings: BridgeSettings
    previous_level: int
    previous_report_caller: bool


_STATE: BridgeRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: BridgeRuntime) -> None:
    """Install ``runtime`` as the active singleton; refuse to replace one."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise RuntimeError("lib_log_bridge.install() was already called; call uninstall() first")
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> BridgeRuntime:
    """Return the active runtime or raise when none is installed."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_bridge.install() must be called first")
        return _STATE


def is_installed() -> bool:
    """Return ``True`` when :func:`lib_log_bridge.install` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "BridgeRuntime",
    "clear_runtime",
    "current_runtime",
    "is_installed",
    "set_runtime",
]

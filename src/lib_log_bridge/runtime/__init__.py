"""Composition root attaching the bridge to a stdlib logger.

Purpose
-------
Give host applications one call that builds (or accepts) the structlog backend,
wraps it in a :class:`~lib_log_bridge.adapters.BridgeHandler`, registers the
handler on a stdlib logger, and applies the caller-reporting preference, plus
the matching teardown.

Contents
--------
* :func:`install` / :func:`uninstall` - attach and detach the bridge.
* :func:`current_handler` / :func:`is_installed` - runtime queries.
* :class:`BridgeConfig` - configuration dataclass with ``LOG_BRIDGE_*`` overrides.

System Role
-----------
Outer shell around the adapter and use-case layers; the only module that
mutates global logging state.
"""

from __future__ import annotations

import logging

from lib_log_bridge.adapters import BridgeHandler, build_structlog_backend, set_report_caller
from lib_log_bridge.application.ports import DiagnosticHook, StructuredLoggerPort

from . import _state as _state_module
from ._settings import BridgeConfig, BridgeSettings, build_settings
from ._state import BridgeRuntime, clear_runtime, current_runtime, is_installed, set_runtime

logger = logging.getLogger(__name__)


def install(
    config: BridgeConfig | None = None,
    *,
    backend: StructuredLoggerPort | None = None,
    diagnostic: DiagnosticHook | None = None,
) -> BridgeHandler:
    """Route a stdlib logger's records into a structured backend.

    Parameters
    ----------
    config:
        Optional :class:`BridgeConfig`; ``LOG_BRIDGE_*`` environment variables
        override its values.
    backend:
        Already configured structlog logger. When omitted a default one is built
        with :func:`~lib_log_bridge.adapters.build_structlog_backend`.
    diagnostic:
        Optional callback receiving bridge telemetry.

    Returns
    -------
    BridgeHandler
        The handler registered on the target logger.

    Raises
    ------
    RuntimeError
        When the bridge is already installed.
    ValueError
        When the configured level or renderer is invalid.

    Examples
    --------
    >>> handler = install(BridgeConfig(logger_name="docs.install"), backend=None)  # doctest: +SKIP
    >>> logging.getLogger("docs.install").info("ready")  # doctest: +SKIP
    >>> uninstall()  # doctest: +SKIP
    """
    with _state_module._STATE_LOCK:
        if is_installed():
            raise RuntimeError("lib_log_bridge.install() was already called; call uninstall() first")
        settings = build_settings(config or BridgeConfig())
        if backend is None:
            backend = build_structlog_backend(renderer=settings.renderer, colors=settings.force_color)
        handler = BridgeHandler(backend, diagnostic=diagnostic)

        target = logging.getLogger(settings.logger_name)
        previous_level = target.level
        target.addHandler(handler)
        target.setLevel(settings.level.to_python_level())
        previous_report_caller = set_report_caller(settings.report_caller)

        set_runtime(
            BridgeRuntime(
                handler=handler,
                target=target,
                settings=settings,
                previous_level=previous_level,
                previous_report_caller=previous_report_caller,
            )
        )
    logger.debug("bridge installed on logger %r", settings.logger_name or "root")
    return handler


def uninstall() -> None:
    """Detach the bridge and restore the logger level and caller reporting.

    Raises
    ------
    RuntimeError
        When the bridge is not installed.
    """
    with _state_module._STATE_LOCK:
        runtime = current_runtime()
        runtime.target.removeHandler(runtime.handler)
        runtime.target.setLevel(runtime.previous_level)
        set_report_caller(runtime.previous_report_caller)
        runtime.handler.close()
        clear_runtime()


def current_handler() -> BridgeHandler:
    """Return the installed handler or raise :class:`RuntimeError`."""

    return current_runtime().handler


def current_settings() -> BridgeSettings:
    """Return the settings the active bridge was installed with."""

    return current_runtime().settings


__all__ = [
    "BridgeConfig",
    "BridgeSettings",
    "current_handler",
    "current_settings",
    "install",
    "is_installed",
    "uninstall",
]

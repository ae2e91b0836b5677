"""Configuration inputs for :func:`lib_log_bridge.runtime.install`.

Environment variables take precedence over the values passed in code, matching
how the rest of the logging stack treats ``LOG_*`` overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from lib_log_bridge.adapters import RENDERERS
from lib_log_bridge.domain import LogLevel

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BridgeConfig:
    """Caller-facing configuration for installing the bridge.

    Attributes
    ----------
    logger_name:
        Stdlib logger receiving the handler; ``None`` selects the root logger.
        Overridden by ``LOG_BRIDGE_LOGGER``.
    level:
        Threshold applied to that stdlib logger (``LOG_BRIDGE_LEVEL``).
    renderer:
        ``console`` or ``json`` for the default structlog backend
        (``LOG_BRIDGE_RENDERER``).
    report_caller:
        Whether the stdlib records call sites (``LOG_BRIDGE_REPORT_CALLER``).
    force_color:
        ANSI colours in console output (``LOG_BRIDGE_FORCE_COLOR``).
    """

    logger_name: str | None = None
    level: str | LogLevel = LogLevel.DEBUG
    renderer: str = "console"
    report_caller: bool = True
    force_color: bool = False


@dataclass(frozen=True)
class BridgeSettings:
    """Validated configuration after environment overrides."""

    logger_name: str | None
    level: LogLevel
    renderer: str
    report_caller: bool
    force_color: bool


def build_settings(config: BridgeConfig) -> BridgeSettings:
    """Apply environment overrides to ``config`` and validate the result.

    Raises
    ------
    ValueError
        When the level or renderer cannot be resolved.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_BRIDGE_RENDERER', None)
    >>> build_settings(BridgeConfig(level='info', renderer='JSON')).renderer
    'json'
    """
    logger_name = os.getenv("LOG_BRIDGE_LOGGER", config.logger_name or "") or None
    level = coerce_level(os.getenv("LOG_BRIDGE_LEVEL") or config.level)
    renderer = (os.getenv("LOG_BRIDGE_RENDERER") or config.renderer).strip().lower()
    if renderer not in RENDERERS:
        raise ValueError(f"Unknown renderer: {renderer!r} (expected one of {', '.join(RENDERERS)})")
    return BridgeSettings(
        logger_name=logger_name,
        level=level,
        renderer=renderer,
        report_caller=env_bool("LOG_BRIDGE_REPORT_CALLER", config.report_caller),
        force_color=env_bool("LOG_BRIDGE_FORCE_COLOR", config.force_color),
    )


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Unrecognised values keep ``default``.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_BRIDGE_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_BRIDGE_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_BRIDGE_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_BRIDGE_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_BRIDGE_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


__all__ = ["BridgeConfig", "BridgeSettings", "build_settings", "coerce_level", "env_bool"]

"""Stdlib :class:`logging.Handler` forwarding records into a structlog logger.

Purpose
-------
Implement the front-end hook contract: the stdlib calls :meth:`BridgeHandler.emit`
synchronously for every record that passes the logger's threshold; the handler
converts the record and writes it to the structured backend exactly once.

Contents
--------
* :class:`BridgeHandler` - the hook.
* :func:`new_bridge_handler` - functional constructor.
* :class:`MissingBackendError` - raised when no backend handle is supplied.
* :func:`set_report_caller` / :func:`report_caller_enabled` - the stdlib's
  caller-lookup switch.

System Role
-----------
Outermost piece of the entry adapter. All failures end here: they are reported
through the diagnostic hook and :meth:`logging.Handler.handleError` and never
reach the application's logging call.
"""

from __future__ import annotations

import logging
import os

from lib_log_bridge.application.ports import DiagnosticHook, StructuredLoggerPort
from lib_log_bridge.application.use_cases import build_diagnostic_emitter, convert_record, create_forward_entry

_STDLIB_SRCFILE = os.path.normcase(logging.addLevelName.__code__.co_filename)
# Value the stdlib itself assigns to ``logging._srcfile`` at import time.

_INTERNAL_LOGGER_PREFIX = "lib_log_bridge"


class MissingBackendError(ValueError):
    """Raised when a bridge handler is built without a backend logger."""


def set_report_caller(enabled: bool) -> bool:
    """Switch the stdlib's caller lookup on or off and return the previous state.

    With caller lookup off, records carry ``(unknown file)``/``0`` as their call
    site and the bridge omits caller metadata entirely.

    Examples
    --------
    >>> previous = set_report_caller(False)
    >>> report_caller_enabled()
    False
    >>> _ = set_report_caller(previous)
    """
    previous = report_caller_enabled()
    logging._srcfile = _STDLIB_SRCFILE if enabled else None  # type: ignore[attr-defined]
    return previous


def report_caller_enabled() -> bool:
    """Return ``True`` when the stdlib records call sites."""

    return bool(getattr(logging, "_srcfile", None))


def _is_external_record(record: logging.LogRecord) -> bool:
    name = record.name or ""
    return not (name == _INTERNAL_LOGGER_PREFIX or name.startswith(_INTERNAL_LOGGER_PREFIX + "."))


class BridgeHandler(logging.Handler):
    """Forward stdlib log records to a structured backend logger."""

    def __init__(self, backend: StructuredLoggerPort, *, diagnostic: DiagnosticHook | None = None) -> None:
        """Bind the handler to ``backend``.

        Parameters
        ----------
        backend:
            Configured structlog logger (anything with ``log(level, event, **kw)``).
        diagnostic:
            Optional callback receiving ``forwarded``, ``level_unmapped`` and
            ``forward_failed`` events. Its exceptions are swallowed.

        Raises
        ------
        MissingBackendError
            When ``backend`` is ``None``.
        """
        if backend is None:
            raise MissingBackendError("a structured backend logger is required")
        super().__init__(level=logging.NOTSET)
        self._backend = backend
        self._emit_diagnostic = build_diagnostic_emitter(diagnostic)
        self._forward = create_forward_entry(backend, emit=self._emit_diagnostic)
        self.addFilter(_is_external_record)

    @property
    def backend(self) -> StructuredLoggerPort:
        return self._backend

    @property
    def levels(self) -> tuple[int, ...]:
        """Every level registered with :mod:`logging`; the handler accepts all of them."""

        return tuple(sorted(set(logging.getLevelNamesMapping().values())))

    def emit(self, record: logging.LogRecord) -> None:
        """Convert ``record`` and write it to the backend; never raises."""

        try:
            entry = convert_record(record, emit=self._emit_diagnostic)
            self._forward(entry)
        except Exception as exc:  # noqa: BLE001 - logging must not crash the caller
            self._emit_diagnostic(
                "forward_failed",
                {"logger": record.name, "levelno": record.levelno, "error": repr(exc)},
            )
            self.handleError(record)


def new_bridge_handler(backend: StructuredLoggerPort, *, diagnostic: DiagnosticHook | None = None) -> BridgeHandler:
    """Return a :class:`BridgeHandler` for ``backend``.

    Examples
    --------
    >>> new_bridge_handler(None)
    Traceback (most recent call last):
    ...
    lib_log_bridge.adapters.handler.MissingBackendError: a structured backend logger is required
    """
    return BridgeHandler(backend, diagnostic=diagnostic)


__all__ = [
    "BridgeHandler",
    "MissingBackendError",
    "new_bridge_handler",
    "report_caller_enabled",
    "set_report_caller",
]

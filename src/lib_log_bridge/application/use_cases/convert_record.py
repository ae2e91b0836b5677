"""Use case turning a stdlib :class:`logging.LogRecord` into a :class:`ForwardedEntry`.

Purpose
-------
Read level, message, caller-supplied fields, an attached error, and the call
site off a completed record without interpreting any field value.

Contents
--------
* :func:`convert_record` - the conversion itself.
* :func:`record_fields` - extra attributes of a record, in insertion order.
* :func:`record_error` / :func:`record_call_site` - error and caller lookups.

System Role
-----------
First half of the entry adapter; the second half is
:mod:`lib_log_bridge.application.use_cases.forward_entry`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable

from lib_log_bridge.domain import (
    ERROR_KEY,
    CallSite,
    ForwardedEntry,
    LogLevel,
    StructuredField,
    is_mapped_level,
    translate_level,
)

_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
# Everything a bare record carries; any other attribute came in through ``extra=``.

_UNKNOWN_FILE = "(unknown file)"
# Pathname the stdlib stores when caller lookup is switched off.

_NO_ERROR: Any = object()


def convert_record(
    record: logging.LogRecord,
    *,
    emit: Callable[[str, dict[str, Any]], None] | None = None,
) -> ForwardedEntry:
    """Translate ``record`` into a :class:`ForwardedEntry`.

    Parameters
    ----------
    record:
        Completed stdlib record; it is only read.
    emit:
        Optional diagnostic emitter; receives ``level_unmapped`` when the
        record's level is not registered with :mod:`logging`.

    Returns
    -------
    ForwardedEntry
        Fields in record order, the error (if any) appended last, caller set
        only when the record carries a real call site.

    Examples
    --------
    >>> record = logging.makeLogRecord({'levelno': 20, 'msg': 'I am batman', 'Name': 'James Bond'})
    >>> entry = convert_record(record)
    >>> entry.level, entry.message, [(f.key, f.value) for f in entry.fields]
    (<LogLevel.INFO: 20>, 'I am batman', [('Name', 'James Bond')])
    """
    level = _resolve_level(record, emit)
    fields = list(record_fields(record))
    error = record_error(record)
    if error is not _NO_ERROR:
        fields.append(StructuredField.of(ERROR_KEY, error))
    return ForwardedEntry(
        level=level,
        message=record.getMessage(),
        fields=tuple(fields),
        caller=record_call_site(record),
        logger_name=record.name,
    )


def record_fields(record: logging.LogRecord) -> Iterator[StructuredField]:
    """Yield caller-supplied attributes of ``record`` except the error slot."""

    for key, value in record.__dict__.items():
        if key in _RECORD_ATTRIBUTES or key == ERROR_KEY:
            continue
        yield StructuredField.of(key if isinstance(key, str) else str(key), value)


def record_error(record: logging.LogRecord) -> Any:
    """Return the error attached to ``record`` or a private sentinel when none was set.

    ``extra={"error": ...}`` wins over ``exc_info``; an explicit ``None`` is
    returned as ``None`` so callers can keep it apart from "never set".
    """
    if ERROR_KEY in record.__dict__:
        return record.__dict__[ERROR_KEY]
    exc_info = record.exc_info
    if isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[1] is not None:
        return exc_info[1]
    return _NO_ERROR


def record_call_site(record: logging.LogRecord) -> CallSite | None:
    """Return the call site of ``record`` or ``None`` when caller lookup was off.

    Examples
    --------
    >>> record_call_site(logging.makeLogRecord({'pathname': '(unknown file)', 'lineno': 0})) is None
    True
    >>> record_call_site(logging.makeLogRecord({'pathname': 'app.py', 'lineno': 7, 'funcName': 'run'}))
    CallSite(file='app.py', line=7, function='run')
    """
    pathname = record.pathname
    if not pathname or pathname == _UNKNOWN_FILE or not record.lineno:
        return None
    return CallSite(file=pathname, line=record.lineno, function=record.funcName)


def _resolve_level(
    record: logging.LogRecord,
    emit: Callable[[str, dict[str, Any]], None] | None,
) -> LogLevel:
    levelno = record.levelno
    level = translate_level(levelno)
    if emit is not None and not is_mapped_level(levelno):
        emit(
            "level_unmapped",
            {"logger": record.name, "levelno": levelno, "level": level.name},
        )
    return level


__all__ = ["convert_record", "record_call_site", "record_error", "record_fields"]

"""Domain value object describing one translated log entry.

Purpose
-------
Hold the outcome of converting a stdlib record (level, message, ordered fields,
optional call site) so forwarding is a plain function of immutable data.

Contents
--------
* :class:`CallSite` - file/line/function of the logging call.
* :class:`ForwardedEntry` - translated entry with :meth:`ForwardedEntry.to_kwargs`.
* :data:`CALLER_KEYS` - keys used for caller metadata in the backend event.

System Role
-----------
Produced by :mod:`lib_log_bridge.application.use_cases.convert_record` and
consumed by :mod:`lib_log_bridge.application.use_cases.forward_entry`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .fields import StructuredField
from .levels import LogLevel

CALLER_KEYS = ("pathname", "lineno", "func_name")
# Same names structlog's CallsiteParameter uses, so its renderers treat them as caller info.

_RESERVED_KEYS = frozenset({"self", "level", "event"})
# Parameter names of ``BoundLogger.log(self, level, event, ...)``.

_CALLER_KEY_SET = frozenset(CALLER_KEYS)


@dataclass(slots=True, frozen=True)
class CallSite:
    """Location of the logging call."""

    file: str
    line: int
    function: str | None = None

    def to_dict(self) -> dict[str, Any]:
        pathname, lineno, func_name = CALLER_KEYS
        return {pathname: self.file, lineno: self.line, func_name: self.function}


@dataclass(slots=True, frozen=True)
class ForwardedEntry:
    """Translated log entry ready for the backend.

    Attributes
    ----------
    level:
        Backend severity.
    message:
        Fully rendered message text.
    fields:
        Ordered structured fields; an attached error is always last.
    caller:
        :class:`CallSite` when caller reporting was on, else ``None``.
    logger_name:
        Name of the stdlib logger that fired the record (diagnostics only).
    """

    level: LogLevel
    message: str
    fields: tuple[StructuredField, ...] = ()
    caller: CallSite | None = None
    logger_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_kwargs(self) -> dict[str, Any]:
        """Return the keyword arguments passed to ``backend.log``.

        Keys clashing with ``log()``'s own parameters, or with the caller keys
        when a call site is attached, are prefixed with ``extra_``. Caller keys
        come last.

        Examples
        --------
        >>> entry = ForwardedEntry(
        ...     LogLevel.INFO,
        ...     'msg',
        ...     (StructuredField.of('event', 'signup'), StructuredField.of('user', 'bob')),
        ...     CallSite('app.py', 3, 'main'),
        ... )
        >>> entry.to_kwargs()
        {'extra_event': 'signup', 'user': 'bob', 'pathname': 'app.py', 'lineno': 3, 'func_name': 'main'}
        """
        taken = _RESERVED_KEYS if self.caller is None else _RESERVED_KEYS | _CALLER_KEY_SET
        kwargs: dict[str, Any] = {}
        for item in self.fields:
            key = f"extra_{item.key}" if item.key in taken else item.key
            kwargs[key] = item.value
        if self.caller is not None:
            kwargs.update(self.caller.to_dict())
        return kwargs


__all__ = ["CALLER_KEYS", "CallSite", "ForwardedEntry"]

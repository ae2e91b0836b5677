"""Use case writing a :class:`ForwardedEntry` into the structured backend.

Purpose
-------
Issue exactly one ``backend.log`` call per entry, synchronously, with the
translated level, the message, and the assembled keyword fields.

Contents
--------
* :func:`create_forward_entry` - factory freezing the backend handle.

System Role
-----------
Second half of the entry adapter. Failure containment lives one layer out, in
:class:`lib_log_bridge.adapters.handler.BridgeHandler`, because only the hook
knows the stdlib fallback channel.
"""

from __future__ import annotations

from typing import Any, Callable

from lib_log_bridge.application.ports import StructuredLoggerPort
from lib_log_bridge.domain import ForwardedEntry

ForwardCallable = Callable[[ForwardedEntry], None]


def create_forward_entry(
    backend: StructuredLoggerPort,
    *,
    emit: Callable[[str, dict[str, Any]], None] | None = None,
) -> ForwardCallable:
    """Return a callable forwarding entries to ``backend``.

    Parameters
    ----------
    backend:
        Configured structured logger; shared read-only across threads.
    emit:
        Optional diagnostic emitter notified with ``forwarded`` after each write.

    Examples
    --------
    >>> from lib_log_bridge.domain import LogLevel, StructuredField
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def log(self, level, event, **kw):
    ...         self.calls.append((level, event, kw))
    >>> backend = Recorder()
    >>> forward = create_forward_entry(backend)
    >>> forward(ForwardedEntry(LogLevel.INFO, 'I am batman', (StructuredField.of('Name', 'James Bond'),)))
    >>> backend.calls
    [(20, 'I am batman', {'Name': 'James Bond'})]
    """

    def forward(entry: ForwardedEntry) -> None:
        backend.log(entry.level.value, entry.message, **entry.to_kwargs())
        if emit is not None:
            emit(
                "forwarded",
                {
                    "logger": entry.logger_name,
                    "level": entry.level.name,
                    "fields": len(entry.fields),
                    "errors": sum(1 for item in entry.fields if item.is_error),
                },
            )

    return forward


__all__ = ["ForwardCallable", "create_forward_entry"]

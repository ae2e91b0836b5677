"""Severity translation between stdlib :mod:`logging` and the structured backend.

Purpose
-------
Map every level the stdlib front-end can fire onto exactly one backend
severity, keeping the relative ordering of severities intact.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* :func:`translate_level` - total translation used by the record conversion.
* :func:`is_mapped_level` - predicate distinguishing recognised levels.
* :data:`UNMAPPED_LEVEL` - substitute for levels the stdlib never registered.

System Role
-----------
Leaf of the domain layer. The values equal the numeric levels shared by
:mod:`logging` and ``structlog`` so adapters can hand them to
``BoundLogger.log(level, ...)`` unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Backend severities understood by structlog's ``log()`` method."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name (structlog method name)."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a registered stdlib level into :class:`LogLevel`.

        Levels between two standard levels map to the lower one, levels below
        ``DEBUG`` (``NOTSET``, a custom ``TRACE``) map to ``DEBUG``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(logging.NOTSET) is LogLevel.DEBUG
        True
        >>> LogLevel.from_python_level(27)
        Traceback (most recent call last):
        ...
        ValueError: Unregistered log level numeric: 27
        """
        if not is_mapped_level(level):
            raise ValueError(f"Unregistered log level numeric: {level!r}")
        resolved = cls.DEBUG
        for candidate in cls:
            if candidate.value <= level:
                resolved = candidate
        return resolved


UNMAPPED_LEVEL = LogLevel.CRITICAL
#: Substitute for levels the stdlib does not know; never drop, always escalate.


def is_mapped_level(level: object) -> bool:
    """Return ``True`` when ``level`` is a level registered with :mod:`logging`.

    Examples
    --------
    >>> is_mapped_level(logging.INFO), is_mapped_level(-1), is_mapped_level(True)
    (True, False, False)
    """
    if not isinstance(level, int) or isinstance(level, bool) or level < 0:
        return False
    return level in logging.getLevelNamesMapping().values()


def translate_level(level: object) -> LogLevel:
    """Return the backend level for ``level``; unknown input yields :data:`UNMAPPED_LEVEL`.

    Examples
    --------
    >>> translate_level(logging.INFO) is LogLevel.INFO
    True
    >>> translate_level(1234) is UNMAPPED_LEVEL
    True
    """
    if not is_mapped_level(level):
        return UNMAPPED_LEVEL
    return LogLevel.from_python_level(level)  # type: ignore[arg-type]


__all__ = ["LogLevel", "UNMAPPED_LEVEL", "is_mapped_level", "translate_level"]

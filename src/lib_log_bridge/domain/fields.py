"""Structured fields handed to the backend logger.

Purpose
-------
Represent a single name/value pair together with the value kind decided at
conversion time, so adapters never have to guess what a dynamic value is.

Contents
--------
* :class:`FieldKind` - closed set of value kinds the backend accepts.
* :class:`StructuredField` - immutable name/kind/value triple.
* :data:`ERROR_KEY` - field name used for attached errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

ERROR_KEY = "error"


class FieldKind(Enum):
    """Value kinds distinguished when a field is built."""

    STRING = "string"
    ERROR = "error"
    ANY = "any"

    @classmethod
    def of(cls, value: Any) -> "FieldKind":
        """Classify ``value`` by its runtime type.

        Examples
        --------
        >>> FieldKind.of("x"), FieldKind.of(ValueError("x")), FieldKind.of(None)
        (<FieldKind.STRING: 'string'>, <FieldKind.ERROR: 'error'>, <FieldKind.ANY: 'any'>)
        """
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, BaseException):
            return cls.ERROR
        return cls.ANY


@dataclass(slots=True, frozen=True)
class StructuredField:
    """Name/value pair forwarded to the backend.

    Attributes
    ----------
    key:
        Field name as supplied by the caller; non-string names are converted
        with :func:`str` by the record conversion, empty names are kept.
    kind:
        :class:`FieldKind` computed from ``value``.
    value:
        The caller's object, untouched. Rendering is the backend's job.
    """

    key: str
    kind: FieldKind
    value: Any

    @classmethod
    def of(cls, key: str, value: Any) -> "StructuredField":
        """Build a field, deriving :attr:`kind` from ``value``."""

        return cls(key=key, kind=FieldKind.of(value), value=value)

    @property
    def is_error(self) -> bool:
        return self.kind is FieldKind.ERROR


__all__ = ["ERROR_KEY", "FieldKind", "StructuredField"]

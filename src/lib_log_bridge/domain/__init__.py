"""Domain entities and value objects used by the logging bridge."""

from __future__ import annotations

from .entries import CALLER_KEYS, CallSite, ForwardedEntry
from .fields import ERROR_KEY, FieldKind, StructuredField
from .levels import UNMAPPED_LEVEL, LogLevel, is_mapped_level, translate_level

__all__ = [
    "CALLER_KEYS",
    "CallSite",
    "ERROR_KEY",
    "FieldKind",
    "ForwardedEntry",
    "LogLevel",
    "StructuredField",
    "UNMAPPED_LEVEL",
    "is_mapped_level",
    "translate_level",
]

"""Use cases composing the entry adapter."""

from __future__ import annotations

from ._diagnostics import build_diagnostic_emitter
from .convert_record import convert_record
from .forward_entry import ForwardCallable, create_forward_entry

__all__ = ["ForwardCallable", "build_diagnostic_emitter", "convert_record", "create_forward_entry"]

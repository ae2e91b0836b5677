"""Ports consumed by the bridge use cases."""

from __future__ import annotations

from .structured import DiagnosticHook, StructuredLoggerPort

__all__ = ["DiagnosticHook", "StructuredLoggerPort"]

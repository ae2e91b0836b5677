from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

import pytest
import structlog
from structlog.testing import LogCapture

from lib_log_bridge.adapters.handler import BridgeHandler, report_caller_enabled, set_report_caller


@dataclass
class Observed:
    """Stdlib logger wired to a capturing structlog backend."""

    logger: logging.Logger
    handler: BridgeHandler
    capture: LogCapture
    diagnostics: list[tuple[str, dict[str, Any]]]

    @property
    def entries(self) -> list[dict[str, Any]]:
        return self.capture.entries


def build_capturing_backend(min_level: int = logging.DEBUG) -> tuple[Any, LogCapture]:
    capture = LogCapture()
    backend = structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[capture],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )
    return backend, capture


@pytest.fixture(autouse=True)
def _restore_report_caller() -> Iterator[None]:
    previous = report_caller_enabled()
    yield
    set_report_caller(previous)


@pytest.fixture
def observed() -> Iterator[Observed]:
    backend, capture = build_capturing_backend()
    diagnostics: list[tuple[str, dict[str, Any]]] = []
    handler = BridgeHandler(backend, diagnostic=lambda name, payload: diagnostics.append((name, payload)))
    logger = logging.getLogger(f"tests.bridge.{uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    try:
        yield Observed(logger=logger, handler=handler, capture=capture, diagnostics=diagnostics)
    finally:
        logger.removeHandler(handler)
        handler.close()

from __future__ import annotations

import io
import json
import logging
from typing import Any
from uuid import uuid4

import pytest

from lib_log_bridge.adapters.handler import BridgeHandler, set_report_caller
from lib_log_bridge.adapters.structlog_backend import RENDERERS, build_structlog_backend, expand_error_field
from lib_log_bridge.domain import LogLevel


def _json_lines(stream: io.StringIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def _raised(message: str) -> RuntimeError:
    try:
        raise RuntimeError(message)
    except RuntimeError as exc:
        return exc


def test_json_backend_writes_one_line_per_entry() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="json", stream=stream)

    backend.log(logging.INFO, "I am batman", Name="James Bond")

    [payload] = _json_lines(stream)
    assert payload["event"] == "I am batman"
    assert payload["level"] == "info"
    assert payload["Name"] == "James Bond"
    assert "timestamp" in payload


def test_json_backend_renders_raised_error_with_traceback() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="json", stream=stream)

    backend.log(logging.ERROR, "I am batman", error=_raised("my martini is shaken"))

    [payload] = _json_lines(stream)
    assert payload["error"] == "my martini is shaken"
    assert payload["exception"][0]["exc_type"] == "RuntimeError"


def test_json_backend_keeps_error_placeholder() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="json", stream=stream)

    backend.log(logging.INFO, "I am batman", error=None)

    [payload] = _json_lines(stream)
    assert payload["error"] is None
    assert "exception" not in payload


def test_console_backend_renders_message_and_fields() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="console", stream=stream, colors=False)

    backend.log(logging.WARNING, "I am batman", Name="James Bond")

    output = stream.getvalue()
    assert "I am batman" in output
    assert "warning" in output
    assert "Name=James Bond" in output
    assert "\x1b[" not in output


def test_console_backend_prints_traceback_of_error() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="console", stream=stream, colors=False)

    backend.log(logging.ERROR, "I am batman", error=_raised("my martini is shaken"))

    output = stream.getvalue()
    assert "RuntimeError" in output
    assert "my martini is shaken" in output


def test_backend_threshold_drops_lower_levels() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer="json", min_level=LogLevel.WARNING, stream=stream)

    backend.log(logging.INFO, "dropped")
    backend.log(logging.ERROR, "kept")

    assert [payload["event"] for payload in _json_lines(stream)] == ["kept"]


@pytest.mark.parametrize("name", ["xml", "", "plain"])
def test_unknown_renderer_is_rejected(name: str) -> None:
    with pytest.raises(ValueError, match="Unknown renderer"):
        build_structlog_backend(renderer=name)


def test_renderer_names_are_normalised() -> None:
    stream = io.StringIO()
    backend = build_structlog_backend(renderer=" JSON ", stream=stream)

    backend.log(logging.INFO, "msg")

    assert _json_lines(stream)[0]["event"] == "msg"
    assert RENDERERS == ("console", "json")


def test_expand_error_field_leaves_existing_exc_info_alone() -> None:
    error = _raised("boom")
    event = {"error": error, "exc_info": True}

    result = expand_error_field(None, "error", event)

    assert result["exc_info"] is True
    assert result["error"] == "boom"


def test_expand_error_field_uses_type_name_for_empty_message() -> None:
    assert expand_error_field(None, "info", {"error": KeyError()})["error"] == "KeyError"
    assert expand_error_field(None, "info", {"error": RuntimeError()})["error"] == "RuntimeError"


def test_stdlib_record_reaches_json_output_end_to_end() -> None:
    stream = io.StringIO()
    handler = BridgeHandler(build_structlog_backend(renderer="json", stream=stream))
    logger = logging.getLogger(f"tests.backend.{uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    set_report_caller(False)
    try:
        logger.info("I am batman", extra={"Name": "James Bond"})
    finally:
        logger.removeHandler(handler)

    [payload] = _json_lines(stream)
    assert payload["event"] == "I am batman"
    assert payload["level"] == "info"
    assert payload["Name"] == "James Bond"
    assert "pathname" not in payload

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from lib_log_bridge.domain.levels import UNMAPPED_LEVEL, LogLevel, is_mapped_level, translate_level


@pytest.fixture
def trace_level() -> Iterator[int]:
    logging.addLevelName(5, "TRACE")
    logging.addLevelName(25, "NOTICE")
    try:
        yield 5
    finally:
        for number, name in ((5, "TRACE"), (25, "NOTICE")):
            logging._levelToName.pop(number, None)  # type: ignore[attr-defined]
            logging._nameToLevel.pop(name, None)  # type: ignore[attr-defined]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("CRITICAL", LogLevel.CRITICAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.CRITICAL),
    ],
)
def test_translate_maps_every_standard_level(level: int, expected: LogLevel) -> None:
    assert translate_level(level) is expected


def test_notset_maps_to_debug() -> None:
    assert translate_level(logging.NOTSET) is LogLevel.DEBUG


def test_registered_custom_levels_map_to_lower_neighbour(trace_level: int) -> None:
    assert translate_level(trace_level) is LogLevel.DEBUG
    assert translate_level(25) is LogLevel.INFO


@pytest.mark.parametrize("level", [-5, 15, 27, 1234])
def test_unregistered_levels_escalate_to_highest_severity(level: int) -> None:
    assert not is_mapped_level(level)
    assert translate_level(level) is UNMAPPED_LEVEL is LogLevel.CRITICAL


@pytest.mark.parametrize("level", [None, "INFO", 20.0, True])
def test_non_integer_levels_are_unmapped(level: object) -> None:
    assert translate_level(level) is LogLevel.CRITICAL


def test_from_python_level_rejects_unregistered_numbers() -> None:
    with pytest.raises(ValueError, match="Unregistered log level numeric"):
        LogLevel.from_python_level(33)


def test_translation_preserves_order() -> None:
    registered = sorted(set(logging.getLevelNamesMapping().values()))
    translated = [translate_level(level).value for level in registered]
    assert translated == sorted(translated)


@pytest.mark.parametrize("level", LogLevel)
def test_to_python_level_returns_logging_constant(level: LogLevel) -> None:
    assert level.to_python_level() == getattr(logging, level.name)
    assert translate_level(level.to_python_level()) is level


@pytest.mark.parametrize(
    "level, severity",
    [
        (LogLevel.DEBUG, "debug"),
        (LogLevel.INFO, "info"),
        (LogLevel.WARNING, "warning"),
        (LogLevel.ERROR, "error"),
        (LogLevel.CRITICAL, "critical"),
    ],
)
def test_severity_matches_lowercase_name(level: LogLevel, severity: str) -> None:
    assert level.severity == severity

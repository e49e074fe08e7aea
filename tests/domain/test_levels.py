from __future__ import annotations

import logging

import pytest

from lib_log_to.domain.levels import LogLevel


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", LogLevel.TRACE),
        ("DEBUG", LogLevel.DEBUG),
        ("info", LogLevel.INFORMATION),
        ("Information", LogLevel.INFORMATION),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        (" critical ", LogLevel.CRITICAL),
        ("none", LogLevel.NONE),
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
        (logging.NOTSET, LogLevel.TRACE),
        (5, LogLevel.TRACE),
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFORMATION),
        (logging.WARNING, LogLevel.WARNING),
        (35, LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.CRITICAL),
    ],
)
def test_from_python_level_rounds_down(level: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(level) is expected


@pytest.mark.parametrize(
    "level, tag",
    [
        (LogLevel.TRACE, "trce: "),
        (LogLevel.DEBUG, "dbug: "),
        (LogLevel.INFORMATION, "info: "),
        (LogLevel.WARNING, "warn: "),
        (LogLevel.ERROR, "fail: "),
        (LogLevel.CRITICAL, "crit: "),
    ],
)
def test_level_tag_table(level: LogLevel, tag: str) -> None:
    assert level.tag == tag
    assert len(level.tag) == 6


def test_none_level_tag_has_no_trailing_space() -> None:
    assert LogLevel.NONE.tag == "none"


def test_levels_are_ordered() -> None:
    ordered = [
        LogLevel.TRACE,
        LogLevel.DEBUG,
        LogLevel.INFORMATION,
        LogLevel.WARNING,
        LogLevel.ERROR,
        LogLevel.CRITICAL,
    ]
    assert sorted(reversed(ordered)) == ordered
    assert LogLevel.WARNING >= LogLevel.WARNING
    assert LogLevel.DEBUG < LogLevel.ERROR

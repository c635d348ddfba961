from __future__ import annotations

import pytest

from lib_log_line.domain.levels import LogLevel, is_enabled, rank_to_name, to_rank


@pytest.mark.parametrize(
    "value, expected",
    [
        ("trace", LogLevel.TRACE),
        ("DEBUG", LogLevel.DEBUG),
        ("Verbose", LogLevel.VERBOSE),
        (7, LogLevel.INFO),
        ("8", LogLevel.WARN),
        (LogLevel.ERROR, LogLevel.ERROR),
        ("skip", LogLevel.SKIP),
    ],
)
def test_to_rank_accepts_names_ranks_and_numeric_strings(value: object, expected: LogLevel) -> None:
    assert to_rank(value) is expected


@pytest.mark.parametrize("value", ["bogus", 4, 10, -1, "4", None, True, 7.0, "", "\u00b2"])
def test_to_rank_rejects_values_outside_the_rank_set(value: object) -> None:
    assert to_rank(value) is None


def test_ranks_follow_the_fixed_order() -> None:
    ordered = [LogLevel.SKIP, LogLevel.TRACE, LogLevel.DEBUG, LogLevel.VERBOSE, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]
    assert [level.rank for level in ordered] == [0, 1, 3, 5, 7, 8, 9]


@pytest.mark.parametrize("candidate", list(LogLevel))
@pytest.mark.parametrize("threshold", list(LogLevel))
def test_is_enabled_matches_rank_comparison(candidate: LogLevel, threshold: LogLevel) -> None:
    assert is_enabled(candidate, threshold) == (candidate.rank >= threshold.rank)


def test_info_threshold_suppresses_lower_levels() -> None:
    passing = [level.severity for level in LogLevel if level is not LogLevel.SKIP and is_enabled(level, LogLevel.INFO)]
    assert passing == ["info", "warn", "error"]


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("critical")


def test_from_numeric_rejects_unsupported_rank() -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(2)


@pytest.mark.parametrize("rank, name", [(1, "trace"), (9, "error"), ("5", "verbose"), (2, None), ("info", None)])
def test_rank_to_name(rank: object, name: str | None) -> None:
    assert rank_to_name(rank) == name


def test_prefix_uses_uppercase_name() -> None:
    assert LogLevel.WARN.prefix == "[WARN]"

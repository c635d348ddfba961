from __future__ import annotations

from datetime import datetime

import pytest

from lib_log_line.domain.styles import Color, StyleRule, StyleTable, is_valid_color


def test_format_with_colour_disabled_returns_plain_text() -> None:
    table = StyleTable()
    assert table.format("Hello", "error") == "Hello"


def test_green_foreground_wraps_with_escape_and_reset() -> None:
    table = StyleTable(enabled=True)
    assert table.format("Hello", StyleRule(fg=Color.GREEN)) == "\x1b[92mHello\x1b[0m"


def test_background_is_offset_by_ten_and_reset_independently() -> None:
    table = StyleTable(enabled=True)
    rendered = table.format("go", StyleRule(fg=Color.BLACK, bg=Color.ORANGE))
    assert rendered == "\x1b[30m\x1b[103mgo\x1b[0m\x1b[0m"


def test_rule_without_colours_renders_plain() -> None:
    table = StyleTable(enabled=True)
    assert table.format("plain", StyleRule()) == "plain"


def test_unknown_style_name_renders_plain() -> None:
    table = StyleTable(enabled=True)
    assert table.format("x", "no-such-style") == "x"


def test_inverse_is_not_a_colour_so_strikethru_is_plain() -> None:
    table = StyleTable(enabled=True)
    assert not is_valid_color(Color.INVERSE)
    assert table.format("gone", "strikethru") == "gone"


def test_colorize_false_overrides_enabled_table() -> None:
    table = StyleTable(enabled=True)
    assert table.format("x", "h1", colorize=False) == "x"


def test_enable_toggles_and_ignores_non_bool() -> None:
    table = StyleTable()
    table.enable(True)
    table.enable(True)
    assert table.enabled
    table.enable("yes")  # type: ignore[arg-type]
    assert table.enabled
    table.enable(False)
    assert not table.enabled


def test_add_style_inserts_and_overwrites() -> None:
    table = StyleTable(enabled=True)
    table.add_style("brand", {"fg": Color.RED})
    table.add_style("h1", StyleRule(fg=Color.CYAN))
    assert table.format("b", "brand") == "\x1b[91mb\x1b[0m"
    assert table.get("h1") == StyleRule(fg=Color.CYAN)


def test_custom_styles_merge_over_defaults() -> None:
    table = StyleTable({"h1": {"fg": Color.BLUE}})
    assert table.get("h1") == StyleRule(fg=Color.BLUE)
    assert "h2" in table
    assert "_level_prefix" in table


def test_public_names_hide_internal_styles() -> None:
    names = StyleTable().public_names
    assert "text" in names
    assert all(not name.startswith("_") for name in names)


@pytest.mark.parametrize(
    "value, expected",
    [
        ({"a": 1, "b": [1, 2]}, '{"a":1,"b":[1,2]}'),
        ([1, "x"], '[1,"x"]'),
        (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02 03:04:05"),
        (3.5, "3.5"),
        (None, "None"),
    ],
)
def test_to_text_dumps_structures_and_dates(value: object, expected: str) -> None:
    assert StyleTable().to_text(value) == expected


def test_format_does_not_mutate_table() -> None:
    table = StyleTable(enabled=True)
    before = table.styles
    table.format({"k": "v"}, "value")
    assert table.styles == before

"""Tests for inline style extraction."""

import pytest

from mdpress.errors import ParseError, StyleParseError
from mdpress.layout.styles import first_csv, get_style_value, parse_declarations, to_int
from mdpress.layout.units import inches_to_mm


class TestGetStyleValue:
    def test_returns_trimmed_value(self):
        assert get_style_value("margin-top", "margin-top:   1in  ; color: red") == "1in"

    def test_key_whitespace_ignored(self):
        assert get_style_value(" color ", "  color : red") == "red"

    def test_non_matching_key_is_empty(self):
        assert get_style_value("margin-left", "margin-top: 1in") == ""
        assert not get_style_value("margin-left", "margin-top: 1in")

    def test_order_insensitive(self):
        style = "font-size: 9pt; margin-bottom: .5in; font-family: Georgia"
        assert get_style_value("margin-bottom", style) == ".5in"
        assert get_style_value("font-family", style) == "Georgia"

    def test_repeated_property_is_concatenated(self):
        assert get_style_value("margin-top", "margin-top: 1; margin-top: 2") == "12"

    def test_repeated_property_last_wins_when_not_concatenating(self):
        style = "margin-top: 1; margin-top: 2"
        assert get_style_value("margin-top", style, concatenate=False) == "2"

    def test_mutator_applied(self):
        assert get_style_value("margin-top", "margin-top: .5in", inches_to_mm) == 12.7

    def test_mutator_applied_to_missing_value(self):
        assert get_style_value("margin-top", "", inches_to_mm) == 0

    def test_trailing_semicolon_allowed(self):
        assert get_style_value("color", "color: red;") == "red"

    def test_none_style(self):
        assert get_style_value("color", None) == ""

    def test_declaration_without_colon_raises(self):
        with pytest.raises(StyleParseError) as exc_info:
            get_style_value("color", "color: red; bogus")
        assert exc_info.value.declaration == " bogus"
        assert isinstance(exc_info.value, ParseError)

    def test_value_may_contain_colon(self):
        style = "background: url(http://example.com/bg.png)"
        assert get_style_value("background", style) == "url(http://example.com/bg.png)"


class TestParseDeclarations:
    def test_pairs(self):
        assert parse_declarations("a: 1; b :2") == [("a", "1"), ("b", "2")]

    def test_empty(self):
        assert parse_declarations("") == []


class TestHelpers:
    def test_first_csv(self):
        assert first_csv("Helvetica, Arial, sans-serif") == "Helvetica"
        assert first_csv("Georgia") == "Georgia"
        assert first_csv("") == ""

    @pytest.mark.parametrize(
        "raw, expected",
        [("9pt", 9), ("12", 12), (" 10px", 10), ("", 0), ("pt", 0), (None, 0), ("-3", -3)],
    )
    def test_to_int(self, raw, expected):
        assert to_int(raw) == expected

"""Tests for mdpress.layout.units."""

import pytest

from mdpress.layout.units import inches_to_mm


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1in", 25.4),
        (".5in", 12.7),
        (1, 25.4),
        (0.5, 12.7),
        ("0.25 in", 6.35),
        (0, 0),
        ("", 0),
        ("abc", 0),
        (None, 0),
    ],
)
def test_inches_to_mm(raw, expected):
    assert inches_to_mm(raw) == expected


def test_rounds_to_two_decimals():
    assert inches_to_mm("0.333in") == 8.46


def test_minus_sign_is_stripped():
    # Negative lengths are read as their magnitude.
    assert inches_to_mm("-1in") == 25.4


def test_multiple_decimal_points_is_not_numeric():
    assert inches_to_mm("1.2.3in") == 0

"""Read values out of inline ``style="key: value; ..."`` attributes."""

from __future__ import annotations

import re
from functools import reduce
from typing import Any, Callable

from mdpress.errors import StyleParseError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_declarations(style: str | None) -> list[tuple[str, str]]:
    """Split a style attribute into trimmed ``(key, value)`` pairs.

    Blank declarations (a trailing ``;``) are skipped; anything else without a
    ``:`` raises StyleParseError.
    """
    pairs: list[tuple[str, str]] = []
    for declaration in (style or "").split(";"):
        if not declaration.strip():
            continue
        key, sep, value = declaration.partition(":")
        if not sep:
            raise StyleParseError(declaration)
        pairs.append((key.strip(), value.strip()))
    return pairs


def get_style_value(
    name: str,
    style: str | None,
    mutator: Callable[[str], Any] | None = None,
    *,
    concatenate: bool = True,
) -> Any:
    """Return the value of CSS property ``name`` in ``style``.

    Repeated declarations of the same property are concatenated with no
    separator (``"margin-top: 1; margin-top: 2"`` yields ``"12"``). Pass
    ``concatenate=False`` to get the last declared value instead. A property
    that is not declared yields ``""``.

    ``mutator``, when given, is applied to the extracted string.
    """
    wanted = name.strip()

    def _fold(carry: str, pair: tuple[str, str]) -> str:
        key, value = pair
        if key != wanted:
            return carry
        return carry + value if concatenate else value

    value = reduce(_fold, parse_declarations(style), "")
    if mutator is not None:
        return mutator(value)
    return value


def first_csv(value: str) -> str:
    """``'Helvetica, Arial, sans-serif'`` -> ``'Helvetica'``."""
    return value.split(",")[0]


def to_int(value: str | None) -> int:
    """Leading integer of ``value`` (``'10pt'`` -> 10), 0 when there is none."""
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0

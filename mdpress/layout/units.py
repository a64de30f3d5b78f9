"""Length conversion for wkhtmltopdf options, which are expressed in millimeters."""

from __future__ import annotations

import re

MM_PER_INCH = 25.4

_NOT_NUMERIC = re.compile(r"[^\d.]")


def inches_to_mm(inches: str | int | float | None) -> float:
    """Convert an inch length such as ``'1in'``, ``'.5in'``, ``1`` or ``0.5`` to mm.

    Everything except digits and ``.`` is discarded first, which includes a
    minus sign: ``'-1in'`` is read as one inch. Input that is still not a
    number afterwards converts to 0.
    """
    if inches is None:
        return 0
    cleaned = _NOT_NUMERIC.sub("", str(inches))
    try:
        value = float(cleaned)
    except ValueError:
        return 0
    return round(value * MM_PER_INCH, 2)

"""Duration and quantity primitives.

Parsing helpers for the two numeric formats found in recipe data:

- ISO 8601-style durations from schema.org (``PT1H30M``, ``P1DT2H``)
- Leading ingredient quantities (``2``, ``1.5``, ``3/4``, ``1 1/2``)

and the inverse, formatting a float back into a kitchen-friendly string
with vulgar fraction glyphs (``1 ½``).
"""

from __future__ import annotations

import math
import re
from typing import Final


MINUTES_PER_DAY: Final[int] = 24 * 60
MINUTES_PER_HOUR: Final[int] = 60

# A remainder this close to a whole number or a known fraction snaps to it.
SNAP_TOLERANCE: Final[float] = 0.04
ROUND_UP_THRESHOLD: Final[float] = 0.96

# Checked in order; the first glyph within tolerance wins.
FRACTION_GLYPHS: Final[tuple[tuple[float, str], ...]] = (
    (1 / 8, "⅛"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (1 / 2, "½"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (7 / 8, "⅞"),
)

# Seconds are accepted so "PT1H0M0S" parses, but they do not count.
_DURATION_RE = re.compile(
    r"P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:\d+(?:\.\d+)?S)?",
    re.IGNORECASE | re.ASCII,
)
_MIXED_RE = re.compile(r"(\d+)\s+(\d+)/(\d+)", re.ASCII)
_FRACTION_RE = re.compile(r"(\d+)/(\d+)", re.ASCII)
_LEADING_QUANTITY_RE = re.compile(
    r"^(\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)\s*",
    re.ASCII,
)


def parse_duration_minutes(text: str | None) -> int | None:
    """Convert an ISO 8601-style duration to whole minutes.

    Day, hour and minute groups are optional and default to 0; the leading
    ``P`` is required.

    Args:
        text: Duration string such as ``"PT1H30M"`` or ``"P1DT2H"``.

    Returns:
        ``days * 1440 + hours * 60 + minutes``, or None if ``text`` is
        missing, not a string, or does not match the pattern.

    Example:
        >>> parse_duration_minutes("PT1H30M")
        90
    """
    if not text or not isinstance(text, str):
        return None

    match = _DURATION_RE.fullmatch(text.strip())
    if match is None:
        return None

    days, hours, minutes = (int(group) if group else 0 for group in match.groups())
    return days * MINUTES_PER_DAY + hours * MINUTES_PER_HOUR + minutes


def _divide(numerator: int, denominator: int) -> float:
    # A zero denominator yields a non-finite value instead of raising.
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


def parse_quantity_token(text: str) -> float:
    """Convert a quantity token to a float.

    Accepts an integer or decimal (``"2"``, ``"1.5"``), a vulgar fraction
    (``"3/4"``) or a mixed number (``"1 1/2"``). The denominator is not
    validated: ``"1/0"`` gives ``inf`` and ``"0/0"`` gives ``nan``, and
    text in none of the three forms also gives ``nan``. Callers must check
    ``math.isfinite`` before using the result.
    """
    token = text.strip()

    mixed = _MIXED_RE.fullmatch(token)
    if mixed:
        whole, numerator, denominator = (int(g) for g in mixed.groups())
        return whole + _divide(numerator, denominator)

    fraction = _FRACTION_RE.fullmatch(token)
    if fraction:
        numerator, denominator = (int(g) for g in fraction.groups())
        return _divide(numerator, denominator)

    try:
        return float(token)
    except ValueError:
        return math.nan


def parse_leading_quantity(line: str) -> tuple[float, str] | None:
    """Split a leading quantity off an ingredient line.

    The longest of mixed number, fraction or decimal is consumed together
    with any whitespace that follows it.

    Returns:
        ``(quantity, remainder)``, or None when the line does not start
        with a number.

    Example:
        >>> parse_leading_quantity("1 1/2 cups milk")
        (1.5, 'cups milk')
    """
    match = _LEADING_QUANTITY_RE.match(line)
    if match is None:
        return None
    return parse_quantity_token(match.group(1)), line[match.end() :]


def format_quantity(n: float) -> str:
    """Format a quantity for display, preferring fraction glyphs.

    - ``n <= 0`` (or non-finite) gives ``""``; the caller drops the quantity.
    - A remainder under 0.04 rounds down, over 0.96 rounds up.
    - A remainder within 0.04 of a known fraction renders as its glyph,
      after the whole part when there is one (``"1 ¼"``, ``"½"``).
    - Anything else renders with one decimal (``"2.3"``).
    """
    if not math.isfinite(n) or n <= 0:
        return ""

    whole = math.floor(n)
    remainder = n - whole

    if remainder < SNAP_TOLERANCE:
        return str(whole)
    if remainder > ROUND_UP_THRESHOLD:
        return str(whole + 1)

    for value, glyph in FRACTION_GLYPHS:
        if abs(remainder - value) < SNAP_TOLERANCE:
            return f"{whole} {glyph}" if whole > 0 else glyph

    return f"{n:.1f}"

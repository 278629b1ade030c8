"""Magnitude formatting for item values: 1500000 ↔ "1.5M".

format_value() turns a raw number into abbreviated display text, parse_value()
reads abbreviated text back into a number. The two are intentionally NOT exact
inverses: formatting rounds to one decimal, and string input to format_value()
only has its unit letters stripped rather than being scaled.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

INFINITY_GLYPH = "∞"

# Ordered largest first, the first threshold <= |value| wins.
UNITS: tuple[tuple[float, str], ...] = (
    (1e18, "Qn"),  # quintillion
    (1e15, "Qd"),  # quadrillion
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)

MULTIPLIERS: dict[str, float] = {suffix: threshold for threshold, suffix in UNITS}

_TENTH = Decimal("0.1")
# Wide enough for any finite float scaled down by the smallest unit.
_WIDE = Context(prec=400)

# Legacy suffix stripping: every K, M, B, T, Q, d, n character goes.
_UNIT_CHARS_RE = re.compile(r"[KMBTQdn]")
# Leading numeral, the way a browser's parseFloat() reads it.
_LEADING_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_VALUE_RE = re.compile(r"([0-9]+\.?[0-9]*)\s*(Qd|Qn|K|M|B|T)?")


def _leading_float(text: str) -> float:
    """Parse the longest numeric prefix of text, NaN if there is none."""
    match = _LEADING_FLOAT_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def plain_text(number: float) -> str:
    """Canonical text for a number with no unit: 999.0 → '999', 12.5 → '12.5'."""
    if number.is_integer():
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    if abs(number) >= 1e-6:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent)}"


def _one_decimal(number: float) -> str:
    """Round to exactly one decimal digit, ties away from zero."""
    return str(Decimal(number).quantize(_TENTH, rounding=ROUND_HALF_UP, context=_WIDE))


def format_value(value: Union[float, int, str]) -> str:
    """Return abbreviated display text for a value (e.g., 1500000 → '1.5M').

    Never raises: anything that is not a number degrades to '0'.

    Args:
        value: A number, or text such as '1500' or '1.5M'. Text has its unit
            letters stripped and only the leading numeral is kept, so '1.5M'
            formats as '1.5', not '1.5M'.

    Returns:
        '∞' for positive infinity, a plain number below 1000, otherwise one
        decimal followed by the largest unit not exceeding the magnitude.
    """
    if value == "inf":
        return INFINITY_GLYPH

    if isinstance(value, str):
        number = _leading_float(_UNIT_CHARS_RE.sub("", value))
    else:
        try:
            number = float(value)
        except OverflowError:
            # Integers past the float range saturate like any other infinity.
            return INFINITY_GLYPH if value > 0 else f"-{INFINITY_GLYPH}"
        except (TypeError, ValueError):
            return "0"

    if math.isnan(number):
        return "0"
    if math.isinf(number):
        return INFINITY_GLYPH if number > 0 else f"-{INFINITY_GLYPH}"

    magnitude = abs(number)
    for threshold, suffix in UNITS:
        if magnitude >= threshold:
            return f"{_one_decimal(number / threshold)}{suffix}"
    return plain_text(number)


def is_value_text(text: str) -> bool:
    """True if parse_value() would read text rather than fall back to 0."""
    return text in (INFINITY_GLYPH, "inf") or _VALUE_RE.fullmatch(text) is not None


def parse_value(text: str) -> float:
    """Parse abbreviated text back into a number ('1.5K' → 1500.0).

    Accepts a non-negative numeral with an optional K/M/B/T/Qd/Qn unit and
    nothing else. '∞' and 'inf' give math.inf. Anything unrecognised gives 0.
    """
    if not isinstance(text, str):
        text = str(text)
    if text in (INFINITY_GLYPH, "inf"):
        return math.inf

    match = _VALUE_RE.fullmatch(text)
    if not match:
        return 0.0

    numeral, unit = match.groups()
    base = float(numeral)
    return base * MULTIPLIERS[unit] if unit else base


__all__ = [
    "INFINITY_GLYPH",
    "MULTIPLIERS",
    "UNITS",
    "format_value",
    "is_value_text",
    "parse_value",
    "plain_text",
]

"""Parsing and display formatting for metric values.

Display strings produced by `format_value` ("2.96M", "19.43K") are not meant
to be parsed back: `parse_value` strips the suffix without rescaling.
"""
from __future__ import annotations

import math
import numbers
import re
from typing import Any

NOT_AVAILABLE = "N/A"

_STRIP_RE = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_value(value: Any) -> float:
    """Normalize a cell value into a float.

    Numbers are returned unchanged (as float). Strings have every character
    other than digits, "." and "-" removed and the leading decimal number of
    what remains is parsed, so "1,000" gives 1000.0 and "12.5%" gives 12.5.

    Args:
        value: Number, string, or anything else found in a record.

    Returns:
        The numeric value, or NaN when nothing numeric can be recovered.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, numbers.Real):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    m = _LEADING_NUMBER_RE.match(_STRIP_RE.sub("", value))
    if not m:
        return math.nan
    return float(m.group(0))


def format_value(value: float) -> str:
    """Render a number as a scale-abbreviated display string.

    Bands, checked in order:
        >= 1,000,000  -> "1.50M"
        >= 1,000      -> "2.00K"
        < 1           -> "0.125" (three decimals, negatives included)
        otherwise     -> "999.5" (thousands grouping, up to 3 decimals)

    Non-finite input renders as "N/A".
    """
    if not math.isfinite(value):
        return NOT_AVAILABLE
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{value / 1_000:.2f}K"
    if value < 1:
        return f"{value:.3f}"

    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_growth(growth: float, decimals: int = 1) -> str:
    """Format a growth percentage with an explicit sign, e.g. "+50.0%"."""
    if not math.isfinite(growth):
        return NOT_AVAILABLE
    return f"{growth:+.{decimals}f}%"

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Pattern


def format_number(value: int) -> str:
    """Format an integer with thousands separators (e.g. 3000 -> '3,000')."""
    return f"{value:,}"


def format_percent(fraction: float) -> str:
    """Format a 0.0-1.0 fraction as a whole percentage (e.g. 0.5667 -> '57%').

    Halves round away from zero, so 0.125 -> '13%'.
    """
    percent = (Decimal(repr(fraction)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent:,}%"


def format_date(day: date) -> str:
    """Format a date like 'Mon Jan 01 2024'."""
    return day.strftime("%a %b %d %Y")


def placeholder_pattern(name: str) -> Pattern[str]:
    """Build a matcher for '{{ name }}' tokens, tolerant of inner whitespace."""
    return re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}")

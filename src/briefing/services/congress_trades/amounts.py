"""Parsing and display helpers for disclosure amount ranges.

Capitol Trades reports sizes as ranges such as "1K–15K", "100K–250K",
"500K–1M" or "5M–25M". Scoring and filtering only ever use the lower bound.
"""

import math
import re

_STRIP_PATTERN = re.compile(r"[$,\s]")
_RANGE_SEPARATOR = re.compile(r"[–-]")

_SUFFIX_MULTIPLIERS = {
    "K": 1_000,
    "M": 1_000_000,
}


def parse_amount_value(text: str) -> float:
    """
    Parse a single amount such as "250K", "$1M" or "50,000".

    Returns 0 for anything that is not a finite, non-negative number.
    """
    cleaned = _STRIP_PATTERN.sub("", text or "").upper()
    if not cleaned:
        return 0

    multiplier = 1
    suffix = cleaned[-1]
    if suffix in _SUFFIX_MULTIPLIERS:
        multiplier = _SUFFIX_MULTIPLIERS[suffix]
        cleaned = cleaned[:-1]

    try:
        value = float(cleaned) * multiplier
    except ValueError:
        return 0

    if not math.isfinite(value) or value < 0:
        return 0
    return value


def parse_amount_range(text: str) -> float:
    """Return the lower bound of a range like "100K–250K"."""
    cleaned = _STRIP_PATTERN.sub("", text or "")
    lower = _RANGE_SEPARATOR.split(cleaned)[0].strip()
    if not lower:
        return 0
    return parse_amount_value(lower)


def format_amount_display(amount_range: str) -> str:
    """Format a range for display: "100K–250K" -> "$100K – $250K"."""
    text = (amount_range or "").strip()
    if not re.match(r"^\$?\d", text):
        return text
    return "$" + re.sub(r"\s*[–-]\s*\$?", " – $", text.lstrip("$"))


def format_compact_amount(amount: float) -> str:
    """Format a dollar amount as "5M", "250K" or a plain integer."""
    if amount >= 1_000_000:
        return f"{amount / 1_000_000:.0f}M"
    if amount >= 1_000:
        return f"{amount / 1_000:.0f}K"
    return str(int(amount))

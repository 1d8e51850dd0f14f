"""Significance filters for parsed congress trades."""

from typing import Iterable, List

from .models import TradeRecord
from .reference import ReferenceData

MIN_AMOUNT_LOWER = 100_000
MIN_SCORE = 3

_PLACEHOLDER_TICKERS = ("", "N/A")


def filter_records(
    records: Iterable[TradeRecord], reference: ReferenceData
) -> List[TradeRecord]:
    """
    Keep trades worth surfacing, highest score first.

    Drops, in order: missing or "N/A" tickers, excluded tickers (broad index
    ETFs), amounts under $100K and scores under 3.
    """
    kept = [r for r in records if r.ticker not in _PLACEHOLDER_TICKERS]
    kept = [r for r in kept if not reference.is_excluded(r.ticker)]
    kept = [r for r in kept if r.amount_lower >= MIN_AMOUNT_LOWER]
    kept = [r for r in kept if r.score >= MIN_SCORE]
    return sorted(kept, key=lambda r: r.score, reverse=True)

"""Heuristic significance scoring for congress trades.

score = amount tier x member multiplier x direction weight
        x filing freshness x committee relevance

Trades under $100K always score 0.
"""

from typing import Any, Optional

from ...config.logging import get_logger
from .models import CommitteeRelevance, RelevanceTier, TradeDirection, TradeRecord
from .reference import ReferenceData
from .relevance import get_committee_relevance

logger = get_logger(__name__)

HOT_SCORE_THRESHOLD = 6

# Sentinel distinguishing "relevance not supplied" from "supplied as None".
_UNSET: Any = object()

_AMOUNT_TIERS = (
    (1_000_000, 5),
    (500_000, 3),
    (250_000, 2),
    (100_000, 1),
)

# Capitol Trades rarely distinguishes full from partial sales in the table;
# these apply when the raw type carries the distinction.
_RAW_TYPE_WEIGHTS = {
    "sale_full": 1.75,
    "sale_partial": 1.25,
    "exchange": 0.75,
}

_RELEVANCE_MULTIPLIERS = {
    RelevanceTier.DIRECT: 2,
    RelevanceTier.TANGENTIAL: 1.5,
}


def get_base_amount_score(amount_lower: float) -> int:
    for floor, tier in _AMOUNT_TIERS:
        if amount_lower >= floor:
            return tier
    return 0


def get_direction_weight(
    direction: TradeDirection, raw_type: Optional[str] = None
) -> float:
    raw = (raw_type or "").strip().lower()
    if raw in _RAW_TYPE_WEIGHTS:
        return _RAW_TYPE_WEIGHTS[raw]
    return 1.5 if direction == TradeDirection.SELL else 1


def get_freshness_modifier(filing_lag_days: int) -> float:
    if filing_lag_days <= 7:
        return 1.5
    if filing_lag_days > 30:
        return 0.5
    return 1


def get_relevance_multiplier(relevance: Optional[CommitteeRelevance]) -> float:
    if relevance is None:
        return 1
    return _RELEVANCE_MULTIPLIERS[relevance.tier]


def is_hot(score: float) -> bool:
    return score >= HOT_SCORE_THRESHOLD


def calculate_score(
    *,
    amount_lower: float,
    politician: str,
    direction: TradeDirection,
    filing_lag_days: int,
    reference: ReferenceData,
    raw_type: Optional[str] = None,
    ticker: Optional[str] = None,
    committee_relevance: Optional[CommitteeRelevance] = _UNSET,
) -> float:
    """
    Calculate the significance score of a trade.

    Args:
        amount_lower: Lower bound of the disclosed amount range
        politician: Member name
        direction: Normalized trade direction
        filing_lag_days: Days between trade and disclosure, as reported
        reference: Static reference tables
        raw_type: Raw transaction type text, e.g. "sale_full"
        ticker: Traded ticker, used when relevance must be computed here
        committee_relevance: Pre-computed relevance; None means "no match".
            When omitted it is computed from ``ticker``.

    Returns:
        Product of all scoring factors (0 for trades under $100K)
    """
    base = get_base_amount_score(amount_lower)
    if base == 0:
        return 0

    if committee_relevance is _UNSET:
        committee_relevance = (
            get_committee_relevance(politician, ticker, reference) if ticker else None
        )

    committee_multiplier = get_relevance_multiplier(committee_relevance)
    if committee_relevance is not None:
        logger.debug(
            "Committee relevance boost",
            politician=politician,
            committee=committee_relevance.committee,
            ticker=ticker,
            multiplier=committee_multiplier,
        )

    return (
        base
        * reference.multiplier(politician)
        * get_direction_weight(direction, raw_type)
        * get_freshness_modifier(filing_lag_days)
        * committee_multiplier
    )


def score_record(record: TradeRecord, reference: ReferenceData) -> float:
    """Recompute the score of an already parsed record."""
    return calculate_score(
        amount_lower=record.amount_lower,
        politician=record.politician,
        direction=record.direction,
        filing_lag_days=record.filing_lag_days,
        reference=reference,
        raw_type=record.raw_type,
        ticker=record.ticker,
        committee_relevance=record.committee_relevance,
    )

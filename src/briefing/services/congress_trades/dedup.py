"""Merging of repeated disclosures by the same member."""

from typing import Dict, Iterable, List, Tuple

from .models import AggregateRecord, TradeDirection, TradeEntry, TradeRecord
from .scoring import is_hot

GroupKey = Tuple[str, str, TradeDirection]


def _aggregate(group: List[TradeRecord]) -> AggregateRecord:
    first = group[0]
    max_score = max(t.score for t in group)
    relevance = next(
        (t.committee_relevance for t in group if t.committee_relevance is not None),
        None,
    )
    return AggregateRecord(
        politician=first.politician,
        party=first.party,
        chamber=first.chamber,
        state=first.state,
        ticker=first.ticker,
        direction=first.direction,
        count=len(group),
        total_amount_lower=sum(t.amount_lower for t in group),
        max_score=max_score,
        hot=is_hot(max_score),
        trades=tuple(group),
        url=first.url,
        committee_relevance=relevance,
    )


def deduplicate(records: Iterable[TradeRecord]) -> List[TradeEntry]:
    """
    Group trades by (member, ticker, direction).

    Single trades pass through unchanged; larger groups become one
    AggregateRecord. The result is sorted by score, highest first, using the
    maximum member score for aggregates.
    """
    groups: Dict[GroupKey, List[TradeRecord]] = {}
    for record in records:
        key = (record.politician, record.ticker, record.direction)
        groups.setdefault(key, []).append(record)

    entries: List[TradeEntry] = [
        group[0] if len(group) == 1 else _aggregate(group)
        for group in groups.values()
    ]
    return sorted(entries, key=lambda e: e.effective_score, reverse=True)

"""Rendering of trades into briefing display items."""

from datetime import datetime

from .amounts import format_amount_display, format_compact_amount
from .models import (
    AggregateRecord,
    Chamber,
    DisplayItem,
    TradeDirection,
    TradeEntry,
    TradeRecord,
)

HOT_PREFIX = "🔥 "
DETAIL_SEPARATOR = " · "


def format_date(value: datetime) -> str:
    """Format a date as "Feb 3"."""
    return f"{value:%b} {value.day}"


def format_chamber(chamber: Chamber) -> str:
    return "Sen." if chamber == Chamber.SENATE else "Rep."


def _headline(entry: TradeEntry) -> str:
    prefix = HOT_PREFIX if entry.hot else ""
    action = "purchased" if entry.direction == TradeDirection.BUY else "sold"
    return (
        f"{prefix}{format_chamber(entry.chamber)} {entry.politician} "
        f"({entry.party.value}-{entry.state}) {action} {entry.ticker}"
    )


def format_record(record: TradeRecord) -> DisplayItem:
    """
    Render a single trade.

    Example:
        text:   "🔥 Sen. Jack Reed (D-RI) purchased RTX"
        detail: "Armed Services · $250K – $500K · traded Feb 1 · filed Feb 18"
    """
    parts = []
    if record.committee_relevance is not None:
        parts.append(record.committee_relevance.committee)
    parts.append(format_amount_display(record.amount_range))
    parts.append(f"traded {format_date(record.trade_date)}")
    parts.append(f"filed {format_date(record.disclosure_date)}")
    return DisplayItem(
        text=_headline(record), detail=DETAIL_SEPARATOR.join(parts), url=record.url
    )


def format_grouped_amount(aggregate: AggregateRecord) -> str:
    amounts = sorted(t.amount_lower for t in aggregate.trades)
    if not amounts or amounts[0] == amounts[-1]:
        return format_amount_display(aggregate.trades[0].amount_range)
    return (
        f"${format_compact_amount(amounts[0])}–"
        f"${format_compact_amount(amounts[-1])} total"
    )


def format_aggregate(aggregate: AggregateRecord) -> DisplayItem:
    """Render a group of trades merged by the deduplicator."""
    text = (
        f"{_headline(aggregate)} "
        f"({aggregate.count} trades, {format_grouped_amount(aggregate)})"
    )
    detail = f"Combined from {aggregate.count} transactions"
    if aggregate.committee_relevance is not None:
        detail = f"{aggregate.committee_relevance.committee}{DETAIL_SEPARATOR}{detail}"
    return DisplayItem(text=text, detail=detail, url=aggregate.url)


def format_entry(entry: TradeEntry) -> DisplayItem:
    if isinstance(entry, AggregateRecord):
        return format_aggregate(entry)
    return format_record(entry)

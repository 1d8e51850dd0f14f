"""Tests for rendering trades into briefing items."""

import sys
from datetime import datetime

sys.path.append("src")
from briefing.services.congress_trades.dedup import deduplicate
from briefing.services.congress_trades.formatter import (
    format_aggregate,
    format_date,
    format_entry,
    format_record,
)
from briefing.services.congress_trades.models import (
    Chamber,
    CommitteeRelevance,
    Party,
    RelevanceTier,
    TradeDirection,
)


class TestFormatRecord:
    """Test rendering of single trades."""

    def test_hot_house_purchase(self, make_record):
        item = format_record(make_record())

        assert item.text == "🔥 Rep. Nancy Pelosi (D-CA) purchased NVDA"
        assert item.detail == "$1M – $5M · traded Jan 15 · filed Feb 20"

    def test_senate_sale_without_hot_marker(self, make_record):
        record = make_record(
            politician="Tom Cotton",
            party=Party.REPUBLICAN,
            chamber=Chamber.SENATE,
            state="AR",
            ticker="PANW",
            direction=TradeDirection.SELL,
            score=4,
            hot=False,
        )
        assert format_record(record).text == "Sen. Tom Cotton (R-AR) sold PANW"

    def test_committee_leads_detail(self, make_record):
        record = make_record(
            politician="Jack Reed",
            chamber=Chamber.SENATE,
            state="RI",
            ticker="RTX",
            amount_range="250K–500K",
            trade_date=datetime(2026, 2, 1),
            disclosure_date=datetime(2026, 2, 18),
            committee_relevance=CommitteeRelevance(
                "Armed Services", RelevanceTier.DIRECT
            ),
        )
        item = format_record(record)

        assert item.text == "🔥 Sen. Jack Reed (D-RI) purchased RTX"
        assert item.detail == (
            "Armed Services · $250K – $500K · traded Feb 1 · filed Feb 18"
        )

    def test_carries_trade_url(self, make_record):
        item = format_record(make_record(url="https://www.capitoltrades.com/trades/1"))
        assert item.url == "https://www.capitoltrades.com/trades/1"

    def test_format_date(self):
        assert format_date(datetime(2026, 2, 3)) == "Feb 3"
        assert format_date(datetime(2026, 12, 25)) == "Dec 25"


class TestFormatAggregate:
    """Test rendering of merged trades."""

    def test_amount_range_across_trades(self, make_record):
        [aggregate] = deduplicate(
            [
                make_record(amount_lower=100_000, amount_range="100K–250K"),
                make_record(amount_lower=1_000_000, amount_range="1M–5M"),
            ]
        )
        item = format_aggregate(aggregate)

        assert item.text == (
            "🔥 Rep. Nancy Pelosi (D-CA) purchased NVDA (2 trades, $100K–$1M total)"
        )
        assert item.detail == "Combined from 2 transactions"

    def test_equal_amounts_show_single_range(self, make_record):
        [aggregate] = deduplicate(
            [
                make_record(amount_lower=250_000, amount_range="250K–500K"),
                make_record(amount_lower=250_000, amount_range="250K–500K"),
                make_record(amount_lower=250_000, amount_range="250K–500K"),
            ]
        )
        item = format_aggregate(aggregate)
        assert item.text.endswith("(3 trades, $250K – $500K)")

    def test_committee_prefixes_detail(self, make_record):
        relevance = CommitteeRelevance("Financial Services", RelevanceTier.DIRECT)
        [aggregate] = deduplicate(
            [
                make_record(ticker="JPM", committee_relevance=relevance),
                make_record(ticker="JPM", committee_relevance=relevance),
            ]
        )
        item = format_aggregate(aggregate)
        assert item.detail == "Financial Services · Combined from 2 transactions"

    def test_aggregate_uses_first_url(self, make_record):
        [aggregate] = deduplicate(
            [make_record(url="https://first"), make_record(url="https://second")]
        )
        assert format_aggregate(aggregate).url == "https://first"


class TestFormatEntry:
    """Test dispatch between single and merged trades."""

    def test_dispatches_by_type(self, make_record):
        entries = deduplicate(
            [
                make_record(ticker="NVDA", score=15),
                make_record(ticker="AAPL", score=6),
                make_record(ticker="AAPL", score=5),
            ]
        )
        items = [format_entry(e) for e in entries]

        assert items[0].text == "🔥 Rep. Nancy Pelosi (D-CA) purchased NVDA"
        assert "(2 trades," in items[1].text

"""Shared test configuration and fixtures."""

import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.append("src")
from briefing.services.congress_trades.models import (
    Chamber,
    Party,
    TradeDirection,
    TradeRecord,
)
from briefing.services.congress_trades.reference import (
    build_reference_data,
    get_default_reference_data,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def reference():
    """Packaged reference tables."""
    return get_default_reference_data()


@pytest.fixture
def small_reference():
    """Minimal hand-written reference tables."""
    return build_reference_data(
        politicians={
            "Jane Member": {
                "multiplier": 2,
                "committees": ["Oversight", "Armed Services"],
                "chamber": "House",
                "state": "OH",
                "party": "D",
            },
            "No Committees": {"multiplier": 1.5, "committees": []},
        },
        committee_sectors={
            "_comment": "ignored during validation",
            "Oversight": {"direct": [], "tangential": ["defense"]},
            "Armed Services": {"direct": ["defense"], "tangential": []},
        },
        ticker_sectors={"RTX": "defense", "AAPL": "tech"},
        excluded_tickers=["SPY"],
    )


@pytest.fixture(scope="session")
def capitol_trades_html():
    """Pinned Capitol Trades listing page with 12 small trades."""
    return (FIXTURES_DIR / "capitoltrades.html").read_text(encoding="utf-8")


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 25, 12, 0, 0)


@pytest.fixture
def make_record():
    """Factory for TradeRecord instances with overridable fields."""

    def _make_record(**overrides):
        values = {
            "politician": "Nancy Pelosi",
            "party": Party.DEMOCRAT,
            "chamber": Chamber.HOUSE,
            "state": "CA",
            "company": "NVIDIA",
            "ticker": "NVDA",
            "trade_date": datetime(2026, 1, 15),
            "disclosure_date": datetime(2026, 2, 20),
            "filing_lag_days": 5,
            "owner": "Self",
            "direction": TradeDirection.BUY,
            "raw_type": "buy",
            "amount_range": "1M–5M",
            "amount_lower": 1_000_000,
            "price": "$130",
            "score": 15,
            "hot": True,
            "url": "",
            "committee_relevance": None,
        }
        values.update(overrides)
        return TradeRecord(**values)

    return _make_record


@pytest.fixture(autouse=True)
def isolated_env():
    """Keep real environment variables and .env files out of settings."""
    with patch.dict(
        os.environ,
        {"ENVIRONMENT": "testing", "USE_MOCK_DATA": "false"},
    ):
        from briefing.config.settings import get_settings

        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

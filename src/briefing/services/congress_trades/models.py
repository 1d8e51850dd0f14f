"""Data models for the congress trades briefing source."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple, Union


class Party(Enum):
    """Party affiliation as shown on the disclosure listing."""

    DEMOCRAT = "D"
    REPUBLICAN = "R"
    INDEPENDENT = "I"


class Chamber(Enum):
    """Congressional chamber."""

    HOUSE = "House"
    SENATE = "Senate"


class TradeDirection(Enum):
    """Normalized trade direction."""

    BUY = "buy"
    SELL = "sell"


class RelevanceTier(Enum):
    """How closely a committee's jurisdiction overlaps a ticker's sector."""

    DIRECT = "direct"
    TANGENTIAL = "tangential"


@dataclass(frozen=True)
class CommitteeRelevance:
    """Committee whose oversight overlaps the sector of a traded ticker."""

    committee: str
    tier: RelevanceTier


@dataclass(frozen=True)
class TradeRecord:
    """One parsed disclosure row."""

    politician: str
    party: Party
    chamber: Chamber
    state: str
    company: str
    ticker: str
    trade_date: datetime
    disclosure_date: datetime
    filing_lag_days: int  # as reported by the source
    owner: str
    direction: TradeDirection
    raw_type: str  # e.g. "sell", "sale_full", "exchange"
    amount_range: str  # e.g. "100K–250K"
    amount_lower: float
    price: str
    score: float
    hot: bool
    url: str = ""
    committee_relevance: Optional[CommitteeRelevance] = None

    @property
    def effective_score(self) -> float:
        return self.score


@dataclass(frozen=True)
class AggregateRecord:
    """Several qualifying disclosures by one member for one ticker and direction."""

    politician: str
    party: Party
    chamber: Chamber
    state: str
    ticker: str
    direction: TradeDirection
    count: int
    total_amount_lower: float
    max_score: float
    hot: bool
    trades: Tuple[TradeRecord, ...]
    url: str = ""
    committee_relevance: Optional[CommitteeRelevance] = None

    @property
    def effective_score(self) -> float:
        return self.max_score


TradeEntry = Union[TradeRecord, AggregateRecord]


@dataclass(frozen=True)
class RowParseResult:
    """Outcome of parsing a single table row: a record or a skip reason."""

    record: Optional[TradeRecord] = None
    skip_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class DisplayItem:
    """Rendered line for the daily digest."""

    text: str
    detail: str
    url: str = ""


@dataclass
class BriefingSection:
    """Section of the daily briefing produced by a data source."""

    title: str
    icon: str
    items: List[DisplayItem] = field(default_factory=list)
    summary: Optional[str] = None

"""
Congress trades briefing source.

Scrapes member stock trades from Capitol Trades and surfaces significant
ones using heuristic scoring:
- Row-level extraction that tolerates layout drift
- Multi-factor significance scoring with committee relevance
- Threshold filtering and same-member deduplication
- Rendering into briefing display items
"""

from .amounts import parse_amount_range, parse_amount_value
from .client import CapitolTradesClient, HTMLCache
from .dedup import deduplicate
from .exceptions import CongressTradesError, FetchError, ReferenceDataError
from .extractor import extract_records, parse_disclosure_date
from .filters import filter_records
from .formatter import format_aggregate, format_entry, format_record
from .models import (
    AggregateRecord,
    BriefingSection,
    Chamber,
    CommitteeRelevance,
    DisplayItem,
    Party,
    RelevanceTier,
    TradeDirection,
    TradeRecord,
)
from .reference import (
    ReferenceData,
    build_reference_data,
    get_default_reference_data,
    load_reference_data,
)
from .relevance import get_committee_relevance
from .scoring import HOT_SCORE_THRESHOLD, calculate_score, score_record
from .source import CongressTradesSource, MockCongressTradesSource, create_source

__all__ = [
    # Main source
    "CongressTradesSource",
    "MockCongressTradesSource",
    "create_source",
    # Pipeline stages
    "calculate_score",
    "deduplicate",
    "extract_records",
    "filter_records",
    "format_aggregate",
    "format_entry",
    "format_record",
    "get_committee_relevance",
    "parse_amount_range",
    "parse_amount_value",
    "parse_disclosure_date",
    "score_record",
    "HOT_SCORE_THRESHOLD",
    # Collaborators
    "CapitolTradesClient",
    "HTMLCache",
    "ReferenceData",
    "build_reference_data",
    "get_default_reference_data",
    "load_reference_data",
    # Models
    "AggregateRecord",
    "BriefingSection",
    "Chamber",
    "CommitteeRelevance",
    "DisplayItem",
    "Party",
    "RelevanceTier",
    "TradeDirection",
    "TradeRecord",
    # Errors
    "CongressTradesError",
    "FetchError",
    "ReferenceDataError",
]

"""Row-level extraction of trades from the Capitol Trades listing page.

The page layout is not versioned, so every field is read by a small named
extractor and every row is parsed independently: a bad row is skipped and
counted, never raised. Two warnings flag upstream layout drift:

- no ``<table>`` in a non-trivial document (table removed or renamed);
- zero records from a non-trivial document (table present, columns moved).
"""

import re
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ...config.logging import get_logger
from .amounts import parse_amount_range
from .models import Chamber, Party, RowParseResult, TradeDirection, TradeRecord
from .reference import ReferenceData
from .relevance import get_committee_relevance
from .scoring import calculate_score, is_hot

logger = get_logger(__name__)

BASE_URL = "https://www.capitoltrades.com"

# Documents shorter than this are treated as "no data" rather than drift.
ANOMALY_SIZE_THRESHOLD = 1000
MIN_CELLS = 9

_DAY_MONTH_YEAR = re.compile(r"(\d{1,2})\s*([A-Za-z]{3})[A-Za-z]*\.?\s*(\d{4})")
_DAYS_AGO = re.compile(r"^(\d+)\s*days?\s*(ago)?$")
_LEADING_TIME = re.compile(r"^\d{1,2}:\d{2}\s*")
_ABSOLUTE_DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%Y-%m-%d", "%m/%d/%Y")


# ----------------------------------------------------------------------------
# Field parsers
# ----------------------------------------------------------------------------


def parse_party(text: str) -> Party:
    if "Democrat" in text:
        return Party.DEMOCRAT
    if "Republican" in text:
        return Party.REPUBLICAN
    return Party.INDEPENDENT


def parse_chamber(text: str) -> Chamber:
    return Chamber.SENATE if "Senate" in text else Chamber.HOUSE


def _parse_day_month_year(text: str) -> Optional[datetime]:
    match = _DAY_MONTH_YEAR.search(text)
    if not match:
        return None
    day, month, year = match.groups()
    try:
        return datetime.strptime(f"{day} {month} {year}", "%d %b %Y")
    except ValueError:
        return None


def parse_trade_date(text: str) -> Optional[datetime]:
    """Parse trade dates such as "10 Feb2026" or "10 Feb 2026"."""
    if not _DAY_MONTH_YEAR.search(text):
        logger.warning("Could not parse trade date", text=text)
        return None
    parsed = _parse_day_month_year(text)
    if parsed is None:
        logger.warning("Invalid trade date", text=text)
    return parsed


def parse_disclosure_date(text: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a disclosure date, accepting relative phrases.

    Handles "Today", "Yesterday", "3 days ago", "2 days", "10 Feb2026" and
    common absolute formats. Anything else falls back to ``now``.
    """
    now = now or datetime.now()
    # The listing prefixes same-week disclosures with a time: "14:05Yesterday".
    trimmed = _LEADING_TIME.sub("", text.strip().lower())

    if trimmed == "today":
        return now
    if trimmed == "yesterday":
        return now - timedelta(days=1)

    days_ago = _DAYS_AGO.match(trimmed)
    if days_ago:
        return now - timedelta(days=int(days_ago.group(1)))

    parsed = _parse_day_month_year(text)
    if parsed is not None:
        return parsed

    for fmt in _ABSOLUTE_DATE_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue

    return now


def parse_filing_lag(text: str) -> int:
    match = re.search(r"(\d+)", text)
    return int(match.group(1)) if match else 0


def parse_trade_direction(text: str) -> TradeDirection:
    lower = text.strip().lower()
    if "buy" in lower or lower == "purchase":
        return TradeDirection.BUY
    if "sell" in lower or lower in ("sale", "exchange", "sale_full", "sale_partial"):
        return TradeDirection.SELL
    logger.warning("Unknown trade type, defaulting to sell", text=text)
    return TradeDirection.SELL


def clean_ticker(ticker: str) -> str:
    """Strip the exchange suffix: "HSY:US" -> "HSY"."""
    return ticker.split(":")[0].strip()


# ----------------------------------------------------------------------------
# Field extractors
# ----------------------------------------------------------------------------


def _text(node: Optional[Tag]) -> str:
    return node.get_text(strip=True) if node is not None else ""


def extract_politician_name(cell: Tag) -> str:
    return _text(cell.select_one(".politician-name")) or _text(
        cell.select_one("a[href*=politicians]")
    )


def extract_party_text(cell: Tag) -> str:
    return _text(cell.select_one(".q-field.party"))


def extract_chamber_text(cell: Tag) -> str:
    return _text(cell.select_one(".q-field.chamber"))


def extract_state(cell: Tag) -> str:
    return _text(cell.select_one("[class*=us-state]"))


def extract_company(cell: Tag) -> str:
    return _text(cell.select_one(".issuer-name a"))


def extract_ticker(cell: Tag) -> str:
    return clean_ticker(_text(cell.select_one(".issuer-ticker")))


def extract_trade_url(row: Tag) -> str:
    # Tied to the /trades/<id> URL scheme; an empty URL here means it changed.
    link = row.select_one("a[href*='/trades/']")
    href = link.get("href", "") if link is not None else ""
    if not href:
        return ""
    return href if href.startswith("http") else f"{BASE_URL}{href}"


# ----------------------------------------------------------------------------
# Row and document parsing
# ----------------------------------------------------------------------------


def parse_row(
    row: Tag, reference: ReferenceData, now: Optional[datetime] = None
) -> RowParseResult:
    """Parse one table row into a TradeRecord or a skip reason."""
    cells = row.find_all("td")
    if len(cells) < MIN_CELLS:
        return RowParseResult(skip_reason="too_few_cells")

    politician_cell, issuer_cell = cells[0], cells[1]

    politician = extract_politician_name(politician_cell)
    if not politician:
        return RowParseResult(skip_reason="missing_politician")

    trade_date = parse_trade_date(_text(cells[3]))
    if trade_date is None:
        return RowParseResult(skip_reason="invalid_trade_date")

    ticker = extract_ticker(issuer_cell)
    raw_type = _text(cells[6])
    amount_range = _text(cells[7])
    filing_lag_days = parse_filing_lag(_text(cells[4]))
    direction = parse_trade_direction(raw_type)
    amount_lower = parse_amount_range(amount_range)

    # Computed once and handed to the scorer.
    committee_relevance = (
        get_committee_relevance(politician, ticker, reference) if ticker else None
    )
    score = calculate_score(
        amount_lower=amount_lower,
        politician=politician,
        direction=direction,
        filing_lag_days=filing_lag_days,
        reference=reference,
        raw_type=raw_type,
        ticker=ticker,
        committee_relevance=committee_relevance,
    )

    record = TradeRecord(
        politician=politician,
        party=parse_party(extract_party_text(politician_cell)),
        chamber=parse_chamber(extract_chamber_text(politician_cell)),
        state=extract_state(politician_cell),
        company=extract_company(issuer_cell),
        ticker=ticker,
        trade_date=trade_date,
        disclosure_date=parse_disclosure_date(_text(cells[2]), now),
        filing_lag_days=filing_lag_days,
        owner=_text(cells[5]),
        direction=direction,
        raw_type=raw_type,
        amount_range=amount_range,
        amount_lower=amount_lower,
        price=_text(cells[8]),
        score=score,
        hot=is_hot(score),
        url=extract_trade_url(row),
        committee_relevance=committee_relevance,
    )
    return RowParseResult(record=record)


def extract_records(
    html: str, reference: ReferenceData, now: Optional[datetime] = None
) -> List[TradeRecord]:
    """
    Extract scored trade records from a Capitol Trades listing page.

    Never raises on malformed input; rows that cannot be parsed are skipped.

    Args:
        html: Raw page HTML
        reference: Static reference tables used for scoring
        now: Reference time for relative disclosure dates

    Returns:
        One TradeRecord per parseable row, in page order
    """
    html = html or ""
    records: List[TradeRecord] = []

    soup = BeautifulSoup(html, "html.parser")
    if soup.find("table") is None:
        if len(html) > ANOMALY_SIZE_THRESHOLD:
            logger.warning(
                "Expected table structure not found, Capitol Trades may have changed layout",
                html_bytes=len(html),
            )
        return records

    skipped: Counter = Counter()
    for row in soup.select("table tr")[1:]:
        try:
            result = parse_row(row, reference, now)
        except Exception as e:
            logger.debug("Row parse failed", error=str(e))
            result = RowParseResult(skip_reason="parse_error")

        if result.ok:
            records.append(result.record)
        else:
            skipped[result.skip_reason] += 1

    if skipped:
        logger.info(
            "Skipped unparseable rows",
            parsed=len(records),
            skipped=sum(skipped.values()),
            reasons=dict(skipped),
        )

    if not records and len(html) > ANOMALY_SIZE_THRESHOLD:
        logger.warning(
            "Parsed 0 trades from non-empty HTML, possible parser breakage",
            html_bytes=len(html),
        )

    return records

"""Congress trades data source for the daily briefing."""

import time
from datetime import date, datetime
from typing import Optional, Union

from ...config.logging import get_logger, log_performance
from ...config.settings import Settings, get_settings
from .client import CapitolTradesClient
from .dedup import deduplicate
from .extractor import extract_records
from .filters import filter_records
from .formatter import format_entry
from .models import BriefingSection, DisplayItem
from .reference import ReferenceData, get_default_reference_data, load_reference_data

logger = get_logger(__name__)

SECTION_TITLE = "Congress Trades"
SECTION_ICON = "🏛"


def _empty_section() -> BriefingSection:
    return BriefingSection(title=SECTION_TITLE, icon=SECTION_ICON, items=[])


class CongressTradesSource:
    """Surfaces significant congress member trades scraped from Capitol Trades."""

    name = SECTION_TITLE
    priority = 6
    timeout_seconds = 30

    def __init__(
        self,
        client: Optional[CapitolTradesClient] = None,
        reference: Optional[ReferenceData] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.client = client or CapitolTradesClient.from_settings(settings)
        if reference is None:
            reference = (
                load_reference_data(settings.reference_data_dir)
                if settings.reference_data_dir
                else get_default_reference_data()
            )
        self.reference = reference
        self.logger = logger.bind(component="congress_trades_source")

    def build_section(
        self, html: str, now: Optional[datetime] = None
    ) -> BriefingSection:
        """
        Run extraction, filtering, deduplication and formatting on a page.

        Args:
            html: Capitol Trades listing HTML
            now: Reference time for relative disclosure dates

        Returns:
            Briefing section with one item per surfaced trade or group
        """
        started = time.perf_counter()

        all_records = extract_records(html, self.reference, now)
        self.logger.info("Parsed trades, filtering", parsed=len(all_records))

        filtered = filter_records(all_records, self.reference)
        self.logger.info("Trades passed filters", passed=len(filtered))

        if not filtered and all_records:
            items = [
                DisplayItem(
                    text="No significant trades in the last 24h",
                    detail=f"{len(all_records)} trades checked, none passed filters",
                )
            ]
        else:
            items = [format_entry(entry) for entry in deduplicate(filtered)]

        log_performance(
            "congress_trades.build_section",
            (time.perf_counter() - started) * 1000,
            parsed=len(all_records),
            items=len(items),
        )
        return BriefingSection(title=SECTION_TITLE, icon=SECTION_ICON, items=items)

    async def fetch(self, for_date: Union[date, datetime]) -> BriefingSection:
        """
        Fetch the listing and build the briefing section.

        Fetch failures are logged and produce a section with no items.
        """
        try:
            html = await self.client.get_page(for_date)
        except Exception as e:
            self.logger.warning(
                "Failed to fetch congress trades",
                error_type=type(e).__name__,
                error=str(e),
            )
            return _empty_section()

        return self.build_section(html)


class MockCongressTradesSource:
    """Fixed output for development and tests."""

    name = SECTION_TITLE
    priority = 6

    async def fetch(self, for_date: Union[date, datetime]) -> BriefingSection:
        return BriefingSection(
            title=SECTION_TITLE,
            icon=SECTION_ICON,
            items=[
                DisplayItem(
                    text="🔥 Rep. Nancy Pelosi (D-CA) purchased NVDA",
                    detail="$1M – $5M · traded Jan 15 · filed Feb 20",
                ),
                DisplayItem(
                    text="Sen. Tommy Tuberville (R-AL) sold RTX",
                    detail="$250K – $500K · traded Feb 1 · filed Feb 18",
                ),
            ],
        )


def create_source(
    settings: Optional[Settings] = None,
) -> Union[CongressTradesSource, MockCongressTradesSource]:
    """Create the configured source (mock when USE_MOCK_DATA is set)."""
    settings = settings or get_settings()
    if settings.use_mock_data:
        return MockCongressTradesSource()
    return CongressTradesSource(settings=settings)

"""
Briefing - command line entry point.

Runs the congress trades source once and prints the resulting briefing
section. Use --file to run against a saved Capitol Trades page instead of
fetching it.
"""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from briefing.config.logging import get_logger, setup_logging
from briefing.config.settings import get_settings
from briefing.services.congress_trades import (
    BriefingSection,
    CongressTradesSource,
    MockCongressTradesSource,
    ReferenceDataError,
    create_source,
)


def initialize_application() -> None:
    """Initialize logging from settings."""
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        format_type=settings.log_format,
        file_enabled=settings.log_file_enabled,
        file_path=settings.log_file_path,
        max_file_size=settings.log_max_file_size,
        backup_count=settings.log_backup_count,
    )


def render_section(section: BriefingSection) -> str:
    """Render a section as plain text."""
    lines = [f"{section.icon} {section.title}"]
    if not section.items:
        lines.append("  (no items)")
    for item in section.items:
        lines.append(f"  • {item.text}")
        if item.detail:
            lines.append(f"    {item.detail}")
        if item.url:
            lines.append(f"    {item.url}")
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Surface significant congress member stock trades"
    )
    parser.add_argument(
        "--file", type=Path, help="Parse a saved Capitol Trades page instead of fetching"
    )
    parser.add_argument(
        "--mock", action="store_true", help="Print fixed sample output"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main application entry point."""
    args = parse_args(argv)
    initialize_application()
    logger = get_logger(__name__)

    try:
        if args.mock:
            source = MockCongressTradesSource()
        elif args.file:
            source = CongressTradesSource()
        else:
            source = create_source()
    except ReferenceDataError as e:
        logger.error("Reference data could not be loaded", error=str(e))
        sys.exit(1)

    if args.file and isinstance(source, CongressTradesSource):
        try:
            html = args.file.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Could not read page", path=str(args.file), error=str(e))
            sys.exit(1)
        section = source.build_section(html)
    else:
        section = asyncio.run(source.fetch(datetime.now()))

    print(render_section(section))


if __name__ == "__main__":
    main()

"""Tests for the command line entry point."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.append("src")
from briefing.main import main, parse_args, render_section
from briefing.services.congress_trades import BriefingSection, DisplayItem

FIXTURE = Path(__file__).parent / "fixtures" / "capitoltrades.html"


class TestRenderSection:
    """Test plain text rendering."""

    def test_renders_items(self):
        section = BriefingSection(
            title="Congress Trades",
            icon="🏛",
            items=[
                DisplayItem(
                    text="Sen. Jack Reed (D-RI) purchased RTX",
                    detail="$250K – $500K",
                    url="https://www.capitoltrades.com/trades/1",
                )
            ],
        )

        assert render_section(section).splitlines() == [
            "🏛 Congress Trades",
            "  • Sen. Jack Reed (D-RI) purchased RTX",
            "    $250K – $500K",
            "    https://www.capitoltrades.com/trades/1",
        ]

    def test_renders_empty_section(self):
        section = BriefingSection(title="Congress Trades", icon="🏛")
        assert "(no items)" in render_section(section)


class TestMain:
    """Test the CLI flows."""

    def test_parse_args(self):
        args = parse_args(["--mock"])
        assert args.mock
        assert args.file is None

    @patch("briefing.main.initialize_application")
    def test_mock_flag(self, mock_init, capsys):
        main(["--mock"])

        output = capsys.readouterr().out
        assert "Congress Trades" in output
        assert "Nancy Pelosi" in output

    @pytest.mark.integration
    @patch("briefing.main.initialize_application")
    def test_file_flag_parses_saved_page(self, mock_init, capsys):
        main(["--file", str(FIXTURE)])

        output = capsys.readouterr().out
        assert "trades checked, none passed filters" in output

    @patch("briefing.main.initialize_application")
    def test_missing_file_exits(self, mock_init, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(tmp_path / "missing.html")])
        assert exc_info.value.code == 1

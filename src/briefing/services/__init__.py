"""Briefing data sources."""

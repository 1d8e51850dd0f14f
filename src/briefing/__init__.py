"""Briefing - daily digest of significant congress member stock trades."""

__version__ = "0.1.0"

"""Tests for committee-to-sector relevance matching."""

import sys

sys.path.append("src")
from briefing.services.congress_trades.models import CommitteeRelevance, RelevanceTier
from briefing.services.congress_trades.relevance import get_committee_relevance


class TestGetCommitteeRelevance:
    """Test relevance lookups against the packaged tables."""

    def test_direct_match(self, reference):
        # Jack Reed is on Armed Services, RTX is defense
        assert get_committee_relevance("Jack Reed", "RTX", reference) == (
            CommitteeRelevance("Armed Services", RelevanceTier.DIRECT)
        )

    def test_no_overlap(self, reference):
        # Nancy Pelosi is on Financial Services, RTX is defense
        assert get_committee_relevance("Nancy Pelosi", "RTX", reference) is None

    def test_unknown_politician(self, reference):
        assert get_committee_relevance("Unknown Person", "RTX", reference) is None

    def test_unknown_ticker(self, reference):
        assert get_committee_relevance("Jack Reed", "UNKNOWN", reference) is None

    def test_politician_without_committees(self, reference):
        assert get_committee_relevance("Mike Johnson", "RTX", reference) is None

    def test_financial_services_matches_banks(self, reference):
        assert (
            get_committee_relevance("Nancy Pelosi", "JPM", reference).committee
            == "Financial Services"
        )
        assert (
            get_committee_relevance("Josh Gottheimer", "GS", reference).committee
            == "Financial Services"
        )

    def test_intelligence_matches_cybersecurity(self, reference):
        assert get_committee_relevance("Tom Cotton", "PANW", reference).committee == (
            "Intelligence"
        )
        assert get_committee_relevance("Mark Warner", "CRWD", reference).committee == (
            "Intelligence"
        )

    def test_energy_and_commerce_matches_energy(self, reference):
        relevance = get_committee_relevance("Dan Crenshaw", "XOM", reference)
        assert relevance.committee == "Energy & Commerce"
        assert relevance.tier == RelevanceTier.DIRECT

    def test_tangential_match(self, reference):
        # Intelligence oversees tech tangentially
        relevance = get_committee_relevance("Tom Cotton", "MSFT", reference)
        assert relevance == CommitteeRelevance("Intelligence", RelevanceTier.TANGENTIAL)


class TestFirstMatchSemantics:
    """The first committee in declared order that matches at all wins."""

    def test_earlier_tangential_beats_later_direct(self, small_reference):
        # Oversight (tangential: defense) is listed before Armed Services (direct)
        relevance = get_committee_relevance("Jane Member", "RTX", small_reference)
        assert relevance == CommitteeRelevance("Oversight", RelevanceTier.TANGENTIAL)

    def test_committees_without_sector_entries_are_skipped(self):
        from briefing.services.congress_trades.reference import build_reference_data

        reference = build_reference_data(
            politicians={"A": {"committees": ["Unmapped", "Armed Services"]}},
            committee_sectors={"Armed Services": {"direct": ["defense"]}},
            ticker_sectors={"LMT": "defense"},
        )
        assert get_committee_relevance("A", "LMT", reference) == CommitteeRelevance(
            "Armed Services", RelevanceTier.DIRECT
        )

    def test_no_matching_sector(self, small_reference):
        assert get_committee_relevance("Jane Member", "AAPL", small_reference) is None

"""Committee-to-sector relevance matching."""

from typing import Optional

from ...config.logging import get_logger
from .models import CommitteeRelevance, RelevanceTier
from .reference import ReferenceData

logger = get_logger(__name__)


def get_committee_relevance(
    politician: str, ticker: str, reference: ReferenceData
) -> Optional[CommitteeRelevance]:
    """
    Check whether a member's committees oversee the sector of a traded ticker.

    Committees are checked in their declared order and the first committee
    that matches at all wins; a direct match is preferred over a tangential
    one only within that committee. A member on several relevant committees
    therefore surfaces only the first of them.

    Args:
        politician: Member name as it appears in the politician table
        ticker: Traded ticker symbol
        reference: Static reference tables

    Returns:
        The matching committee and tier, or None
    """
    committees = reference.committees_for(politician)
    if not committees:
        return None

    sector = reference.sector_for(ticker)
    if not sector:
        logger.debug("No sector mapping for ticker", ticker=ticker)
        return None

    for committee in committees:
        sectors = reference.sectors_for_committee(committee)
        if sectors is None:
            continue
        if sector in sectors.direct:
            return CommitteeRelevance(committee=committee, tier=RelevanceTier.DIRECT)
        if sector in sectors.tangential:
            return CommitteeRelevance(
                committee=committee, tier=RelevanceTier.TANGENTIAL
            )

    return None

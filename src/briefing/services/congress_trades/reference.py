"""Static reference tables used for scoring and filtering.

The tables (politician tiers, committee sectors, ticker sectors and the
excluded-ticker list) ship as YAML files next to this module. They are
validated once when loaded and exposed through an immutable
``ReferenceData`` object that is passed explicitly to the scorer, the
relevance matcher and the filters.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.logging import get_logger
from .exceptions import ReferenceDataError

logger = get_logger(__name__)

DATA_DIRECTORY = Path(__file__).parent / "data"

POLITICIANS_FILE = "congress_politicians.yaml"
COMMITTEE_SECTORS_FILE = "committee_sectors.yaml"
TICKER_SECTORS_FILE = "ticker_sectors.yaml"
EXCLUDED_TICKERS_FILE = "excluded_tickers.yaml"


class PoliticianEntry(BaseModel):
    """Tier entry for a single member of Congress."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    multiplier: float = Field(default=1, gt=0)
    role: Optional[str] = None
    committees: Tuple[str, ...] = ()
    chamber: Optional[str] = None
    state: Optional[str] = None
    party: Optional[str] = None

    @field_validator("committees", mode="before")
    @classmethod
    def validate_committees(cls, v):
        """Allow a missing committee list."""
        return () if v is None else v


class CommitteeSectors(BaseModel):
    """Sectors a committee oversees directly or tangentially."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    direct: FrozenSet[str] = frozenset()
    tangential: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class ReferenceData:
    """Validated, read-only lookup tables."""

    politicians: Mapping[str, PoliticianEntry]
    committee_sectors: Mapping[str, CommitteeSectors]
    ticker_sectors: Mapping[str, str]
    excluded_tickers: FrozenSet[str]

    def politician(self, name: str) -> Optional[PoliticianEntry]:
        return self.politicians.get(name)

    def multiplier(self, name: str) -> float:
        entry = self.politicians.get(name)
        return entry.multiplier if entry else 1

    def committees_for(self, name: str) -> Tuple[str, ...]:
        entry = self.politicians.get(name)
        return entry.committees if entry else ()

    def sector_for(self, ticker: str) -> Optional[str]:
        return self.ticker_sectors.get(ticker.upper()) if ticker else None

    def sectors_for_committee(self, committee: str) -> Optional[CommitteeSectors]:
        return self.committee_sectors.get(committee)

    def is_excluded(self, ticker: str) -> bool:
        return ticker.upper() in self.excluded_tickers


def _entries(table: str, raw: Any) -> Dict[str, Any]:
    """Drop comment keys ("_comment", "_updated", ...) from a raw mapping."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ReferenceDataError(table, f"expected a mapping, got {type(raw).__name__}")

    entries = {}
    for key, value in raw.items():
        if str(key).startswith("_"):
            logger.debug("Ignoring non-entry key", table=table, key=key)
            continue
        entries[str(key)] = value
    return entries


def build_reference_data(
    politicians: Optional[Dict[str, Any]] = None,
    committee_sectors: Optional[Dict[str, Any]] = None,
    ticker_sectors: Optional[Dict[str, Any]] = None,
    excluded_tickers: Optional[Iterable[str]] = None,
) -> ReferenceData:
    """
    Validate raw tables and build a ReferenceData instance.

    Args:
        politicians: name -> {multiplier, committees, chamber, state, party}
        committee_sectors: committee -> {direct: [...], tangential: [...]}
        ticker_sectors: ticker -> sector label
        excluded_tickers: tickers that never carry member-specific signal

    Raises:
        ReferenceDataError: If any table entry has the wrong shape
    """
    validated_politicians: Dict[str, PoliticianEntry] = {}
    for name, entry in _entries(POLITICIANS_FILE, politicians).items():
        try:
            validated_politicians[name] = PoliticianEntry.model_validate(entry)
        except ValidationError as e:
            raise ReferenceDataError(POLITICIANS_FILE, f"{name}: {e}") from e

    validated_committees: Dict[str, CommitteeSectors] = {}
    for name, entry in _entries(COMMITTEE_SECTORS_FILE, committee_sectors).items():
        try:
            validated_committees[name] = CommitteeSectors.model_validate(entry)
        except ValidationError as e:
            raise ReferenceDataError(COMMITTEE_SECTORS_FILE, f"{name}: {e}") from e

    validated_sectors: Dict[str, str] = {}
    for ticker, sector in _entries(TICKER_SECTORS_FILE, ticker_sectors).items():
        if not isinstance(sector, str) or not sector.strip():
            raise ReferenceDataError(
                TICKER_SECTORS_FILE, f"{ticker}: sector must be a non-empty string"
            )
        validated_sectors[ticker.upper()] = sector.strip()

    excluded = set()
    for ticker in excluded_tickers or ():
        if not isinstance(ticker, str):
            raise ReferenceDataError(EXCLUDED_TICKERS_FILE, f"{ticker!r} is not a string")
        excluded.add(ticker.strip().upper())

    return ReferenceData(
        politicians=MappingProxyType(validated_politicians),
        committee_sectors=MappingProxyType(validated_committees),
        ticker_sectors=MappingProxyType(validated_sectors),
        excluded_tickers=frozenset(excluded),
    )


def _load_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ReferenceDataError(path.name, f"file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ReferenceDataError(path.name, f"malformed YAML: {e}") from e


def load_reference_data(data_dir: Optional[Union[str, Path]] = None) -> ReferenceData:
    """
    Load and validate all reference tables from a directory.

    Args:
        data_dir: Directory holding the YAML tables (defaults to the packaged data)

    Returns:
        Immutable ReferenceData
    """
    directory = Path(data_dir) if data_dir else DATA_DIRECTORY

    excluded = _load_yaml(directory / EXCLUDED_TICKERS_FILE)
    if excluded is not None and not isinstance(excluded, list):
        raise ReferenceDataError(EXCLUDED_TICKERS_FILE, "expected a list of tickers")

    reference = build_reference_data(
        politicians=_load_yaml(directory / POLITICIANS_FILE),
        committee_sectors=_load_yaml(directory / COMMITTEE_SECTORS_FILE),
        ticker_sectors=_load_yaml(directory / TICKER_SECTORS_FILE),
        excluded_tickers=excluded,
    )

    logger.info(
        "Reference data loaded",
        directory=str(directory),
        politicians=len(reference.politicians),
        committees=len(reference.committee_sectors),
        tickers=len(reference.ticker_sectors),
        excluded=len(reference.excluded_tickers),
    )
    return reference


@lru_cache(maxsize=1)
def get_default_reference_data() -> ReferenceData:
    """Get the packaged reference tables, loaded once per process."""
    return load_reference_data()

"""Exception classes for the congress trades source."""

from typing import Any, Dict, Optional


class CongressTradesError(Exception):
    """Base exception for the congress trades source."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ReferenceDataError(CongressTradesError):
    """Raised when a static reference table is missing or malformed."""

    def __init__(self, table: str, reason: str):
        super().__init__(
            message=f"Invalid reference table '{table}': {reason}",
            details={"table": table, "reason": reason},
        )
        self.table = table


class FetchError(CongressTradesError):
    """Raised when the trades page cannot be retrieved."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        message = f"Capitol Trades returned {status}" if status else reason
        super().__init__(
            message=message or f"Failed to fetch {url}",
            details={"url": url, "status": status},
        )
        self.url = url
        self.status = status

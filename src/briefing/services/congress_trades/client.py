"""HTTP client for the Capitol Trades listing page."""

import asyncio
import time
from datetime import date
from typing import Callable, Dict, Optional, Tuple

import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from ...config.logging import get_logger
from ...config.settings import Settings
from .exceptions import FetchError

logger = get_logger(__name__)

CAPITOL_TRADES_URL = "https://www.capitoltrades.com/trades"

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

RETRYABLE_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class HTMLCache:
    """In-memory TTL cache for fetched pages."""

    def __init__(
        self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, str]] = {}

    def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() > expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: str) -> None:
        now = self._clock()
        # Keys are per day; drop stale pages so a long-lived client stays bounded.
        self._entries = {
            k: entry for k, entry in self._entries.items() if entry[0] >= now
        }
        self._entries[key] = (now + self.ttl_seconds, value)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class CapitolTradesClient:
    """Fetches the trades listing with retry, backoff and caching."""

    def __init__(
        self,
        url: str = CAPITOL_TRADES_URL,
        timeout_seconds: float = 30,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
        cache_ttl_hours: float = 6,
    ):
        """
        Initialize the client.

        Args:
            url: Trades listing URL
            timeout_seconds: Total timeout for a single request
            max_attempts: Attempts before giving up on network errors
            backoff_seconds: Initial backoff, doubled per attempt with full jitter
            cache_ttl_hours: How long a fetched page is reused
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.cache = HTMLCache(ttl_seconds=cache_ttl_hours * 3600)
        self.logger = logger.bind(component="capitol_trades_client")

    @classmethod
    def from_settings(cls, settings: Settings) -> "CapitolTradesClient":
        return cls(
            url=settings.congress_trades_url,
            timeout_seconds=settings.congress_trades_timeout_seconds,
            max_attempts=settings.congress_trades_max_attempts,
            backoff_seconds=settings.congress_trades_backoff_seconds,
            cache_ttl_hours=settings.congress_trades_cache_ttl_hours,
        )

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self.logger.warning(
            "Fetch attempt failed, retrying",
            attempt=retry_state.attempt_number,
            error=str(error),
        )

    async def _request(self) -> Tuple[int, str]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(
            headers=REQUEST_HEADERS, timeout=timeout
        ) as session:
            async with session.get(self.url) as response:
                return response.status, await response.text()

    async def fetch_html(self) -> str:
        """
        Fetch the listing page.

        Network errors and timeouts are retried; an HTTP error status is not.

        Returns:
            Page HTML

        Raises:
            FetchError: If the server answers with a non-2xx status
            aiohttp.ClientError: If every attempt failed at the network level
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_random_exponential(
                multiplier=self.backoff_seconds,
                max=self.backoff_seconds * 2 ** self.max_attempts,
            ),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=self._log_retry,
            reraise=True,
        )

        status, body = 0, ""
        async for attempt in retrying:
            with attempt:
                status, body = await self._request()

        if not 200 <= status < 300:
            raise FetchError(self.url, status=status)

        self.logger.debug("Fetched trades page", url=self.url, html_bytes=len(body))
        return body

    async def get_page(self, for_date: date) -> str:
        """Fetch the listing page, reusing a cached copy for the same day."""
        cache_key = f"congress-trades-{for_date:%Y-%m-%d}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            self.logger.debug("Using cached trades page", cache_key=cache_key)
            return cached

        html = await self.fetch_html()
        self.cache.set(cache_key, html)
        return html

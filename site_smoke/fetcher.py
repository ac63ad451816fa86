"""HTTP page fetching for the check groups."""

import asyncio
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from yarl import URL

from site_smoke.config import SiteConfig
from site_smoke.models.fetch import FetchOutcome

log = logging.getLogger(__name__)


class NetworkError(Exception):
    """Raised when a request cannot complete (DNS, timeout, refused connection)."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message


@dataclass(frozen=True, kw_only=True)
class PageFetcher:
    """Fetches pages of the target site one request at a time."""

    config: SiteConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: SiteConfig
    ) -> AsyncGenerator["PageFetcher", None]:
        """Create fetcher with managed session lifecycle."""
        timeout = aiohttp.ClientTimeout(total=config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield cls(config=config, session=session)

    def resolve(self, path: str) -> str:
        """Resolve a site path or a relative reference against the base URL."""
        return str(URL(self.config.base_url).join(URL(path)))

    async def fetch_page(self, path: str) -> FetchOutcome:
        """Fetch a path on the target site."""
        return await self.fetch_url(self.resolve(path))

    async def fetch_url(self, url: str) -> FetchOutcome:
        """Fetch an absolute URL.

        Raises:
            NetworkError: If the request could not complete.

        """
        start = time.monotonic()
        try:
            async with self.session.get(url) as response:
                body = await response.text(errors="replace")
                elapsed_ms = round((time.monotonic() - start) * 1000)
                outcome = FetchOutcome(
                    status=response.status,
                    body=body,
                    elapsed_ms=elapsed_ms,
                    final_url=str(response.url),
                    headers=dict(response.headers),
                )
        except asyncio.TimeoutError as e:
            raise NetworkError(
                url, f"Request timed out after {self.config.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

        log.debug(
            "Fetched %s: status=%d elapsed=%dms size=%d",
            url,
            outcome.status,
            outcome.elapsed_ms,
            len(outcome.body),
        )
        return outcome

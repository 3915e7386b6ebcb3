"""
Remote Fetcher - Single-attempt GET against a hook's remote source.

The remote source is caller-controlled, so there is no retry and no
backoff: one attempt with a fixed total timeout. Any failure is fatal for
the current task only.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import aiohttp

from .exceptions import FetchError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    status_code: int
    body: str
    url: str


class RemoteFetcher:
    """
    aiohttp-backed fetcher shared by all task requests.

    Headers are passed as (name, value) pairs so multi-value headers go
    out as repeated header lines in their configured order.
    """

    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def fetch(
        self,
        url: str,
        headers: Iterable[tuple[str, str]] = (),
    ) -> FetchResult:
        """
        GET ``url`` with ``headers`` attached.

        Raises:
            FetchError: network failure, timeout, or non-2xx status
        """
        session = await self._get_session()

        try:
            async with session.get(url, headers=list(headers)) as response:
                body = await response.text(errors="replace")

                if not 200 <= response.status < 300:
                    raise FetchError(
                        f"Remote source responded with status {response.status}",
                        status_code=response.status,
                        url=url,
                        body=body,
                    )

                logger.debug(f"Fetched {url}: {response.status}, {len(body)} chars")
                return FetchResult(
                    status_code=response.status,
                    body=body,
                    url=url,
                )

        except asyncio.TimeoutError:
            raise FetchError(
                f"Remote source timed out after {self.timeout}s",
                url=url,
            )
        except aiohttp.ClientError as e:
            raise FetchError(
                "Remote source could not be reached",
                url=url,
                details={"exception": str(e)},
            )

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

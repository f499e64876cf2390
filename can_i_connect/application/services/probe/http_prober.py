from __future__ import annotations

import time
from typing import Optional

import httpx

from can_i_connect.core.logging.logger import StructuredLogger
from can_i_connect.domain.errors import RequestTimedOut, TransportError


class HTTPProber:
    """Issue a GET and treat any HTTP response as reachable.

    Status codes are not judged: a 404 or 503 still proves the host answered.
    Transport failures are raised so the caller can log the exact cause.
    """

    def __init__(self, logger: StructuredLogger) -> None:
        self.logger = logger

    async def probe(self, url: str, client: Optional[httpx.AsyncClient], timeout: float) -> bool:
        if client is not None:
            return await self._get(client, url, timeout)
        async with httpx.AsyncClient() as default_client:
            return await self._get(default_client, url, timeout)

    async def _get(self, client: httpx.AsyncClient, url: str, timeout: float) -> bool:
        start = time.perf_counter()
        try:
            resp = await client.get(url)
        except httpx.TimeoutException as e:
            self.logger.debug(lambda: f"HTTP Error: {e!r}", extra={"host": url})
            raise RequestTimedOut(timeout) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.debug(lambda: f"HTTP Error: {e!r}", extra={"host": url})
            raise TransportError(e) from e
        dur_ms = int((time.perf_counter() - start) * 1000.0)
        self.logger.debug(
            lambda: f"Request to {url} got Response code: {resp.status_code}",
            extra={"host": url, "status": resp.status_code, "latency_ms": dur_ms},
        )
        return True

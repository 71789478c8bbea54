"""aiohttp-backed transport for the device's HTTP endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..core import TransportResponse
from ..errors import TransportFailure

LOGGER = logging.getLogger(__name__)


class AiohttpTransport:
    """Issues single requests and reads the full body before returning."""

    def __init__(
        self,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    async def request(self, method: str, url: str) -> TransportResponse:
        session = await self._ensure_session()
        LOGGER.debug("%s %s", method, url)

        try:
            async with asyncio.timeout(self._timeout):
                async with session.request(method, url) as response:
                    body = await response.read()
                    return TransportResponse(
                        status=response.status,
                        body=body,
                        headers=dict(response.headers),
                    )
        except asyncio.TimeoutError as exc:
            LOGGER.warning(
                "%s %s timed out after %.1fs", method, url, self._timeout
            )
            raise TransportFailure(
                f"{method} {url} timed out after {self._timeout:.1f}s", url=url
            ) from exc
        except aiohttp.ClientError as exc:
            LOGGER.warning("%s %s failed: %s", method, url, exc)
            raise TransportFailure(f"{method} {url} failed: {exc}", url=url) from exc

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=None)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

"""
HTTP transport for the WhatsApp client.

The client only needs one capability from the network layer: POST a byte body
with headers and get back the status code and the raw response bytes.
Anything implementing HttpTransport can be swapped in (tests, proxies,
custom networking).
"""

import asyncio
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.utils.errors import TransportError


@runtime_checkable
class HttpTransport(Protocol):
    """Capability to perform an HTTP POST."""

    async def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> tuple[int, bytes]:
        """POST ``body`` to ``url``.

        Returns:
            Tuple of (HTTP status, raw response body)

        Raises:
            TransportError: If the request could not complete
        """
        ...


class AiohttpTransport:
    """
    aiohttp-backed transport.

    A session passed in is borrowed and never closed here (its owner, e.g. an
    application lifespan, manages it). Without one, a session is created on
    first use and released by close().
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        """Initialize transport.

        Args:
            session: Optional shared aiohttp session
            timeout: Total request timeout in seconds (defaults to REQUEST_TIMEOUT)
        """
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.request_timeout
        )
        self.logger = get_logger(__name__)

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> tuple[int, bytes]:
        """POST raw bytes and return the status with the full response body."""
        session = self._get_session()

        try:
            async with session.post(
                url, data=body, headers=dict(headers), timeout=self.timeout
            ) as response:
                payload = await response.read()
                self.logger.debug(f"POST {url} returned HTTP {response.status}")
                return response.status, payload

        except asyncio.TimeoutError as err:
            self.logger.debug(f"Request to {url} timed out after {self.timeout.total}s")
            raise TransportError(
                f"Request to {url} timed out after {self.timeout.total}s"
            ) from err
        except aiohttp.ClientError as err:
            self.logger.debug(f"Request to {url} failed: {err}")
            raise TransportError(f"Request to {url} failed: {err}") from err

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
            self._session = None

"""
Quote server client.

Issues a single GET to the quote server under one overall deadline and
returns the bid. No session is kept between calls and nothing is retried.
"""

import asyncio
import logging

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class QuoteClientError(Exception):
    """Base exception for the quote client"""
    pass


class QuoteRequestError(QuoteClientError):
    """Transport failure or error status from the quote server"""
    pass


class QuoteTimeoutError(QuoteClientError):
    """Quote server did not answer within the deadline"""
    pass


class QuoteParseError(QuoteClientError):
    """Quote server answered with a malformed body"""
    pass


class ServerResponse(BaseModel):
    """Body returned by GET /cotacao"""
    bid: str


class QuoteClient:
    """
    Client for the quote server.

    Example:
        >>> client = QuoteClient("http://localhost:8080/cotacao", timeout=0.3)
        >>> asyncio.run(client.fetch_bid())
        '5.25'
    """

    def __init__(
        self,
        url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            url: Full URL of the quote endpoint
            timeout: Overall deadline in seconds (connect, read and parse)
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch_bid(self) -> str:
        """
        Fetch the current bid from the server.

        Raises:
            QuoteTimeoutError: deadline expired
            QuoteRequestError: transport failure or error status
            QuoteParseError: body is not ``{"bid": "<string>"}``
        """
        try:
            return await asyncio.wait_for(self._fetch(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise QuoteTimeoutError(
                f"Timeout of {self.timeout * 1000:.0f}ms exceeded waiting for the server"
            ) from e

    async def _fetch(self) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise asyncio.TimeoutError() from e
            except httpx.HTTPError as e:
                raise QuoteRequestError(f"Request to quote server failed: {e}") from e

        try:
            return ServerResponse.model_validate_json(response.content).bid
        except ValidationError as e:
            raise QuoteParseError(f"Malformed response from quote server: {e}") from e

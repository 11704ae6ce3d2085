"""
Exchange Rate Fetching Service

Fetches the current USD/BRL quote from AwesomeAPI
(https://economia.awesomeapi.com.br/json/last/USD-BRL).

Each fetch runs under a caller-supplied deadline. Deadline expiry, transport
failures and malformed payloads surface as distinct exception classes so the
caller can decide how to report them.
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from server.schemas.exchange import ExchangeRate, ExchangeRateEnvelope

logger = logging.getLogger(__name__)

# Constants
AWESOMEAPI_USD_BRL_URL = "https://economia.awesomeapi.com.br/json/last/USD-BRL"


class ExchangeRateServiceError(Exception):
    """Base exception for exchange rate service"""
    pass


class ExchangeRateFetchError(ExchangeRateServiceError):
    """Transport failure or non-2xx status from the upstream API"""
    pass


class ExchangeRateTimeoutError(ExchangeRateServiceError):
    """Upstream API did not answer within the deadline"""
    pass


class ExchangeRateParseError(ExchangeRateServiceError):
    """Upstream API answered with a malformed payload"""
    pass


class ExchangeRateService:
    """
    Client for the external pricing API.

    The HTTP client is created lazily unless one is injected (tests pass an
    ``httpx.AsyncClient`` backed by ``httpx.MockTransport``).
    """

    def __init__(
        self,
        url: str = AWESOMEAPI_USD_BRL_URL,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for API calls"""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client"""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def fetch_usd_brl(self, timeout: float) -> ExchangeRate:
        """
        Fetch the current USD/BRL quote.

        Args:
            timeout: Deadline in seconds for the whole request, body read
                and parse included.

        Returns:
            ExchangeRate parsed from the upstream payload

        Raises:
            ExchangeRateTimeoutError: deadline expired
            ExchangeRateFetchError: transport failure or error status
            ExchangeRateParseError: payload is not the expected JSON
        """
        try:
            return await asyncio.wait_for(self._fetch(timeout), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout of {timeout * 1000:.0f}ms exceeded fetching exchange rate")
            raise ExchangeRateTimeoutError(
                f"Exchange rate API did not respond within {timeout * 1000:.0f}ms"
            ) from e

    async def _fetch(self, timeout: float) -> ExchangeRate:
        client = await self._get_http_client()

        try:
            response = await client.get(self.url, timeout=timeout)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            # httpx may hit its own per-phase timeout first
            raise asyncio.TimeoutError() from e
        except httpx.HTTPError as e:
            logger.error(f"Exchange rate API HTTP error: {e}")
            raise ExchangeRateFetchError(f"Failed to fetch exchange rate: {e}") from e

        try:
            envelope = ExchangeRateEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Exchange rate API parse error: {e}")
            raise ExchangeRateParseError(f"Malformed exchange rate payload: {e}") from e

        return envelope.usdbrl

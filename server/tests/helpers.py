"""Builders for test doubles."""
import httpx

from server.core.context import QuoteContext
from server.services.exchange_service import ExchangeRateService
from server.services.quote_store import QuoteStore

API_URL = "https://economia.awesomeapi.com.br/json/last/USD-BRL"


def make_exchange_service(handler) -> ExchangeRateService:
    """ExchangeRateService whose HTTP traffic is answered by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ExchangeRateService(url=API_URL, http_client=http_client)


def make_context(
    handler,
    store: QuoteStore,
    api_timeout: float = 1.0,
    store_timeout: float = 1.0,
) -> QuoteContext:
    return QuoteContext(
        exchange_service=make_exchange_service(handler),
        quote_store=store,
        api_timeout=api_timeout,
        store_timeout=store_timeout,
    )

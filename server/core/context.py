"""
Per-application request context.

Holds everything the quote endpoint needs: the outbound API client, the
quote store and the two stage deadlines. Built once at startup (or by a
test) and attached to ``app.state``.
"""

from dataclasses import dataclass

from fastapi import Request

from server.core.config import Settings
from server.core.database import Database
from server.services.exchange_service import ExchangeRateService
from server.services.quote_store import QuoteStore


@dataclass
class QuoteContext:
    exchange_service: ExchangeRateService
    quote_store: QuoteStore
    api_timeout: float
    store_timeout: float

    async def startup(self) -> None:
        await self.quote_store.init()

    async def shutdown(self) -> None:
        await self.exchange_service.close()
        await self.quote_store.close()


def build_context(settings: Settings) -> QuoteContext:
    """Build the production context from settings"""
    return QuoteContext(
        exchange_service=ExchangeRateService(url=settings.exchange_api_url),
        quote_store=QuoteStore(Database(settings.database_url)),
        api_timeout=settings.exchange_api_timeout_seconds,
        store_timeout=settings.database_timeout_seconds,
    )


def get_context(request: Request) -> QuoteContext:
    """Dependency for getting the application's QuoteContext"""
    return request.app.state.context

"""
Quote API Endpoint

GET /cotacao fetches the current USD/BRL rate, stores it on a best-effort
basis and returns only the bid.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from server.core.context import QuoteContext, get_context
from server.schemas.exchange import BidResponse
from server.services.exchange_service import ExchangeRateServiceError
from server.services.quote_store import QuoteStoreError

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/cotacao", response_model=BidResponse)
async def get_cotacao(
    context: QuoteContext = Depends(get_context),
):
    """
    Get the current USD/BRL bid.

    Responds 500 if the pricing API fails or misses its deadline. A failed
    or slow database write is only logged.
    """
    logger.info("Request received on /cotacao")

    try:
        exchange_rate = await context.exchange_service.fetch_usd_brl(
            timeout=context.api_timeout
        )
    except ExchangeRateServiceError as e:
        logger.error(f"Failed to fetch exchange rate: {e}")
        return PlainTextResponse("Failed to fetch external exchange rate", status_code=500)

    try:
        await context.quote_store.save_quote(exchange_rate.bid, timeout=context.store_timeout)
    except QuoteStoreError as e:
        # The client already has what it needs; persistence is best-effort
        logger.error(f"Failed to save quote to database: {e}")

    logger.info("Response sent to client")
    return BidResponse(bid=exchange_rate.bid)

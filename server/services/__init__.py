"""Business logic services."""
from .exchange_service import (
    ExchangeRateFetchError,
    ExchangeRateParseError,
    ExchangeRateService,
    ExchangeRateServiceError,
    ExchangeRateTimeoutError,
)
from .quote_store import QuoteStore, QuoteStoreError, QuoteStoreTimeoutError

__all__ = [
    "ExchangeRateService",
    "ExchangeRateServiceError",
    "ExchangeRateFetchError",
    "ExchangeRateTimeoutError",
    "ExchangeRateParseError",
    "QuoteStore",
    "QuoteStoreError",
    "QuoteStoreTimeoutError",
]

from .exchange import BidResponse, ExchangeRate, ExchangeRateEnvelope

__all__ = [
    "BidResponse",
    "ExchangeRate",
    "ExchangeRateEnvelope",
]

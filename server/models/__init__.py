from .quote import StoredQuote

__all__ = [
    "StoredQuote",
]

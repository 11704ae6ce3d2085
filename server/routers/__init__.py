from fastapi import APIRouter

from .quote import router as quote_router

api_router = APIRouter()

api_router.include_router(quote_router, tags=["Cotacao"])

__all__ = ["api_router"]

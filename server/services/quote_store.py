"""
Quote persistence.

Writes one ``StoredQuote`` row per call under a caller-supplied deadline.

The deadline bounds the INSERT, which runs in an open transaction. If it
expires there, the connection is invalidated and the uncommitted INSERT is
discarded with it. The deadline is checked once more right before COMMIT;
a COMMIT that has started is never cancelled. A reported timeout therefore
always means no row was written, and a returned quote always means one was.
"""

import asyncio
import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from server.core.database import Database
from server.models.quote import StoredQuote

logger = logging.getLogger(__name__)


class QuoteStoreError(Exception):
    """Failed to persist a quote"""
    pass


class QuoteStoreTimeoutError(QuoteStoreError):
    """Database did not accept the write within the deadline"""
    pass


def rfc3339_now() -> str:
    """Current local time as RFC 3339 with UTC offset, second precision"""
    return datetime.now().astimezone().isoformat(timespec="seconds")


class QuoteStore:
    """Repository for ``cotacoes`` rows."""

    def __init__(self, database: Database):
        self.database = database

    async def init(self) -> None:
        await self.database.init_db()

    async def close(self) -> None:
        await self.database.close()

    async def save_quote(self, bid: str, timeout: float) -> StoredQuote:
        """
        Persist a bid with the current timestamp.

        Args:
            bid: Bid value exactly as received from the pricing API
            timeout: Deadline in seconds for reaching COMMIT

        Returns:
            The stored row, with its id populated

        Raises:
            QuoteStoreTimeoutError: deadline expired, nothing was written
            QuoteStoreError: any other failure, nothing was written
        """
        quote = StoredQuote(bid=bid, timestamp=rfc3339_now())

        try:
            async with self.database.session() as session:
                await self._write(session, quote, timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout of {timeout * 1000:.0f}ms exceeded saving quote to database")
            raise QuoteStoreTimeoutError(
                f"Database write did not complete within {timeout * 1000:.0f}ms"
            ) from e
        except Exception as e:
            raise QuoteStoreError(f"Failed to save quote: {e}") from e

        logger.info(f"Quote saved to database: id={quote.id} bid={quote.bid}")
        return quote

    async def _write(self, session: AsyncSession, quote: StoredQuote, timeout: float) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        try:
            await asyncio.wait_for(self._insert(session, quote), timeout=timeout)
        except asyncio.TimeoutError:
            # The driver thread may still run the INSERT; dropping the
            # connection discards its open transaction.
            await session.invalidate()
            raise

        if loop.time() >= deadline:
            raise asyncio.TimeoutError()

        await session.commit()

    async def _insert(self, session: AsyncSession, quote: StoredQuote) -> None:
        session.add(quote)
        await session.flush()

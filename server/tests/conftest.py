"""Test configuration and fixtures."""
import sqlite3

import pytest
import pytest_asyncio

from server.core.database import Database
from server.services.quote_store import QuoteStore


@pytest.fixture
def awesomeapi_payload():
    """Sample AwesomeAPI response for USD-BRL."""
    return {
        "USDBRL": {
            "code": "USD",
            "codein": "BRL",
            "name": "Dólar Americano/Real Brasileiro",
            "high": "5.2870",
            "low": "5.2301",
            "varBid": "0.0159",
            "pctChange": "0.3",
            "bid": "5.25",
            "ask": "5.2510",
            "timestamp": "1729339200",
            "create_date": "2024-10-19 09:00:00",
        }
    }


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "cotacoes.db"


@pytest.fixture
def database_url(db_path):
    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture
def count_rows(db_path):
    """Count persisted quotes straight from the SQLite file."""

    def _count() -> int:
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM cotacoes").fetchone()[0]
        finally:
            conn.close()

    return _count


@pytest_asyncio.fixture
async def quote_store(database_url):
    """Initialized QuoteStore backed by a temporary SQLite file."""
    store = QuoteStore(Database(database_url))
    await store.init()
    yield store
    await store.close()

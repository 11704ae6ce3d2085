"""Test configuration and fixtures."""
import httpx
import pytest

from client.config import Settings

SERVER_URL = "http://localhost:8080/cotacao"


@pytest.fixture
def output_file(tmp_path):
    """Output path inside a per-test directory."""
    return tmp_path / "cotacao.txt"


@pytest.fixture
def settings(output_file):
    return Settings(
        server_url=SERVER_URL,
        request_timeout_seconds=0.3,
        output_file=str(output_file),
    )


@pytest.fixture
def server_ok():
    """Transport answering like a healthy quote server."""
    return httpx.MockTransport(lambda request: httpx.Response(200, json={"bid": "5.25"}))

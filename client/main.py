"""Client entry point: fetch the bid and write it to the output file."""
import asyncio
import logging
import os
import tempfile
from pathlib import Path

import httpx

from client.config import Settings, get_settings
from client.quote_client import (
    QuoteClient,
    QuoteClientError,
    QuoteParseError,
    QuoteTimeoutError,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
OUTPUT_FILE_MODE = 0o644


def save_quote_to_file(path: str | Path, bid: str) -> None:
    """Write ``Dólar: <bid>``, replacing any previous content atomically."""
    path = Path(path)
    content = f"Dólar: {bid}"

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_name, OUTPUT_FILE_MODE)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def main(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """
    Run one client invocation.

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    logger.info("Client started. Requesting quote...")
    client = QuoteClient(
        settings.server_url,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )

    try:
        bid = asyncio.run(client.fetch_bid())
    except QuoteTimeoutError as e:
        logger.error(f"Timeout: {e}")
        return 1
    except QuoteParseError as e:
        logger.error(f"Failed to parse server response: {e}")
        return 1
    except QuoteClientError as e:
        logger.error(f"Failed to request quote from server: {e}")
        return 1

    try:
        save_quote_to_file(settings.output_file, bid)
    except OSError as e:
        logger.error(f"Failed to save quote to {settings.output_file}: {e}")
        return 1

    logger.info(f"Quote saved to {settings.output_file}. Value: {bid}")
    return 0

"""Client entry point tests."""
import asyncio
import logging
import stat

import httpx
import pytest

from client.main import main, save_quote_to_file


class TestSaveQuoteToFile:
    """Test output file writing"""

    def test_writes_literal_format(self, output_file):
        save_quote_to_file(output_file, "5.25")

        assert output_file.read_text(encoding="utf-8") == "Dólar: 5.25"

    def test_overwrites_previous_content(self, output_file):
        output_file.write_text("Dólar: 4.99\nold history line\n", encoding="utf-8")

        save_quote_to_file(output_file, "5.25")

        assert output_file.read_text(encoding="utf-8") == "Dólar: 5.25"

    def test_file_is_world_readable(self, output_file):
        save_quote_to_file(output_file, "5.25")

        assert stat.S_IMODE(output_file.stat().st_mode) == 0o644

    def test_leaves_no_temp_files(self, output_file):
        save_quote_to_file(output_file, "5.25")

        assert [p.name for p in output_file.parent.iterdir()] == ["cotacao.txt"]


class TestMain:
    """Test one full client run"""

    def test_success_writes_file(self, settings, server_ok, output_file):
        assert main(settings, transport=server_ok) == 0

        assert output_file.read_text(encoding="utf-8") == "Dólar: 5.25"

    def test_timeout_exits_nonzero_without_file(self, settings, output_file, caplog):
        async def handler(request):
            await asyncio.sleep(1.0)
            return httpx.Response(200, json={"bid": "5.25"})

        with caplog.at_level(logging.ERROR):
            code = main(settings, transport=httpx.MockTransport(handler))

        assert code != 0
        assert not output_file.exists()
        assert "Timeout" in caplog.text

    def test_timeout_keeps_previous_file(self, settings, output_file):
        output_file.write_text("Dólar: 4.99", encoding="utf-8")

        async def handler(request):
            await asyncio.sleep(1.0)
            return httpx.Response(200, json={"bid": "5.25"})

        assert main(settings, transport=httpx.MockTransport(handler)) != 0
        assert output_file.read_text(encoding="utf-8") == "Dólar: 4.99"

    def test_server_error_exits_nonzero_without_file(self, settings, output_file, caplog):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="error"))

        with caplog.at_level(logging.ERROR):
            code = main(settings, transport=transport)

        assert code != 0
        assert not output_file.exists()
        assert "Timeout" not in caplog.text

    def test_malformed_response_exits_nonzero(self, settings, output_file, caplog):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="not json"))

        with caplog.at_level(logging.ERROR):
            code = main(settings, transport=transport)

        assert code != 0
        assert not output_file.exists()
        assert "parse" in caplog.text

    def test_unwritable_output_exits_nonzero(self, settings, server_ok, tmp_path):
        settings.output_file = str(tmp_path / "missing" / "cotacao.txt")

        assert main(settings, transport=server_ok) != 0


@pytest.mark.parametrize("bid", ["5.25", "5.2510", "4.9"])
def test_bid_written_verbatim(settings, output_file, bid):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"bid": bid}))

    assert main(settings, transport=transport) == 0
    assert output_file.read_text(encoding="utf-8") == f"Dólar: {bid}"

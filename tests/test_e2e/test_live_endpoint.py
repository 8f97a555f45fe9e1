"""End-to-end tests against a running /records server."""
import os
import pytest

LIVE_E2E = os.environ.get("RECORDS_E2E_TEST", "false").lower() == "true"
RECORDS_URL = os.environ.get("RECORDS_BASE_URL", "http://localhost:3000/records")


@pytest.mark.skipif(not LIVE_E2E, reason="E2E tests disabled")
class TestLiveEndpoint:

    async def test_first_page(self):
        from records_mcp.engine import retrieve

        payload = await retrieve(base_url=RECORDS_URL)
        assert payload.previous_page is None
        assert len(payload.ids) <= 10

    async def test_walk_pages(self):
        """Follow nextPage until exhausted; ids never repeat across pages."""
        from records_mcp.engine import PageQueryEngine
        from records_mcp.transport import RequestsTransport

        transport = RequestsTransport()
        engine = PageQueryEngine(transport=transport, base_url=RECORDS_URL)
        seen: list[int] = []
        page = 1
        try:
            while page is not None and page <= 50:
                payload = await engine.retrieve(page=page, colors=["red", "green"])
                seen.extend(payload.ids)
                assert all(r.color.value in ("red", "green") for r in payload.open)
                page = payload.next_page
        finally:
            transport.close()
        assert len(seen) == len(set(seen))

"""Shared test fixtures for Records MCP tests."""
import pytest
from unittest.mock import AsyncMock

from records_mcp.engine import PageQueryEngine
from records_mcp.transport import TransportResponse

BASE_URL = "http://localhost:3000/records"

_COLORS = ["red", "brown", "blue", "yellow", "green"]


def make_records(start: int, count: int) -> list[dict]:
    """Rows as the server serves them: colors cycle, every third is closed."""
    return [
        {
            "id": i,
            "color": _COLORS[(i - 1) % len(_COLORS)],
            "disposition": "closed" if i % 3 == 0 else "open",
        }
        for i in range(start, start + count)
    ]


@pytest.fixture
def record_factory():
    return make_records


@pytest.fixture
def full_page_rows():
    """11 rows: a full page plus the over-fetched sentinel row."""
    return make_records(1, 11)


@pytest.fixture
def short_page_rows():
    return make_records(11, 5)


@pytest.fixture
def mock_transport():
    """Transport returning an empty successful page unless reconfigured."""
    return AsyncMock(return_value=TransportResponse(status_code=200, payload=[]))


@pytest.fixture
def engine(mock_transport):
    return PageQueryEngine(transport=mock_transport, base_url=BASE_URL)

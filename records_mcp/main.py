"""Records MCP Server — main entry point.

Exposes paginated, color-filtered access to the /records endpoint as an MCP tool.
"""
import logging
from contextlib import asynccontextmanager
from mcp.server.fastmcp import FastMCP
from records_mcp.config import config
from records_mcp.engine import PageQueryEngine
from records_mcp.transport import RequestsTransport

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

transport = RequestsTransport(timeout=config.request_timeout_seconds)
engine = PageQueryEngine(transport=transport, base_url=config.base_url)


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    """Expose the shared engine. Entered once per request under stateless HTTP;
    the transport is closed by main() when the server stops.
    """
    yield {"engine": engine}


mcp = FastMCP(
    "records_mcp",
    lifespan=app_lifespan,
    stateless_http=True,
    host="0.0.0.0",
    port=config.port,
)

from records_mcp.tools.records import register_record_tools

register_record_tools(mcp, engine)


def main():
    logger.info(f"Records MCP Server started (endpoint: {config.base_url})")
    try:
        mcp.run(transport="streamable-http")
    finally:
        transport.close()
        logger.info("Records MCP Server stopped")


if __name__ == "__main__":
    main()

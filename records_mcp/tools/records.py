"""Record listing tools."""
from pydantic import BaseModel, Field, ConfigDict
from mcp.server.fastmcp import FastMCP
from records_mcp.engine import PageQueryEngine
from records_mcp.models import Color
from records_mcp.utils.errors import handle_error
from records_mcp.utils.formatting import ResponseFormat, format_payload


class RetrieveRecordsInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)
    page: int = Field(default=1, ge=1, description="Page to retrieve (1-based)")
    colors: list[Color] = Field(
        default_factory=list,
        description="Colors to include (red, brown, blue, yellow, green). Empty = all colors.",
    )
    response_format: ResponseFormat = Field(default=ResponseFormat.MARKDOWN)


def register_record_tools(mcp: FastMCP, engine: PageQueryEngine):

    @mcp.tool(
        name="records_retrieve",
        annotations={
            "title": "Retrieve Records Page",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def records_retrieve(params: RetrieveRecordsInput) -> str:
        """Retrieve one page (10 records) from the /records endpoint.

        Returns the page's ids, its open records annotated with isPrimary
        (red, blue or yellow), the number of closed primary-colored records,
        and the previous/next page numbers. Filter with colors; follow
        nextPage until it is null to walk every page.
        """
        try:
            payload = await engine.retrieve(page=params.page, colors=params.colors)
            return format_payload(payload, params.page, fmt=params.response_format)
        except Exception as e:
            return handle_error(e)

    return records_retrieve

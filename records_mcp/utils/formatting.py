"""Response formatting helpers."""
import json
from enum import Enum

from records_mcp.models import RetrievePayload


class ResponseFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"


def _page_label(page) -> str:
    return str(page) if page is not None else "—"


def format_payload(
    payload: RetrievePayload,
    page: int,
    fmt: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    if fmt == ResponseFormat.JSON:
        return json.dumps(payload.to_dict(), indent=2)
    lines = [f"## Records — page {page}\n"]
    if not payload.ids:
        lines.append("_No records on this page._")
    else:
        lines.append(f"**{len(payload.ids)} record(s):** " + ", ".join(map(str, payload.ids)))
    lines.append(f"**Closed primary count:** {payload.closed_primary_count}")
    lines.append(
        f"**Previous page:** {_page_label(payload.previous_page)} | "
        f"**Next page:** {_page_label(payload.next_page)}\n"
    )
    if payload.open:
        lines.append("| id | color | isPrimary |")
        lines.append("| --- | --- | --- |")
        for r in payload.open:
            lines.append(f"| {r.id} | {r.color.value} | {r.is_primary} |")
    else:
        lines.append("_No open records._")
    return "\n".join(lines)

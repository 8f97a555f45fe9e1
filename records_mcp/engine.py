"""Page query engine for the /records endpoint.

Builds the paginated, color-filtered request for a page and reshapes the
returned rows into a ``RetrievePayload``:

- ids of every record on the page
- open records, annotated with ``isPrimary``
- count of closed records with a primary color
- previous / next page numbers

Each page is fetched with one extra row; that row only decides whether a
next page exists and is dropped before anything else looks at the data.
"""
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from records_mcp.config import config
from records_mcp.models import (
    ClassifiedRecord,
    Disposition,
    PageRequest,
    Record,
    RecordsRequest,
    RetrievePayload,
)
from records_mcp.transport import RequestsTransport, Transport
from records_mcp.utils.errors import InvalidRequest, MalformedResponse, TransportFailure
from records_mcp.utils.pagination import (
    PAGE_SIZE,
    adjacent_pages,
    page_window,
    split_overfetch,
)
from records_mcp.utils.query_string import add_query

logger = logging.getLogger(__name__)

Options = Union[PageRequest, Mapping[str, Any], None]


def coerce_options(options: Options = None, **kwargs) -> PageRequest:
    """Turn caller options into a validated PageRequest.

    Missing or ``None`` keys fall back to the PageRequest defaults.
    """
    if isinstance(options, PageRequest) and not kwargs:
        return options
    if isinstance(options, PageRequest):
        values = options.model_dump()
    elif options is None:
        values = {}
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        raise InvalidRequest(
            f"options must be a mapping or PageRequest, got {type(options).__name__}"
        )
    values.update(kwargs)
    values = {k: v for k, v in values.items() if v is not None}
    try:
        return PageRequest.model_validate(values)
    except ValidationError as e:
        raise InvalidRequest(str(e)) from e


def parse_records(rows: list) -> list[Record]:
    records = []
    for index, row in enumerate(rows):
        try:
            records.append(Record.model_validate(row))
        except ValidationError as e:
            raise MalformedResponse(f"record at index {index} is invalid: {e}") from e
    return records


class PageQueryEngine:
    """Request builder and response shaper around a transport."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        base_url: Optional[str] = None,
    ):
        self.transport = transport or RequestsTransport()
        self.base_url = base_url or config.base_url

    def build_request(self, request: PageRequest) -> RecordsRequest:
        window = page_window(request.page, PAGE_SIZE)
        params = [("limit", window.limit), ("offset", window.offset)]
        if request.colors:
            params.append(("color[]", [c.value for c in request.colors]))
        return RecordsRequest(method="GET", url=add_query(self.base_url, params))

    def shape_response(self, raw: Any, page: int) -> RetrievePayload:
        if not isinstance(raw, list):
            raise MalformedResponse(
                f"expected a JSON array, got {type(raw).__name__}"
            )

        rows, has_more = split_overfetch(parse_records(raw), PAGE_SIZE)
        previous_page, next_page = adjacent_pages(page, has_more)

        classified = [ClassifiedRecord.from_record(r) for r in rows]
        return RetrievePayload(
            ids=[r.id for r in classified],
            open=[r for r in classified if r.disposition == Disposition.OPEN],
            closed_primary_count=sum(
                1
                for r in classified
                if r.disposition == Disposition.CLOSED and r.is_primary
            ),
            previous_page=previous_page,
            next_page=next_page,
        )

    async def retrieve(self, options: Options = None, **kwargs) -> RetrievePayload:
        """Fetch one page of records and derive the payload.

        Args:
            options: PageRequest or mapping with ``page`` (default 1) and
                ``colors`` (default: no filter). Keyword arguments override it.

        Raises:
            InvalidRequest: page or colors failed validation.
            TransportFailure: the endpoint answered with a non-success status.
            MalformedResponse: the body is not an array of records.
        """
        request = coerce_options(options, **kwargs)
        outgoing = self.build_request(request)
        logger.debug(f"{outgoing.method} {outgoing.url}")

        response = await self.transport(outgoing.url)
        if not response.ok:
            raise TransportFailure(response.status_code, url=outgoing.url)

        payload = self.shape_response(response.payload, request.page)
        logger.info(
            f"Retrieved page {request.page}: {len(payload.ids)} record(s), "
            f"{len(payload.open)} open, next_page={payload.next_page}"
        )
        return payload


async def retrieve(
    options: Options = None,
    *,
    transport: Optional[Transport] = None,
    base_url: Optional[str] = None,
    **kwargs,
) -> RetrievePayload:
    """One-shot retrieve with a throwaway engine."""
    owned = transport is None
    engine = PageQueryEngine(transport=transport, base_url=base_url)
    try:
        return await engine.retrieve(options, **kwargs)
    finally:
        if owned:
            engine.transport.close()

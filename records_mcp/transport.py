"""HTTP transport for the /records endpoint.

The engine only needs an awaitable ``url -> TransportResponse`` callable.
``RequestsTransport`` is the default one, backed by a ``requests.Session``
whose blocking calls run in a worker thread.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import requests

from records_mcp.config import config
from records_mcp.utils.errors import MalformedResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Tagged transport outcome: success carries a payload, failure a status."""

    status_code: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


Transport = Callable[[str], Awaitable[TransportResponse]]


class RequestsTransport:
    """GETs a URL and decodes its JSON body.

    No retries and no caching: one call, one request.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self._session = session or requests.Session()
        self._owns_session = session is None
        self.timeout = timeout if timeout is not None else config.request_timeout_seconds

    async def __call__(self, url: str) -> TransportResponse:
        response = await asyncio.to_thread(
            self._session.get,
            url,
            timeout=self.timeout,
            headers={"Accept": "application/json"},
        )
        result = TransportResponse(status_code=response.status_code)
        if not result.ok:
            logger.warning(f"GET {url} returned {response.status_code}")
            return result

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(f"response body is not valid JSON: {e}") from e
        return TransportResponse(status_code=response.status_code, payload=payload)

    def close(self):
        if self._owns_session:
            self._session.close()

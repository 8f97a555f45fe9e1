"""Error taxonomy for the records client, plus actionable messages for tools."""
from typing import Optional

import requests


class RecordsError(Exception):
    """Base class for every failure raised by the records client."""


class InvalidRequest(RecordsError, ValueError):
    """The page request could not be turned into a valid query."""


class TransportFailure(RecordsError):
    """The /records endpoint answered with a non-success status."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Fetching /records failed with: {status_code}")


# Name used by callers that think of the failure as a failed fetch.
FetchFailure = TransportFailure


class MalformedResponse(RecordsError):
    """The response body is not a JSON array of well-formed records."""


def handle_error(e: Exception) -> str:
    """Return a human-readable, actionable error message.

    Distinguishes between:
    - Invalid caller input (fix the request)
    - Non-success HTTP status (server side, may be transient for 5xx)
    - Malformed payloads (server contract broken)
    - Network level failures (endpoint unreachable / slow)
    """
    if isinstance(e, InvalidRequest):
        return f"Error: Invalid request — {str(e).strip()}. Check page and colors and try again."

    if isinstance(e, TransportFailure):
        if e.status_code >= 500:
            return (
                f"Error: The /records endpoint failed with status {e.status_code}. "
                "This is a server-side error; retry the request later."
            )
        if e.status_code == 404:
            return (
                "Error: The /records endpoint was not found (404). "
                "Check RECORDS_BASE_URL."
            )
        return (
            f"Error: The /records endpoint rejected the request with status "
            f"{e.status_code}."
        )

    if isinstance(e, MalformedResponse):
        return (
            f"Error: The /records endpoint returned an unexpected payload — {e}. "
            "Expected a JSON array of records."
        )

    if isinstance(e, requests.Timeout):
        return (
            "Error: Request to /records timed out. "
            "Retry shortly or raise RECORDS_REQUEST_TIMEOUT."
        )

    if isinstance(e, requests.ConnectionError):
        return (
            "Error: Cannot connect to the /records endpoint. "
            "Check that the server is running and RECORDS_BASE_URL is correct."
        )

    return f"Error: {type(e).__name__} — {str(e)}"

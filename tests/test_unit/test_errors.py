"""Unit tests for error handling — transport, payload, and input failures."""
import requests
from records_mcp.utils.errors import (
    FetchFailure,
    InvalidRequest,
    MalformedResponse,
    RecordsError,
    TransportFailure,
    handle_error,
)


class TestErrorTypes:
    def test_transport_failure_carries_status(self):
        err = TransportFailure(503, url="http://h/records")
        assert err.status_code == 503
        assert err.url == "http://h/records"
        assert str(err) == "Fetching /records failed with: 503"

    def test_fetch_failure_is_transport_failure(self):
        assert FetchFailure is TransportFailure

    def test_hierarchy(self):
        assert issubclass(TransportFailure, RecordsError)
        assert issubclass(MalformedResponse, RecordsError)
        assert issubclass(InvalidRequest, ValueError)


class TestErrorHandling:
    def test_server_error(self):
        result = handle_error(TransportFailure(500))
        assert "500" in result
        assert "retry" in result.lower()

    def test_not_found(self):
        result = handle_error(TransportFailure(404))
        assert "RECORDS_BASE_URL" in result

    def test_client_error(self):
        result = handle_error(TransportFailure(400))
        assert "status 400" in result

    def test_malformed(self):
        result = handle_error(MalformedResponse("expected a JSON array, got dict"))
        assert "JSON array" in result

    def test_invalid_request(self):
        result = handle_error(InvalidRequest("page must be >= 1"))
        assert result.startswith("Error: Invalid request")

    def test_timeout(self):
        result = handle_error(requests.Timeout("read timed out"))
        assert "timed out" in result.lower()

    def test_connection_error(self):
        result = handle_error(requests.ConnectionError("refused"))
        assert "cannot connect" in result.lower()

    def test_generic_error(self):
        result = handle_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result

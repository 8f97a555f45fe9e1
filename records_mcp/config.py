"""Configuration for the Records MCP server and query engine."""
import os
from dataclasses import dataclass, field


@dataclass
class RecordsConfig:
    """Client configuration loaded from environment variables."""

    # /records endpoint
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "RECORDS_BASE_URL", "http://localhost:3000/records"
        )
    )

    # Transport
    request_timeout_seconds: float = field(
        default_factory=lambda: float(
            os.environ.get("RECORDS_REQUEST_TIMEOUT", "10")
        )
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("RECORDS_LOG_LEVEL", "INFO").upper()
    )

    # MCP server
    port: int = field(
        default_factory=lambda: int(os.environ.get("APP_PORT", "8000"))
    )


config = RecordsConfig()

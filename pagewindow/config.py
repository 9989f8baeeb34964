"""Configuration for the pagination window server."""
import os
from dataclasses import dataclass, field


@dataclass
class PaginationSettings:
    """Settings loaded from environment variables."""

    # Window shape
    window_buffer: int = field(
        default_factory=lambda: int(os.environ.get("PAGEWINDOW_BUFFER", "3"))
    )

    # Server
    app_host: str = field(
        default_factory=lambda: os.environ.get("APP_HOST", "0.0.0.0")
    )
    app_port: int = field(
        default_factory=lambda: int(os.environ.get("APP_PORT", "8000"))
    )
    transport: str = field(
        default_factory=lambda: os.environ.get(
            "PAGEWINDOW_TRANSPORT", "streamable-http"
        )
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("PAGEWINDOW_LOG_LEVEL", "INFO").upper()
    )


config = PaginationSettings()

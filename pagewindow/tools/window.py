"""Pagination window tools."""
import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from mcp.server.fastmcp import FastMCP

from pagewindow.config import config
from pagewindow.utils.errors import handle_error
from pagewindow.utils.formatting import ResponseFormat, format_window
from pagewindow.validation import check_config, ensure_number
from pagewindow.window import window_for_config

logger = logging.getLogger(__name__)


class GetWindowInput(BaseModel):
    offset: int = Field(..., description="Zero-based position in the list")
    limit: int = Field(..., description="Number of items per page")
    total: int = Field(..., description="Total number of items in the list")
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON)

    @field_validator("offset", "limit", "total", mode="before")
    @classmethod
    def require_number(cls, v: Any) -> Any:
        return ensure_number(v)


def window_response(params: GetWindowInput, buffer: Optional[int] = None) -> str:
    """Compute a window for the tool input and format it, or return an error message."""
    try:
        validated = check_config(params.model_dump(include={"offset", "limit", "total"}))
        window = window_for_config(
            validated, config.window_buffer if buffer is None else buffer
        )
        return format_window(window, fmt=params.response_format)
    except Exception as e:
        return handle_error(e)


def register_window_tools(mcp: FastMCP):

    @mcp.tool(
        name="pagination_get_window",
        annotations={
            "title": "Get Pagination Window",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": False,
        },
    )
    async def pagination_get_window(params: GetWindowInput) -> str:
        """Compute the pagination controls for a list position.

        Returns previous/next navigation, the visible page numbers around the
        current page, and ellipses where pages are omitted. Every page-bearing
        item carries the offset at which that page starts, so the caller can
        fetch it directly.
        """
        return window_response(params)

    logger.info("Registered pagination window tools")

"""Pagination window MCP server — main entry point."""
import logging
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from pagewindow.config import config
from pagewindow.tools.window import register_window_tools

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    """Log server start and stop; the window computation holds no resources."""
    logger.info(
        f"Pagination window server started (window buffer={config.window_buffer})"
    )
    yield {}
    logger.info("Pagination window server stopped")


mcp = FastMCP(
    "pagewindow_mcp",
    lifespan=app_lifespan,
    stateless_http=True,
    host=config.app_host,
    port=config.app_port,
)

register_window_tools(mcp)


def main():
    mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()

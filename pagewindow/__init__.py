"""Bounded pagination windows: page links, ellipses and previous/next navigation."""
from pagewindow.items import (
    Direction,
    EllipsisItem,
    EllipsisPosition,
    NavigationItem,
    PageItem,
    Window,
    WindowItem,
)
from pagewindow.utils.errors import InvalidConfiguration
from pagewindow.validation import PaginationConfig, check_config, validate_config
from pagewindow.window import (
    WINDOW_BUFFER,
    current_page,
    get_pagination_window,
    page_count,
    select_window,
    window_bounds,
    window_for_config,
)

__all__ = [
    "Direction",
    "EllipsisItem",
    "EllipsisPosition",
    "InvalidConfiguration",
    "NavigationItem",
    "PageItem",
    "PaginationConfig",
    "WINDOW_BUFFER",
    "Window",
    "WindowItem",
    "check_config",
    "current_page",
    "get_pagination_window",
    "page_count",
    "select_window",
    "validate_config",
    "window_bounds",
    "window_for_config",
]

"""Window selection and the top-level pagination entry point.

The window shows the current page and up to ``buffer`` pages on each side.
The first and last pages are always reachable: when the window does not touch
an end of the list, that end is shown as a literal page preceded (or followed)
by an ellipsis marker.
"""
from typing import Any, Optional, Union

from pagewindow.items import (
    ELLIPSIS_BACK,
    ELLIPSIS_FRONT,
    FIRST_PAGE,
    Window,
    build_items,
)
from pagewindow.validation import PaginationConfig, validate_config

WINDOW_BUFFER = 3


def current_page(offset: int, limit: int) -> int:
    """1-based number of the page containing ``offset``."""
    return offset // limit + 1


def page_count(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items; an empty list has one page."""
    return max(-(-total // limit), FIRST_PAGE)


def window_bounds(
    current: int, last: int, buffer: int = WINDOW_BUFFER
) -> tuple[int, int]:
    """Return the first and last page numbers of the visible window."""
    if buffer < 1:
        raise ValueError(f"window buffer must be >= 1, got {buffer}")
    if last < FIRST_PAGE:
        raise ValueError(f"last page must be >= {FIRST_PAGE}, got {last}")

    safe_current = min(max(current, FIRST_PAGE), last)
    window_first = safe_current - buffer
    window_last = safe_current + buffer
    if window_first <= FIRST_PAGE:
        # Plus one to take the place of the front ellipsis.
        return FIRST_PAGE, min(window_last + (FIRST_PAGE - window_first) + 1, last)
    if window_last >= last:
        # Minus one to take the place of the back ellipsis.
        return max(window_first - (window_last - last) - 1, FIRST_PAGE), last
    return window_first, window_last


def select_window(
    current: int, last: int, buffer: int = WINDOW_BUFFER
) -> list[Union[int, str]]:
    """Return the visible page numbers, with ellipsis markers for gaps."""
    if last == FIRST_PAGE:
        return [FIRST_PAGE]

    window_first, window_last = window_bounds(current, last, buffer)
    if window_first == FIRST_PAGE and window_last == last:
        return list(range(FIRST_PAGE, last + 1))

    if window_first > FIRST_PAGE:
        front = [FIRST_PAGE, ELLIPSIS_FRONT]
    else:
        front = [window_first]
    if window_last < last:
        back = [ELLIPSIS_BACK, last]
    else:
        back = [window_last]
    return [*front, *range(window_first + 1, window_last), *back]


def window_for_config(
    config: PaginationConfig, buffer: int = WINDOW_BUFFER
) -> Window:
    """Build the window for an already validated configuration."""
    limit = config.limit
    current = current_page(config.offset, limit)
    last = page_count(config.total, limit)
    return build_items(limit, current, last, select_window(current, last, buffer))


def get_pagination_window(
    config: Any, buffer: int = WINDOW_BUFFER
) -> Optional[Window]:
    """Generate a bounded window of pagination items for a list.

    ``config`` is a mapping (or PaginationConfig) with ``offset``, ``limit``
    and ``total``. Returns None when the configuration is invalid.
    """
    validated = validate_config(config)
    if validated is None:
        return None
    return window_for_config(validated, buffer)

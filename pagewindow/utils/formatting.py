"""Response formatting helpers."""
import json
from enum import Enum

from pagewindow.items import PageItem, Window, window_adapter


class ResponseFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"


def _current_and_last(window: Window) -> tuple:
    # The last page is always shown, so it is the highest page number present.
    pages = [item for item in window if isinstance(item, PageItem)]
    current = next((p.number for p in pages if p.is_current), None)
    return current, max(p.number for p in pages)


def format_window(
    window: Window,
    fmt: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    current, last = _current_and_last(window)
    if fmt == ResponseFormat.JSON:
        return json.dumps(
            {
                "current": current,
                "last": last,
                "items": window_adapter.dump_python(window, mode="json"),
            },
            indent=2,
        )
    lines = [f"**Page {current} of {last}**\n"]
    lines.append("| Key | Type | Number | Offset | Disabled | Current |")
    lines.append("| --- | --- | --- | --- | --- | --- |")
    for item in window:
        number = getattr(item, "number", "")
        offset = getattr(item, "offset", "")
        is_current = "yes" if getattr(item, "is_current", False) else ""
        disabled = "yes" if item.is_disabled else ""
        lines.append(
            f"| {item.key} | {item.type} | {number} | {offset} | {disabled} | {is_current} |"
        )
    return "\n".join(lines)

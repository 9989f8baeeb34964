"""Display items that make up a pagination window.

Every item carries a ``type`` discriminant, a ``key`` that is unique within one
window, and an ``is_disabled`` flag. Page-bearing items also carry the page
``number`` and the list ``offset`` at which that page starts.
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

FIRST_PAGE = 1


class Direction(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class EllipsisPosition(str, Enum):
    FRONT = "front"
    BACK = "back"


class PageItem(BaseModel):
    """A link to a specific page."""

    model_config = ConfigDict(frozen=True)
    type: Literal["page"] = "page"
    key: str
    is_disabled: bool = False
    number: int
    offset: int
    is_current: bool


class EllipsisItem(BaseModel):
    """A gap of one or more omitted pages."""

    model_config = ConfigDict(frozen=True)
    type: Literal["ellipsis"] = "ellipsis"
    key: str
    is_disabled: Literal[True] = True


class NavigationItem(BaseModel):
    """A link to the page adjacent to the current one."""

    model_config = ConfigDict(frozen=True)
    type: Literal["navigation"] = "navigation"
    key: str
    is_disabled: bool
    direction: Direction
    number: int
    offset: int


WindowItem = Annotated[
    Union[PageItem, EllipsisItem, NavigationItem], Field(discriminator="type")
]
Window = list[WindowItem]

window_adapter = TypeAdapter(Window)


def page_offset(limit: int, number: int) -> int:
    """Offset of the first item on page ``number``."""
    return (number - 1) * limit


def create_page_item(limit: int, current: int, number: int) -> PageItem:
    return PageItem(
        key=f"page-{number}",
        number=number,
        offset=page_offset(limit, number),
        is_current=number == current,
    )


def create_ellipsis_item(position: EllipsisPosition) -> EllipsisItem:
    position = EllipsisPosition(position)
    return EllipsisItem(key=f"ellipsis-{position.value}")


def create_previous_item(limit: int, current: int) -> NavigationItem:
    previous = max(current - 1, FIRST_PAGE)
    return NavigationItem(
        key="navigation-previous",
        is_disabled=current <= FIRST_PAGE,
        direction=Direction.PREVIOUS,
        number=previous,
        offset=page_offset(limit, previous),
    )


def create_next_item(limit: int, current: int, last: int) -> NavigationItem:
    next_ = min(current + 1, last)
    return NavigationItem(
        key="navigation-next",
        is_disabled=current >= last,
        direction=Direction.NEXT,
        number=next_,
        offset=page_offset(limit, next_),
    )


# Markers a window selection uses in place of omitted pages.
ELLIPSIS_FRONT = "ellipsis-front"
ELLIPSIS_BACK = "ellipsis-back"

_MARKER_POSITIONS = {
    ELLIPSIS_FRONT: EllipsisPosition.FRONT,
    ELLIPSIS_BACK: EllipsisPosition.BACK,
}


def build_items(
    limit: int, current: int, last: int, selection: list[Union[int, str]]
) -> Window:
    """Wrap a selection of page numbers and ellipsis markers in navigation items."""
    items: Window = [create_previous_item(limit, current)]
    for entry in selection:
        if isinstance(entry, str):
            items.append(create_ellipsis_item(_MARKER_POSITIONS[entry]))
        else:
            items.append(create_page_item(limit, current, entry))
    items.append(create_next_item(limit, current, last))
    return items

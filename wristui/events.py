"""Event identifiers, colours and widget styles shared by the UI layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SYS_EVENTS_BASE = 0
LB_EVENTS_BASE = 0x100


def rgb(r: int, g: int, b: int) -> int:
    """Pack three 4-bit channels into a 12-bit colour value."""
    for channel in (r, g, b):
        if not 0 <= channel <= 0xF:
            raise ValueError(f"colour channel {channel} out of range 0..15")
    return (r << 8) | (g << 4) | b


class WidgetEvent(IntEnum):
    """Events delivered to widgets."""

    PRESS = SYS_EVENTS_BASE
    RELEASE = SYS_EVENTS_BASE + 1
    TAP = SYS_EVENTS_BASE + 2
    SWIPE_LEFT = SYS_EVENTS_BASE + 3
    SWIPE_RIGHT = SYS_EVENTS_BASE + 4
    SWIPE_UP = SYS_EVENTS_BASE + 5
    SWIPE_DOWN = SYS_EVENTS_BASE + 6

    LB_ITEM_SELECTED = LB_EVENTS_BASE
    LB_ITEM_DESELECTED = LB_EVENTS_BASE + 1


class TileEvent(IntEnum):
    """Events delivered to tiles."""

    ENTER = 0xF00
    EXIT = 0xF01
    USERBTN = 0xF02
    MODAL_CLOSE = 0xF03


STYLE_BG_DEFAULT = rgb(0, 0, 0)
STYLE_BORDER_DEFAULT = rgb(0xF, 0xF, 0xF)
STYLE_FRONT_DEFAULT = rgb(0xF, 0xF, 0xF)


@dataclass
class Style:
    """Colours used to render a widget."""

    background: int = STYLE_BG_DEFAULT
    border: int = STYLE_BORDER_DEFAULT
    front: int = STYLE_FRONT_DEFAULT
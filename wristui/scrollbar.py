"""A scrollbar showing a cursor for the visible part of a larger range."""

from __future__ import annotations

from enum import IntEnum

from wristui.events import rgb
from wristui.widget import Widget, WidgetRegistry

SCROLLBAR_STYLE_BORDER = rgb(0xF, 0xF, 0xF)
SCROLLBAR_STYLE_CURSOR = rgb(0xF, 0xF, 0xF)
SCROLLBAR_MIN_HANDLE_SIZE = 10


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class ScrollbarType(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class Scrollbar(Widget):
    """A bordered bar with a cursor; the cursor is always laid out vertically."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int,
                 kind: ScrollbarType = ScrollbarType.VERTICAL):
        super().__init__(registry, tile, x, y, width, height)
        self.min = 0
        self.max = 100
        self.value = 0
        self.kind = kind

    def cursor_geometry(self) -> tuple[int, int]:
        """Return the cursor's (offset, size) along the bar."""
        height = self.box.height
        if self.max < height:
            size = height // 2
        else:
            size = _cdiv(height * (height // 2), self.max)
        size = max(size, SCROLLBAR_MIN_HANDLE_SIZE)
        span = self.max - self.min
        offset = _cdiv(self.value * (height - size), span) if span else 0
        return offset, size

    def render(self, display) -> None:
        self._border(display, SCROLLBAR_STYLE_BORDER)
        offset, size = self.cursor_geometry()
        self.fill_region(display, 1, 1 + offset, self.box.width - 2, size, SCROLLBAR_STYLE_CURSOR)
"""A horizontal slider whose value is set by pressing along it."""

from __future__ import annotations

from typing import Callable

from wristui.events import WidgetEvent, rgb
from wristui.widget import Widget, WidgetRegistry

SLIDER_STYLE_BORDER = rgb(0xD, 0xD, 0xD)
SLIDER_STYLE_TEXT = rgb(0xE, 0xE, 0xE)
SLIDER_STYLE_CURSOR = rgb(0x5, 0x9, 0xF)
SLIDER_STYLE_FILL = rgb(0x5, 0x9, 0xF)
SLIDER_CURSOR_RADIUS = 10
SLIDER_FILL_RADIUS = 2

SLIDER_MIN_DEFAULT = 0
SLIDER_MAX_DEFAULT = 100
SLIDER_VALUE_DEFAULT = 0


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Slider(Widget):
    """A bar with a round cursor; presses move the cursor and notify a handler."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int):
        super().__init__(registry, tile, x, y, width, height)
        self.min_value = SLIDER_MIN_DEFAULT
        self.max_value = SLIDER_MAX_DEFAULT
        self._value = SLIDER_VALUE_DEFAULT
        self.label: str | None = None
        self.on_tap: Callable[[Slider], None] | None = None

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        """Set the value, clamped to the slider's range."""
        self._value = min(max(value, self.min_value), self.max_value)

    def configure(self, min_value: int, max_value: int, value: int, step: int = 1) -> None:
        """Set the range and value; this also clears the press handler."""
        if max_value < min_value:
            min_value, max_value = max_value, min_value
        self.min_value = min_value
        self.max_value = max_value
        self.on_tap = None
        self.value = value

    def handle_event(self, event: WidgetEvent, x: int, y: int, velocity: int) -> bool:
        if self.on_tap is None:
            return False
        radius = SLIDER_CURSOR_RADIUS
        width = self.box.width
        if event == WidgetEvent.PRESS:
            if radius <= x <= width - radius:
                new = _cdiv(x * (self.max_value - self.min_value), width - 2 * radius) + self.min_value
                self.value = new
                self.on_tap(self)
            elif x < radius:
                self._value = self.min_value
            else:
                self._value = self.max_value
            return True
        return event in (WidgetEvent.SWIPE_LEFT, WidgetEvent.SWIPE_RIGHT)

    def render(self, display) -> None:
        radius = SLIDER_CURSOR_RADIUS
        width = self.box.width
        span = self.max_value - self.min_value - 2 * radius
        x = radius
        if span:
            x += _cdiv((self._value - self.min_value) * (width - 2 * radius), span)
        y = self.box.height // 2
        edge = radius + SLIDER_FILL_RADIUS // 2

        self.draw_line(display, radius, y, width - 2 * radius, y, SLIDER_STYLE_BORDER)
        self.draw_disc(display, edge, y, SLIDER_FILL_RADIUS, SLIDER_STYLE_CURSOR)
        self.fill_region(display, edge, y - SLIDER_FILL_RADIUS, x, SLIDER_FILL_RADIUS * 2 + 1,
                         SLIDER_STYLE_FILL)
        self.draw_disc(display, x, y, radius, SLIDER_STYLE_CURSOR)
"""A push button with a centred text label."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from wristui.events import WidgetEvent, rgb
from wristui.widget import Widget, WidgetRegistry

BUTTON_STYLE_BORDER = rgb(0xF, 0xF, 0xF)
BUTTON_STYLE_BG = rgb(0x0, 0x0, 0x0)
BUTTON_STYLE_BG_PRESSED = rgb(0x3, 0x3, 0x3)
BUTTON_STYLE_TEXT = rgb(0xE, 0xE, 0xE)

_TEXT_X2_HEIGHT = 32


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class ButtonState(IntEnum):
    PRESSED = 0
    RELEASED = 1


class Button(Widget):
    """A bordered button that darkens while pressed and reports taps."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int,
                 label: str | None = None):
        super().__init__(registry, tile, x, y, width, height)
        self.state = ButtonState.RELEASED
        self.label = label
        self.on_tap: Callable[[Button], None] | None = None
        self.style.background = BUTTON_STYLE_BG
        self.style.border = BUTTON_STYLE_BORDER
        self.style.front = BUTTON_STYLE_BORDER

    def handle_event(self, event: WidgetEvent, x: int, y: int, velocity: int) -> bool:
        if event == WidgetEvent.PRESS:
            self.state = ButtonState.PRESSED
            return True
        if event == WidgetEvent.RELEASE:
            self.state = ButtonState.RELEASED
            return True
        if event == WidgetEvent.TAP:
            if self.on_tap is not None:
                self.on_tap(self)
            return True
        return False

    def render(self, display) -> None:
        width, height = self.box.width, self.box.height
        self._border(display, self.style.border)
        background = BUTTON_STYLE_BG_PRESSED if self.state is ButtonState.PRESSED else self.style.background
        self.fill_region(display, 1, 1, width - 2, height - 2, background)
        if self.label is not None:
            text_width = display.text_width(self.label, 2)
            dx = _cdiv(width - text_width, 2)
            dy = _cdiv(height - _TEXT_X2_HEIGHT, 2)
            self.draw_text_x2(display, dx, dy, self.label, self.style.front)
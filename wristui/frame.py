"""A widget that only draws a rectangular border."""

from __future__ import annotations

from wristui.events import rgb
from wristui.widget import Widget

FRAME_STYLE_BORDER = rgb(0xF, 0xF, 0xF)
FRAME_STYLE_BG = rgb(0x0, 0x0, 0x0)
FRAME_STYLE_BG_PRESSED = rgb(0x3, 0x3, 0x3)
FRAME_STYLE_TEXT = rgb(0xE, 0xE, 0xE)


class Frame(Widget):
    """A bordered rectangle with rounded-off corners."""

    def render(self, display) -> None:
        self._border(display, self.style.border)
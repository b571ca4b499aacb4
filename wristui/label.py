"""A widget showing a line of text on a background."""

from __future__ import annotations

from enum import IntEnum

from wristui.events import rgb
from wristui.widget import Widget, WidgetRegistry

LABEL_STYLE_TEXT = rgb(0xF, 0xF, 0xF)


class LabelFont(IntEnum):
    NORMAL = 0
    SMALL = 1


class Label(Widget):
    """Text drawn at a small inset from the widget's top-left corner."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int,
                 text: str | None = None):
        super().__init__(registry, tile, x, y, width, height)
        self.text = text
        self.font = LabelFont.NORMAL

    def render(self, display) -> None:
        if self.text is None:
            return
        self.fill_region(display, 1, 1, self.box.width - 2, self.box.height - 2, self.style.background)
        if self.font is LabelFont.NORMAL:
            self.draw_text_x2(display, 3, 3, self.text, self.style.front)
        else:
            self.draw_text(display, 3, 3, self.text, self.style.front)
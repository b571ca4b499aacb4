"""A widget that shows an image."""

from __future__ import annotations

from wristui.image import Image
from wristui.widget import Widget, WidgetRegistry


class ImageWidget(Widget):
    """Blits the top-left part of an image, the size of the widget, onto the display."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int,
                 image: Image):
        super().__init__(registry, tile, x, y, width, height)
        self.image = image

    def render(self, display) -> None:
        self.bitblt(display, self.image, 0, 0, self.box.width, self.box.height, 0, 0)
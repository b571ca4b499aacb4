"""Base widget, widget boxes and the registry that keeps widgets in creation order."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from wristui.events import Style, WidgetEvent
from wristui.image import Image, bitblt


@dataclass
class Box:
    """A rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Tell whether the point (x, y) lies inside the box."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class WidgetRegistry:
    """All widgets, in the order they were created."""

    def __init__(self) -> None:
        self._widgets: list[Widget] = []

    def register(self, widget: Widget) -> None:
        self._widgets.append(widget)

    def __iter__(self) -> Iterator[Widget]:
        return iter(list(self._widgets))

    def __len__(self) -> int:
        return len(self._widgets)

    def for_tile(self, tile) -> Iterator[Widget]:
        """Yield the widgets that belong to the given tile."""
        return (widget for widget in list(self._widgets) if widget.tile is tile)


class Widget:
    """A rectangular element of the interface, optionally placed on a tile."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int):
        self.tile = tile
        self.box = Box(x, y, width, height)
        self.style = Style()
        registry.register(self)

    def send_event(self, event: WidgetEvent, x: int = 0, y: int = 0, velocity: int = 0) -> bool:
        """Deliver an event; return True if the widget processed it."""
        return bool(self.handle_event(event, x, y, velocity))

    def handle_event(self, event: WidgetEvent, x: int, y: int, velocity: int) -> bool:
        """Process an event; plain widgets process none."""
        return False

    def _tile_offset(self) -> tuple[int, int]:
        if self.tile is None:
            return 0, 0
        return self.tile.offset_x, self.tile.offset_y

    @property
    def abs_x(self) -> int:
        return self.box.x + self._tile_offset()[0]

    @property
    def abs_y(self) -> int:
        return self.box.y + self._tile_offset()[1]

    def abs_box(self) -> Box:
        """Return the widget box in screen coordinates."""
        return Box(self.abs_x, self.abs_y, self.box.width, self.box.height)

    def draw(self, display) -> None:
        """Render the widget clipped to its own region, then restore the drawing window."""
        x0, y0, x1, y1 = display.get_drawing_window()
        ox, oy = self._tile_offset()
        box = self.box
        display.set_drawing_window(
            x0 if box.x < x0 else box.x + ox,
            y0 if box.y < y0 else box.y + oy,
            x1 if box.x + box.width > x1 else box.x + box.width + ox,
            y1 if box.y + box.height > y1 else box.y + box.height + oy,
        )
        try:
            self.render(display)
        finally:
            display.set_drawing_window(x0, y0, x1, y1)

    def render(self, display) -> None:
        """Draw the widget's content; plain widgets draw nothing."""

    def set_style(self, style: Style) -> None:
        self.style = replace(style)

    def _border(self, display, color: int) -> None:
        width, height = self.box.width, self.box.height
        self.draw_line(display, 1, 0, width - 2, 0, color)
        self.draw_line(display, 1, height - 1, width - 2, height - 1, color)
        self.draw_line(display, 0, 1, 0, height - 2, color)
        self.draw_line(display, width - 1, 1, width - 1, height - 2, color)

    def set_pixel(self, display, x: int, y: int, color: int) -> None:
        display.set_pixel(x + self.abs_x, y + self.abs_y, color)

    def fill_region(self, display, x: int, y: int, width: int, height: int, color: int) -> None:
        display.fill_region(x + self.abs_x, y + self.abs_y, width, height, color)

    def draw_line(self, display, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        ax, ay = self.abs_x, self.abs_y
        display.draw_line(x0 + ax, y0 + ay, x1 + ax, y1 + ay, color)

    def draw_circle(self, display, x: int, y: int, r: int, color: int) -> None:
        display.draw_circle(x + self.abs_x, y + self.abs_y, r, color)

    def draw_disc(self, display, x: int, y: int, r: int, color: int) -> None:
        display.draw_disc(x + self.abs_x, y + self.abs_y, r, color)

    def bitblt(self, display, image: Image, source_x: int, source_y: int, width: int, height: int,
               dest_x: int, dest_y: int) -> None:
        bitblt(display, image, source_x, source_y, width, height,
               dest_x + self.abs_x, dest_y + self.abs_y)

    def draw_text(self, display, x: int, y: int, text: str, color: int) -> int:
        return display.draw_text(self.abs_x + x, self.abs_y + y, text, color, 1)

    def draw_text_x2(self, display, x: int, y: int, text: str, color: int) -> int:
        return display.draw_text(self.abs_x + x, self.abs_y + y, text, color, 2)
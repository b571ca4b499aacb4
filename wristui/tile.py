"""Screens of the interface (tiles), their links and the modal dialog box."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

from wristui.display import SCREEN_HEIGHT, SCREEN_WIDTH
from wristui.events import TileEvent, rgb
from wristui.image import Image, bitblt
from wristui.widget import WidgetRegistry

MODAL_STYLE_BORDER = rgb(0xF, 0xF, 0xF)


class TileType(IntEnum):
    MAIN = 0
    SECONDARY = 1


class Tile:
    """A full-screen page holding widgets, linked to its neighbours."""

    def __init__(self, registry: WidgetRegistry, user_data: Any = None):
        self.registry = registry
        self.tile_type = TileType.MAIN
        self.offset_x = 0
        self.offset_y = 0
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.left: Tile | None = None
        self.right: Tile | None = None
        self.top: Tile | None = None
        self.bottom: Tile | None = None
        self.user_data = user_data
        self.background_color = rgb(0, 0, 0)

    def draw(self, display) -> bool:
        """Draw the tile; return False if nothing was drawn."""
        return bool(self.render(display))

    def render(self, display) -> bool:
        """Fill the background and draw the widgets, unless the tile is off screen."""
        if self.offset_x >= display.width or self.offset_y >= display.height:
            return False
        if self.offset_x <= -display.width or self.offset_y <= -display.height:
            return False
        display.set_drawing_window(
            self.offset_x,
            self.offset_y,
            self.offset_x + self.width,
            self.offset_y + self.height,
        )
        display.fill_region(self.offset_x, self.offset_y, self.width, self.height,
                            self.background_color)
        self.draw_widgets(display)
        return True

    def send_event(self, event: TileEvent, x: int = 0, y: int = 0, velocity: int = 0) -> bool:
        """Deliver an event; return True if the tile processed it."""
        return bool(self.handle_event(event, x, y, velocity))

    def handle_event(self, event: TileEvent, x: int, y: int, velocity: int) -> bool:
        """Process an event; plain tiles process none."""
        return False

    def link_right(self, other: Tile | None) -> None:
        """Place a main tile to the right of this one."""
        if other is None or other.tile_type is not TileType.MAIN:
            return
        self.right = other
        other.left = self

    def link_left(self, other: Tile | None) -> None:
        """Place a main tile to the left of this one."""
        if other is None or other.tile_type is not TileType.MAIN:
            return
        self.left = other
        other.right = self

    def link_top(self, other: Tile | None) -> None:
        """Place a tile above this one; it becomes a secondary tile."""
        if other is None:
            return
        self.top = other
        other.bottom = self
        other.tile_type = TileType.SECONDARY

    def link_bottom(self, other: Tile | None) -> None:
        """Place a tile below this one; it becomes a secondary tile."""
        if other is None:
            return
        self.bottom = other
        other.top = self
        other.tile_type = TileType.SECONDARY

    def main_tile(self) -> Tile:
        """Return the main tile this tile hangs from (itself for a main tile)."""
        tile = self
        if tile.tile_type is TileType.SECONDARY:
            while tile.top is not None:
                tile = tile.top
        return tile

    def draw_widgets(self, display) -> None:
        """Draw every widget that belongs to this tile, in creation order."""
        for widget in self.registry.for_tile(self):
            widget.draw(display)

    def set_pixel(self, display, x: int, y: int, color: int) -> None:
        display.set_pixel(x + self.offset_x, y + self.offset_y, color)

    def fill_region(self, display, x: int, y: int, width: int, height: int, color: int) -> None:
        display.fill_region(x + self.offset_x, y + self.offset_y, width, height, color)

    def draw_line(self, display, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        ox, oy = self.offset_x, self.offset_y
        display.draw_line(x0 + ox, y0 + oy, x1 + ox, y1 + oy, color)

    def draw_circle(self, display, x: int, y: int, r: int, color: int) -> None:
        display.draw_circle(x + self.offset_x, y + self.offset_y, r, color)

    def draw_disc(self, display, x: int, y: int, r: int, color: int) -> None:
        display.draw_disc(x + self.offset_x, y + self.offset_y, r, color)

    def draw_text(self, display, x: int, y: int, text: str, color: int) -> int:
        return display.draw_text(self.offset_x + x, self.offset_y + y, text, color, 1)

    def draw_text_x2(self, display, x: int, y: int, text: str, color: int) -> int:
        return display.draw_text(self.offset_x + x, self.offset_y + y, text, color, 2)

    def bitblt(self, display, image: Image, source_x: int, source_y: int, width: int, height: int,
               dest_x: int, dest_y: int) -> None:
        bitblt(display, image, source_x, source_y, width, height,
               dest_x + self.offset_x, dest_y + self.offset_y)


class Modal(Tile):
    """A bordered dialog box drawn over the current tile."""

    def __init__(self, registry: WidgetRegistry, x: int, y: int, width: int, height: int,
                 on_close: Callable[[], None] | None = None):
        super().__init__(registry, None)
        self.user_data = self
        self.offset_x = x
        self.offset_y = y
        self.width = width
        self.height = height
        self.on_close = on_close

    def render(self, display) -> bool:
        display.set_drawing_window(
            self.offset_x,
            self.offset_y,
            self.offset_x + self.width,
            self.offset_y + self.height,
        )
        width, height = self.width, self.height
        self.fill_region(display, 1, 1, width - 2, height - 2, self.background_color)
        self.draw_line(display, 1, 0, width - 2, 0, MODAL_STYLE_BORDER)
        self.draw_line(display, 1, height - 1, width - 2, height - 1, MODAL_STYLE_BORDER)
        self.draw_line(display, 0, 1, 0, height - 2, MODAL_STYLE_BORDER)
        self.draw_line(display, width - 1, 1, width - 1, height - 2, MODAL_STYLE_BORDER)
        self.draw_widgets(display)
        return True

    def handle_event(self, event: TileEvent, x: int, y: int, velocity: int) -> bool:
        """Close the dialog on request; the event is never reported as processed."""
        if event == TileEvent.MODAL_CLOSE and self.on_close is not None:
            self.on_close()
        return False
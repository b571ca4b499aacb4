"""A widget holding child widgets placed relative to its own position."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from wristui.events import WidgetEvent, rgb
from wristui.widget import Box, Widget, WidgetRegistry

CONTAINER_STYLE_BG = rgb(0, 0, 0)


@dataclass
class ContainerItem:
    """A child widget together with its position relative to the container."""

    widget: Widget
    rel_box: Box


class Container(Widget):
    """Draws its children clipped to its interior, shifted by a scroll offset."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int):
        super().__init__(registry, tile, x, y, width, height)
        self._items: list[ContainerItem] = []
        self.offset_x = 0
        self.offset_y = 0

    def add(self, widget: Widget) -> None:
        """Append a widget; its current box becomes its position inside the container."""
        self._items.append(ContainerItem(widget, replace(widget.box)))

    def remove(self, widget: Widget) -> None:
        """Remove the first item holding this widget; unknown widgets are ignored."""
        for index, item in enumerate(self._items):
            if item.widget is widget:
                del self._items[index]
                return

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ContainerItem]:
        return iter(list(self._items))

    def debug_list(self) -> str:
        """Describe the container's items, one per line."""
        if not self._items:
            return "list is empty !"
        lines = []
        for n, item in enumerate(self._items):
            following = self._items[n + 1].widget if n + 1 < len(self._items) else None
            lines.append(f"item #{n}: widget={item.widget!r}, next={following!r}")
        return "\n".join(lines)

    def handle_event(self, event: WidgetEvent, x: int, y: int, velocity: int) -> bool:
        # The last child is never consulted when dispatching events.
        for item in self._items[:-1]:
            child = item.widget
            if event == WidgetEvent.RELEASE:
                child.send_event(event, x, y, velocity)
            elif child.box.contains(x, y) and child.send_event(event, x, y, velocity):
                return True
        return False

    def render(self, display) -> None:
        width, height = self.box.width, self.box.height
        self.fill_region(display, 1, 1, width - 2, height - 2, CONTAINER_STYLE_BG)
        abs_x, abs_y = self.abs_x, self.abs_y
        display.set_drawing_window(abs_x + 1, abs_y + 1, abs_x + width - 2, abs_y + height - 2)
        for item in list(self._items):
            item.widget.box.x = item.rel_box.x + abs_x + self.offset_x
            item.widget.box.y = item.rel_box.y + abs_y + self.offset_y
            item.widget.draw(display)
        display.set_drawing_window(0, 0, display.width - 1, display.height - 1)
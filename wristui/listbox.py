"""A scrollable list of widgets with a vertical scrollbar."""

from __future__ import annotations

from enum import IntEnum

from wristui.container import Container
from wristui.events import WidgetEvent, rgb
from wristui.scrollbar import Scrollbar, ScrollbarType
from wristui.widget import Widget, WidgetRegistry

LISTBOX_STYLE_BORDER = rgb(0xF, 0xF, 0xF)


class ListboxState(IntEnum):
    IDLE = 0
    MOVING = 1
    MOVING_FREE = 2
    STOPPED = 3


class Listbox(Widget):
    """Stacks widgets vertically in a container and scrolls them with swipes."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int):
        super().__init__(registry, tile, x, y, width, height)
        self.container = Container(registry, None, x + 1, y + 1, width - 12, height - 2)
        self.scrollbar = Scrollbar(registry, None, width - 10, 0, 10, height, ScrollbarType.VERTICAL)
        self.n_items = 0
        self.selected_item: Widget | None = None
        self.state = ListboxState.IDLE
        self.move_orig_x = 0
        self.move_orig_y = 0
        self.offset = 0
        self.speed = 0.0

    @property
    def _bottom_offset(self) -> int:
        return -(self.scrollbar.max - 20)

    def animate(self) -> None:
        """Advance the scrolling animation by one step."""
        if self.speed < 0:
            if self.offset < 0:
                self.offset -= int(self.speed / 4)
                if self.offset >= 0:
                    self.offset = 0
                    self.state = ListboxState.IDLE
            self.speed = (9.8 * self.speed) / 10.0
        elif self.speed > 0:
            bottom = self._bottom_offset
            if self.offset > bottom:
                self.offset -= int(self.speed / 4)
                if self.offset <= bottom:
                    self.offset = bottom
                    self.state = ListboxState.IDLE
            self.speed = (9.8 * self.speed) / 10.0
        else:
            self.offset = self._bottom_offset
            self.state = ListboxState.IDLE

    def add(self, widget: Widget) -> None:
        """Append a widget below the last one, stretched to the list width."""
        items = list(self.container)
        widget.box.x = 2
        if items:
            last = items[-1].rel_box
            widget.box.y = last.y + last.height
        else:
            widget.box.y = 2
        widget.box.width = self.container.box.width - 4
        self.container.add(widget)
        self.update_scrollbar()

    def remove(self, widget: Widget) -> None:
        """Remove a widget and close the gap it leaves."""
        self.container.remove(widget)
        y = 2
        for item in self.container:
            item.rel_box.y = y
            y += item.rel_box.height
        self.update_scrollbar()

    def update_scrollbar(self) -> None:
        """Set the scrollbar range to the total height of the items."""
        items = list(self.container)
        if items:
            self.scrollbar.max = items[0].rel_box.y + sum(item.rel_box.height for item in items)
        else:
            self.scrollbar.max = 0

    def __len__(self) -> int:
        return len(self.container)

    def handle_event(self, event: WidgetEvent, x: int, y: int, velocity: int) -> bool:
        if event == WidgetEvent.TAP:
            if self.state is ListboxState.STOPPED:
                self.state = ListboxState.IDLE
            else:
                for item in self.container:
                    child = item.widget
                    if child.box.contains(x, y):
                        if self.selected_item is not None:
                            self.selected_item.send_event(WidgetEvent.LB_ITEM_DESELECTED, 0, 0, 0)
                        child.send_event(WidgetEvent.LB_ITEM_SELECTED, 0, 0, 0)
                        self.selected_item = child
                        self.send_event(WidgetEvent.LB_ITEM_SELECTED, 0, 0, 0)
            return True
        if event == WidgetEvent.PRESS:
            if self.state is ListboxState.MOVING_FREE:
                self.state = ListboxState.STOPPED
                return True
            return False
        if event == WidgetEvent.SWIPE_UP:
            if self.offset == self._bottom_offset:
                self.state = ListboxState.IDLE
            else:
                self.state = ListboxState.MOVING
                self.speed = velocity
            return True
        if event == WidgetEvent.SWIPE_DOWN:
            if self.offset == 0:
                self.state = ListboxState.IDLE
            else:
                self.state = ListboxState.MOVING
                self.speed = -velocity
            return True
        if event == WidgetEvent.RELEASE:
            if self.state is ListboxState.MOVING:
                self.state = ListboxState.MOVING_FREE
            return False
        self.state = ListboxState.IDLE
        return False

    def render(self, display) -> None:
        abs_x, abs_y = self.abs_x, self.abs_y
        self.container.box.x = abs_x + 1
        self.container.box.y = abs_y + 1
        if self.state is not ListboxState.IDLE:
            self.animate()
        self.container.offset_y = self.offset
        self.scrollbar.value = -self.offset
        self.scrollbar.box.x = abs_x + self.box.width - 10
        self.scrollbar.box.y = abs_y
        self.container.draw(display)
        self.scrollbar.draw(display)
        self._border(display, LISTBOX_STYLE_BORDER)
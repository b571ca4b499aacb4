"""The interface controller: tile navigation, event dispatch, animation and eco mode."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable, Protocol

from wristui.display import Screen
from wristui.events import TileEvent, WidgetEvent
from wristui.tile import Modal, Tile, TileType
from wristui.touch import GestureRecognizer, TouchEventType
from wristui.widget import WidgetRegistry

UI_ANIM_DELTA = 40
DIMMED_BACKLIGHT = 100
TAP_VIBRATION_MS = 5
DEFAULT_MAX_INACTIVITY = 15
DEFAULT_MAX_INACTIVITY_TO_DEEPSLEEP = 60


class UIState(IntEnum):
    IDLE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    MOVE_UP = 3
    MOVE_DOWN = 4


class ScreenMode(IntEnum):
    NORMAL = 0
    DIMMED = 1


class PowerManager(Protocol):
    """What the interface needs from the power management unit."""

    def is_userbtn_pressed(self) -> bool: ...

    def is_usb_plugged(self, query_irq: bool) -> bool: ...

    def deepsleep(self) -> None: ...


class InactivityTimer:
    """A one-shot alarm that re-arms itself a few seconds after firing."""

    RETRIGGER_SECONDS = 5

    def __init__(self, clock: Callable[[], float] | None = None):
        self.clock = clock if clock is not None else time.monotonic
        self.running = False
        self._deadline: float | None = None

    def start(self, seconds: float) -> None:
        """Arm the alarm to fire `seconds` from now and run the timer."""
        self._deadline = self.clock() + seconds
        self.running = True

    def pause(self) -> None:
        self.running = False

    def expired(self) -> bool:
        """Return True if the alarm fired; it is then re-armed a few seconds later."""
        if not self.running or self._deadline is None:
            return False
        now = self.clock()
        if now < self._deadline:
            return False
        self._deadline = now + self.RETRIGGER_SECONDS
        return True


class UI:
    """Drives tiles, widgets and the screen from touch and power events."""

    def __init__(
        self,
        screen: Screen | None = None,
        touch=None,
        registry: WidgetRegistry | None = None,
        power: PowerManager | None = None,
        vibrate: Callable[[int], object] | None = None,
        timer: InactivityTimer | None = None,
    ):
        self.screen = screen if screen is not None else Screen()
        self.touch = touch if touch is not None else GestureRecognizer()
        self.registry = registry if registry is not None else WidgetRegistry()
        self.power = power
        self.vibrate = vibrate
        self.timer = timer if timer is not None else InactivityTimer()

        self.current_tile: Tile | None = None
        self.default_tile: Tile | None = None
        self.state = UIState.IDLE
        self.from_tile: Tile | None = None
        self.to_tile: Tile | None = None
        self.modal: Modal | None = None
        self.screen_mode = ScreenMode.NORMAL

        self.usb_plugged = power.is_usb_plugged(True) if power is not None else False
        self.eco_mode_enabled = False
        self.inactivity_detected = False
        self.eco_max_inactivity = DEFAULT_MAX_INACTIVITY
        self.eco_max_inactivity_to_deepsleep = DEFAULT_MAX_INACTIVITY_TO_DEEPSLEEP

    @property
    def display(self):
        return self.screen.framebuffer

    # Tile selection

    def set_default_tile(self, tile: Tile) -> None:
        self.default_tile = tile
        tile.offset_x = 0
        tile.offset_y = 0

    def select_tile(self, tile: Tile) -> None:
        """Make a tile current, sending EXIT to the old one and ENTER to the new one."""
        if self.default_tile is None:
            self.set_default_tile(tile)
        if self.current_tile is not None:
            self.current_tile.send_event(TileEvent.EXIT, 0, 0, 0)
        self.current_tile = tile
        tile.offset_x = 0
        tile.offset_y = 0
        tile.send_event(TileEvent.ENTER, 0, 0, 0)

    def select_default_tile(self) -> None:
        if self.default_tile is None:
            return
        self.select_tile(self.default_tile)

    # Navigation

    def _require_current(self) -> Tile:
        if self.current_tile is None:
            raise RuntimeError("no tile is selected")
        return self.current_tile

    def _start_move(self, state: UIState, target: Tile, offset_x: int, offset_y: int) -> None:
        self.state = state
        self.from_tile = self.current_tile
        self.to_tile = target
        target.offset_x = offset_x
        target.offset_y = offset_y

    def swipe_right(self) -> None:
        """Start moving to the tile on the left of the current main tile, if any."""
        main = self._require_current().main_tile()
        if main.left is not None:
            self._start_move(UIState.MOVE_LEFT, main.left, -self.display.width, 0)

    def swipe_left(self) -> None:
        """Start moving to the tile on the right of the current main tile, if any."""
        main = self._require_current().main_tile()
        if main.right is not None:
            self._start_move(UIState.MOVE_RIGHT, main.right, self.display.width, 0)

    def swipe_up(self) -> None:
        """Start moving to the tile below the current one, if any."""
        current = self._require_current()
        if current.bottom is not None:
            self._start_move(UIState.MOVE_DOWN, current.bottom, 0, self.display.height)

    def swipe_down(self) -> None:
        """Start moving to the tile above the current one, if any."""
        current = self._require_current()
        if current.top is not None:
            self._start_move(UIState.MOVE_UP, current.top, 0, -self.display.height)

    def go_right(self) -> None:
        self.swipe_left()

    def go_left(self) -> None:
        self.swipe_right()

    def go_up(self) -> None:
        self.swipe_down()

    def go_down(self) -> None:
        self.swipe_up()

    # Modal dialog box

    def set_modal(self, modal: Modal) -> None:
        if modal.on_close is None:
            modal.on_close = self.unset_modal
        self.modal = modal

    def unset_modal(self) -> None:
        self.modal = None

    # Event dispatch

    def forward_event_to_widget(self, event_type: TouchEventType, x: int, y: int,
                                velocity: int = 0) -> bool:
        """Offer a touch event to widgets; return True if it was claimed."""
        event = WidgetEvent(int(event_type))
        for widget in self.registry:
            if event_type == TouchEventType.RELEASE:
                widget.send_event(event, x, y, velocity)
                continue
            if self.modal is not None:
                if widget.tile is not self.modal:
                    continue
                left = self.modal.offset_x + widget.box.x
                top = self.modal.offset_y + widget.box.y
            else:
                if self.current_tile is None or widget.tile is not self.current_tile:
                    continue
                left = widget.box.x
                top = widget.box.y
            inside = left <= x < left + widget.box.width and top <= y < top + widget.box.height
            if inside and widget.send_event(event, x - left, y - top, velocity):
                return True
        # An active modal swallows swipes so the tiles underneath cannot move.
        return self.modal is not None and event_type >= TouchEventType.SWIPE_LEFT

    # Eco mode

    def enable_ecomode(self) -> None:
        self.eco_mode_enabled = True
        self.timer.start(self.eco_max_inactivity)

    def disable_ecomode(self) -> None:
        self.eco_mode_enabled = False
        self.timer.pause()

    def wakeup(self) -> None:
        """Restore the default backlight and restart the inactivity timer."""
        self.screen.wake()
        self.timer.start(self.eco_max_inactivity)

    def _deepsleep(self) -> None:
        self.display.blank()
        self.display.commit()
        if self.power is not None:
            self.power.deepsleep()

    # Main loop step

    def _handle_touch(self, touch) -> None:
        if self.eco_mode_enabled:
            self.inactivity_detected = False
            self.screen_mode = ScreenMode.NORMAL
            self.timer.start(self.eco_max_inactivity)
            self.screen.wake()

        swipes = {
            TouchEventType.SWIPE_RIGHT: self.swipe_right,
            TouchEventType.SWIPE_LEFT: self.swipe_left,
            TouchEventType.SWIPE_UP: self.swipe_up,
            TouchEventType.SWIPE_DOWN: self.swipe_down,
        }
        kind = touch.type
        if kind in swipes:
            if not self.forward_event_to_widget(kind, touch.x, touch.y, int(touch.velocity)):
                swipes[kind]()
        elif kind in (TouchEventType.PRESS, TouchEventType.RELEASE):
            self.forward_event_to_widget(kind, touch.x, touch.y, 0)
        elif kind == TouchEventType.TAP:
            self.forward_event_to_widget(kind, touch.x, touch.y, 0)
            if self.vibrate is not None:
                self.vibrate(TAP_VIBRATION_MS)

    def _handle_inactivity(self) -> None:
        if not (self.inactivity_detected and self.eco_mode_enabled):
            return
        self.inactivity_detected = False
        if self.screen_mode is ScreenMode.NORMAL:
            self.screen.backlight = DIMMED_BACKLIGHT
            self.screen_mode = ScreenMode.DIMMED
            if self.eco_max_inactivity_to_deepsleep != 0:
                self.timer.start(self.eco_max_inactivity_to_deepsleep)
            else:
                self.timer.pause()
        else:
            self.timer.pause()
            self._deepsleep()

    def _animate(self) -> None:
        to_tile, from_tile = self.to_tile, self.from_tile
        if self.state is UIState.MOVE_RIGHT:
            to_tile.offset_x -= UI_ANIM_DELTA
            from_tile.offset_x -= UI_ANIM_DELTA
        elif self.state is UIState.MOVE_LEFT:
            to_tile.offset_x += UI_ANIM_DELTA
            from_tile.offset_x += UI_ANIM_DELTA
        elif self.state is UIState.MOVE_DOWN:
            to_tile.offset_y -= UI_ANIM_DELTA
            from_tile.offset_y -= UI_ANIM_DELTA
        else:
            to_tile.offset_y += UI_ANIM_DELTA
            from_tile.offset_y += UI_ANIM_DELTA

        from_tile.draw(self.display)
        to_tile.draw(self.display)

        horizontal = self.state in (UIState.MOVE_LEFT, UIState.MOVE_RIGHT)
        arrived = to_tile.offset_x == 0 if horizontal else to_tile.offset_y == 0
        if arrived:
            self.current_tile.send_event(TileEvent.EXIT, 0, 0, 0)
            self.state = UIState.IDLE
            self.current_tile = to_tile
            self.current_tile.send_event(TileEvent.ENTER, 0, 0, 0)

    def process_events(self) -> None:
        """Handle pending input, advance any animation and refresh the screen."""
        if self.timer.expired():
            self.inactivity_detected = True

        if self.state is UIState.IDLE:
            touch = self.touch.get_event()
            if touch is not None:
                self._handle_touch(touch)
            else:
                self._handle_inactivity()

        if self.power is not None and self.power.is_userbtn_pressed():
            if self.current_tile is self.default_tile:
                self._deepsleep()
            else:
                self.select_default_tile()
            if self.current_tile is not None:
                self.current_tile.send_event(TileEvent.USERBTN, 0, 0, 0)

        if self.power is not None and self.power.is_usb_plugged(False) and not self.usb_plugged:
            self.usb_plugged = True
            self.wakeup()
        else:
            self.usb_plugged = False

        self.display.blank()
        if self.state is UIState.IDLE:
            if self.current_tile is not None:
                self.current_tile.draw(self.display)
            if self.modal is not None:
                self.modal.draw(self.display)
        else:
            self._animate()
        self.display.commit()


__all__ = [
    "InactivityTimer",
    "PowerManager",
    "ScreenMode",
    "TileType",
    "UI",
    "UIState",
]
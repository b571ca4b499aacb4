"""Turning raw touch-panel reports into presses, releases, taps and swipes."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from math import sqrt
from typing import Callable

from wristui.events import WidgetEvent


class TouchEventType(IntEnum):
    """Gesture events; the values match the corresponding widget events."""

    PRESS = WidgetEvent.PRESS
    RELEASE = WidgetEvent.RELEASE
    TAP = WidgetEvent.TAP
    SWIPE_LEFT = WidgetEvent.SWIPE_LEFT
    SWIPE_RIGHT = WidgetEvent.SWIPE_RIGHT
    SWIPE_UP = WidgetEvent.SWIPE_UP
    SWIPE_DOWN = WidgetEvent.SWIPE_DOWN

    @property
    def widget_event(self) -> WidgetEvent:
        return WidgetEvent(self.value)


class RawTouchKind(IntEnum):
    """Kind of contact reported by the touch controller."""

    PRESS = 0
    RELEASE = 1
    CONTACT = 2
    NONE = 3


@dataclass(frozen=True)
class TouchEvent:
    type: TouchEventType
    x: int
    y: int
    velocity: float = 0.0


class _State(Enum):
    CLEAR = "clear"
    PRESS = "press"


def _millis() -> int:
    return int(time.monotonic() * 1000)


class GestureRecognizer:
    """State machine that recognises gestures and queues the resulting events."""

    def __init__(
        self,
        max_x: int = 239,
        max_y: int = 239,
        tap_max_time: int = 500,
        tap_max_dist: float = 10.0,
        swipe_min_velocity: float = 30.0,
        clock: Callable[[], int] | None = None,
        queue_size: int = 10,
    ):
        self.max_x = max_x
        self.max_y = max_y
        self.tap_max_time = tap_max_time
        self.tap_max_dist = tap_max_dist
        self.swipe_min_velocity = swipe_min_velocity
        self.clock = clock if clock is not None else _millis
        self.queue_size = queue_size
        self.inverted = False
        self._queue: deque[TouchEvent] = deque()
        self._state = _State.CLEAR
        self._first = (0, 0)
        self._last = (0, 0)
        self._distance = 0.0
        self._start_ms = 0
        self._swipe_sent = False

    def _report(self, kind: TouchEventType, x: int, y: int, velocity: float = 0.0) -> None:
        if self.inverted:
            x = self.max_x - x
            y = self.max_y - y
        if len(self._queue) < self.queue_size:
            self._queue.append(TouchEvent(kind, x, y, velocity))

    def _swipe_direction(self, dx: int, dy: int) -> TouchEventType | None:
        if abs(dx) > abs(dy):
            forward = TouchEventType.SWIPE_RIGHT if dx > 0 else TouchEventType.SWIPE_LEFT
        elif abs(dy) > abs(dx):
            forward = TouchEventType.SWIPE_DOWN if dy > 0 else TouchEventType.SWIPE_UP
        else:
            return None
        if not self.inverted:
            return forward
        return {
            TouchEventType.SWIPE_RIGHT: TouchEventType.SWIPE_LEFT,
            TouchEventType.SWIPE_LEFT: TouchEventType.SWIPE_RIGHT,
            TouchEventType.SWIPE_DOWN: TouchEventType.SWIPE_UP,
            TouchEventType.SWIPE_UP: TouchEventType.SWIPE_DOWN,
        }[forward]

    def process(self, kind: RawTouchKind, x: int, y: int) -> None:
        """Feed one report from the touch controller."""
        if self._state is _State.CLEAR:
            if kind in (RawTouchKind.PRESS, RawTouchKind.CONTACT):
                self._first = (x, y)
                self._start_ms = self.clock()
                self._state = _State.PRESS
                self._report(TouchEventType.PRESS, x, y)
            return

        if kind is RawTouchKind.RELEASE:
            self._report(TouchEventType.RELEASE, *self._last)
            elapsed = self.clock() - self._start_ms
            if elapsed < self.tap_max_time and self._distance < self.tap_max_dist:
                self._report(TouchEventType.TAP, *self._first)
            self._swipe_sent = False
            self._state = _State.CLEAR
            return

        self._last = (x, y)
        elapsed = self.clock() - self._start_ms
        dx = x - self._first[0]
        dy = y - self._first[1]
        self._distance = sqrt(dx * dx + dy * dy)
        velocity = (self._distance * 100) / elapsed if elapsed > 0 else 0.0

        if velocity >= self.swipe_min_velocity and not self._swipe_sent:
            direction = self._swipe_direction(dx, dy)
            if direction is not None:
                self._report(direction, *self._first, velocity)
                self._swipe_sent = True

        self._report(TouchEventType.PRESS, x, y)

    def get_event(self) -> TouchEvent | None:
        """Return the oldest queued event, or None if there is none."""
        return self._queue.popleft() if self._queue else None
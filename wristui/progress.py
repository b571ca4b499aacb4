"""A horizontal progress bar."""

from __future__ import annotations

from wristui.events import rgb
from wristui.widget import Widget, WidgetRegistry

PROGRESS_MIN_DEFAULT = 0
PROGRESS_MAX_DEFAULT = 100
PROGRESS_VALUE_DEFAULT = 0
PROGRESS_STYLE_BORDER = rgb(0xF, 0xF, 0xF)
PROGRESS_STYLE_BG = rgb(0x0, 0x0, 0x0)
PROGRESS_STYLE_BAR = rgb(0xE, 0xE, 0xE)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Progress(Widget):
    """A bar filled in proportion to its value within [min_value, max_value]."""

    def __init__(self, registry: WidgetRegistry, tile, x: int, y: int, width: int, height: int):
        super().__init__(registry, tile, x, y, width, height)
        self.min_value = PROGRESS_MIN_DEFAULT
        self.max_value = PROGRESS_MAX_DEFAULT
        self._value = PROGRESS_VALUE_DEFAULT

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        """Set the value; one outside the range falls back to the minimum."""
        if self.min_value <= value <= self.max_value:
            self._value = value
        else:
            self._value = self.min_value

    def configure(self, min_value: int, max_value: int, value: int) -> None:
        """Set the range (swapping bounds given in the wrong order) and the value."""
        if max_value < min_value:
            min_value, max_value = max_value, min_value
        self.min_value = min_value
        self.max_value = max_value
        self.value = value

    def render(self, display) -> None:
        width, height = self.box.width, self.box.height
        self._border(display, PROGRESS_STYLE_BORDER)
        self.fill_region(display, 1, 1, width - 2, height - 2, PROGRESS_STYLE_BG)
        span = self.max_value - self.min_value
        bar = _cdiv((self._value - self.min_value) * (width - 4), span) if span else 0
        self.fill_region(display, 2, 2, bar, height - 4, PROGRESS_STYLE_BAR)
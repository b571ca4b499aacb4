"""In-memory 12-bit framebuffer and the screen that presents it."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 240
FONT_HEIGHT = 16


@dataclass(frozen=True)
class TextRun:
    """A piece of text drawn on the framebuffer."""

    x: int
    y: int
    text: str
    color: int
    scale: int


class Framebuffer:
    """A back buffer with a clipping window, plus a committed front buffer."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT, char_width: int = 8):
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        if char_width <= 0:
            raise ValueError("character width must be positive")
        self.width = width
        self.height = height
        self.char_width = char_width
        self._back = [[0] * width for _ in range(height)]
        self.front = [[0] * width for _ in range(height)]
        self.text_runs: list[TextRun] = []
        self.committed_text: list[TextRun] = []
        self.commit_count = 0
        self._window = (0, 0, width - 1, height - 1)

    def set_drawing_window(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Restrict drawing to the inclusive rectangle (x0, y0)-(x1, y1)."""
        self._window = (x0, y0, x1, y1)

    def get_drawing_window(self) -> tuple[int, int, int, int]:
        return self._window

    def _clip_x(self) -> tuple[int, int]:
        x0, _, x1, _ = self._window
        return max(x0, 0), min(x1, self.width - 1)

    def _clip_y(self) -> tuple[int, int]:
        _, y0, _, y1 = self._window
        return max(y0, 0), min(y1, self.height - 1)

    def _visible(self, x: int, y: int) -> bool:
        lo_x, hi_x = self._clip_x()
        lo_y, hi_y = self._clip_y()
        return lo_x <= x <= hi_x and lo_y <= y <= hi_y

    def set_pixel(self, x: int, y: int, color: int) -> None:
        if self._visible(x, y):
            self._back[y][x] = color

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside framebuffer")
        return self._back[y][x]

    def fill_region(self, x: int, y: int, width: int, height: int, color: int) -> None:
        lo_x, hi_x = self._clip_x()
        lo_y, hi_y = self._clip_y()
        start_x, end_x = max(x, lo_x), min(x + width - 1, hi_x)
        start_y, end_y = max(y, lo_y), min(y + height - 1, hi_y)
        if start_x > end_x:
            return
        for row in self._back[start_y:end_y + 1] if start_y <= end_y else ():
            row[start_x:end_x + 1] = [color] * (end_x - start_x + 1)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        step_x = 1 if x0 < x1 else -1
        step_y = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.set_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            doubled = 2 * err
            if doubled >= dy:
                err += dy
                x0 += step_x
            if doubled <= dx:
                err += dx
                y0 += step_y

    def draw_circle(self, x: int, y: int, r: int, color: int) -> None:
        if r < 0:
            raise ValueError("radius must not be negative")
        cx, cy = r, 0
        err = 1 - r
        while cx >= cy:
            for px, py in (
                (cx, cy), (cy, cx), (-cy, cx), (-cx, cy),
                (-cx, -cy), (-cy, -cx), (cy, -cx), (cx, -cy),
            ):
                self.set_pixel(x + px, y + py, color)
            cy += 1
            if err < 0:
                err += 2 * cy + 1
            else:
                cx -= 1
                err += 2 * (cy - cx) + 1

    def draw_disc(self, x: int, y: int, r: int, color: int) -> None:
        if r < 0:
            raise ValueError("radius must not be negative")
        for dy in range(-r, r + 1):
            half = isqrt(r * r - dy * dy)
            self.fill_region(x - half, y + dy, 2 * half + 1, 1, color)

    def copy_line(self, x: int, y: int, pixels) -> None:
        """Copy a run of pixel values to row y starting at column x."""
        for offset, color in enumerate(pixels):
            self.set_pixel(x + offset, y, color)

    def text_width(self, text: str, scale: int = 1) -> int:
        if scale < 1:
            raise ValueError("text scale must be at least 1")
        return len(text) * self.char_width * scale

    def draw_text(self, x: int, y: int, text: str, color: int, scale: int = 1) -> int:
        """Record a text run and return its width in pixels."""
        width = self.text_width(text, scale)
        self.text_runs.append(TextRun(x, y, text, color, scale))
        return width

    def blank(self) -> None:
        for row in self._back:
            row[:] = [0] * self.width
        self.text_runs.clear()

    def commit(self) -> None:
        """Present the back buffer on the front buffer."""
        self.front = [list(row) for row in self._back]
        self.committed_text = list(self.text_runs)
        self.commit_count += 1


class Screen:
    """A display panel with a backlight, driven by a framebuffer."""

    def __init__(self, framebuffer: Framebuffer | None = None, default_backlight: int = 255):
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.default_backlight = default_backlight
        self.inverted = False
        self.backlight = 0
        self.framebuffer.blank()
        self.framebuffer.commit()
        self.backlight = default_backlight

    def wake(self) -> None:
        """Restore the default backlight level."""
        self.backlight = self.default_backlight

    def update(self) -> None:
        self.framebuffer.commit()
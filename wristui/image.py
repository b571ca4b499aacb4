"""Raw bitmap images and blitting them onto a framebuffer."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_HEADER = struct.Struct("<HHBB")
_WHITE = 0xFFF


class ImageDepth(IntEnum):
    BPP1 = 0
    BPP12 = 1


class ImageType(IntEnum):
    RAW = 0
    RLE = 1


@dataclass(frozen=True)
class Image:
    """A bitmap: a 6-byte header followed by pixel data."""

    width: int
    height: int
    depth: ImageDepth
    image_type: ImageType
    pixels: bytes

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 12-bit colour of the pixel at (x, y)."""
        if self.image_type is not ImageType.RAW:
            raise ValueError(f"cannot read pixels of a {self.image_type.name} image")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside image")
        index = y * self.width + x
        if self.depth is ImageDepth.BPP1:
            byte = index // 8
            if byte >= len(self.pixels):
                raise IndexError("image data truncated")
            return _WHITE if self.pixels[byte] & (1 << (index % 8)) else 0
        chunk = self.pixels[index * 2:index * 2 + 2]
        if len(chunk) < 2:
            raise IndexError("image data truncated")
        return int.from_bytes(chunk, "little") & _WHITE


def load_image(data: bytes) -> Image:
    """Parse an image from its binary form."""
    if len(data) < _HEADER.size:
        raise ValueError("image data shorter than its header")
    width, height, depth, image_type = _HEADER.unpack_from(data)
    return Image(
        width=width,
        height=height,
        depth=ImageDepth(depth),
        image_type=ImageType(image_type),
        pixels=bytes(data[_HEADER.size:]),
    )


def bitblt(display, image: Image, source_x: int, source_y: int, width: int, height: int,
           dest_x: int, dest_y: int) -> None:
    """Copy a region of a raw image onto the display; other image types are ignored."""
    if image.image_type is not ImageType.RAW:
        return
    if image.depth is ImageDepth.BPP1:
        for x in range(width):
            for y in range(height):
                display.set_pixel(dest_x + x, dest_y + y, image.get_pixel(source_x + x, source_y + y))
        return

    if dest_y < 0:
        source_y -= dest_y
        height += dest_y
        dest_y = 0
    if height + dest_y >= display.height:
        height = display.height - dest_y
    for y in range(height):
        row = [image.get_pixel(source_x + x, source_y + y) for x in range(width)]
        display.copy_line(dest_x, dest_y + y, row)
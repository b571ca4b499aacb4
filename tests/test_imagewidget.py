import struct

from wristui.display import Framebuffer
from wristui.image import ImageDepth, ImageType, load_image
from wristui.imagewidget import ImageWidget
from wristui.widget import WidgetRegistry


class _Tile:
    def __init__(self, offset_x=0, offset_y=0):
        self.offset_x = offset_x
        self.offset_y = offset_y


def _image(width, height, colors):
    header = struct.pack("<HHBB", width, height, ImageDepth.BPP12, ImageType.RAW)
    body = b"".join(c.to_bytes(2, "little") for c in colors)
    return load_image(header + body)


def test_pixels_are_copied_at_widget_position():
    image = _image(2, 2, [0x111, 0x222, 0x333, 0x444])
    fb = Framebuffer()
    widget = ImageWidget(WidgetRegistry(), None, 5, 6, 2, 2, image)
    widget.draw(fb)
    for y in range(2):
        for x in range(2):
            assert fb.get_pixel(5 + x, 6 + y) == image.get_pixel(x, y)


def test_tile_offset_moves_image():
    image = _image(2, 1, [0x0F0, 0xF00])
    fb = Framebuffer()
    widget = ImageWidget(WidgetRegistry(), _Tile(10, 20), 1, 1, 2, 1, image)
    widget.draw(fb)
    assert fb.get_pixel(11, 21) == 0x0F0
    assert fb.get_pixel(12, 21) == 0xF00


def test_surroundings_untouched():
    image = _image(1, 1, [0xFFF])
    fb = Framebuffer()
    widget = ImageWidget(WidgetRegistry(), None, 3, 3, 1, 1, image)
    widget.draw(fb)
    assert fb.get_pixel(3, 3) == 0xFFF
    assert fb.get_pixel(4, 3) == 0
    assert fb.get_pixel(3, 4) == 0


def test_rle_image_is_ignored():
    header = struct.pack("<HHBB", 1, 1, ImageDepth.BPP12, ImageType.RLE)
    image = load_image(header + b"\xff\x0f")
    fb = Framebuffer()
    ImageWidget(WidgetRegistry(), None, 0, 0, 1, 1, image).draw(fb)
    assert fb.get_pixel(0, 0) == 0
import struct

import pytest

from wristui.display import Framebuffer
from wristui.image import ImageDepth, ImageType, bitblt, load_image

WHITE = 0xFFF


def encode(width, height, depth, image_type, payload):
    return struct.pack("<HHBB", width, height, depth, image_type) + bytes(payload)


def image_12bpp(width, height, values, image_type=ImageType.RAW):
    payload = b"".join(v.to_bytes(2, "little") for v in values)
    return load_image(encode(width, height, ImageDepth.BPP12, image_type, payload))


def test_load_image_header():
    image = load_image(encode(3, 2, ImageDepth.BPP12, ImageType.RAW, bytes(12)))
    assert (image.width, image.height) == (3, 2)
    assert image.depth is ImageDepth.BPP12
    assert image.image_type is ImageType.RAW


def test_load_image_too_short():
    with pytest.raises(ValueError):
        load_image(b"\x01\x00")


def test_load_image_bad_depth():
    with pytest.raises(ValueError):
        load_image(encode(1, 1, 7, ImageType.RAW, b"\x00"))


def test_1bpp_pixels():
    # 4x2 image, bit index = y * width + x
    bits = (1 << 0) | (1 << 5)
    image = load_image(encode(4, 2, ImageDepth.BPP1, ImageType.RAW, [bits]))
    assert image.get_pixel(0, 0) == WHITE
    assert image.get_pixel(1, 1) == WHITE
    assert image.get_pixel(1, 0) != WHITE


def test_12bpp_round_trip():
    values = list(range(1, 7))
    image = image_12bpp(3, 2, values)
    assert [image.get_pixel(x, y) for y in range(2) for x in range(3)] == values


def test_12bpp_masks_high_bits():
    image = image_12bpp(1, 1, [0xF123])
    assert image.get_pixel(0, 0) == 0xF123 & WHITE


def test_get_pixel_out_of_bounds():
    image = image_12bpp(2, 2, [1, 2, 3, 4])
    with pytest.raises(IndexError):
        image.get_pixel(2, 0)


def test_rle_pixels_unsupported():
    image = image_12bpp(1, 1, [5], ImageType.RLE)
    with pytest.raises(ValueError):
        image.get_pixel(0, 0)


def test_bitblt_12bpp_copies_region():
    fb = Framebuffer(10, 10, 8)
    image = image_12bpp(3, 3, list(range(1, 10)))
    bitblt(fb, image, 1, 1, 2, 2, 4, 5)
    assert fb.get_pixel(4, 5) == image.get_pixel(1, 1)
    assert fb.get_pixel(5, 6) == image.get_pixel(2, 2)


def test_bitblt_12bpp_negative_dest_y_shifts_source():
    fb = Framebuffer(10, 10, 8)
    image = image_12bpp(2, 3, list(range(1, 7)))
    bitblt(fb, image, 0, 0, 2, 3, 0, -1)
    assert fb.get_pixel(0, 0) == image.get_pixel(0, 1)
    assert fb.get_pixel(1, 1) == image.get_pixel(1, 2)


def test_bitblt_12bpp_clips_bottom():
    fb = Framebuffer(4, 4, 8)
    image = image_12bpp(1, 4, [7, 8, 9, 10])
    bitblt(fb, image, 0, 0, 1, 4, 0, 2)
    assert [fb.get_pixel(0, y) for y in (2, 3)] == [image.get_pixel(0, 0), image.get_pixel(0, 1)]


def test_bitblt_1bpp():
    fb = Framebuffer(8, 8, 8)
    image = load_image(encode(2, 2, ImageDepth.BPP1, ImageType.RAW, [1 << 3]))
    bitblt(fb, image, 0, 0, 2, 2, 3, 3)
    assert fb.get_pixel(4, 4) == WHITE
    assert fb.get_pixel(3, 3) != WHITE


def test_bitblt_ignores_rle():
    fb = Framebuffer(4, 4, 8)
    before = [fb.get_pixel(x, y) for y in range(4) for x in range(4)]
    image = image_12bpp(2, 2, [1, 2, 3, 4], ImageType.RLE)
    bitblt(fb, image, 0, 0, 2, 2, 0, 0)
    assert [fb.get_pixel(x, y) for y in range(4) for x in range(4)] == before


def test_image_is_frozen():
    image = image_12bpp(1, 1, [1])
    with pytest.raises(AttributeError):
        image.width = 2
    assert image.width == 1
    assert image.get_pixel(0, 0) == 1
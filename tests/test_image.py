import pytest

from cubscene.image import (
    BIG_ENDIAN,
    LITTLE_ENDIAN,
    good_color,
    new_image,
    rgb_shifts,
)

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = new_image(IM1_SX, IM1_SY, LITTLE_ENDIAN)
    assert img.bpp == 32
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == IM1_SX * 4 * IM1_SY


@pytest.mark.parametrize("size,kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_color_map_round_trip(size, kind):
    w, h = size
    img = new_image(w, h, LITTLE_ENDIAN)
    for y in range(h):
        for x in range(w):
            img.put_pixel(x, y, good_color(_color_map(x, y, w, h, kind), 24, (16, 8, 8, 8, 0, 8)))
    flat = img.pixels()
    assert len(flat) == w * h
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            expected = _color_map(x, y, w, h, kind)
            assert img.get_pixel(x, y) == expected
            assert flat[y * w + x] == expected


def test_fresh_image_is_black():
    img = new_image(3, 2)
    assert img.pixels() == [0] * 6


def test_little_endian_bytes():
    img = new_image(2, 1, LITTLE_ENDIAN)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_bytes():
    img = new_image(2, 1, BIG_ENDIAN)
    img.put_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == bytes([0x11, 0x22, 0x33, 0x44])
    assert img.get_pixel(1, 0) == 0x11223344


def test_negative_color_is_masked():
    img = new_image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds(x, y):
    img = new_image(4, 3)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-2, 3)])
def test_bad_size(w, h):
    with pytest.raises(ValueError):
        new_image(w, h)


def test_bad_endian():
    with pytest.raises(ValueError):
        new_image(2, 2, 7)


def test_rgb_shifts_truecolor():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_zero_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


def test_good_color_deep_visual_is_identity():
    assert good_color(0x123456, 24, (16, 8, 8, 8, 0, 8)) == 0x123456
    assert good_color(0xFF99FF, 32, (16, 8, 8, 8, 0, 8)) == 0xFF99FF


def test_good_color_16_bit():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x000000, 16, shifts) == 0
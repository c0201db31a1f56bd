import pytest

from solong.image import Image

IM1_SIZE = 42
IM3_SIZE = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _filled(size, kind):
    image = Image(size, size)
    for y in range(size):
        for x in range(size):
            image.put_pixel(x, y, _color_map(x, y, size, size, kind))
    return image


def test_new_image_is_zeroed():
    image = Image(IM1_SIZE, IM1_SIZE)
    assert all(value == 0 for value in image.pixels)
    assert len(image.pixels) == IM1_SIZE * IM1_SIZE


def test_line_length_and_depth():
    image = Image(IM3_SIZE, IM3_SIZE)
    assert image.bits_per_pixel == 32
    assert image.line_length == IM3_SIZE * 4


@pytest.mark.parametrize("size,kind", [(IM1_SIZE, 1), (IM3_SIZE, 1), (IM3_SIZE, 2)])
def test_color_map_round_trip(size, kind):
    image = _filled(size, kind)
    for y in range(0, size, 7):
        for x in range(0, size, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, size, size, kind)


def test_put_pixel_keeps_unsigned_32_bits():
    image = Image(2, 2)
    image.put_pixel(1, 1, -1)
    assert image.get_pixel(1, 1) == 0xFFFFFFFF
    assert image.get_pixel(0, 0) == 0


def test_to_bytes_is_little_endian():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0x11223344)
    data = image.to_bytes()
    assert data[:4] == bytes([0x44, 0x33, 0x22, 0x11])
    assert len(data) == 2 * 4


def test_blit_places_image_at_offset():
    small = _filled(IM1_SIZE, 1)
    big = Image(IM3_SIZE, IM3_SIZE)
    big.blit(small, 20, 20)
    for y in range(IM1_SIZE):
        for x in range(IM1_SIZE):
            assert big.get_pixel(20 + x, 20 + y) == small.get_pixel(x, y)
    assert big.get_pixel(19, 20) == 0
    assert big.get_pixel(20 + IM1_SIZE, 20) == 0


def test_blit_clips_to_destination():
    source = Image(3, 3)
    for y in range(3):
        for x in range(3):
            source.put_pixel(x, y, 10 * y + x + 1)
    target = Image(2, 2)
    target.blit(source, -1, -1)
    assert target.get_pixel(0, 0) == source.get_pixel(1, 1)
    assert target.get_pixel(1, 1) == source.get_pixel(2, 2)


def test_blit_entirely_outside_changes_nothing():
    source = Image(2, 2)
    source.put_pixel(0, 0, 5)
    target = Image(2, 2)
    target.blit(source, 10, 10)
    assert all(value == 0 for value in target.pixels)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (IM1_SIZE, 0), (0, IM1_SIZE)])
def test_out_of_range_pixels_raise(x, y):
    image = Image(IM1_SIZE, IM1_SIZE)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-2, 3)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)
import pytest

from tilequest.image import Image, get_color_value


def test_new_image_is_blank():
    image = Image(3, 2)
    assert all(value == 0 for row in image.rows() for value in row)


def test_put_and_get_round_trip():
    image = Image(4, 4)
    image.put_pixel(2, 3, 0x00FF8800)
    assert image.get_pixel(2, 3) == 0x00FF8800
    assert image.get_pixel(3, 2) == 0


def test_negative_color_is_stored_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_bytes_are_little_endian():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0x11223344)
    assert image.to_bytes()[:4] == b"\x44\x33\x22\x11"


def test_byte_length_and_size_line():
    image = Image(5, 3)
    assert image.size_line == 5 * image.bytes_per_pixel
    assert len(image.to_bytes()) == image.size_line * image.height
    assert image.bits_per_pixel == 8 * image.bytes_per_pixel


def test_rows_shape_and_position():
    image = Image(3, 2)
    image.put_pixel(1, 1, 0x123456)
    rows = list(image.rows())
    assert len(rows) == image.height
    assert all(len(row) == image.width for row in rows)
    assert rows[1][1] == 0x123456
    assert rows[0] == [0, 0, 0]


def test_to_bytes_is_a_copy():
    image = Image(1, 1)
    snapshot = image.to_bytes()
    image.put_pixel(0, 0, 0xABCDEF)
    assert image.to_bytes() != snapshot
    assert snapshot == bytes(4)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_range_pixel_raises(x, y):
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-3, 4)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_get_color_value_keeps_rgb():
    assert get_color_value(0x00FF00) == 0x00FF00


def test_get_color_value_wraps_negative():
    assert get_color_value(-1) == 0xFFFFFFFF


def test_get_color_value_is_idempotent():
    for color in (0, -5, 0x7FFFFFFF, 0xFF000000):
        once = get_color_value(color)
        assert get_color_value(once) == once
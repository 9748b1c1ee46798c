from __future__ import annotations

import numpy as np
import pytest

from PIL import Image as PILImage

from bmp_encoder import Image


def test_accessors():
    image = Image(width=2, height=-3, buffer=bytes(18))
    assert image.bytes_per_pixel() == 3
    assert image.bits_per_pixel() == 24
    assert image.rows == 3
    assert image.bytes_per_line == 6
    assert image.top_down


def test_buffer_length_must_match_dimensions():
    with pytest.raises(ValueError):
        Image(width=2, height=2, buffer=bytes(11))


def test_negative_width_is_rejected():
    with pytest.raises(ValueError):
        Image(width=-1, height=1, buffer=b"")


def test_buffer_is_copied():
    source = bytearray(3)
    image = Image(width=1, height=1, buffer=source)
    source[0] = 99
    assert image.buffer == bytes(3)


def test_from_rows_expands_grayscale_and_masks_values():
    image = Image.from_rows([[0, 256 + 7], [(1, 2, 3), (300, 0, 0)]])
    assert image.width == 2
    assert image.height == 2
    assert image.buffer == bytes([0, 0, 0, 7, 7, 7, 1, 2, 3, 44, 0, 0])


@pytest.mark.parametrize(
    "rows",
    [[], [[]], [[1, 2], [3]]],
)
def test_from_rows_rejects_bad_shapes(rows):
    with pytest.raises(ValueError):
        Image.from_rows(rows)


def test_from_array_stores_rows_in_array_order():
    array = np.arange(2 * 5 * 3, dtype=np.uint8).reshape(2, 5, 3)
    image = Image.from_array(array, top_down=True)
    assert image.height == -2
    assert image.top_down
    assert image.buffer == array.tobytes()


@pytest.mark.parametrize(
    "values",
    [[[[0.9, 254.99, 1.5]]], [[[np.nan, 1.7, 2.0]]]],
)
def test_from_array_rejects_float_pixels(values):
    with pytest.raises(ValueError):
        Image.from_array(np.array(values))


def test_from_array_accepts_bool_masks():
    image = Image.from_array(np.array([[True, False]]))
    assert image.buffer == bytes([1, 1, 1, 0, 0, 0])


def test_from_array_grayscale():
    image = Image.from_array(np.array([[5, 6]], dtype=np.uint8))
    assert image.buffer == bytes([5, 5, 5, 6, 6, 6])


def test_from_array_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        Image.from_array(np.full((1, 1, 3), 256))


def test_from_array_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((2, 2, 4), dtype=np.uint8))


def test_from_pil_keeps_visual_orientation():
    picture = PILImage.new("RGB", (1, 2))
    picture.putpixel((0, 0), (255, 0, 0))
    picture.putpixel((0, 1), (0, 0, 255))

    top_down = Image.from_pil(picture)
    assert top_down.height == -2
    assert top_down.buffer == bytes([255, 0, 0, 0, 0, 255])

    bottom_up = Image.from_pil(picture, top_down=False)
    assert bottom_up.height == 2
    assert bottom_up.buffer == bytes([0, 0, 255, 255, 0, 0])


def test_from_pil_converts_mode():
    picture = PILImage.new("L", (3, 1), color=9)
    image = Image.from_pil(picture)
    assert image.buffer == bytes([9] * 9)

import io

import numpy as np
import pytest
from PIL import Image

from random_image.encoder import encode_png, to_image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_to_image_is_rgba():
    pixels = np.zeros((3, 5, 4), dtype=np.uint8)
    image = to_image(pixels)
    assert image.mode == "RGBA"
    assert image.size == (5, 3)


@pytest.mark.parametrize(
    "pixels",
    [
        np.zeros((3, 5, 3), dtype=np.uint8),
        np.zeros((3, 5), dtype=np.uint8),
        np.zeros((3, 5, 4), dtype=np.float64),
    ],
)
def test_to_image_rejects_other_buffers(pixels):
    with pytest.raises(ValueError):
        to_image(pixels)


def test_encode_png_is_lossless():
    pixels = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
    target = io.BytesIO()
    encode_png(pixels, target)

    data = target.getvalue()
    assert data.startswith(PNG_SIGNATURE)
    with Image.open(io.BytesIO(data)) as image:
        np.testing.assert_array_equal(np.asarray(image), pixels)


def test_encode_png_propagates_sink_errors(tmp_path):
    pixels = np.zeros((2, 2, 4), dtype=np.uint8)
    with pytest.raises(OSError):
        encode_png(pixels, str(tmp_path / "missing" / "out.png"))

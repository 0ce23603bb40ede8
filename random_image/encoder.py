# encoder.py
# PNG serialization of an RGBA pixel buffer
# pip install pillow numpy

import numpy as np
from PIL import Image


def to_image(pixels):
    """Wrap a (height, width, 4) uint8 buffer as an RGBA Pillow image, ValueError otherwise."""
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"Expected a (height, width, 4) uint8 buffer, got {pixels.shape} {pixels.dtype}")
    return Image.fromarray(pixels)


def encode_png(pixels, target):
    """Write the buffer as an 8-bit RGBA PNG to a path or writable binary file."""
    image = to_image(pixels)
    image.save(target, format="PNG")

# image_gen.py
# Colored noise image: one OpenSimplex field per RGBA channel
# pip install numpy pillow opensimplex

import numpy as np

from random_image.encoder import encode_png
from random_image.simplex_noise_gen import NoiseField, Simplex

CHANNELS = ("red", "green", "blue", "alpha")
CHANNEL_MAX = 255

# alpha keeps 64 levels of randomness on top of a fixed floor, so it stays in [191, 255]
ALPHA_FLOOR = 191
ALPHA_SPAN = 64


def make_roughness(width, rng):
    """
    Coordinate multiplier for the noise fields.

    Inversely proportional to the width and scaled by a random factor
    in [1, 3), so the grain varies between runs but stays in proportion
    to the resolution. Smaller = smoother, larger = rougher.
    """
    return (1 + rng.random() * 2) / width


def make_noises(rng) -> dict[str, NoiseField]:
    """One independently seeded noise field per channel, in RGBA order."""
    return {name: Simplex.from_rng(rng) for name in CHANNELS}


def channel_bytes(values):
    """Map noise values to color bytes: |n| * 255, truncated and clamped to 255."""
    scaled = np.abs(values) * CHANNEL_MAX
    return np.minimum(scaled, CHANNEL_MAX).astype(np.uint8)


def alpha_bytes(values):
    """Map noise values to alpha bytes in [191, 255]."""
    scaled = np.minimum(np.abs(values) * ALPHA_SPAN, ALPHA_SPAN).astype(np.uint8)
    return scaled + np.uint8(ALPHA_FLOOR)


def synthesize(width, height, rng):
    """
    Fill a (height, width, 4) uint8 RGBA buffer from four independent noise fields.

    Args:
        width: Width of the image in pixels, > 0
        height: Height of the image in pixels, > 0
        rng: numpy Generator used for the roughness and the channel seeds

    Returns:
        numpy array of shape (height, width, 4), dtype uint8
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be > 0, got {width}x{height}")

    roughness = make_roughness(width, rng)
    noises = make_noises(rng)

    xs = np.arange(width) * roughness
    ys = np.arange(height) * roughness

    pixels = np.empty((height, width, 4), dtype=np.uint8)
    for i, name in enumerate(CHANNELS):
        values = noises[name].grid(xs, ys)
        if name == "alpha":
            pixels[:, :, i] = alpha_bytes(values)
        else:
            pixels[:, :, i] = channel_bytes(values)

    return pixels


def generate_image(width, height, target, rng):
    pixels = synthesize(width, height, rng)
    encode_png(pixels, target)
    return pixels

"""
Image file utilities for PyColorNoise.

The generators stop at an in-memory uint8 buffer; these helpers write it to
disk and read it back using Pillow.

Dependencies:
- numpy: Array checks and conversion
- pillow: PNG encoding and decoding

Author: B.G.
"""

import numpy as np
from PIL import Image


def save_png(buffer, output_path):
    """
    Save a pixel buffer as an 8-bit grayscale PNG.

    Args:
        buffer: uint8 array of shape (height, width)
        output_path: Destination path (str or Path)

    Raises:
        ValueError: If buffer is not a 2D uint8 array
        OSError: If the file cannot be written

    Example:
        import pycolornoise as pcn

        mask = pcn.blue_noise(128, 128)
        pcn.misc.save_png(mask, "blue_128.png")
    """
    pixels = np.asarray(buffer)
    if pixels.ndim != 2:
        raise ValueError(f"Pixel buffer must be 2D, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Pixel buffer must be uint8, got {pixels.dtype}")

    # 2D uint8 maps to Pillow mode "L"
    img = Image.fromarray(np.ascontiguousarray(pixels))
    try:
        img.save(output_path, format="PNG")
    except Exception as e:
        raise OSError(f"Failed to save PNG to '{output_path}': {e}")


def load_png(input_path):
    """
    Load a PNG as a grayscale uint8 array of shape (height, width).

    Color images are converted to luminance.
    """
    with Image.open(input_path) as img:
        if img.mode != "L":
            img = img.convert("L")
        return np.array(img, dtype=np.uint8)

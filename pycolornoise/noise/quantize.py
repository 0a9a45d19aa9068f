"""
Conversion of normalized float fields to 8-bit grayscale pixel buffers.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def quantize(field: np.ndarray) -> np.ndarray:
    """
    Map a float field in [0, 1) to 8-bit pixels.

    Each pixel is round(value * 255), rounding halves up. Out-of-range values
    are clamped to [0, 255] and NaN becomes 0, so arbitrary input never fails.

    Args:
        field: Float field of shape (height, width)

    Returns:
        numpy.ndarray: Read-only uint8 array of shape (height, width)
    """
    scaled = np.floor(np.asarray(field, dtype=np.float64) * cte.PIXEL_MAX + 0.5)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=cte.PIXEL_MAX, neginf=0.0)

    pixels = np.clip(scaled, 0, cte.PIXEL_MAX).astype(cte.PIXEL_TYPE)
    pixels.setflags(write=False)
    return pixels

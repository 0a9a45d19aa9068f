"""
Gaussian blur primitive used by the shaping strategies.

Separable linear blur with edge replication, backed by
scipy.ndimage.gaussian_filter. Source and target buffers are kept apart.

Author: B.G.
"""

import numpy as np
from scipy.ndimage import gaussian_filter

from .. import constants as cte


def gaussian_blur(source: np.ndarray, sigma: float, out: np.ndarray | None = None) -> np.ndarray:
    """
    Blur a 2D field with a Gaussian kernel.

    Args:
        source: Field to read, shape (height, width). Not modified.
        sigma: Standard deviation of the kernel in pixels (> 0)
        out: Target array of the same shape (default: newly allocated).
             Must not share memory with ``source``.

    Returns:
        numpy.ndarray: The blurred field (``out`` when given)
    """
    if out is None:
        out = np.empty_like(source, dtype=cte.FLOAT_TYPE)
    elif np.shares_memory(out, source):
        raise ValueError("out must not alias source")

    gaussian_filter(
        source,
        sigma=sigma,
        output=out,
        mode=cte.BLUR_MODE,
        truncate=cte.BLUR_TRUNCATE,
    )
    return out

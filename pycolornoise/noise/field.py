"""
Uniform random field generation for PyColorNoise.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def random_field(width: int, height: int, rng=None) -> np.ndarray:
    """
    Draw a field of independent uniform samples in [0, 1).

    Every shaping strategy starts from this field. The random source is
    injected so tests can supply fixed sequences; any object exposing
    ``random(size, dtype=...)`` like ``numpy.random.Generator`` works.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        rng: Random source (default: fresh ``numpy.random.default_rng()``)

    Returns:
        numpy.ndarray: float32 field of shape (height, width)

    Note:
        Dimensions are expected to be validated by the caller.
    """
    if rng is None:
        rng = np.random.default_rng()

    samples = rng.random((height, width), dtype=cte.FLOAT_TYPE)

    # Mocked sources may hand back plain sequences or float64 arrays
    return np.asarray(samples, dtype=cte.FLOAT_TYPE).reshape(height, width)

"""
Noise generation module for PyColorNoise.

Builds spectrally shaped noise from a uniform random field by iterating
Gaussian blur arithmetic and rank-based histogram normalization.

Noise Types:
- White Noise: independent uniform pixels, flat spectrum
- Red Noise: repeated blurring, low frequencies dominate
- Blue Noise: repeated high-pass (field minus blur), high frequencies dominate
- Green Noise: difference of two blurs, a mid-frequency band dominates
- Purple Noise: field minus that band, mid frequencies removed

Building blocks:
- random_field: uniform [0, 1) float field from an injectable random source
- gaussian_blur: separable Gaussian blur with edge replication
- normalize_histogram: exact rank equalization to {0, 1/N, ..., (N-1)/N}
- shape_field: the shaping loop shared by every color
- quantize: float field to read-only 8-bit pixels

Usage:
    import numpy as np
    import pycolornoise as pcn

    rng = np.random.default_rng(7)

    # Dithering threshold mask
    mask = pcn.noise.blue_noise(128, 128, iterations=5, sigma=1.0, rng=rng)

    # Band-pass stippling pattern, float output
    band = pcn.noise.green_noise(256, 256, low_sigma=1.0, high_sigma=3.0,
                                 return_float=True)

Author: B.G.
"""

from .field import random_field
from .blur import gaussian_blur
from .normalize import normalize_histogram, rank_values
from .quantize import quantize
from .shaping import (
    NOISE_COLORS,
    SINGLE_SIGMA_COLORS,
    BAND_COLORS,
    ShapingParameters,
    shape_field,
)
from .generators import (
    white_noise,
    red_noise,
    blue_noise,
    green_noise,
    purple_noise,
    generate_noise,
)

__all__ = [
    "random_field",
    "gaussian_blur",
    "normalize_histogram", "rank_values",
    "quantize",
    "NOISE_COLORS", "SINGLE_SIGMA_COLORS", "BAND_COLORS",
    "ShapingParameters", "shape_field",
    "white_noise", "red_noise", "blue_noise", "green_noise", "purple_noise",
    "generate_noise",
]

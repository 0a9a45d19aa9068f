"""
PyColorNoise: spectrally shaped noise textures.

Generates white, red, blue, green and purple noise as 8-bit grayscale images
by iterating Gaussian blur arithmetic over a uniform random field and
re-equalizing the histogram after every round.

Submodules:
- noise: random fields, blur, normalization, shaping, quantization, generators
- analysis: power spectrum measurements and plots
- misc: PNG storage helpers
- cli: command line entry points

Usage:
    import pycolornoise as pcn

    dither = pcn.blue_noise(256, 256, iterations=5, sigma=1.0)
    terrain_seed = pcn.red_noise(512, 512, iterations=5, sigma=4.0)

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import errors
from . import noise
from . import analysis
from . import misc

from .noise import (
    NOISE_COLORS,
    white_noise,
    red_noise,
    blue_noise,
    green_noise,
    purple_noise,
    generate_noise,
)

__all__ = [
    "constants",
    "errors",
    "noise",
    "analysis",
    "misc",
    "NOISE_COLORS",
    "white_noise",
    "red_noise",
    "blue_noise",
    "green_noise",
    "purple_noise",
    "generate_noise",
]

"""
Global defaults for PyColorNoise.

Author: B.G.
"""

import numpy as np

# Working precision of noise fields during shaping
FLOAT_TYPE = np.float32

# Output pixel type and its maximum value
PIXEL_TYPE = np.uint8
PIXEL_MAX = 255

# Default texture side length (pixels)
DEFAULT_SIZE = 256

# Number of blur/normalize rounds
DEFAULT_ITERATIONS = 5

# Blur standard deviations (pixels)
DEFAULT_SIGMA = 1.0
DEFAULT_LOW_SIGMA = 1.0
DEFAULT_HIGH_SIGMA = 2.0

# Gaussian blur edge handling (scipy.ndimage mode) and kernel radius in sigmas
BLUR_MODE = "nearest"
BLUR_TRUNCATE = 4.0

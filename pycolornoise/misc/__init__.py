"""
Miscellaneous Utilities for PyColorNoise

Storage helpers that sit outside the generation pipeline.

Available Functions:
- save_png: Write an 8-bit grayscale pixel buffer as PNG
- load_png: Read a grayscale PNG back as a uint8 array

Author: B.G.
"""

from .image_utils import save_png, load_png

# Export public API
__all__ = [
    "save_png",
    "load_png",
]

"""
Spectral shaping of uniform noise fields for PyColorNoise.

All colors share one iteration loop: each round derives a shaped field from
the field entering the round, then rank-normalizes it back into the live
field. Blurred copies live in scratch buffers owned by the loop, the live
field is only written by the normalization at the end of a round.

Per-round transforms:
- white:  no shaping
- red:    blur(field, sigma)                                  (low-pass)
- blue:   field - blur(field, sigma)                          (high-pass)
- green:  blur(field, low) - blur(field, high)                (band-pass)
- purple: field - (blur(field, low) - blur(field, high))      (band-notch)

Author: B.G.
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np

from .. import errors
from .blur import gaussian_blur
from .normalize import normalize_histogram

NOISE_COLORS = ("white", "red", "blue", "green", "purple")

# Colors parameterized by a single sigma vs a (low_sigma, high_sigma) band
SINGLE_SIGMA_COLORS = ("red", "blue")
BAND_COLORS = ("green", "purple")


@dataclass(frozen=True)
class ShapingParameters:
    """
    Parameters of one noise generation call.

    Attributes:
        color: One of NOISE_COLORS
        width: Pixels in x direction (> 0)
        height: Pixels in y direction (> 0)
        iterations: Number of shaping rounds (>= 0, ignored for white)
        sigma: Blur standard deviation for red and blue
        low_sigma: Narrow blur for green and purple
        high_sigma: Wide blur for green and purple
        strict_band: Reject low_sigma >= high_sigma instead of producing the
                     degenerate band the permissive mode allows
    """

    color: str
    width: int
    height: int
    iterations: int = 0
    sigma: float | None = None
    low_sigma: float | None = None
    high_sigma: float | None = None
    strict_band: bool = False

    def validate(self):
        """
        Check every parameter the color uses.

        Raises:
            UnknownNoiseColor: color has no strategy
            InvalidDimensions: width or height is not a positive integer
            InvalidIterations: iterations is negative or not an integer
            InvalidSigma: a used sigma is missing, non-finite or <= 0
            InvalidBandOrdering: strict_band and low_sigma >= high_sigma
        """
        if self.color not in NOISE_COLORS:
            raise errors.UnknownNoiseColor(
                f"Unknown noise color '{self.color}', expected one of {', '.join(NOISE_COLORS)}"
            )

        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise errors.InvalidDimensions(f"{name} must be a positive integer, got {value!r}")

        if self.color == "white":
            return

        if not _is_int(self.iterations) or self.iterations < 0:
            raise errors.InvalidIterations(
                f"iterations must be a non-negative integer, got {self.iterations!r}"
            )

        if self.color in SINGLE_SIGMA_COLORS:
            _check_sigma("sigma", self.sigma)
        elif self.color in BAND_COLORS:
            _check_sigma("low_sigma", self.low_sigma)
            _check_sigma("high_sigma", self.high_sigma)
            if self.strict_band and self.low_sigma >= self.high_sigma:
                raise errors.InvalidBandOrdering(
                    f"low_sigma ({self.low_sigma}) must be smaller than high_sigma ({self.high_sigma})"
                )


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_sigma(name, value):
    if (
        value is None
        or isinstance(value, bool)
        or not isinstance(value, Real)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise errors.InvalidSigma(f"{name} must be a finite number > 0, got {value!r}")


def _red_round(field, scratch, sigma):
    gaussian_blur(field, sigma, out=scratch[0])
    return scratch[0]


def _blue_round(field, scratch, sigma):
    low = gaussian_blur(field, sigma, out=scratch[0])
    np.subtract(field, low, out=low)
    return low


def _band(field, scratch, low_sigma, high_sigma):
    low = gaussian_blur(field, low_sigma, out=scratch[0])
    high = gaussian_blur(field, high_sigma, out=scratch[1])
    np.subtract(low, high, out=low)
    return low


def _purple_round(field, scratch, low_sigma, high_sigma):
    mid = _band(field, scratch, low_sigma, high_sigma)
    np.subtract(field, mid, out=mid)
    return mid


# color -> (round function, number of scratch buffers)
_ROUNDS = {
    "red": (_red_round, 1),
    "blue": (_blue_round, 1),
    "green": (_band, 2),
    "purple": (_purple_round, 2),
}


def shape_field(field: np.ndarray, color: str, iterations: int, sigma=None,
                low_sigma=None, high_sigma=None) -> np.ndarray:
    """
    Shape a uniform noise field in place.

    Runs exactly ``iterations`` rounds of the color's transform, each ending
    with a histogram normalization written back into ``field``. With zero
    iterations, or for white noise, the field is returned untouched and is
    never normalized.

    Args:
        field: float32 field of shape (height, width), modified in place
        color: One of NOISE_COLORS
        iterations: Number of rounds
        sigma: Blur standard deviation (red, blue)
        low_sigma: Narrow blur (green, purple)
        high_sigma: Wide blur (green, purple)

    Returns:
        numpy.ndarray: ``field``

    Raises:
        UnknownNoiseColor: color has no strategy

    Note:
        Parameters are not validated here; see ShapingParameters.validate.
    """
    if color == "white":
        return field
    if color not in _ROUNDS:
        raise errors.UnknownNoiseColor(f"Unknown noise color '{color}'")

    round_fn, n_scratch = _ROUNDS[color]
    sigmas = (sigma,) if color in SINGLE_SIGMA_COLORS else (low_sigma, high_sigma)

    if iterations <= 0:
        return field

    scratch = [np.empty_like(field) for _ in range(n_scratch)]

    for _ in range(iterations):
        shaped = round_fn(field, scratch, *sigmas)
        normalize_histogram(shaped, out=field)

    return field


__all__ = [
    "NOISE_COLORS",
    "SINGLE_SIGMA_COLORS",
    "BAND_COLORS",
    "ShapingParameters",
    "shape_field",
]

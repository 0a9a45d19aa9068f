"""
Exceptions raised when noise generation parameters are rejected.

All of them derive from ValueError so callers catching bad arguments the
usual way keep working.

Author: B.G.
"""


class NoiseParameterError(ValueError):
    """Base class for invalid noise generation parameters."""


class InvalidDimensions(NoiseParameterError):
    """Width or height is not a positive integer."""


class InvalidIterations(NoiseParameterError):
    """Iteration count is negative or not an integer."""


class InvalidSigma(NoiseParameterError):
    """Blur standard deviation is not a finite positive number."""


class InvalidBandOrdering(NoiseParameterError):
    """low_sigma is not strictly smaller than high_sigma (strict mode only)."""


class UnknownNoiseColor(NoiseParameterError):
    """Requested noise color has no shaping strategy."""


__all__ = [
    "NoiseParameterError",
    "InvalidDimensions",
    "InvalidIterations",
    "InvalidSigma",
    "InvalidBandOrdering",
    "UnknownNoiseColor",
]

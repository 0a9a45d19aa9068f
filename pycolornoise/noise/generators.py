"""
Public noise generators for PyColorNoise.

Each generator validates its parameters before allocating anything, draws a
uniform random field, shapes it with the color's strategy and quantizes the
result to an 8-bit grayscale pixel buffer.

Band ordering: green and purple noise expect low_sigma < high_sigma (a narrow
blur minus a wide blur isolates a frequency band). By default the ordering is
not enforced and swapped or equal sigmas give a degenerate but well-defined
texture. Pass ``strict_band=True`` to reject such calls with
InvalidBandOrdering instead.

Author: B.G.
"""

from .. import constants as cte
from .field import random_field
from .quantize import quantize
from .shaping import ShapingParameters, shape_field


def _generate(params: ShapingParameters, rng, return_float: bool):
    params.validate()

    field = random_field(params.width, params.height, rng=rng)
    shape_field(
        field,
        params.color,
        params.iterations,
        sigma=params.sigma,
        low_sigma=params.low_sigma,
        high_sigma=params.high_sigma,
    )

    if return_float:
        return field
    return quantize(field)


def white_noise(width: int, height: int, rng=None, return_float: bool = False):
    """
    Generate white noise: independent uniform pixels, flat spectrum.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        rng: Random source (default: fresh numpy Generator)
        return_float: If True, return the float field in [0, 1) instead of pixels

    Returns:
        numpy.ndarray: uint8 image (or float32 field) of shape (height, width)

    Example:
        mask = white_noise(64, 64, rng=np.random.default_rng(3))
    """
    params = ShapingParameters("white", width, height)
    return _generate(params, rng, return_float)


def red_noise(width: int, height: int, iterations: int = cte.DEFAULT_ITERATIONS,
              sigma: float = cte.DEFAULT_SIGMA, rng=None, return_float: bool = False):
    """
    Generate red noise: energy concentrated in low spatial frequencies.

    Each round blurs the field and re-equalizes it.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        iterations: Number of blur/normalize rounds (default: 5). 0 returns
                    the raw random field.
        sigma: Blur standard deviation in pixels (default: 1.0). Larger values
               give larger blobs.
        rng: Random source (default: fresh numpy Generator)
        return_float: If True, return the float field instead of pixels

    Returns:
        numpy.ndarray: uint8 image (or float32 field) of shape (height, width)
    """
    params = ShapingParameters("red", width, height, iterations, sigma=sigma)
    return _generate(params, rng, return_float)


def blue_noise(width: int, height: int, iterations: int = cte.DEFAULT_ITERATIONS,
               sigma: float = cte.DEFAULT_SIGMA, rng=None, return_float: bool = False):
    """
    Generate blue noise: energy concentrated in high spatial frequencies.

    Each round subtracts the blurred field from the field and re-equalizes.
    Suitable as a dithering threshold mask.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        iterations: Number of high-pass/normalize rounds (default: 5)
        sigma: Blur standard deviation in pixels (default: 1.0)
        rng: Random source (default: fresh numpy Generator)
        return_float: If True, return the float field instead of pixels

    Returns:
        numpy.ndarray: uint8 image (or float32 field) of shape (height, width)
    """
    params = ShapingParameters("blue", width, height, iterations, sigma=sigma)
    return _generate(params, rng, return_float)


def green_noise(width: int, height: int, iterations: int = cte.DEFAULT_ITERATIONS,
                low_sigma: float = cte.DEFAULT_LOW_SIGMA,
                high_sigma: float = cte.DEFAULT_HIGH_SIGMA,
                rng=None, strict_band: bool = False, return_float: bool = False):
    """
    Generate green noise: band-pass, mid frequencies dominate.

    Each round replaces the field by blur(low_sigma) - blur(high_sigma),
    re-equalized.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        iterations: Number of rounds (default: 5)
        low_sigma: Narrow blur, upper edge of the band (default: 1.0)
        high_sigma: Wide blur, lower edge of the band (default: 2.0)
        rng: Random source (default: fresh numpy Generator)
        strict_band: Raise InvalidBandOrdering if low_sigma >= high_sigma
        return_float: If True, return the float field instead of pixels

    Returns:
        numpy.ndarray: uint8 image (or float32 field) of shape (height, width)
    """
    params = ShapingParameters(
        "green", width, height, iterations,
        low_sigma=low_sigma, high_sigma=high_sigma, strict_band=strict_band,
    )
    return _generate(params, rng, return_float)


def purple_noise(width: int, height: int, iterations: int = cte.DEFAULT_ITERATIONS,
                 low_sigma: float = cte.DEFAULT_LOW_SIGMA,
                 high_sigma: float = cte.DEFAULT_HIGH_SIGMA,
                 rng=None, strict_band: bool = False, return_float: bool = False):
    """
    Generate purple noise: band-notch, low and high frequencies kept.

    Each round subtracts the green band blur(low_sigma) - blur(high_sigma)
    from the field itself and re-equalizes.

    Args:
        width: Number of pixels in x direction
        height: Number of pixels in y direction
        iterations: Number of rounds (default: 5)
        low_sigma: Narrow blur, upper edge of the notch (default: 1.0)
        high_sigma: Wide blur, lower edge of the notch (default: 2.0)
        rng: Random source (default: fresh numpy Generator)
        strict_band: Raise InvalidBandOrdering if low_sigma >= high_sigma
        return_float: If True, return the float field instead of pixels

    Returns:
        numpy.ndarray: uint8 image (or float32 field) of shape (height, width)
    """
    params = ShapingParameters(
        "purple", width, height, iterations,
        low_sigma=low_sigma, high_sigma=high_sigma, strict_band=strict_band,
    )
    return _generate(params, rng, return_float)


def generate_noise(color: str, width: int, height: int,
                   iterations: int = cte.DEFAULT_ITERATIONS,
                   sigma: float = cte.DEFAULT_SIGMA,
                   low_sigma: float = cte.DEFAULT_LOW_SIGMA,
                   high_sigma: float = cte.DEFAULT_HIGH_SIGMA,
                   rng=None, strict_band: bool = False, return_float: bool = False):
    """
    Generate noise of the named color.

    Parameters the color does not use are ignored (sigma for green and
    purple, the band for red and blue, everything but the size for white).

    Raises:
        UnknownNoiseColor: color is not in NOISE_COLORS
        NoiseParameterError: any other invalid parameter
    """
    params = ShapingParameters(
        color, width, height, iterations,
        sigma=sigma, low_sigma=low_sigma, high_sigma=high_sigma,
        strict_band=strict_band,
    )
    return _generate(params, rng, return_float)


__all__ = [
    "white_noise",
    "red_noise",
    "blue_noise",
    "green_noise",
    "purple_noise",
    "generate_noise",
]

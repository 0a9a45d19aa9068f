"""
Noise Generation CLI Commands for PyColorNoise

Command line interface for generating noise textures as PNG files.

Author: B.G.
"""

import sys

import click

import pycolornoise as pcn
from pycolornoise import constants as cte
from pycolornoise.errors import NoiseParameterError


@click.command()
@click.argument("color", type=click.Choice(pcn.NOISE_COLORS, case_sensitive=False))
@click.argument("output_png", type=click.Path(dir_okay=False))
@click.option("--width", "-W", default=cte.DEFAULT_SIZE, show_default=True, type=int,
              help="Texture width in pixels")
@click.option("--height", "-H", default=cte.DEFAULT_SIZE, show_default=True, type=int,
              help="Texture height in pixels")
@click.option("--iterations", "-n", default=cte.DEFAULT_ITERATIONS, show_default=True, type=int,
              help="Number of blur/normalize rounds (ignored for white)")
@click.option("--sigma", default=cte.DEFAULT_SIGMA, show_default=True, type=float,
              help="Blur standard deviation for red and blue noise")
@click.option("--low-sigma", default=cte.DEFAULT_LOW_SIGMA, show_default=True, type=float,
              help="Narrow blur for green and purple noise")
@click.option("--high-sigma", default=cte.DEFAULT_HIGH_SIGMA, show_default=True, type=float,
              help="Wide blur for green and purple noise")
@click.option("--strict-band", is_flag=True, default=False,
              help="Reject low-sigma >= high-sigma instead of generating a degenerate band")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise(color, output_png, width, height, iterations, sigma, low_sigma, high_sigma,
          strict_band, verbose):
    """
    Generate a noise texture and save it as an 8-bit grayscale PNG.

    COLOR: One of white, red, blue, green, purple

    OUTPUT_PNG: Path of the PNG file to write

    Examples:

        # 256x256 blue noise dithering mask
        pcn-noise blue mask.png

        # Smooth red noise with wide blur
        pcn-noise red terrain.png -W 512 -H 512 --sigma 4

        # Band-pass noise with verbose output
        pcn-noise -v green band.png --low-sigma 1 --high-sigma 3
    """
    color = color.lower()
    try:
        if verbose:
            click.echo(f"Generating {color} noise ({width}x{height}, iterations={iterations})...")

        pixels = pcn.generate_noise(
            color,
            width,
            height,
            iterations=iterations,
            sigma=sigma,
            low_sigma=low_sigma,
            high_sigma=high_sigma,
            strict_band=strict_band,
        )

        if verbose:
            click.echo(f"Saving PNG to '{output_png}'...")

        pcn.misc.save_png(pixels, output_png)

        if verbose:
            click.echo(f"Done! Mean value: {pixels.mean():.2f}, range: {pixels.min()}-{pixels.max()}")
        else:
            click.echo(f"Generated {color} noise -> '{output_png}'")

    except NoiseParameterError as e:
        click.echo(f"Error: Invalid parameter - {e}", err=True)
        sys.exit(1)

    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noise()

"""CLI command plotting the spectral character of each noise color."""

import sys

import click

import pycolornoise as pcn
from pycolornoise import constants as cte
from pycolornoise.errors import NoiseParameterError


def _parse_colors(ctx, param, value):
    colors = [c.strip().lower() for c in value.split(",") if c.strip()]
    unknown = [c for c in colors if c not in pcn.NOISE_COLORS]
    if unknown:
        raise click.BadParameter(f"unknown color(s): {', '.join(unknown)}")
    if not colors:
        raise click.BadParameter("at least one color is required")
    return colors


@click.command()
@click.argument("output_plot", type=click.Path(dir_okay=False))
@click.option("--colors", "-c", default=",".join(pcn.NOISE_COLORS), show_default=True,
              callback=_parse_colors, help="Comma separated noise colors to compare")
@click.option("--size", "-s", default=128, show_default=True, type=int,
              help="Side length of the generated square textures")
@click.option("--iterations", "-n", default=cte.DEFAULT_ITERATIONS, show_default=True, type=int,
              help="Number of blur/normalize rounds")
@click.option("--sigma", default=cte.DEFAULT_SIGMA, show_default=True, type=float,
              help="Blur standard deviation for red and blue noise")
@click.option("--low-sigma", default=cte.DEFAULT_LOW_SIGMA, show_default=True, type=float,
              help="Narrow blur for green and purple noise")
@click.option("--high-sigma", default=cte.DEFAULT_HIGH_SIGMA, show_default=True, type=float,
              help="Wide blur for green and purple noise")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def spectrum(output_plot, colors, size, iterations, sigma, low_sigma, high_sigma, verbose):
    """Generate noise textures and plot their radial power spectra to OUTPUT_PLOT."""
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        images = {}
        for color in colors:
            if verbose:
                click.echo(f"Generating {color} noise ({size}x{size})...")
            images[color] = pcn.generate_noise(
                color, size, size,
                iterations=iterations,
                sigma=sigma,
                low_sigma=low_sigma,
                high_sigma=high_sigma,
            )

        fig = pcn.analysis.plot_radial_spectra(images)
        fig.savefig(output_plot, dpi=120, bbox_inches="tight")
        plt.close(fig)

        if verbose:
            for color, image in images.items():
                low = pcn.analysis.band_energy_fraction(image, 0.0, 0.1)
                click.echo(f"  {color:<7} low-band (|k|<0.1) energy: {low:.3f}")
        click.echo(f"Saved spectrum plot -> '{output_plot}'")

    except NoiseParameterError as e:
        click.echo(f"Error: Invalid parameter - {e}", err=True)
        sys.exit(1)

    except Exception as e:  # pragma: no cover - error handling path
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["spectrum"]

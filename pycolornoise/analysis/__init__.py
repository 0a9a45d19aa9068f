"""
Spectral analysis of generated noise for PyColorNoise.

Measures where a texture's energy sits in spatial frequency so the
character of each noise color can be checked and compared.

Available Functions:
- power_spectrum: 2D power spectrum and radial frequency grid
- radial_power_spectrum: power averaged over rings of equal |k|
- band_energy_fraction: share of energy inside a frequency band
- plot_radial_spectra: matplotlib comparison plot

Author: B.G.
"""

from .spectrum import (
    power_spectrum,
    radial_power_spectrum,
    band_energy_fraction,
    plot_radial_spectra,
)

__all__ = [
    "power_spectrum",
    "radial_power_spectrum",
    "band_energy_fraction",
    "plot_radial_spectra",
]

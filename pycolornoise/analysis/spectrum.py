"""
Power spectrum measurements for noise textures.

Frequencies are expressed in cycles per pixel, so |k| runs from 0 to about
0.707 in the corners of the spectrum and 0.5 is the Nyquist limit along
each axis. The image mean is removed first so the DC bin carries no energy.

Author: B.G.
"""

import numpy as np


def power_spectrum(image):
    """
    Compute the 2D power spectrum of an image.

    Args:
        image: 2D array (uint8 pixels or float field)

    Returns:
        tuple: (K, P) where K is the radial frequency |k| of every bin and
        P the power |F|^2, both of shape (height, width) in FFT order
    """
    data = np.asarray(image, dtype=np.float64)
    if data.ndim != 2:
        raise ValueError("image must be 2D")

    data = data - data.mean()
    power = np.abs(np.fft.fft2(data)) ** 2

    ny, nx = data.shape
    kx = np.fft.fftfreq(nx, d=1.0)
    ky = np.fft.fftfreq(ny, d=1.0)
    KX, KY = np.meshgrid(kx, ky, indexing="xy")
    K = np.sqrt(KX**2 + KY**2)

    return K, power


def radial_power_spectrum(image, nbins: int | None = None):
    """
    Average the power spectrum over rings of equal radial frequency.

    Args:
        image: 2D array
        nbins: Number of rings over [0, 0.5] (default: half the smaller side)

    Returns:
        tuple: (centers, mean_power), each of length nbins. Rings without any
        frequency bin hold 0.
    """
    K, power = power_spectrum(image)
    if nbins is None:
        nbins = max(1, min(K.shape) // 2)

    edges = np.linspace(0.0, 0.5, nbins + 1)
    inside = K <= 0.5
    idx = np.clip(np.digitize(K[inside], edges) - 1, 0, nbins - 1)

    sums = np.bincount(idx, weights=power[inside], minlength=nbins)
    counts = np.bincount(idx, minlength=nbins)
    mean_power = np.divide(sums, counts, out=np.zeros(nbins), where=counts > 0)

    centers = 0.5 * (edges[:-1] + edges[1:])
    return centers, mean_power


def band_energy_fraction(image, low: float, high: float) -> float:
    """
    Fraction of the non-DC spectral energy with low <= |k| < high.

    A flat (white) spectrum gives roughly the band's share of the frequency
    plane, about pi * (high^2 - low^2) for bands below 0.5.

    Args:
        image: 2D array
        low: Lower band edge in cycles per pixel
        high: Upper band edge in cycles per pixel

    Returns:
        float: Value in [0, 1]
    """
    if low >= high:
        raise ValueError("low must be smaller than high")

    K, power = power_spectrum(image)
    total = power[K > 0].sum()
    if total == 0:
        return 0.0

    band = power[(K >= low) & (K < high)].sum()
    return float(band / total)


def plot_radial_spectra(images, ax=None, nbins: int | None = None):
    """
    Plot radially averaged spectra of several images on a log power axis.

    Args:
        images: Mapping of label -> 2D array
        ax: Existing matplotlib Axes (default: new figure)
        nbins: Rings per spectrum (see radial_power_spectrum)

    Returns:
        matplotlib.figure.Figure: The figure holding the plot
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 4.5))
    else:
        fig = ax.figure

    for label, image in images.items():
        centers, mean_power = radial_power_spectrum(image, nbins=nbins)
        # Skip the DC ring, its power is zero after mean removal
        ax.semilogy(centers[1:], np.maximum(mean_power[1:], 1e-12), label=label, color=_line_color(label))

    ax.set_xlabel("Spatial frequency |k| (cycles/pixel)")
    ax.set_ylabel("Mean power")
    ax.set_xlim(0.0, 0.5)
    ax.grid(True, which="both", alpha=0.3)
    ax.legend()
    return fig


def _line_color(label):
    # Draw each noise color in its own color when the label names one
    palette = {
        "white": "0.5",
        "red": "tab:red",
        "blue": "tab:blue",
        "green": "tab:green",
        "purple": "tab:purple",
    }
    return palette.get(label)

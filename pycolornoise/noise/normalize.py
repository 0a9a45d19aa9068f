"""
Rank-based histogram normalization for PyColorNoise.

Repeated blurring collapses a field's values toward its mean. Re-equalizing
after every shaping round keeps the distribution exactly uniform so the next
round works on full-contrast input. This is order-statistics equalization,
not a min-max rescale: the output only depends on the ranking of the input.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def rank_values(n: int) -> np.ndarray:
    """Return the normalized rank positions ``0, 1/n, ..., (n-1)/n`` as float32."""
    return (np.arange(n, dtype=np.float64) / n).astype(cte.FLOAT_TYPE)


def normalize_histogram(source: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """
    Replace every value by its descending rank position.

    The pixel holding the greatest input value receives 0, the next greatest
    receives 1/N, and so on up to (N-1)/N, so the output holds each of the N
    rank positions exactly once.

    Args:
        source: Field to rank, any shape. Read before ``out`` is written, so
                passing the same array as ``out`` normalizes in place.
        out: Target array with the same shape (default: newly allocated)

    Returns:
        numpy.ndarray: The normalized field (``out`` when given)

    Note:
        Equal input values get an unspecified relative order (the sort is not
        stable). Output for tied fields may therefore differ between runs or
        numpy versions; this is accepted and intentionally left unfixed.
        NaN values are ranked as the smallest elements.
        Rank positions are float32, so above 2**24 pixels (e.g. 4097x4097)
        neighbouring positions k/N round to the same value and the output
        is no longer free of duplicates.
    """
    values = np.asarray(source).ravel()
    n = values.size

    keys = np.where(np.isnan(values), -np.inf, values)

    # Ascending sort reversed: greatest first, NaN (as -inf) last
    order = np.argsort(keys, kind="quicksort")[::-1]

    ranked = np.empty(n, dtype=cte.FLOAT_TYPE)
    ranked[order] = rank_values(n)

    if out is None:
        return ranked.reshape(np.shape(source))

    out[...] = ranked.reshape(out.shape)
    return out

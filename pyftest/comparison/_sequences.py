"""
Successive differences and termwise ratios over model-ordered sequences.

Every per-model quantity (SSR, dof, residual dof, R²) is a sequence of
length N in model order; every per-comparison quantity has length N-1,
entry i describing the pair (model i, model i+1).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from pyftest.core.exceptions import DimensionError


def successive_decreasing_diff(seq: Sequence[float]) -> NDArray[np.float64]:
    """Earlier minus later: ``seq[i] - seq[i+1]``."""
    arr = np.asarray(seq, dtype=np.float64)
    return arr[:-1] - arr[1:]


def successive_increasing_diff(seq: Sequence[float]) -> NDArray[np.float64]:
    """Later minus earlier: ``seq[i+1] - seq[i]``."""
    arr = np.asarray(seq, dtype=np.float64)
    return arr[1:] - arr[:-1]


def elementwise_ratio(
    numerator: Sequence[float],
    denominator: Sequence[float],
) -> NDArray[np.float64]:
    """
    Termwise quotient of two equal-length sequences.

    A zero divisor produces inf (or NaN for 0/0) instead of raising;
    that is how a degenerate comparison surfaces as a non-finite
    F statistic.

    Raises:
        DimensionError: If the sequences differ in length
    """
    num = np.asarray(numerator, dtype=np.float64)
    den = np.asarray(denominator, dtype=np.float64)
    if num.shape != den.shape:
        raise DimensionError(
            f"elementwise_ratio: length mismatch, numerator={num.shape[0]}, "
            f"denominator={den.shape[0]}"
        )
    with np.errstate(divide='ignore', invalid='ignore'):
        return num / den

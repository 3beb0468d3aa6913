"""
Submodel check for fitted linear models.

A model is nested in another when both were fit to the same response and
every predictor column of the smaller one appears, value for value, among
the columns of the larger one. Columns are compared numerically, not by
term name: two columns with identical floating point content are the same
predictor however they were built, and mathematically equivalent columns
computed along different paths (centered vs raw coding) are not.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyftest.core.protocols import LinearModel


def is_submodel(inner: LinearModel, outer: LinearModel) -> bool:
    """
    Check whether `inner` is nested in `outer`.

    Args:
        inner: Candidate submodel
        outer: Candidate enclosing model

    Returns:
        True if the responses are identical and every column of inner.X
        matches some column of outer.X exactly
    """
    if not np.array_equal(np.asarray(inner.y), np.asarray(outer.y)):
        return False

    X_inner = np.asarray(inner.X)
    X_outer = np.asarray(outer.X)

    # More predictors than the enclosing model can never be a subset
    if X_inner.shape[1] > X_outer.shape[1]:
        return False

    return all(
        _has_matching_column(X_inner[:, i], X_outer)
        for i in range(X_inner.shape[1])
    )


def _has_matching_column(column: NDArray[Any], X: NDArray[Any]) -> bool:
    """True if `column` equals some column of `X` elementwise."""
    for j in range(X.shape[1]):
        if np.array_equal(column, X[:, j]):
            return True
    return False

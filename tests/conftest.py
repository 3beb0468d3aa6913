"""
pytest configuration and shared fixtures.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray


@dataclass(frozen=True, eq=False)
class LeastSquaresModel:
    """
    Minimal fitted OLS model exposing the LinearModel attributes.

    dof counts the coefficients plus the residual variance, so a model with
    an intercept and one slope reports dof = 3.
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return np.linalg.lstsq(self.X, self.y, rcond=None)[0]

    @property
    def deviance(self) -> float:
        residuals = self.y - self.X @ self.coefficients
        return float(residuals @ residuals)

    @property
    def dof(self) -> int:
        return self.X.shape[1] + 1

    @property
    def dof_residual(self) -> int:
        return self.X.shape[0] - self.X.shape[1]

    @property
    def r_squared(self) -> float:
        tss = float(np.sum((self.y - np.mean(self.y)) ** 2))
        return 1.0 - self.deviance / tss


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def ols():
    """Factory fitting a LeastSquaresModel from columns (1D arrays) and y."""
    def _fit(columns, y):
        X = np.column_stack([np.asarray(c, dtype=np.float64) for c in columns])
        return LeastSquaresModel(X=X, y=np.asarray(y, dtype=np.float64))
    return _fit

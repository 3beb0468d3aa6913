"""
Shared fixtures for sequential F-test tests.

Provides the two-treatment dataset with its full and intercept-only fits,
and a three-level nested sequence on simulated data.
"""

import numpy as np
import pytest


@pytest.fixture
def treatment_data():
    """12 observations, two treatments, clear difference in means."""
    treatment = np.array([1, 1, 1, 2, 2, 2, 1, 1, 1, 2, 2, 2.])
    result = np.array([1.1, 1.2, 1, 2.2, 1.9, 2, .9, 1, 1, 2.2, 2, 2])
    return treatment, result


@pytest.fixture
def treatment_models(ols, treatment_data):
    """(Result ~ Treatment, Result ~ 1) fitted to treatment_data."""
    treatment, result = treatment_data
    intercept = np.ones_like(result)
    full = ols([intercept, treatment], result)
    null = ols([intercept], result)
    return full, null


@pytest.fixture
def three_nested(ols, rng):
    """y ~ 1 + x1 + x2 + x3, y ~ 1 + x1, y ~ 1, largest first."""
    n = 40
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = rng.standard_normal(n)
    y = 2.0 + 1.5 * x1 - 0.8 * x2 + rng.standard_normal(n) * 0.5
    intercept = np.ones(n)
    return (
        ols([intercept, x1, x2, x3], y),
        ols([intercept, x1], y),
        ols([intercept], y),
    )

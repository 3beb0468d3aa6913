"""
Tests for ComparisonDesign factory validation.

Validates:
    - Arity: at least two models
    - Every element must expose the LinearModel attributes
    - Response/design matrix shape and finiteness checks
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
import pytest

from pyftest.core.exceptions import DimensionError, InvalidArity, ValidationError
from pyftest.comparison.design import ComparisonDesign


@dataclass
class StubModel:
    """Fitted-model stand-in with fixed summaries."""
    y: Any
    X: Any
    deviance: float = 1.0
    dof: int = 2
    dof_residual: int = 3
    r_squared: float = 0.5


# ═══════════════════════════════════════════════════════════════════════
# Arity
# ═══════════════════════════════════════════════════════════════════════


class TestArity:

    def test_two_models(self, treatment_models):
        design = ComparisonDesign.for_models(treatment_models)
        assert design.n_models == 2
        assert design.n_obs == 12

    def test_single_model_in_list(self, treatment_models):
        with pytest.raises(InvalidArity) as exc_info:
            ComparisonDesign.for_models([treatment_models[0]])
        assert exc_info.value.n_models == 1

    def test_bare_model(self, treatment_models):
        with pytest.raises(InvalidArity):
            ComparisonDesign.for_models(treatment_models[0])

    def test_empty(self):
        with pytest.raises(InvalidArity, match="at least 2 models, got 0"):
            ComparisonDesign.for_models([])

    def test_generator_accepted(self, three_nested):
        design = ComparisonDesign.for_models(m for m in three_nested)
        assert design.n_models == 3
        assert design.models == three_nested


# ═══════════════════════════════════════════════════════════════════════
# Model validation
# ═══════════════════════════════════════════════════════════════════════


class TestModelValidation:

    def test_rejects_non_model(self, treatment_models):
        with pytest.raises(ValidationError, match="model 2"):
            ComparisonDesign.for_models([treatment_models[0], "not a model"])

    def test_rejects_1d_design_matrix(self):
        y = np.arange(5.0)
        good = StubModel(y=y, X=np.ones((5, 1)))
        bad = StubModel(y=y, X=np.ones(5))
        with pytest.raises(DimensionError, match="model 2 X"):
            ComparisonDesign.for_models([good, bad])

    def test_rejects_2d_response(self):
        bad = StubModel(y=np.ones((5, 2)), X=np.ones((5, 1)))
        good = StubModel(y=np.arange(5.0), X=np.ones((5, 1)))
        with pytest.raises(DimensionError, match="model 1 y"):
            ComparisonDesign.for_models([bad, good])

    def test_rejects_row_mismatch(self):
        y = np.arange(5.0)
        bad = StubModel(y=y, X=np.ones((4, 1)))
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            ComparisonDesign.for_models([bad, bad])

    def test_rejects_nan_response(self):
        y = np.array([1.0, np.nan, 3.0])
        model = StubModel(y=y, X=np.ones((3, 1)))
        with pytest.raises(ValidationError, match="non-finite"):
            ComparisonDesign.for_models([model, model])

    def test_rejects_non_numeric_response(self):
        model = StubModel(y=['a', 'b'], X=np.ones((2, 1)))
        with pytest.raises(ValidationError, match="non-numeric"):
            ComparisonDesign.for_models([model, model])

    def test_integer_arrays_promoted(self):
        model = StubModel(y=[1, 2, 3], X=[[1], [1], [1]])
        design = ComparisonDesign.for_models([model, model])
        assert design.responses[0].dtype == np.float64
        assert design.design_matrices[0].dtype == np.float64

"""
Comparison design object.

Wraps an ordered, validated sequence of fitted linear models together with
the response vectors and design matrices read from them.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyftest.core.exceptions import InvalidArity, ValidationError
from pyftest.core.protocols import LinearModel
from pyftest.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
)


@dataclass(frozen=True)
class ComparisonDesign:
    """
    Validated input for a sequential F-test.

    Created via ComparisonDesign.for_models(), not directly. Models are kept
    in caller order, largest first; nesting is checked by the solver.
    """
    models: tuple[LinearModel, ...]
    responses: tuple[NDArray[np.floating[Any]], ...]
    design_matrices: tuple[NDArray[np.floating[Any]], ...]
    n_models: int
    n_obs: int

    @staticmethod
    def for_models(models: Sequence[LinearModel]) -> 'ComparisonDesign':
        """
        Create a design from fitted models ordered by decreasing complexity.

        Args:
            models: Sequence of at least two fitted linear models

        Returns:
            ComparisonDesign

        Raises:
            InvalidArity: If fewer than two models are given
            ValidationError: If an element is not a fitted linear model or
                its arrays are malformed
        """
        if isinstance(models, LinearModel):
            models = (models,)
        models = tuple(models)

        if len(models) < 2:
            raise InvalidArity(
                f"F test requires at least 2 models, got {len(models)}",
                n_models=len(models),
            )

        responses = []
        design_matrices = []
        for i, model in enumerate(models, start=1):
            if not isinstance(model, LinearModel):
                raise ValidationError(
                    f"model {i}: {type(model).__name__} does not expose "
                    f"y, X, deviance, dof, dof_residual and r_squared"
                )
            y_arr = check_array(model.y, f"model {i} y")
            check_1d(y_arr, f"model {i} y")
            check_finite(y_arr, f"model {i} y")

            X_arr = check_array(model.X, f"model {i} X")
            check_2d(X_arr, f"model {i} X")
            check_finite(X_arr, f"model {i} X")

            check_consistent_length(
                y_arr, X_arr, names=(f"model {i} y", f"model {i} X")
            )
            responses.append(y_arr)
            design_matrices.append(X_arr)

        return ComparisonDesign(
            models=models,
            responses=tuple(responses),
            design_matrices=tuple(design_matrices),
            n_models=len(models),
            n_obs=len(responses[0]),
        )

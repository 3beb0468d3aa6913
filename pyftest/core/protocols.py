"""
Core protocols for pyftest.

The comparison engine never fits a model. It reads fitted models through
the structural interface below, so any object exposing these attributes
(a thin wrapper around statsmodels, scikit-learn, or a hand-rolled least
squares fit) can be compared.

Design Principles:
    - Minimal contract: only what the F-test and nesting check read
    - Structural typing (Protocol) rather than nominal (ABC)
    - Read-only: the engine never mutates a model
"""

from typing import Protocol, Any, runtime_checkable

from numpy.typing import NDArray


@runtime_checkable
class LinearModel(Protocol):
    """
    A fitted linear regression model.

    Attributes
    ----------
    y : ndarray, shape (n,)
        Observed response the model was fit to.
    X : ndarray, shape (n, p)
        Design matrix, one column per predictor (intercept included).
    deviance : float
        Sum of squared residuals.
    dof : int
        Number of estimated parameters.
    dof_residual : int
        Residual degrees of freedom (observations minus coefficients).
    r_squared : float
        Fraction of response variance explained.
    """

    @property
    def y(self) -> NDArray[Any]:
        ...

    @property
    def X(self) -> NDArray[Any]:
        ...

    @property
    def deviance(self) -> float:
        ...

    @property
    def dof(self) -> int:
        ...

    @property
    def dof_residual(self) -> int:
        ...

    @property
    def r_squared(self) -> float:
        ...

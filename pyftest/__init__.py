"""
pyftest: sequential F-tests for nested linear regression models.

Given fitted models ordered by decreasing complexity, checks that each is
nested in its predecessor and tests whether the larger model fits
significantly better, reporting SSR, degrees of freedom, R², F and p.

Submodules:
    comparison: ftest(), the nesting check and the comparison table
    core: protocols, result envelope, exceptions, validation
"""

__version__ = "0.1.0"

from pyftest import comparison
from pyftest.comparison import ftest, is_submodel, render_table, FTestSolution
from pyftest.core import (
    LinearModel,
    PyFTestError,
    ValidationError,
    InvalidArity,
    NestingViolation,
)

__all__ = [
    "__version__",
    "comparison",
    "ftest",
    "is_submodel",
    "render_table",
    "FTestSolution",
    "LinearModel",
    "PyFTestError",
    "ValidationError",
    "InvalidArity",
    "NestingViolation",
]

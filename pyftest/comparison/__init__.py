"""
Sequential F-tests for nested linear models.

Public API:
    ftest(models) -> FTestSolution       # compare each model to its predecessor
    is_submodel(inner, outer) -> bool    # nesting check used by ftest
    render_table(params, labels) -> str  # comparison table text
"""

from pyftest.comparison.solvers import ftest
from pyftest.comparison.solution import FTestSolution
from pyftest.comparison._common import FTestParams
from pyftest.comparison._nesting import is_submodel
from pyftest.comparison._table import format_pvalue, render_table

__all__ = [
    "ftest",
    "is_submodel",
    "render_table",
    "format_pvalue",
    "FTestSolution",
    "FTestParams",
]

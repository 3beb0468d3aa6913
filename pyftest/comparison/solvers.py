"""
Sequential F-test over nested linear models.

Public API:
    ftest(models) -> FTestSolution
"""

import warnings
from typing import Sequence

import numpy as np
from scipy import stats as sp_stats

from pyftest.core.compute.timing import Timer
from pyftest.core.exceptions import NestingViolation
from pyftest.core.protocols import LinearModel
from pyftest.core.result import Result
from pyftest.comparison._common import FTestParams
from pyftest.comparison._nesting import is_submodel
from pyftest.comparison._sequences import (
    elementwise_ratio,
    successive_decreasing_diff,
    successive_increasing_diff,
)
from pyftest.comparison.design import ComparisonDesign
from pyftest.comparison.solution import FTestSolution


def ftest(models: Sequence[LinearModel]) -> FTestSolution:
    """
    F-test each model against its predecessor.

    For each adjacent pair, tests whether the earlier (larger) model fits
    significantly better than the later (smaller) one. Models must be
    ordered by decreasing complexity, each nested in the one before it.

    Args:
        models: Fitted linear models, largest first. At least two.

    Returns:
        FTestSolution with per-model SSR, dof, residual dof and R², and
        per-comparison F statistics and p-values

    Raises:
        InvalidArity: If fewer than two models are given
        NestingViolation: If some model is not nested in its predecessor
        ValidationError: If a model's response or design matrix is malformed

    Examples:
        >>> result = ftest([full_model, null_model])
        >>> result.fstat[0]
        >>> print(result.summary())
    """
    timer = Timer()
    timer.start()

    with timer.section('validation'):
        design = ComparisonDesign.for_models(models)
        _check_nesting(design)

    with timer.section('statistics'):
        ssr = tuple(float(m.deviance) for m in design.models)
        dof = tuple(int(m.dof) for m in design.models)
        dof_resid = tuple(int(m.dof_residual) for m in design.models)
        r2 = tuple(float(m.r_squared) for m in design.models)

        # Parameters dropped from model i to model i+1 and the SSR this costs;
        # (ssr[i+1] - ssr[i]) / (dof[i] - dof[i+1])
        df_num = successive_decreasing_diff(dof)
        ms_num = elementwise_ratio(
            successive_decreasing_diff(ssr), successive_increasing_diff(dof)
        )
        # Residual mean square of the larger model of each pair
        ms_den = elementwise_ratio(ssr[:-1], dof_resid[:-1])

        fstat = elementwise_ratio(ms_num, ms_den)
        with np.errstate(invalid='ignore'):
            pval = sp_stats.f.sf(fstat, df_num, np.asarray(dof_resid[:-1]))
        pval = np.atleast_1d(np.asarray(pval, dtype=np.float64))

    timer.stop()

    issues = []
    degenerate = ~(np.isfinite(fstat) & np.isfinite(pval))
    for i in np.flatnonzero(degenerate):
        msg = (
            f"comparison of model {i + 2} against model {i + 1} is degenerate "
            f"(dof difference {int(df_num[i])}, residual dof {dof_resid[i]}): "
            f"F = {fstat[i]}, p = {pval[i]}"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        issues.append(msg)

    params = FTestParams(
        ssr=ssr,
        dof=dof,
        dof_resid=dof_resid,
        r2=r2,
        fstat=tuple(float(f) for f in fstat),
        pval=tuple(float(p) for p in pval),
    )

    result = Result(
        params=params,
        info={
            'method': 'sequential_f',
            'n_models': design.n_models,
            'n_obs': design.n_obs,
            'df_num': tuple(int(d) for d in df_num),
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(issues),
    )

    return FTestSolution(_result=result)


def _check_nesting(design: ComparisonDesign) -> None:
    """Raise NestingViolation at the first model not nested in its predecessor."""
    models = design.models
    for i in range(1, design.n_models):
        if not is_submodel(models[i], models[i - 1]):
            raise NestingViolation(
                f"F test {i + 1} is only valid if model {i + 1} is nested "
                f"in model {i}",
                index=i + 1,
                predecessor=i,
            )

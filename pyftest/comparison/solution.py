"""
User-facing sequential F-test solution type.

Wraps a Result[FTestParams] and provides convenient accessors and the
formatted comparison table.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from pyftest.core.result import Result
from pyftest.comparison._common import FTestParams
from pyftest.comparison._table import render_table


@dataclass
class FTestSolution:
    """
    User-facing result for a sequential F-test.

    Produced by ftest(). Per-model accessors have one entry per input model;
    fstat and pval have one entry per adjacent pair.
    """
    _result: Result[FTestParams]

    @property
    def params(self) -> FTestParams:
        return self._result.params

    @property
    def ssr(self) -> tuple[float, ...]:
        return self._result.params.ssr

    @property
    def dof(self) -> tuple[int, ...]:
        return self._result.params.dof

    @property
    def dof_resid(self) -> tuple[int, ...]:
        return self._result.params.dof_resid

    @property
    def r2(self) -> tuple[float, ...]:
        return self._result.params.r2

    @property
    def fstat(self) -> tuple[float, ...]:
        return self._result.params.fstat

    @property
    def pval(self) -> tuple[float, ...]:
        return self._result.params.pval

    @property
    def n_models(self) -> int:
        return self._result.params.n_models

    @property
    def df_num(self) -> tuple[int, ...]:
        """Numerator degrees of freedom of each F statistic."""
        return self._result.info['df_num']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, labels: Sequence[str] | None = None) -> str:
        """Generate the model comparison table."""
        return render_table(self._result.params, labels=labels)

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"FTestSolution(n_models={self.n_models}, "
            f"fstat={self.fstat}, pval={self.pval})"
        )

"""
Common data types for sequential F-tests.

Contains the frozen parameter payload that goes inside the Result[P]
envelope. The payload is a pure data container: its only behaviour is the
length check run once at construction.
"""

from dataclasses import dataclass

from pyftest.core.exceptions import DimensionError


@dataclass(frozen=True)
class FTestParams:
    """
    Parameter payload for a sequential F-test over N nested models.

    Per-model fields have length N, in input order. Per-comparison fields
    have length N-1; entry i compares model i+1 against model i (1-based),
    i.e. each model against its predecessor.
    """
    ssr: tuple[float, ...]          # sum of squared residuals, per model
    dof: tuple[int, ...]            # parameter count, per model
    dof_resid: tuple[int, ...]      # residual degrees of freedom, per model
    r2: tuple[float, ...]           # R², per model
    fstat: tuple[float, ...]        # F statistic, per adjacent pair
    pval: tuple[float, ...]         # p-value of fstat, per adjacent pair

    def __post_init__(self):
        n = len(self.ssr)
        per_model = {'dof': self.dof, 'dof_resid': self.dof_resid, 'r2': self.r2}
        per_pair = {'fstat': self.fstat, 'pval': self.pval}

        mismatched = {k: len(v) for k, v in per_model.items() if len(v) != n}
        if mismatched:
            raise DimensionError(
                f"per-model fields must all have length {n} (len(ssr)), got {mismatched}"
            )
        mismatched = {k: len(v) for k, v in per_pair.items() if len(v) != n - 1}
        if mismatched:
            raise DimensionError(
                f"per-comparison fields must have length {n - 1}, got {mismatched}"
            )

    @property
    def n_models(self) -> int:
        return len(self.ssr)

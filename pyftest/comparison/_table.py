"""
Text rendering of sequential F-test results.

Produces the column-aligned comparison table shown by FTestSolution.summary():

            Res. DOF DOF ΔDOF    SSR    ΔSSR      R²    ΔR²       F* p(>F)
    Model 1       10   3      0.1283          0.9603
    Model 2       11   2   -1 3.2292 -3.1008 -0.0000 0.9603 241.6234 <1e-7
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pyftest.core.exceptions import ValidationError
from pyftest.comparison._common import FTestParams
from pyftest.comparison._sequences import successive_decreasing_diff

HEADER = ("", "Res. DOF", "DOF", "ΔDOF", "SSR", "ΔSSR", "R²", "ΔR²", "F*", "p(>F)")

# Smallest positive double; p = 0 is displayed against this bound
_SMALLEST_P = float(np.nextafter(0.0, 1.0))


def format_pvalue(p: float) -> str:
    """
    Display convention for p-values.

    Four decimals down to 1e-4; below that only the order of magnitude,
    as ``<1e-k``. NaN (a degenerate comparison) is shown as ``NaN``.
    """
    if np.isnan(p):
        return "NaN"
    if p >= 1e-4:
        return f"{p:.4f}"
    exponent = int(np.ceil(np.log10(max(p, _SMALLEST_P))))
    return f"<1e{exponent}"


def render_table(
    params: FTestParams,
    labels: Sequence[str] | None = None,
) -> str:
    """
    Render an F-test payload as an aligned text table.

    One header row and one row per model. The first model has no
    predecessor, so its ΔDOF, ΔSSR, ΔR², F* and p columns are blank.
    Deltas are earlier minus later: ΔDOF is taken over residual dof.

    Args:
        params: F-test payload for N models
        labels: Row labels, one per model. Default "Model 1".."Model N".

    Returns:
        Table text, rows separated by newlines

    Raises:
        ValidationError: If the number of labels differs from N
    """
    n = params.n_models
    if labels is None:
        labels = [f"Model {i}" for i in range(1, n + 1)]
    else:
        labels = [str(label) for label in labels]
        if len(labels) != n:
            raise ValidationError(
                f"labels: expected {n} labels (one per model), got {len(labels)}"
            )

    d_dof = successive_decreasing_diff(params.dof_resid)
    d_ssr = successive_decreasing_diff(params.ssr)
    d_r2 = successive_decreasing_diff(params.r2)

    rows = [list(HEADER)]
    rows.append([
        labels[0],
        f"{int(params.dof_resid[0]):d}",
        f"{int(params.dof[0]):d}",
        " ",
        f"{params.ssr[0]:.4f}",
        " ",
        f"{params.r2[0]:.4f}",
        " ",
        " ",
        " ",
    ])
    for i in range(1, n):
        rows.append([
            labels[i],
            f"{int(params.dof_resid[i]):d}",
            f"{int(params.dof[i]):d}",
            f"{int(d_dof[i - 1]):d}",
            f"{params.ssr[i]:.4f}",
            f"{d_ssr[i - 1]:.4f}",
            f"{params.r2[i]:.4f}",
            f"{d_r2[i - 1]:.4f}",
            f"{params.fstat[i - 1]:.4f}",
            format_pvalue(params.pval[i - 1]),
        ])

    widths = [max(len(row[c]) for row in rows) for c in range(len(HEADER))]

    lines = []
    for row in rows:
        # Label column flush; every later column gets one separating space
        cells = [row[0].rjust(widths[0])]
        cells.extend(" " + cell.rjust(w) for cell, w in zip(row[1:], widths[1:]))
        lines.append("".join(cells))
    return "\n".join(lines)

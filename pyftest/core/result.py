"""
Generic result container for pyftest computations.

The Result class provides a standardized envelope around the domain payload.
This keeps timing, diagnostics, and non-fatal warnings in one place while the
payload itself stays a plain frozen record.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, model count, observations)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (per-model and per-comparison statistics)
        info: Structured metadata (method, n_models, n_obs)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=FTestParams(ssr=..., dof=..., dof_resid=..., r2=...,
        ...                        fstat=..., pval=...),
        ...     info={'method': 'sequential_f', 'n_models': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

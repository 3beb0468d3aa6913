"""
Core infrastructure for pyftest.

Shared abstractions used by the comparison subpackage.

Key components:
    protocols: LinearModel protocol (what a fitted model must expose)
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pyftest.core.protocols import LinearModel
from pyftest.core.result import Result
from pyftest.core.exceptions import (
    PyFTestError,
    ValidationError,
    DimensionError,
    InvalidArity,
    NestingViolation,
)

__all__ = [
    # Protocols
    "LinearModel",
    # Result
    "Result",
    # Exceptions
    "PyFTestError",
    "ValidationError",
    "DimensionError",
    "InvalidArity",
    "NestingViolation",
]

"""
Exception hierarchy for pyftest.

All exceptions inherit from PyFTestError to allow catching any
library-specific error. Comparison-specific exceptions inherit from
ValidationError because they are raised before any statistic is computed.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyFTestError(Exception):
    """Base exception for all pyftest errors."""
    pass


class ValidationError(PyFTestError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays/sequences have inconsistent lengths.
    """
    pass


class InvalidArity(ValidationError):
    """
    Too few models were supplied for a sequential comparison.

    Attributes:
        n_models: Number of models actually supplied
    """

    def __init__(self, message: str, n_models: int):
        super().__init__(message)
        self.n_models = n_models


class NestingViolation(ValidationError):
    """
    A model is not a submodel of its predecessor.

    Raised when model `index` does not share the response of model
    `predecessor` or uses a predictor column that model `predecessor`
    does not contain. Indices are 1-based, matching the table labels.

    Attributes:
        index: 1-based position of the offending model
        predecessor: 1-based position of the model it should be nested in
    """

    def __init__(self, message: str, index: int, predecessor: int):
        super().__init__(message)
        self.index = index
        self.predecessor = predecessor

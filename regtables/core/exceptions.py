"""
Exception hierarchy for regtables.

All exceptions inherit from RegTablesError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Statistic extraction failures are never raised; they become
      unavailable statistics (see regtables.statistics.extract)
"""


class RegTablesError(Exception):
    """Base exception for all regtables errors."""
    pass


class ValidationError(RegTablesError):
    """
    Input validation failed.

    Raised when caller-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Sequence lengths are inconsistent.

    Raised when coefficient names, values, standard errors and p-values
    do not line up, or when standard deviations do not match the number
    of coefficients.
    """
    pass


class CapabilityError(RegTablesError):
    """
    A model is missing a required capability.

    Raised when a model cannot provide something the result record
    cannot be built without (coefficients, standard errors, residual
    degrees of freedom, formula).

    Attributes:
        capability: Name of the missing capability
        model_type: Name of the model's type
    """

    def __init__(
        self,
        message: str,
        capability: str | None = None,
        model_type: str | None = None,
    ):
        super().__init__(message)
        self.capability = capability
        self.model_type = model_type

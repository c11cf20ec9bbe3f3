"""
Core infrastructure for regtables.

This module provides shared abstractions and utilities used by the
statistics, names, coefficients and result submodules.

Key components:
    protocols: RegressionModel, RenderContext protocols
    capabilities: Model capability names and accessors
    result: Generic Result[P] extraction envelope
    exceptions: Exception hierarchy
    validation: Input validators
"""

from regtables.core.protocols import RegressionModel, RenderContext
from regtables.core.result import Result
from regtables.core.exceptions import (
    RegTablesError,
    ValidationError,
    DimensionError,
    CapabilityError,
)

__all__ = [
    # Protocols
    "RegressionModel",
    "RenderContext",
    # Result
    "Result",
    # Exceptions
    "RegTablesError",
    "ValidationError",
    "DimensionError",
    "CapabilityError",
]

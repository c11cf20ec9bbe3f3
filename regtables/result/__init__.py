"""
Unified regression result records.

Public API:
    summarize(model, standardize_coef=False, ...) -> SimpleRegressionResult
    summarize_all(models, ...) -> list[SimpleRegressionResult]
    build_result(model, formula, coefvalues, ...) -> SimpleRegressionResult
"""

from regtables.result.solution import SimpleRegressionResult
from regtables.result.builders import (
    FIXED_EFFECTS_KEY,
    build_result,
    summarize,
    summarize_all,
)

__all__ = [
    "SimpleRegressionResult",
    "FIXED_EFFECTS_KEY",
    "build_result",
    "summarize",
    "summarize_all",
]

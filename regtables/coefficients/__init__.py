"""
Coefficient p-values and standardization.

Public API:
    t_statistics(coefvalues, coefstderrors) -> ndarray
    coef_pvalues(coefvalues, coefstderrors, df_residual) -> ndarray
    standardize_coef_values(std_X, std_Y, coefvalues, coefstderrors)
    standardize_model_coefs(model, coefvalues, coefstderrors)
"""

from regtables.coefficients.normalize import (
    t_statistics,
    coef_pvalues,
    standardize_coef_values,
    standardize_model_coefs,
)

__all__ = [
    "t_statistics",
    "coef_pvalues",
    "standardize_coef_values",
    "standardize_model_coefs",
]

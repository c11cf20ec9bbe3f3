"""
Coefficient normalization.

Turns a model's raw coefficients and standard errors into the values a
regression table shows: p-values from the F(1, df) distribution and,
optionally, standardized coefficients.

p-values:
    p = P(F(1, df) > t²),  t = coef / stderr

This is the two-sided t-test p-value for every model type, nonlinear
ones included. For models whose coefficients are asymptotically normal
rather than t-distributed this is an approximation that regtables does
not correct.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from regtables.core.capabilities import (
    CAPABILITY_MODEL_MATRIX,
    CAPABILITY_RESPONSE,
    CAPABILITY_STANDARDIZE,
    get_capability,
    has_capability,
)
from regtables.core.validation import check_consistent_length, check_dof, check_vector


def t_statistics(
    coefvalues: ArrayLike,
    coefstderrors: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    t-statistics for coefficients.

    A zero standard error gives ±inf (or NaN for a zero coefficient).
    """
    coefs = check_vector(coefvalues, 'coefvalues')
    ses = check_vector(coefstderrors, 'coefstderrors')
    check_consistent_length(coefs, ses, names=('coefvalues', 'coefstderrors'))
    with np.errstate(divide='ignore', invalid='ignore'):
        return coefs / ses


def coef_pvalues(
    coefvalues: ArrayLike,
    coefstderrors: ArrayLike,
    df_residual: int,
) -> NDArray[np.floating[Any]]:
    """
    Two-sided p-values from the upper tail of F(1, df_residual).

    Edge cases:
        - zero standard error: p-value 0, whatever the coefficient
        - df_residual <= 0 or NaN: all p-values NaN (no reference distribution)
        - NaN coefficient or standard error: NaN

    Raises:
        DimensionError: If the vectors differ in length
        ValidationError: If df_residual is not an integer
    """
    t = t_statistics(coefvalues, coefstderrors)
    df = check_dof(df_residual, 'df_residual')
    if df <= 0:
        return np.full(t.shape, np.nan, dtype=np.float64)
    ses = np.asarray(coefstderrors, dtype=np.float64)
    with np.errstate(invalid='ignore'):
        p = stats.f.sf(t ** 2, 1, df)
    return np.where(ses == 0, 0.0, p)


def standardize_coef_values(
    std_X: ArrayLike,
    std_Y: float,
    coefvalues: ArrayLike,
    coefstderrors: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Rescale coefficients and standard errors to standardized units.

        coef' = coef * sd(x) / sd(y)
        se'   = se   * sd(x) / sd(y)

    A regressor with zero standard deviation (the constant) is scaled by
    1 instead, so the intercept reads as the number of response standard
    deviations away from zero.

    Raises:
        DimensionError: If std_X does not match the number of coefficients
    """
    sx = check_vector(std_X, 'std_X')
    coefs = check_vector(coefvalues, 'coefvalues')
    ses = check_vector(coefstderrors, 'coefstderrors')
    check_consistent_length(
        sx, coefs, ses, names=('std_X', 'coefvalues', 'coefstderrors')
    )
    sx = np.where(sx == 0, 1.0, sx)
    sy = float(std_Y)
    return coefs * sx / sy, ses * sx / sy


def standardize_model_coefs(
    model: Any,
    coefvalues: ArrayLike,
    coefstderrors: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Standardize a model's coefficients, if the model allows it.

    In order of preference:
        1. the model's own standardize_coef_values(coefvalues, coefstderrors)
        2. sample standard deviations of model_matrix columns and response
        3. warn and return the values unchanged
    """
    coefs = check_vector(coefvalues, 'coefvalues')
    ses = check_vector(coefstderrors, 'coefstderrors')

    if has_capability(model, CAPABILITY_STANDARDIZE):
        new_coefs, new_ses = getattr(model, CAPABILITY_STANDARDIZE)(coefs, ses)
        return check_vector(new_coefs, 'coefvalues'), check_vector(new_ses, 'coefstderrors')

    if has_capability(model, CAPABILITY_MODEL_MATRIX) and has_capability(model, CAPABILITY_RESPONSE):
        X = np.asarray(get_capability(model, CAPABILITY_MODEL_MATRIX), dtype=np.float64)
        y = np.asarray(get_capability(model, CAPABILITY_RESPONSE), dtype=np.float64)
        if X.ndim == 1:
            X = X[:, np.newaxis]
        std_X = np.std(X, axis=0, ddof=1)
        std_Y = float(np.std(y, ddof=1))
        return standardize_coef_values(std_X, std_Y, coefs, ses)

    warnings.warn(
        f"standardize_coef is not possible for {type(model).__name__}",
        UserWarning,
        stacklevel=2,
    )
    return coefs, ses

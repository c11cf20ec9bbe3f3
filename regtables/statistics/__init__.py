"""
Regression statistics.

Public API:
    construct(variant, model) -> RegressionStatistic   (never raises)
    make_reg_stats(model, stat) -> statistic, literal or (statistic, label)
    label(render, variant) -> str
    regression_type(model) -> RegressionType
    default_regression_statistics(model) -> list of variants
    register_extractor(variant, model_type) -> decorator

Example:
    >>> from regtables.statistics import construct, AIC
    >>> str(construct(AIC, model_without_loglikelihood))
    ''
"""

from regtables.statistics._common import (
    RegressionStatistic,
    UnderStatistic,
    TStat,
    STDError,
    CoefValue,
    RegressionType,
    NONLINEAR,
)
from regtables.statistics.registry import (
    Nobs,
    R2,
    R2McFadden,
    R2CoxSnell,
    R2Nagelkerke,
    R2Deviance,
    AdjR2,
    AdjR2McFadden,
    AdjR2Deviance,
    DOF,
    LogLikelihood,
    AIC,
    AICC,
    BIC,
    FStat,
    FStatPValue,
    FStatIV,
    FStatIVPValue,
    R2Within,
    ALL_STATISTICS,
)
from regtables.statistics.extract import (
    register_extractor,
    unregister_extractor,
    find_extractor,
    safe_extract,
    construct,
    make_reg_stats,
    label,
    regression_type,
    default_statistics_for,
    default_regression_statistics,
)

__all__ = [
    # Base types
    "RegressionStatistic",
    "UnderStatistic",
    "TStat",
    "STDError",
    "CoefValue",
    "RegressionType",
    "NONLINEAR",
    # Variants
    "Nobs",
    "R2",
    "R2McFadden",
    "R2CoxSnell",
    "R2Nagelkerke",
    "R2Deviance",
    "AdjR2",
    "AdjR2McFadden",
    "AdjR2Deviance",
    "DOF",
    "LogLikelihood",
    "AIC",
    "AICC",
    "BIC",
    "FStat",
    "FStatPValue",
    "FStatIV",
    "FStatIVPValue",
    "R2Within",
    "ALL_STATISTICS",
    # Extraction
    "register_extractor",
    "unregister_extractor",
    "find_extractor",
    "safe_extract",
    "construct",
    "make_reg_stats",
    "label",
    "regression_type",
    "default_statistics_for",
    "default_regression_statistics",
]

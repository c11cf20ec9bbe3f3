"""
Building SimpleRegressionResult records.

summarize() is the entry point for a fitted model. build_result() is
the lower-level entry point for callers (and model extensions) that
have already computed coefficients, standard errors and p-values, e.g.
clustered standard errors or a model-specific p-value.

Every accepted shape of formula and names is normalized here and ends
in the same canonical constructor, _build().
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from regtables.coefficients.normalize import coef_pvalues, standardize_model_coefs
from regtables.core.capabilities import (
    CAPABILITY_COEFFICIENTS,
    CAPABILITY_DF_RESIDUAL,
    CAPABILITY_FE_TERMS,
    CAPABILITY_FORMULA,
    CAPABILITY_OTHER_STATS,
    CAPABILITY_STANDARD_ERRORS,
    get_capability,
    has_capability,
    require_capability,
    require_capabilities,
)
from regtables.core.exceptions import ValidationError
from regtables.core.validation import check_consistent_length, check_dof, check_vector
from regtables.names.coefnames import FixedEffectCoefName
from regtables.names.terms import get_coefname
from regtables.names.transform import replace_name
from regtables.render import RenderType
from regtables.result.solution import SimpleRegressionResult
from regtables.statistics._common import RegressionType
from regtables.statistics.extract import (
    default_regression_statistics,
    make_reg_stats,
    regression_type,
)


FIXED_EFFECTS_KEY = 'fixedeffects'


def _split_formula(formula: Any) -> tuple[Any, Any]:
    """Return (lhs, rhs) from a formula object or a (lhs, rhs) pair."""
    if hasattr(formula, 'lhs') and hasattr(formula, 'rhs'):
        return formula.lhs, formula.rhs
    if isinstance(formula, tuple) and len(formula) == 2:
        return formula
    raise ValidationError(
        f"formula: expected an object with lhs and rhs or a (lhs, rhs) pair, "
        f"got {type(formula).__name__}"
    )


def _response_name(lhs: Any) -> Any:
    name = get_coefname(lhs)
    if isinstance(name, list):
        # several responses: the first one names the model
        if not name:
            raise ValidationError("formula: left-hand side has no terms")
        return name[0]
    return name


def _coef_names(rhs: Any) -> tuple[list[Any], list[Any]]:
    """Coefficient names and fixed-effect names found on the right-hand side."""
    names = get_coefname(rhs)
    if not isinstance(names, list):
        names = [names]
    coefnames = [n for n in names if not isinstance(n, FixedEffectCoefName)]
    fixedeffects = [n for n in names if isinstance(n, FixedEffectCoefName)]
    return coefnames, fixedeffects


def _fixed_effect_rows(
    fixedeffects: Sequence[Any],
    labels: Mapping[Any, str],
    transform_labels: Mapping[str, str],
) -> list[tuple[Any, Any]]:
    rows = []
    for fe in fixedeffects:
        if isinstance(fe, tuple) and len(fe) == 2:
            name, value = fe
        else:
            name, value = fe, True
        name = get_coefname(name)
        if not isinstance(name, FixedEffectCoefName):
            name = FixedEffectCoefName(name)
        rows.append((replace_name(name, labels, transform_labels), value))
    return rows


def _build(
    model: Any,
    responsename: Any,
    coefnames: Sequence[Any],
    coefvalues: Any,
    coefstderrors: Any,
    coefpvalues: Any,
    regression_statistics: Sequence[Any],
    reg_type: RegressionType,
    fixedeffects: Sequence[Any] | None,
    dof_residual: int,
    other: Mapping[str, Sequence[Any]],
    labels: Mapping[Any, str],
    transform_labels: Mapping[str, str],
) -> SimpleRegressionResult:
    other_data = {str(k): list(v) for k, v in other.items()}
    if fixedeffects:
        other_data.setdefault(
            FIXED_EFFECTS_KEY,
            _fixed_effect_rows(fixedeffects, labels, transform_labels),
        )
    return SimpleRegressionResult(
        responsename=replace_name(responsename, labels, transform_labels),
        coefnames=tuple(replace_name(n, labels, transform_labels) for n in coefnames),
        coefvalues=coefvalues,
        coefstderrors=coefstderrors,
        coefpvalues=coefpvalues,
        statistics=tuple(make_reg_stats(model, s) for s in regression_statistics),
        regressiontype=reg_type,
        dof_residual=dof_residual,
        other_data=other_data,
    )


def build_result(
    model: Any,
    formula: Any,
    coefvalues: Any,
    coefstderrors: Any,
    coefpvalues: Any,
    regression_statistics: Sequence[Any],
    reg_type: RegressionType | None = None,
    fixedeffects: Sequence[Any] | None = None,
    dof_residual: int | None = None,
    other: Mapping[str, Sequence[Any]] | None = None,
    *,
    labels: Mapping[Any, str] | None = None,
    transform_labels: Mapping[str, str] | None = None,
) -> SimpleRegressionResult:
    """
    Build a result record from precomputed coefficient data.

    Args:
        model: The fitted model; statistics are extracted from it
        formula: Object with lhs/rhs or a (lhs, rhs) pair. Each side may
            be a term, a tuple/list of terms, a string, a coefficient
            name, or a list of names. A list on the left-hand side uses
            its first element. Fixed-effect names on the right-hand side
            are moved to the fixed effects.
        coefvalues, coefstderrors, coefpvalues: One entry per coefficient
        regression_statistics: Statistic variants, literals, or
            (variant, label) pairs
        reg_type: Estimator tag; defaults to regression_type(model)
        fixedeffects: Fixed-effect names (or (name, value) pairs); stored
            under other_data['fixedeffects'] unless other already has them
        dof_residual: Defaults to the model's df_residual; NaN becomes
            DOF_UNDEFINED (-1)
        other: Auxiliary rows; defaults to the model's other_stats, if any
        labels: Exact renames for response, coefficient and fixed-effect names
        transform_labels: Substring renames, applied in order

    Raises:
        DimensionError: If names and values differ in length
        CapabilityError: If a needed default is missing from the model
    """
    lhs, rhs = _split_formula(formula)
    responsename = _response_name(lhs)
    coefnames, formula_fixedeffects = _coef_names(rhs)
    if fixedeffects is None and formula_fixedeffects:
        fixedeffects = formula_fixedeffects
    if reg_type is None:
        reg_type = regression_type(model)
    if dof_residual is None:
        dof_residual = require_capability(model, CAPABILITY_DF_RESIDUAL)
    if other is None:
        other = get_capability(model, CAPABILITY_OTHER_STATS) if has_capability(model, CAPABILITY_OTHER_STATS) else {}
    return _build(
        model,
        responsename,
        coefnames,
        coefvalues,
        coefstderrors,
        coefpvalues,
        regression_statistics,
        reg_type,
        fixedeffects,
        dof_residual,
        other or {},
        labels or {},
        transform_labels or {},
    )


def summarize(
    model: Any,
    standardize_coef: bool = False,
    *,
    labels: Mapping[Any, str] | None = None,
    regression_statistics: Sequence[Any] | None = None,
    transform_labels: Mapping[str, str] | None = None,
    render: RenderType | None = None,
) -> SimpleRegressionResult:
    """
    Summarize a fitted regression model.

    Args:
        model: Any object providing coefficients, standard_errors,
            df_residual, formula and is_linear (see
            regtables.core.protocols.RegressionModel)
        standardize_coef: Report standardized coefficients; warns and
            reports raw values if the model does not support it
        labels: Exact renames, e.g. {'x1': 'Capital'}
        regression_statistics: Statistics to include; defaults to
            default_regression_statistics(model)
        transform_labels: Substring renames, e.g. {'log(': 'ln('}
        render: Render context passed to default_regression_statistics

    An undefined (NaN) df_residual is recorded as DOF_UNDEFINED (-1) and
    gives NaN p-values.

    Returns:
        SimpleRegressionResult

    Raises:
        CapabilityError: If the model lacks a required capability
        DimensionError: If coefficient vectors and names differ in length

    Example:
        >>> result = summarize(model, labels={'x1': 'Capital'},
        ...                    regression_statistics=[Nobs, R2, AIC])
        >>> [str(name) for name in result.coefnames]
        ['(Intercept)', 'Capital']
    """
    required = require_capabilities(model)
    coefvalues = check_vector(required[CAPABILITY_COEFFICIENTS], 'coefficients')
    coefstderrors = check_vector(required[CAPABILITY_STANDARD_ERRORS], 'standard_errors')
    check_consistent_length(
        coefvalues, coefstderrors, names=('coefficients', 'standard_errors')
    )
    if standardize_coef:
        coefvalues, coefstderrors = standardize_model_coefs(model, coefvalues, coefstderrors)
    dof_residual = check_dof(required[CAPABILITY_DF_RESIDUAL], 'df_residual')
    coefpvalues = coef_pvalues(coefvalues, coefstderrors, dof_residual)
    if regression_statistics is None:
        regression_statistics = default_regression_statistics(model, render)
    fixedeffects = None
    if has_capability(model, CAPABILITY_FE_TERMS):
        fixedeffects = get_capability(model, CAPABILITY_FE_TERMS)
    return build_result(
        model,
        required[CAPABILITY_FORMULA],
        coefvalues,
        coefstderrors,
        coefpvalues,
        regression_statistics,
        regression_type(model),
        fixedeffects,
        dof_residual,
        labels=labels,
        transform_labels=transform_labels,
    )


def summarize_all(
    models: Sequence[Any],
    standardize_coef: bool = False,
    **kwargs: Any,
) -> list[SimpleRegressionResult]:
    """Summarize several models with the same options (one record each)."""
    return [summarize(model, standardize_coef, **kwargs) for model in models]

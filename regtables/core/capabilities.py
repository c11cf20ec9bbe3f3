"""
Capability name constants for regtables.

This module is the SINGLE SOURCE OF TRUTH for the attribute names a
regression model may expose. Import from here, never use raw strings.

Usage:
    from regtables.core.capabilities import CAPABILITY_AIC, get_capability

    aic = get_capability(model, CAPABILITY_AIC)
"""

from typing import Any

from regtables.core.exceptions import CapabilityError

# --- Required ---

CAPABILITY_COEFFICIENTS = 'coefficients'
CAPABILITY_STANDARD_ERRORS = 'standard_errors'
CAPABILITY_DF_RESIDUAL = 'df_residual'
CAPABILITY_FORMULA = 'formula'
CAPABILITY_IS_LINEAR = 'is_linear'

# --- Optional statistics ---

CAPABILITY_NOBS = 'n_observations'
CAPABILITY_R2 = 'r_squared'
CAPABILITY_ADJR2 = 'adjusted_r_squared'
CAPABILITY_PSEUDO_R2 = 'pseudo_r_squared'
CAPABILITY_ADJ_PSEUDO_R2 = 'adjusted_pseudo_r_squared'
CAPABILITY_DOF = 'dof'
CAPABILITY_LOGLIKELIHOOD = 'log_likelihood'
CAPABILITY_AIC = 'aic'
CAPABILITY_AICC = 'aicc'
CAPABILITY_BIC = 'bic'

# --- Optional extensions ---

CAPABILITY_FE_TERMS = 'fe_terms'
CAPABILITY_OTHER_STATS = 'other_stats'
CAPABILITY_REGRESSION_TYPE = 'regression_type'
CAPABILITY_DEFAULT_STATISTICS = 'default_regression_statistics'
CAPABILITY_MODEL_MATRIX = 'model_matrix'
CAPABILITY_RESPONSE = 'response'
CAPABILITY_STANDARDIZE = 'standardize_coef_values'

# Kinds accepted by pseudo_r_squared / adjusted_pseudo_r_squared
R2_KIND_MCFADDEN = 'mcfadden'
R2_KIND_COXSNELL = 'coxsnell'
R2_KIND_NAGELKERKE = 'nagelkerke'
R2_KIND_DEVIANCE = 'devianceratio'

REQUIRED_CAPABILITIES = (
    CAPABILITY_COEFFICIENTS,
    CAPABILITY_STANDARD_ERRORS,
    CAPABILITY_DF_RESIDUAL,
    CAPABILITY_FORMULA,
)


def get_capability(model: Any, name: str) -> Any:
    """
    Read a capability from a model.

    Capabilities may be plain attributes, properties, or zero-argument
    methods; callables are called.

    Raises:
        AttributeError: If the model does not expose the capability
    """
    attr = getattr(model, name)
    if callable(attr):
        return attr()
    return attr


def has_capability(model: Any, name: str) -> bool:
    """Check whether a model exposes a capability."""
    return hasattr(model, name)


def require_capability(model: Any, name: str) -> Any:
    """
    Read a capability the result record cannot be built without.

    Raises:
        CapabilityError: If the model does not expose the capability
    """
    if not has_capability(model, name):
        model_type = type(model).__name__
        raise CapabilityError(
            f"{model_type} does not provide required capability {name!r}",
            capability=name,
            model_type=model_type,
        )
    return get_capability(model, name)


def require_capabilities(
    model: Any,
    names: tuple[str, ...] = REQUIRED_CAPABILITIES,
) -> dict[str, Any]:
    """
    Read every capability a result record cannot be built without.

    Returns:
        Mapping from capability name to its value, in the order of names

    Raises:
        CapabilityError: For the first capability the model does not expose
    """
    return {name: require_capability(model, name) for name in names}


__all__ = [
    'CAPABILITY_COEFFICIENTS',
    'CAPABILITY_STANDARD_ERRORS',
    'CAPABILITY_DF_RESIDUAL',
    'CAPABILITY_FORMULA',
    'CAPABILITY_IS_LINEAR',
    'CAPABILITY_NOBS',
    'CAPABILITY_R2',
    'CAPABILITY_ADJR2',
    'CAPABILITY_PSEUDO_R2',
    'CAPABILITY_ADJ_PSEUDO_R2',
    'CAPABILITY_DOF',
    'CAPABILITY_LOGLIKELIHOOD',
    'CAPABILITY_AIC',
    'CAPABILITY_AICC',
    'CAPABILITY_BIC',
    'CAPABILITY_FE_TERMS',
    'CAPABILITY_OTHER_STATS',
    'CAPABILITY_REGRESSION_TYPE',
    'CAPABILITY_DEFAULT_STATISTICS',
    'CAPABILITY_MODEL_MATRIX',
    'CAPABILITY_RESPONSE',
    'CAPABILITY_STANDARDIZE',
    'R2_KIND_MCFADDEN',
    'R2_KIND_COXSNELL',
    'R2_KIND_NAGELKERKE',
    'R2_KIND_DEVIANCE',
    'REQUIRED_CAPABILITIES',
    'get_capability',
    'has_capability',
    'require_capability',
    'require_capabilities',
]

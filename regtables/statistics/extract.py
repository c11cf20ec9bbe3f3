"""
Safe extraction of statistics from models.

construct() is the one place where extraction failures are absorbed:
whatever goes wrong while reading a statistic from a model (a missing
capability, an unsupported kind, a numerical error) becomes an
unavailable statistic. Summarizing a model must succeed even when some
requested statistics do not apply to it.

Model packages that can compute statistics regtables cannot compute
generically (F-statistics, within R2) register an extractor for their
model type with register_extractor().
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from regtables.core.capabilities import (
    CAPABILITY_DEFAULT_STATISTICS,
    CAPABILITY_IS_LINEAR,
    CAPABILITY_REGRESSION_TYPE,
    get_capability,
    has_capability,
    require_capability,
)
from regtables.core.result import Result
from regtables.families import Gaussian
from regtables.render import RenderType, resolve_render
from regtables.statistics._common import NONLINEAR, RegressionStatistic, RegressionType
from regtables.statistics.registry import Nobs, R2, R2McFadden


Extractor = Callable[[Any], Any]

# variant -> model type -> extraction function
_EXTRACTORS: dict[type[RegressionStatistic], dict[type, Extractor]] = {}


def register_extractor(
    variant: type[RegressionStatistic],
    model_type: type,
) -> Callable[[Extractor], Extractor]:
    """
    Register how a statistic is extracted from one model type.

    The registration applies to subclasses of model_type as well; the
    most specific registration along the model's MRO wins.

    Example:
        >>> @register_extractor(FStat, MyIVModel)
        ... def _fstat(model):
        ...     return model.f_statistic
    """
    if not (isinstance(variant, type) and issubclass(variant, RegressionStatistic)):
        raise TypeError(f"variant must be a RegressionStatistic subclass, got {variant!r}")

    def decorator(fn: Extractor) -> Extractor:
        _EXTRACTORS.setdefault(variant, {})[model_type] = fn
        return fn
    return decorator


def unregister_extractor(variant: type[RegressionStatistic], model_type: type) -> None:
    """Remove a registration made with register_extractor()."""
    _EXTRACTORS.get(variant, {}).pop(model_type, None)


def find_extractor(variant: type[RegressionStatistic], model: Any) -> Extractor:
    """The registered extractor for the model's type, else the variant's own."""
    registered = _EXTRACTORS.get(variant)
    if registered:
        for klass in type(model).__mro__:
            if klass in registered:
                return registered[klass]
    return variant.extract


def safe_extract(variant: type[RegressionStatistic], model: Any) -> Result[int | float]:
    """
    Extract a statistic's value, returning failures as a Result.

    Never raises for anything the model or extractor does.
    """
    source = variant.__name__
    extractor = find_extractor(variant, model)
    try:
        raw = extractor(model)
        if raw is None:
            return Result.failure(f"{source} is not available for {type(model).__name__}", source)
        return Result.success(variant.coerce(raw), source)
    except Exception as e:
        # single failure boundary for statistic extraction
        return Result.failure(f"{type(e).__name__}: {e}", source)


def construct(variant: type[RegressionStatistic], model: Any) -> RegressionStatistic:
    """Build a statistic from a model; unavailable if extraction fails."""
    return variant(safe_extract(variant, model).value)


def make_reg_stats(model: Any, stat: Any) -> Any:
    """
    Materialize one requested statistic.

    Accepts:
        - a RegressionStatistic subclass: constructed from the model
        - a (stat, label) pair: stat materialized, label kept as the
          display label
        - anything else (a precomputed statistic or literal): passed through
    """
    if isinstance(stat, type) and issubclass(stat, RegressionStatistic):
        return construct(stat, model)
    if isinstance(stat, tuple) and len(stat) == 2 and isinstance(stat[1], str):
        return (make_reg_stats(model, stat[0]), stat[1])
    return stat


def label(render: RenderType | None, stat: Any) -> str:
    """
    Label of a statistic (class or instance) in a render context.

    (stat, label) pairs use their own label.
    """
    render = resolve_render(render)
    if isinstance(stat, tuple) and len(stat) == 2 and isinstance(stat[1], str):
        return stat[1]
    cls = stat if isinstance(stat, type) else type(stat)
    if not hasattr(cls, 'label'):
        raise TypeError(f"{cls.__name__} has no label")
    return cls.label(render)


# =====================================================================
# Regression type and default statistics
# =====================================================================

def regression_type(model: Any) -> RegressionType:
    """
    Classify a model.

    The model's own regression_type capability wins; otherwise linear
    models are tagged Gaussian and everything else 'NL'.
    """
    if has_capability(model, CAPABILITY_REGRESSION_TYPE):
        reg_type = get_capability(model, CAPABILITY_REGRESSION_TYPE)
        if isinstance(reg_type, RegressionType):
            return reg_type
        return RegressionType(reg_type)
    if require_capability(model, CAPABILITY_IS_LINEAR):
        return RegressionType(Gaussian())
    return RegressionType(NONLINEAR)


def default_statistics_for(reg_type: RegressionType) -> tuple[type[RegressionStatistic], ...]:
    """Default statistics for a regression type: R2 for OLS/IV, McFadden R2 otherwise."""
    if reg_type.is_linear:
        return (Nobs, R2)
    return (Nobs, R2McFadden)


def default_regression_statistics(
    model: Any,
    render: RenderType | None = None,
) -> list[Any]:
    """
    Default statistics to show for a model.

    Uses the model's default_regression_statistics capability when it has
    one, otherwise default_statistics_for(regression_type(model)). The
    render argument is accepted so that renderers can pass their context;
    the defaults do not depend on it.
    """
    if has_capability(model, CAPABILITY_DEFAULT_STATISTICS):
        defaults = get_capability(model, CAPABILITY_DEFAULT_STATISTICS)
        if isinstance(defaults, Sequence) and not isinstance(defaults, str):
            return list(defaults)
    return list(default_statistics_for(regression_type(model)))

"""
Common types for regression statistics.

Defines the RegressionStatistic base every registry variant derives
from, the per-coefficient under statistics (t-statistic, standard
error), CoefValue, and the RegressionType tag shown in the estimator row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TYPE_CHECKING
from collections.abc import Callable

import numpy as np

from regtables.families import Family, Gaussian

if TYPE_CHECKING:
    from regtables.render import RenderType


def _resolve_label(cls: type, render: 'RenderType', default: Callable[[], str]) -> str:
    override = render.label_for(cls)
    if override is not None:
        return override
    return default()


# =====================================================================
# Regression statistics
# =====================================================================

@dataclass(frozen=True)
class RegressionStatistic:
    """
    A summary statistic of a fitted model (N, R2, AIC, ...).

    Each variant is a subclass that defines how to extract its value from
    a model and how its label reads. The payload is optional: None means
    the statistic does not apply to, or could not be computed for, the
    model. An unavailable statistic prints as the empty string.

    Attributes
    ----------
    value : int, float or None
        The statistic, coerced to the variant's payload type.
    """
    value: int | float | None = None

    payload_type: ClassVar[type] = float

    def __post_init__(self):
        if self.value is not None:
            object.__setattr__(self, 'value', self.coerce(self.value))

    @classmethod
    def coerce(cls, raw: Any) -> int | float:
        """
        Convert a raw extracted value to the payload type.

        Raises:
            ValueError: If an integer payload gets a non-integral value
        """
        if isinstance(raw, np.ndarray):
            raw = raw.item()
        if cls.payload_type is int and not float(raw).is_integer():
            raise ValueError(f"{cls.__name__} expects an integer, got {raw!r}")
        return cls.payload_type(raw)

    @classmethod
    def extract(cls, model: Any) -> Any:
        """
        Read the raw value from a model.

        May raise anything; callers go through
        regtables.statistics.extract.construct, which never raises.
        The base implementation is the always-unavailable placeholder.
        """
        return None

    @classmethod
    def default_label(cls, render: 'RenderType') -> str:
        raise NotImplementedError

    @classmethod
    def label(cls, render: 'RenderType') -> str:
        """Label in the given render context (overrides first)."""
        return _resolve_label(cls, render, lambda: cls.default_label(render))

    @property
    def is_available(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        if self.value is None:
            return ''
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        if self.value is None:
            return ''
        return format(self.value, format_spec)


# =====================================================================
# Statistics shown under each coefficient
# =====================================================================

@dataclass(frozen=True)
class UnderStatistic:
    """Per-coefficient statistic shown beneath the coefficient."""
    value: float

    @classmethod
    def compute(cls, stderror: float, coef: float) -> UnderStatistic:
        raise NotImplementedError


@dataclass(frozen=True)
class TStat(UnderStatistic):
    """t-statistic: coefficient / standard error."""

    @classmethod
    def compute(cls, stderror: float, coef: float) -> TStat:
        with np.errstate(divide='ignore', invalid='ignore'):
            return cls(float(np.divide(coef, stderror)))


@dataclass(frozen=True)
class STDError(UnderStatistic):
    """The standard error itself."""

    @classmethod
    def compute(cls, stderror: float, coef: float) -> STDError:
        return cls(float(stderror))


@dataclass(frozen=True)
class CoefValue:
    """A coefficient together with its p-value."""
    value: float
    pvalue: float


# =====================================================================
# Regression type
# =====================================================================

NONLINEAR = 'NL'


@dataclass(frozen=True)
class RegressionType:
    """
    Classification of a model for the "Estimator" row.

    Attributes
    ----------
    value : Family or str
        A distribution family for linear and generalized linear models,
        otherwise a string tag ('NL' for generic nonlinear models).
    is_iv : bool
        Whether the model is instrumented.
    """
    value: Family | str
    is_iv: bool = False

    @property
    def is_linear(self) -> bool:
        return isinstance(self.value, Gaussian) and self.value.link == 'identity'

    def display_value(self) -> str:
        if isinstance(self.value, Family):
            if self.is_linear:
                return 'IV' if self.is_iv else 'OLS'
            return self.value.display_name
        return str(self.value)

    @classmethod
    def default_label(cls, render: 'RenderType') -> str:
        return 'Estimator'

    @classmethod
    def label(cls, render: 'RenderType') -> str:
        return _resolve_label(cls, render, lambda: cls.default_label(render))

    def __str__(self) -> str:
        return self.display_value()

"""
Unified regression result record.

SimpleRegressionResult holds everything a regression table needs about
one fitted model, in a form that no longer depends on the model's type:
names, coefficients, standard errors, p-values, summary statistics, the
estimator tag, residual degrees of freedom and an open-ended bag of
auxiliary rows (fixed effects, clustering, random effects).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

import numpy as np

from regtables.core.exceptions import ValidationError
from regtables.core.validation import check_consistent_length, check_dof, check_vector
from regtables.statistics._common import CoefValue, RegressionType, TStat, UnderStatistic


def _freeze_other_data(other: Mapping[str, Sequence[Any]]) -> Mapping[str, tuple]:
    frozen = {}
    for key, rows in other.items():
        pairs = []
        for row in rows:
            row = tuple(row)
            if len(row) != 2:
                raise ValidationError(
                    f"other_data[{key!r}]: expected (value, label) pairs, got {row!r}"
                )
            pairs.append(row)
        frozen[str(key)] = tuple(pairs)
    return MappingProxyType(frozen)


@dataclass(frozen=True, eq=False)
class SimpleRegressionResult:
    """
    Summary of one fitted regression model.

    Immutable after construction; all sequences are stored as tuples.

    Attributes:
        responsename: Name of the response variable
        coefnames: Coefficient names, in model order
        coefvalues: Coefficient estimates
        coefstderrors: Standard errors
        coefpvalues: p-values
        statistics: Requested summary statistics; each entry is a
            RegressionStatistic, a precomputed literal, or a
            (statistic, label) pair
        regressiontype: Estimator tag
        dof_residual: Residual degrees of freedom as reported by the
            model (negative sentinels are kept, NaN becomes
            DOF_UNDEFINED, -1)
        other_data: Auxiliary rows keyed by name, each a tuple of
            (value, label) pairs

    Raises:
        DimensionError: If names, values, standard errors and p-values
            differ in length
    """
    responsename: Any
    coefnames: tuple[Any, ...]
    coefvalues: tuple[float, ...]
    coefstderrors: tuple[float, ...]
    coefpvalues: tuple[float, ...]
    statistics: tuple[Any, ...]
    regressiontype: RegressionType
    dof_residual: int
    other_data: Mapping[str, tuple] = field(default_factory=dict)

    def __post_init__(self):
        coefnames = tuple(self.coefnames)
        values = check_vector(self.coefvalues, 'coefvalues')
        ses = check_vector(self.coefstderrors, 'coefstderrors')
        pvalues = check_vector(self.coefpvalues, 'coefpvalues')
        check_consistent_length(
            coefnames, values, ses, pvalues,
            names=('coefnames', 'coefvalues', 'coefstderrors', 'coefpvalues'),
        )
        if not isinstance(self.regressiontype, RegressionType):
            raise ValidationError(
                f"regressiontype: expected RegressionType, got {type(self.regressiontype).__name__}"
            )
        object.__setattr__(self, 'coefnames', coefnames)
        object.__setattr__(self, 'coefvalues', tuple(float(v) for v in values))
        object.__setattr__(self, 'coefstderrors', tuple(float(v) for v in ses))
        object.__setattr__(self, 'coefpvalues', tuple(float(v) for v in pvalues))
        object.__setattr__(self, 'statistics', tuple(self.statistics))
        object.__setattr__(self, 'dof_residual', check_dof(self.dof_residual, 'dof_residual'))
        object.__setattr__(self, 'other_data', _freeze_other_data(self.other_data))

    # --- Field access with fallback to the auxiliary bag ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a field, then the auxiliary data, then return default.

        Never raises for an unknown key.
        """
        if key in _FIELD_NAMES:
            return getattr(self, key)
        return self.other_data.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in _FIELD_NAMES or key in self.other_data

    # --- Derived values ---

    @property
    def n_coefficients(self) -> int:
        return len(self.coefnames)

    @property
    def t_statistics(self) -> tuple[float, ...]:
        with np.errstate(divide='ignore', invalid='ignore'):
            t = np.asarray(self.coefvalues) / np.asarray(self.coefstderrors)
        return tuple(float(v) for v in t)

    def under_statistics(self, kind: type[UnderStatistic] = TStat) -> tuple[UnderStatistic, ...]:
        """Statistic shown under each coefficient (TStat or STDError)."""
        return tuple(
            kind.compute(se, coef)
            for coef, se in zip(self.coefvalues, self.coefstderrors)
        )

    def coef_values(self) -> tuple[CoefValue, ...]:
        return tuple(
            CoefValue(value, pvalue)
            for value, pvalue in zip(self.coefvalues, self.coefpvalues)
        )

    def __repr__(self) -> str:
        return (
            f"SimpleRegressionResult(response={str(self.responsename)!r}, "
            f"n_coef={self.n_coefficients}, "
            f"regressiontype={self.regressiontype.display_value()!r}, "
            f"dof_residual={self.dof_residual})"
        )


_FIELD_NAMES = frozenset(f.name for f in fields(SimpleRegressionResult))

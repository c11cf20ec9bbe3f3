"""
pytest configuration and shared fixtures.

Fitted models are stand-ins: plain dataclasses exposing the attributes
regtables reads. No regression is ever fitted in the test suite.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest
import numpy as np

from regtables.families import Binomial
from regtables.names import FormulaTerm, InterceptTerm, Term
from regtables.statistics import RegressionType


@dataclass
class BareFit:
    """Only the required capabilities."""
    coefficients: Any
    standard_errors: Any
    df_residual: int
    formula: Any
    is_linear: bool = True


@dataclass
class LinearFit:
    """OLS-like fit with the usual statistics as attributes and methods."""
    coefficients: Any
    standard_errors: Any
    df_residual: int
    formula: Any
    is_linear: bool = True
    n_observations: int = 12
    r_squared: float = 0.8
    adjusted_r_squared: float = 0.75
    dof: int = 3

    def log_likelihood(self):
        return -20.5

    def aic(self):
        return 47.0

    def aicc(self):
        return 50.0

    def bic(self):
        return 48.5


@dataclass
class LogitFit:
    """GLM-like fit: pseudo R2 by kind, family given by the model."""
    coefficients: Any
    standard_errors: Any
    df_residual: int
    formula: Any
    is_linear: bool = False
    n_observations: int = 200
    pseudo: dict = field(default_factory=lambda: {'mcfadden': 0.21, 'coxsnell': 0.18})

    def pseudo_r_squared(self, kind):
        if kind not in self.pseudo:
            raise ValueError(f"{kind} not supported")
        return self.pseudo[kind]

    def regression_type(self):
        return RegressionType(Binomial())


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_formula():
    return FormulaTerm(Term('y'), (InterceptTerm(), Term('x1')))


@pytest.fixture
def bare_model(simple_formula):
    return BareFit(
        coefficients=np.array([2.0, 0.5]),
        standard_errors=np.array([1.0, 0.25]),
        df_residual=10,
        formula=simple_formula,
    )


@pytest.fixture
def linear_model(simple_formula):
    return LinearFit(
        coefficients=np.array([2.0, 0.5]),
        standard_errors=np.array([1.0, 0.25]),
        df_residual=10,
        formula=simple_formula,
    )


@pytest.fixture
def logit_model():
    return LogitFit(
        coefficients=np.array([-1.2, 0.8, 0.05]),
        standard_errors=np.array([0.4, 0.2, 0.1]),
        df_residual=197,
        formula=FormulaTerm(Term('default'), (InterceptTerm(), Term('income'), Term('age'))),
    )

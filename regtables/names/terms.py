"""
Formula term adapters.

regtables does not parse formulas; whatever produced the fitted model
owns that. It only needs each term to say which coefficient names it
produces. Any object with a coefnames() method works; the small term
types here cover the common shapes and are what the tests use.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Any

from regtables.names.coefnames import (
    AbstractCoefName,
    CategoricalCoefName,
    CoefName,
    FixedEffectCoefName,
    InteractedCoefName,
)


INTERCEPT_NAME = '(Intercept)'


@dataclass(frozen=True)
class Term:
    """A continuous variable or transformed variable, e.g. 'log(x)'."""
    name: str

    def coefnames(self) -> CoefName:
        return CoefName(self.name)


@dataclass(frozen=True)
class InterceptTerm:
    """The constant term."""

    def coefnames(self) -> CoefName:
        return CoefName(INTERCEPT_NAME)


@dataclass(frozen=True)
class CategoricalTerm:
    """
    A categorical variable expanded into one coefficient per level.

    levels are the levels that receive a coefficient (the base level
    already removed by the contrast coding).
    """
    name: str
    levels: tuple[str, ...]

    def coefnames(self) -> list[CategoricalCoefName]:
        return [CategoricalCoefName(self.name, str(level)) for level in self.levels]


@dataclass(frozen=True)
class InteractionTerm:
    """Interaction of several terms; one coefficient per combination."""
    terms: tuple[Any, ...]

    def coefnames(self) -> list[InteractedCoefName]:
        parts = []
        for term in self.terms:
            names = get_coefname(term)
            parts.append(names if isinstance(names, list) else [names])
        return [InteractedCoefName(combo) for combo in product(*parts)]


@dataclass(frozen=True)
class FixedEffectTerm:
    """A fixed effect, e.g. fe(firm)."""
    name: str

    def coefnames(self) -> FixedEffectCoefName:
        return FixedEffectCoefName(self.name)


@dataclass(frozen=True)
class FormulaTerm:
    """Left- and right-hand side of a fitted formula."""
    lhs: Any
    rhs: Any


def get_coefname(term: Any) -> Any:
    """
    Convert a term (or terms) into coefficient names.

    Strings and structured names pass through, objects with coefnames()
    are asked for their names, tuples and lists are converted element by
    element and flattened into one list (a categorical term contributes
    one name per level).
    """
    if term is None or isinstance(term, (str, AbstractCoefName)):
        return term
    if isinstance(term, (tuple, list)):
        names = []
        for t in term:
            converted = get_coefname(t)
            if isinstance(converted, list):
                names.extend(converted)
            else:
                names.append(converted)
        return names
    if hasattr(term, 'coefnames'):
        names = term.coefnames()
        if isinstance(names, (tuple, list)):
            return get_coefname(list(names))
        return get_coefname(names)
    raise TypeError(
        f"Cannot derive a coefficient name from {type(term).__name__}; "
        f"expected str, a coefficient name, or an object with coefnames()"
    )

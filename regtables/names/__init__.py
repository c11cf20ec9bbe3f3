"""
Coefficient names and renaming.

Public API:
    get_coefname(term) -> name or list of names
    replace_name(name, exact_dict, repl_dict) -> name
    transformer(name, repl_dict) -> name
"""

from regtables.names.coefnames import (
    AbstractCoefName,
    CoefName,
    InteractedCoefName,
    CategoricalCoefName,
    FixedEffectCoefName,
    RandomEffectCoefName,
)
from regtables.names.terms import (
    Term,
    InterceptTerm,
    CategoricalTerm,
    InteractionTerm,
    FixedEffectTerm,
    FormulaTerm,
    get_coefname,
)
from regtables.names.transform import transformer, replace_name

__all__ = [
    "AbstractCoefName",
    "CoefName",
    "InteractedCoefName",
    "CategoricalCoefName",
    "FixedEffectCoefName",
    "RandomEffectCoefName",
    "Term",
    "InterceptTerm",
    "CategoricalTerm",
    "InteractionTerm",
    "FixedEffectTerm",
    "FormulaTerm",
    "get_coefname",
    "transformer",
    "replace_name",
]

"""
Coefficient name variants.

A coefficient name is either a plain string or one of the structured
variants below. Structured names keep the parts of a term separate
(the two sides of an interaction, a categorical variable and its level)
so that renaming rules can be applied to each part and renderers can
lay the parts out as they like.

All variants are frozen and hashable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union


class AbstractCoefName:
    """Base class for structured coefficient names."""

    def map_strings(self, fn: Callable[[str], str]) -> 'AbstractCoefName':
        """Return the same variant with fn applied to every string part."""
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


NameLike = Union[str, AbstractCoefName]


def _map_part(part: NameLike, fn: Callable[[str], str]) -> NameLike:
    if isinstance(part, AbstractCoefName):
        return part.map_strings(fn)
    return fn(part)


@dataclass(frozen=True)
class CoefName(AbstractCoefName):
    """A single named term, e.g. 'x1' or 'log(income)'."""
    name: str

    def map_strings(self, fn: Callable[[str], str]) -> CoefName:
        return CoefName(fn(self.name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class InteractedCoefName(AbstractCoefName):
    """Interaction of two or more terms, shown as 'a & b'."""
    names: tuple[NameLike, ...]

    def __post_init__(self):
        # lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, 'names', tuple(self.names))

    def map_strings(self, fn: Callable[[str], str]) -> InteractedCoefName:
        return InteractedCoefName(tuple(_map_part(n, fn) for n in self.names))

    def __str__(self) -> str:
        return ' & '.join(str(n) for n in self.names)


@dataclass(frozen=True)
class CategoricalCoefName(AbstractCoefName):
    """One level of a categorical term, shown as 'name: level'."""
    name: str
    level: str

    def map_strings(self, fn: Callable[[str], str]) -> CategoricalCoefName:
        return CategoricalCoefName(fn(self.name), fn(self.level))

    def __str__(self) -> str:
        return f"{self.name}: {self.level}"


@dataclass(frozen=True)
class FixedEffectCoefName(AbstractCoefName):
    """A fixed effect absorbed by the model rather than estimated."""
    name: NameLike

    def map_strings(self, fn: Callable[[str], str]) -> FixedEffectCoefName:
        return FixedEffectCoefName(_map_part(self.name, fn))

    def __str__(self) -> str:
        return str(self.name)


@dataclass(frozen=True)
class RandomEffectCoefName(AbstractCoefName):
    """A random effect of rhs grouped by lhs, shown as 'lhs | rhs'."""
    rhs: NameLike
    lhs: NameLike

    def map_strings(self, fn: Callable[[str], str]) -> RandomEffectCoefName:
        return RandomEffectCoefName(_map_part(self.rhs, fn), _map_part(self.lhs, fn))

    def __str__(self) -> str:
        return f"{self.lhs} | {self.rhs}"

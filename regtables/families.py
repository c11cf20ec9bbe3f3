"""
Distribution family tags.

A RegressionType for a linear or generalized linear model carries one of
these families. Unlike a fitting library, regtables only needs to know
which family and link a model used so that the estimator column can read
"OLS", "Binomial", "Poisson", ...

Each Family defines:
- a canonical name ('gaussian', 'binomial', ...)
- a link name, defaulting to the canonical link
- a display name used in the "Estimator" row

References:
    McCullagh, P., & Nelder, J. A. (1989). Generalized Linear Models (2nd ed.)
"""

from __future__ import annotations

from abc import ABC, abstractmethod


_VALID_LINKS = frozenset({'identity', 'logit', 'probit', 'log', 'inverse', 'cloglog'})


def _resolve_link(link: str | None, default: str) -> str:
    """Resolve a link argument to a link name."""
    if link is None:
        return default
    if isinstance(link, str):
        if link.lower() not in _VALID_LINKS:
            valid = ', '.join(sorted(_VALID_LINKS))
            raise ValueError(f"Unknown link: {link!r}. Valid links: {valid}")
        return link.lower()
    raise TypeError(f"link must be str, got {type(link).__name__}")


# =====================================================================
# Family base class
# =====================================================================

class Family(ABC):
    """
    Distribution family tag.

    Families compare equal when they are the same family with the same
    link, so RegressionType values can be compared and hashed.
    """

    def __init__(self, link: str | None = None):
        self._link = _resolve_link(link, self._default_link())

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def _default_link(self) -> str:
        ...

    @property
    def link(self) -> str:
        return self._link

    @property
    def display_name(self) -> str:
        """Name shown in the estimator row."""
        return self.name.capitalize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Family):
            return NotImplemented
        return self.name == other.name and self.link == other.link

    def __hash__(self) -> int:
        return hash((self.name, self.link))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(link={self._link!r})"


# =====================================================================
# Concrete families
# =====================================================================

class Gaussian(Family):
    """Gaussian (Normal) family. Default link: identity."""

    @property
    def name(self) -> str:
        return 'gaussian'

    def _default_link(self) -> str:
        return 'identity'


class Binomial(Family):
    """Binomial family. Default link: logit."""

    @property
    def name(self) -> str:
        return 'binomial'

    def _default_link(self) -> str:
        return 'logit'


class Poisson(Family):
    """Poisson family. Default link: log."""

    @property
    def name(self) -> str:
        return 'poisson'

    def _default_link(self) -> str:
        return 'log'


class Gamma(Family):
    """Gamma family. Default link: inverse."""

    @property
    def name(self) -> str:
        return 'gamma'

    def _default_link(self) -> str:
        return 'inverse'


# =====================================================================
# Family name → class mapping + resolver
# =====================================================================

_FAMILY_CLASSES: dict[str, type[Family]] = {
    'gaussian': Gaussian,
    'normal': Gaussian,
    'binomial': Binomial,
    'poisson': Poisson,
    'gamma': Gamma,
}


def resolve_family(family: str | Family) -> Family:
    """Resolve a family argument to a Family instance.

    Args:
        family: Either a string name ('gaussian', 'binomial', 'poisson',
                'gamma') or a Family instance (passed through).

    Returns:
        Family instance.

    Raises:
        ValueError: If string name is not recognized.
        TypeError: If argument is neither string nor Family.
    """
    if isinstance(family, Family):
        return family
    if isinstance(family, str):
        cls = _FAMILY_CLASSES.get(family.lower())
        if cls is None:
            valid = ', '.join(
                sorted(k for k in _FAMILY_CLASSES.keys() if k != 'normal')
            )
            raise ValueError(
                f"Unknown family: {family!r}. Valid families: {valid}"
            )
        return cls()
    raise TypeError(f"family must be str or Family, got {type(family).__name__}")

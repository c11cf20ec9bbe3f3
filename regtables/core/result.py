"""
Generic extraction result for regtables.

Every extraction from a model (a statistic, an optional capability)
returns a Result[P] instead of raising. The Result either carries a
value or records why no value could be produced.

Design decisions:
    - Generic over payload P for type safety
    - error is a string, not the exception, so results stay hashable
      and comparable
    - Immutable (frozen=True)
"""

from dataclasses import dataclass
from typing import TypeVar, Generic

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of a single extraction.

    Type Parameters:
        P: The payload type (int, float, ...)

    Attributes:
        value: Extracted payload, or None if unavailable
        error: Description of the failure, or None on success
        source: Name of what was extracted (capability or statistic)

    Examples:
        >>> Result(value=0.83, source='r_squared')
        >>> Result(value=None, error="AttributeError: 'Fit' object has "
        ...        "no attribute 'aic'", source='AIC')
    """
    value: P | None
    error: str | None = None
    source: str = ''

    @property
    def ok(self) -> bool:
        """True if a value was produced."""
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: P, source: str = '') -> 'Result[P]':
        return cls(value=value, source=source)

    @classmethod
    def failure(cls, error: str, source: str = '') -> 'Result[P]':
        return cls(value=None, error=error, source=source)

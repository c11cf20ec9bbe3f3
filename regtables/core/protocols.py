"""
Core protocols for regtables.

These define structural interfaces that regression models and render
contexts must satisfy. We use Protocol (structural typing) rather than
ABC (nominal typing) so any fitted model can be summarized without
inheriting from a regtables class.

Design Principles:
    - Minimal contracts: prescribe only what a result record cannot
      be built without
    - Capability-driven: everything else is optional and looked up by
      name (see regtables.core.capabilities)
"""

from typing import Protocol, Any, runtime_checkable
from collections.abc import Sequence


@runtime_checkable
class RegressionModel(Protocol):
    """
    Minimal protocol for a fitted regression model.

    Optional capabilities (n_observations, r_squared, aic, fe_terms, ...)
    are deliberately not part of the protocol; a model that lacks them
    still summarizes, with the corresponding statistics unavailable.
    """

    @property
    def coefficients(self) -> Sequence[float]:
        """Estimated coefficient values, in formula order."""
        ...

    @property
    def standard_errors(self) -> Sequence[float]:
        """Standard errors, same order as coefficients."""
        ...

    @property
    def df_residual(self) -> int:
        """Residual degrees of freedom."""
        ...

    @property
    def formula(self) -> Any:
        """
        Formula schema.

        Either an object with .lhs and .rhs attributes or a (lhs, rhs)
        pair. Terms must expose coefnames(), or be strings or
        coefficient names.
        """
        ...

    @property
    def is_linear(self) -> bool:
        """Whether the model is a linear model."""
        ...


@runtime_checkable
class RenderContext(Protocol):
    """
    Protocol for the output style labels are rendered for.

    Only the label layer lives in regtables; text, LaTeX and HTML writers
    belong to the rendering collaborator.
    """

    def label_p(self) -> str:
        """How the letter p is written (p, $p$, <i>p</i>)."""
        ...

    def label_for(self, variant: type) -> str | None:
        """Label override for a variant, or None to use the default."""
        ...

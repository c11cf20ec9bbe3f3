"""
Render contexts.

A render context decides how labels read in a given output style. The
statistic registry asks the render context first and falls back to each
variant's default label, so overriding the label of R2 in LaTeX output
also changes "Adjusted R2", "McFadden R2" and "Within-R2".

Writing tables (text, LaTeX, HTML) is the job of the rendering
collaborator; nothing here produces markup beyond label strings.
"""

from __future__ import annotations

from collections.abc import Mapping


class RenderType:
    """
    Base render context.

    Args:
        label_overrides: Map from variant class name (e.g. 'R2', 'Nobs',
            'RegressionType') to the label to use instead of the default.
            Overrides given here take precedence over the class-level
            defaults of the render type.
    """

    default_overrides: Mapping[str, str] = {}

    def __init__(self, label_overrides: Mapping[str, str] | None = None):
        overrides = dict(self.default_overrides)
        if label_overrides:
            overrides.update(label_overrides)
        self._overrides = overrides

    @property
    def label_overrides(self) -> dict[str, str]:
        return dict(self._overrides)

    def label_p(self) -> str:
        return 'p'

    def label_for(self, variant: type) -> str | None:
        return self._overrides.get(variant.__name__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderType):
            return NotImplemented
        return type(self) is type(other) and self._overrides == other._overrides

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self._overrides.items()))))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AsciiTable(RenderType):
    """Plain text output."""
    pass


class LatexTable(RenderType):
    """LaTeX output."""

    default_overrides = {'R2': '$R^2$'}

    def label_p(self) -> str:
        return '$p$'


class HtmlTable(RenderType):
    """HTML output."""

    default_overrides = {'R2': 'R<sup>2</sup>'}

    def label_p(self) -> str:
        return '<i>p</i>'


DEFAULT_RENDER = AsciiTable()


def resolve_render(render: RenderType | None) -> RenderType:
    """Use the default plain-text render context when none is given."""
    return DEFAULT_RENDER if render is None else render

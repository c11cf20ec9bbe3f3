"""
regtables: unified summaries of fitted regression models.

Takes fitted models of any kind (linear, generalized linear, instrumented,
fixed effects, ...) that expose a small introspection contract and turns
each into one SimpleRegressionResult: names, coefficients, standard
errors, p-values, summary statistics and auxiliary rows, ready for a
table renderer.

Submodules:
    statistics: Statistic registry and safe extraction
    coefficients: p-values and standardized coefficients
    names: Coefficient names and renaming rules
    result: The unified record and its builders
    render: Render contexts for labels
    families: Distribution family tags
"""

__version__ = "0.1.0"

from regtables import statistics
from regtables import names
from regtables.result import SimpleRegressionResult, build_result, summarize, summarize_all

__all__ = [
    "__version__",
    "statistics",
    "names",
    "SimpleRegressionResult",
    "build_result",
    "summarize",
    "summarize_all",
]

"""
Regression statistic variants.

One class per statistic. Each class says where its value comes from
(extract) and how its label reads (default_label). Labels of the R2
family are composed from the label of the base variant, resolved through
the render context, so that a render type which writes R2 as $R^2$ gets
"Adjusted $R^2$" and "Within-$R^2$" for free.

F-statistics and the within R2 have no generic definition; they stay
unavailable unless an extractor is registered for the model type
(see regtables.statistics.extract.register_extractor).
"""

from __future__ import annotations

from typing import Any, ClassVar, TYPE_CHECKING

from regtables.core.capabilities import (
    CAPABILITY_ADJ_PSEUDO_R2,
    CAPABILITY_ADJR2,
    CAPABILITY_AIC,
    CAPABILITY_AICC,
    CAPABILITY_BIC,
    CAPABILITY_DOF,
    CAPABILITY_LOGLIKELIHOOD,
    CAPABILITY_NOBS,
    CAPABILITY_PSEUDO_R2,
    CAPABILITY_R2,
    R2_KIND_COXSNELL,
    R2_KIND_DEVIANCE,
    R2_KIND_MCFADDEN,
    R2_KIND_NAGELKERKE,
    get_capability,
)
from regtables.statistics._common import RegressionStatistic

if TYPE_CHECKING:
    from regtables.render import RenderType


class _CapabilityStatistic(RegressionStatistic):
    """Statistic read directly from one model capability."""

    capability: ClassVar[str]

    @classmethod
    def extract(cls, model: Any) -> Any:
        return get_capability(model, cls.capability)


class _PseudoR2Statistic(RegressionStatistic):
    """Statistic read from pseudo_r_squared(kind) or its adjusted variant."""

    capability: ClassVar[str]
    kind: ClassVar[str]

    @classmethod
    def extract(cls, model: Any) -> Any:
        return getattr(model, cls.capability)(cls.kind)


# =====================================================================
# Sample size and R2 family
# =====================================================================

class Nobs(_CapabilityStatistic):
    """Number of observations."""
    payload_type = int
    capability = CAPABILITY_NOBS

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'N'


class R2(_CapabilityStatistic):
    capability = CAPABILITY_R2

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'R2'


class R2McFadden(_PseudoR2Statistic):
    capability = CAPABILITY_PSEUDO_R2
    kind = R2_KIND_MCFADDEN

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'McFadden ' + R2.label(render)


class R2CoxSnell(_PseudoR2Statistic):
    capability = CAPABILITY_PSEUDO_R2
    kind = R2_KIND_COXSNELL

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Cox-Snell ' + R2.label(render)


class R2Nagelkerke(_PseudoR2Statistic):
    capability = CAPABILITY_PSEUDO_R2
    kind = R2_KIND_NAGELKERKE

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Nagelkerke ' + R2.label(render)


class R2Deviance(_PseudoR2Statistic):
    capability = CAPABILITY_PSEUDO_R2
    kind = R2_KIND_DEVIANCE

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Deviance ' + R2.label(render)


class AdjR2(_CapabilityStatistic):
    capability = CAPABILITY_ADJR2

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Adjusted ' + R2.label(render)


class AdjR2McFadden(_PseudoR2Statistic):
    capability = CAPABILITY_ADJ_PSEUDO_R2
    kind = R2_KIND_MCFADDEN

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'McFadden ' + AdjR2.label(render)


class AdjR2Deviance(_PseudoR2Statistic):
    capability = CAPABILITY_ADJ_PSEUDO_R2
    kind = R2_KIND_DEVIANCE

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Deviance ' + AdjR2.label(render)


# =====================================================================
# Likelihood-based statistics
# =====================================================================

class DOF(_CapabilityStatistic):
    """Model degrees of freedom (number of estimated parameters)."""
    payload_type = int
    capability = CAPABILITY_DOF

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Degrees of Freedom'


class LogLikelihood(_CapabilityStatistic):
    capability = CAPABILITY_LOGLIKELIHOOD

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Log Likelihood'


class AIC(_CapabilityStatistic):
    capability = CAPABILITY_AIC

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'AIC'


class AICC(_CapabilityStatistic):
    """Small-sample corrected AIC."""
    capability = CAPABILITY_AICC

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'AICC'


class BIC(_CapabilityStatistic):
    capability = CAPABILITY_BIC

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'BIC'


# =====================================================================
# Placeholders (need a registered extractor)
# =====================================================================

class FStat(RegressionStatistic):
    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'F'


class FStatPValue(RegressionStatistic):
    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return FStat.label(render) + '-test ' + render.label_p() + ' value'


class FStatIV(RegressionStatistic):
    """First-stage F statistic of an instrumented model."""

    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'First-stage ' + FStat.label(render) + ' statistic'


class FStatIVPValue(RegressionStatistic):
    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'First-stage ' + render.label_p() + ' value'


class R2Within(RegressionStatistic):
    @classmethod
    def default_label(cls, render: RenderType) -> str:
        return 'Within-' + R2.label(render)


ALL_STATISTICS: tuple[type[RegressionStatistic], ...] = (
    Nobs,
    R2,
    R2McFadden,
    R2CoxSnell,
    R2Nagelkerke,
    R2Deviance,
    AdjR2,
    AdjR2McFadden,
    AdjR2Deviance,
    DOF,
    LogLikelihood,
    AIC,
    AICC,
    BIC,
    FStat,
    FStatPValue,
    FStatIV,
    FStatIVPValue,
    R2Within,
)

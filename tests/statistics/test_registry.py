"""
Tests for the regression statistic variants.

Validates:
    - Payload coercion (int for N and DOF, float otherwise)
    - Empty rendering of unavailable statistics
    - Default labels and their composition
    - Label overrides through render contexts
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from regtables.render import AsciiTable, HtmlTable, LatexTable
from regtables.statistics import (
    AIC,
    AICC,
    ALL_STATISTICS,
    BIC,
    DOF,
    AdjR2,
    AdjR2Deviance,
    AdjR2McFadden,
    FStat,
    FStatIV,
    FStatIVPValue,
    FStatPValue,
    LogLikelihood,
    Nobs,
    R2,
    R2CoxSnell,
    R2Deviance,
    R2McFadden,
    R2Nagelkerke,
    R2Within,
    RegressionStatistic,
    label,
)


# ═══════════════════════════════════════════════════════════════════════
# Values
# ═══════════════════════════════════════════════════════════════════════


class TestValues:

    def test_nobs_is_int(self):
        stat = Nobs(np.int64(120))
        assert stat.value == 120
        assert isinstance(stat.value, int)

    def test_dof_from_integral_float(self):
        assert DOF(4.0).value == 4

    def test_r2_is_float(self):
        stat = R2(np.float64(0.5))
        assert isinstance(stat.value, float)

    def test_zero_dim_array_unwrapped(self):
        assert AIC(np.array(12.5)).value == 12.5

    def test_default_is_unavailable(self):
        stat = BIC()
        assert stat.value is None
        assert stat.is_available is False

    def test_available(self):
        assert R2(0.3).is_available is True

    def test_str_of_unavailable_is_empty(self):
        assert str(LogLikelihood(None)) == ''

    def test_str_of_value(self):
        assert str(Nobs(100)) == '100'
        assert str(R2(0.25)) == '0.25'

    def test_format_of_value(self):
        assert f"{R2(0.25):.3f}" == '0.250'
        assert f"{Nobs(1200):,}" == '1,200'

    def test_format_of_unavailable_is_empty(self):
        assert f"{R2():.3f}" == ''
        assert format(Nobs(None), 'd') == ''

    def test_fractional_int_payload_rejected(self):
        with pytest.raises(ValueError, match="Nobs expects an integer"):
            Nobs(12.7)

    def test_repr_names_variant(self):
        assert repr(AdjR2(0.5)) == 'AdjR2(value=0.5)'

    def test_frozen(self):
        stat = R2(0.5)
        with pytest.raises(FrozenInstanceError):
            stat.value = 0.6

    def test_equality_is_per_variant(self):
        assert R2(0.5) == R2(0.5)
        assert R2(0.5) != AdjR2(0.5)

    def test_all_variants_are_statistics(self):
        assert len(ALL_STATISTICS) == 19
        for variant in ALL_STATISTICS:
            assert issubclass(variant, RegressionStatistic)
            assert str(variant()) == ''


# ═══════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════


ASCII_LABELS = [
    (Nobs, 'N'),
    (R2, 'R2'),
    (R2McFadden, 'McFadden R2'),
    (R2CoxSnell, 'Cox-Snell R2'),
    (R2Nagelkerke, 'Nagelkerke R2'),
    (R2Deviance, 'Deviance R2'),
    (AdjR2, 'Adjusted R2'),
    (AdjR2McFadden, 'McFadden Adjusted R2'),
    (AdjR2Deviance, 'Deviance Adjusted R2'),
    (DOF, 'Degrees of Freedom'),
    (LogLikelihood, 'Log Likelihood'),
    (AIC, 'AIC'),
    (AICC, 'AICC'),
    (BIC, 'BIC'),
    (FStat, 'F'),
    (FStatPValue, 'F-test p value'),
    (FStatIV, 'First-stage F statistic'),
    (FStatIVPValue, 'First-stage p value'),
    (R2Within, 'Within-R2'),
]


class TestLabels:

    @pytest.mark.parametrize("variant,expected", ASCII_LABELS)
    def test_ascii_label(self, variant, expected):
        assert label(AsciiTable(), variant) == expected

    def test_label_of_instance(self):
        assert label(AsciiTable(), AdjR2(0.4)) == 'Adjusted R2'

    def test_default_render(self):
        assert label(None, Nobs) == 'N'

    def test_pair_uses_own_label(self):
        assert label(AsciiTable(), (R2(0.4), 'R-squared')) == 'R-squared'

    def test_latex_r2_propagates(self):
        render = LatexTable()
        assert label(render, R2) == '$R^2$'
        assert label(render, AdjR2) == 'Adjusted $R^2$'
        assert label(render, AdjR2McFadden) == 'McFadden Adjusted $R^2$'
        assert label(render, R2Within) == 'Within-$R^2$'

    def test_latex_p_label(self):
        assert label(LatexTable(), FStatPValue) == 'F-test $p$ value'
        assert label(LatexTable(), FStatIVPValue) == 'First-stage $p$ value'

    def test_html_labels(self):
        assert label(HtmlTable(), R2McFadden) == 'McFadden R<sup>2</sup>'
        assert label(HtmlTable(), FStatPValue) == 'F-test <i>p</i> value'

    def test_user_override_of_base_label(self):
        render = AsciiTable(label_overrides={'FStat': 'F-stat'})
        assert label(render, FStat) == 'F-stat'
        assert label(render, FStatIV) == 'First-stage F-stat statistic'

    def test_user_override_of_composed_label(self):
        render = AsciiTable(label_overrides={'AdjR2': 'Adj. R2'})
        assert label(render, AdjR2) == 'Adj. R2'
        assert label(render, AdjR2Deviance) == 'Deviance Adj. R2'
        assert label(render, R2) == 'R2'

    def test_non_statistic_has_no_label(self):
        with pytest.raises(TypeError):
            label(AsciiTable(), 3.5)

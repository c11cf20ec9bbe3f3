"""
Tests for distribution family tags and the regression type built on them.
"""

import pytest

from regtables.families import Binomial, Family, Gamma, Gaussian, Poisson, resolve_family
from regtables.render import AsciiTable
from regtables.statistics import RegressionType


class TestFamilies:

    def test_default_links(self):
        assert Gaussian().link == 'identity'
        assert Binomial().link == 'logit'
        assert Poisson().link == 'log'
        assert Gamma().link == 'inverse'

    def test_explicit_link(self):
        assert Binomial('probit').link == 'probit'

    def test_unknown_link(self):
        with pytest.raises(ValueError, match="Unknown link"):
            Binomial('sqrt')

    def test_link_must_be_str(self):
        with pytest.raises(TypeError):
            Binomial(3)

    def test_equality_includes_link(self):
        assert Binomial() == Binomial('logit')
        assert Binomial() != Binomial('probit')
        assert Gaussian() != Poisson()

    def test_hashable(self):
        assert len({Gaussian(), Gaussian(), Poisson()}) == 2

    def test_repr(self):
        assert repr(Poisson()) == "Poisson(link='log')"


class TestResolveFamily:

    def test_by_name(self):
        assert isinstance(resolve_family('binomial'), Binomial)

    def test_normal_alias(self):
        assert isinstance(resolve_family('Normal'), Gaussian)

    def test_passthrough(self):
        family = Poisson()
        assert resolve_family(family) is family

    def test_unknown(self):
        with pytest.raises(ValueError, match="Valid families"):
            resolve_family('tweedie')

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            resolve_family(1)

    def test_is_family(self):
        assert isinstance(resolve_family('gamma'), Family)


class TestRegressionTypeDisplay:

    def test_ols(self):
        assert RegressionType(Gaussian()).display_value() == 'OLS'

    def test_iv(self):
        assert RegressionType(Gaussian(), is_iv=True).display_value() == 'IV'

    def test_glm_families(self):
        assert RegressionType(Poisson()).display_value() == 'Poisson'
        assert RegressionType(Gamma()).display_value() == 'Gamma'

    def test_string_tag(self):
        assert RegressionType('Probit').display_value() == 'Probit'

    def test_label(self):
        assert RegressionType.label(AsciiTable()) == 'Estimator'

    def test_label_override(self):
        render = AsciiTable(label_overrides={'RegressionType': 'Model'})
        assert RegressionType.label(render) == 'Model'

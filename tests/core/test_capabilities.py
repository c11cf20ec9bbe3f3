"""
Tests for capability accessors.
"""

import pytest

from regtables.core.capabilities import (
    CAPABILITY_AIC,
    CAPABILITY_COEFFICIENTS,
    CAPABILITY_NOBS,
    REQUIRED_CAPABILITIES,
    get_capability,
    has_capability,
    require_capability,
    require_capabilities,
)
from regtables.core.exceptions import CapabilityError
from regtables.core.protocols import RegressionModel


class _Fit:
    n_observations = 50

    @property
    def coefficients(self):
        return [1.0, 2.0]

    def aic(self):
        return 12.5


class TestGetCapability:

    def test_plain_attribute(self):
        assert get_capability(_Fit(), CAPABILITY_NOBS) == 50

    def test_property(self):
        assert get_capability(_Fit(), CAPABILITY_COEFFICIENTS) == [1.0, 2.0]

    def test_method_is_called(self):
        assert get_capability(_Fit(), CAPABILITY_AIC) == 12.5

    def test_missing_raises_attribute_error(self):
        with pytest.raises(AttributeError):
            get_capability(_Fit(), 'bic')


class TestHasCapability:

    def test_present(self):
        assert has_capability(_Fit(), CAPABILITY_AIC) is True

    def test_absent(self):
        assert has_capability(_Fit(), 'bic') is False


class TestRequireCapability:

    def test_present(self):
        assert require_capability(_Fit(), CAPABILITY_NOBS) == 50

    def test_absent_raises_capability_error(self):
        with pytest.raises(CapabilityError) as exc_info:
            require_capability(_Fit(), 'df_residual')
        assert exc_info.value.capability == 'df_residual'
        assert exc_info.value.model_type == '_Fit'

    def test_required_set(self):
        assert CAPABILITY_COEFFICIENTS in REQUIRED_CAPABILITIES


class TestRequireCapabilities:

    def test_reads_all_required(self, bare_model):
        required = require_capabilities(bare_model)
        assert tuple(required) == REQUIRED_CAPABILITIES
        assert required['df_residual'] == 10
        assert required['formula'] is bare_model.formula

    def test_first_missing_reported(self):
        with pytest.raises(CapabilityError) as exc_info:
            require_capabilities(_Fit())
        assert exc_info.value.capability == 'standard_errors'

    def test_explicit_names(self):
        assert require_capabilities(_Fit(), (CAPABILITY_NOBS, CAPABILITY_AIC)) == {
            CAPABILITY_NOBS: 50,
            CAPABILITY_AIC: 12.5,
        }


class TestRegressionModelProtocol:

    def test_conforming_model(self, bare_model):
        assert isinstance(bare_model, RegressionModel)

    def test_partial_model_does_not_conform(self):
        assert not isinstance(_Fit(), RegressionModel)

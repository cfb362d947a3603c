import math

import pytest

from finsim.distributions.params import SECONDS_PER_YEAR, scale_yearly_params
from finsim.exceptions import ConfigurationError


def test_year_length_is_julian_year():
    assert SECONDS_PER_YEAR == 31_557_600.0


def test_daily_scaling():
    params = scale_yearly_params(86_400.0, yearly_mean=1.10, yearly_stddev=0.2)
    assert params.intervals_per_year == pytest.approx(365.25)
    assert params.mean_log_return == pytest.approx(math.log(1.10) / 365.25)
    assert params.stddev_log_return == pytest.approx(0.2 / math.sqrt(365.25))


def test_one_year_interval_keeps_annual_values():
    params = scale_yearly_params(SECONDS_PER_YEAR, yearly_mean=1.5, yearly_stddev=0.3)
    assert params.intervals_per_year == 1.0
    assert params.mean_log_return == pytest.approx(math.log(1.5))
    assert params.stddev_log_return == pytest.approx(0.3)


def test_no_drift_no_volatility_is_exactly_zero():
    params = scale_yearly_params(60.0, yearly_mean=1.0, yearly_stddev=0.0)
    assert params.mean_log_return == 0.0
    assert params.stddev_log_return == 0.0


def test_compounding_scaled_mean_recovers_yearly_growth():
    params = scale_yearly_params(3_600.0, yearly_mean=1.25, yearly_stddev=0.0)
    assert math.exp(params.mean_log_return * params.intervals_per_year) == pytest.approx(1.25)


@pytest.mark.parametrize("yearly_mean", [0.0, -0.5, math.nan])
def test_invalid_yearly_mean(yearly_mean):
    with pytest.raises(ConfigurationError, match="yearly_mean"):
        scale_yearly_params(86_400.0, yearly_mean=yearly_mean, yearly_stddev=0.1)


def test_negative_yearly_stddev():
    with pytest.raises(ConfigurationError, match="yearly_stddev"):
        scale_yearly_params(86_400.0, yearly_mean=1.0, yearly_stddev=-0.1)

import pytest

from finsim.exceptions import ConfigurationError
from finsim.schema.request import (
    MAX_SEED,
    AccumulationSpec,
    GenerationRequest,
    IntervalDuration,
    TotalDuration,
    time_spec_from_options,
)


def test_time_spec_from_options_picks_supplied_variant():
    assert time_spec_from_options(100.0, None) == TotalDuration(100.0)
    assert time_spec_from_options(None, 5.0) == IntervalDuration(5.0)


def test_time_spec_from_options_rejects_both_and_neither():
    with pytest.raises(ConfigurationError):
        time_spec_from_options(100.0, 5.0)
    with pytest.raises(ConfigurationError):
        time_spec_from_options(None, None)


def test_request_derives_missing_duration():
    by_total = GenerationRequest.from_options(num_points=4, total_seconds=100.0)
    assert by_total.interval_duration == 25.0
    assert by_total.total_duration == 100.0

    by_interval = GenerationRequest.from_options(num_points=4, interval_seconds=25.0)
    assert by_interval.total_duration == 100.0


def test_request_defaults():
    req = GenerationRequest(num_points=3, time_spec=IntervalDuration(1.0))
    assert req.accumulate is False
    assert req.yearly_mean == 1.0
    assert req.yearly_stddev == 0.0
    assert req.seed is None
    assert req.accumulation == AccumulationSpec()


@pytest.mark.parametrize("yearly_mean", [0.0, -1.1])
def test_non_positive_yearly_mean_rejected(yearly_mean):
    with pytest.raises(ConfigurationError, match="yearly_mean"):
        GenerationRequest.from_options(num_points=3, interval_seconds=1.0, yearly_mean=yearly_mean)


def test_negative_yearly_stddev_rejected():
    with pytest.raises(ConfigurationError, match="yearly_stddev"):
        GenerationRequest.from_options(num_points=3, interval_seconds=1.0, yearly_stddev=-0.1)


@pytest.mark.parametrize("seed", [-1, MAX_SEED + 1])
def test_seed_outside_uint64_rejected(seed):
    with pytest.raises(ConfigurationError, match="seed"):
        GenerationRequest.from_options(num_points=3, interval_seconds=1.0, seed=seed)


def test_max_seed_accepted():
    req = GenerationRequest.from_options(num_points=3, interval_seconds=1.0, seed=MAX_SEED)
    assert req.seed == MAX_SEED


def test_leverage_modes_are_exclusive():
    with pytest.raises(ConfigurationError, match="mutually exclusive"):
        AccumulationSpec(continuous_leverage=2.0, initial_leverage=3.0)
    assert AccumulationSpec(pointwise_leverage=-1.0).leverage_mode == "pointwise"
    assert AccumulationSpec().leverage_mode is None


def test_request_round_trips_through_dict():
    req = GenerationRequest.from_options(
        num_points=10, total_seconds=600.0, accumulate=True, yearly_mean=1.1, seed=7, start_value=100.0, initial_leverage=2.0
    )
    data = req.to_dict()
    assert data["interval_seconds"] is None
    assert GenerationRequest.from_dict(data) == req


def test_from_dict_rejects_unknown_fields():
    with pytest.raises(ConfigurationError, match="unknown"):
        GenerationRequest.from_dict({"num_points": 3, "interval_seconds": 1.0, "drift": 0.1})


def test_request_is_immutable():
    req = GenerationRequest.from_options(num_points=3, interval_seconds=1.0)
    with pytest.raises(AttributeError):
        req.num_points = 4  # type: ignore[misc]

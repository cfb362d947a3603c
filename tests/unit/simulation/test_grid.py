import math

import pytest

from finsim.exceptions import ConfigurationError
from finsim.schema.request import IntervalDuration, TotalDuration
from finsim.simulation.grid import ResolvedGrid, resolve, resolve_time_spec


def test_total_seconds_resolves_to_one_day_interval():
    grid = resolve(180, total_duration=15_552_000)
    assert grid == ResolvedGrid(interval_duration=86_400.0, num_points=180)


@pytest.mark.parametrize(
    "num_points,total",
    [(1, 1.0), (3, 10.0), (7, 1_000_000.0), (1000, 31_557_600.0), (365, 0.5)],
)
def test_interval_times_points_recovers_total(num_points, total):
    grid = resolve(num_points, total_duration=total)
    assert grid.interval_duration * num_points == pytest.approx(total, rel=1e-12)
    assert grid.total_duration == pytest.approx(total, rel=1e-12)


def test_interval_quotient_is_not_rounded():
    grid = resolve(3, total_duration=10)
    assert grid.interval_duration == 10 / 3


def test_interval_seconds_passes_through():
    grid = resolve(10, interval_duration=60.0)
    assert grid.interval_duration == 60.0
    assert grid.num_points == 10
    assert grid.total_duration == 600.0


def test_both_durations_rejected():
    with pytest.raises(ConfigurationError, match="mutually exclusive"):
        resolve(10, total_duration=100.0, interval_duration=10.0)


def test_neither_duration_rejected():
    with pytest.raises(ConfigurationError, match="required"):
        resolve(10)


@pytest.mark.parametrize("value", [0, -1.0, math.nan, math.inf])
def test_non_positive_or_non_finite_durations_rejected(value):
    with pytest.raises(ConfigurationError):
        resolve(10, total_duration=value)
    with pytest.raises(ConfigurationError):
        resolve(10, interval_duration=value)


@pytest.mark.parametrize("num_points", [0, -5, 2.5, True])
def test_invalid_num_points_rejected(num_points):
    with pytest.raises(ConfigurationError, match="num_points"):
        resolve(num_points, interval_duration=1.0)


def test_resolve_time_spec_matches_resolve():
    assert resolve_time_spec(4, TotalDuration(100.0)) == resolve(4, total_duration=100.0)
    assert resolve_time_spec(4, IntervalDuration(25.0)) == resolve(4, interval_duration=25.0)


def test_unsupported_time_spec_rejected():
    with pytest.raises(ConfigurationError, match="unsupported time spec"):
        resolve_time_spec(4, 100.0)  # type: ignore[arg-type]

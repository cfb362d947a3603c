"""Annual-to-interval scaling of the log-normal return model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from finsim.exceptions import ConfigurationError

# Julian year: 365.25 days of 86400 seconds.
SECONDS_PER_YEAR = 365.25 * 86400.0


@dataclass(frozen=True, slots=True)
class PerIntervalParams:
    mean_log_return: float
    stddev_log_return: float
    intervals_per_year: float


def scale_yearly_params(interval_duration: float, yearly_mean: float, yearly_stddev: float) -> PerIntervalParams:
    """Convert annual targets into normal parameters for one interval's log-return.

    Log-returns add under compounding, so the annual log growth is split
    evenly across ``n`` intervals, and volatility scales with ``sqrt(n)``.
    ``yearly_mean`` is a growth factor (1.10 means +10% per year).
    """
    if not interval_duration > 0:
        raise ConfigurationError(f"interval_duration must be > 0, got {interval_duration}")
    if not yearly_mean > 0:
        raise ConfigurationError(f"yearly_mean must be a growth factor > 0, got {yearly_mean}")
    if not yearly_stddev >= 0:
        raise ConfigurationError(f"yearly_stddev must be >= 0, got {yearly_stddev}")

    intervals_per_year = SECONDS_PER_YEAR / interval_duration
    return PerIntervalParams(
        mean_log_return=math.log(yearly_mean) / intervals_per_year,
        stddev_log_return=yearly_stddev / math.sqrt(intervals_per_year),
        intervals_per_year=intervals_per_year,
    )


__all__ = ["SECONDS_PER_YEAR", "PerIntervalParams", "scale_yearly_params"]

"""Generation request schema and validation."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from finsim.exceptions import ConfigurationError

MAX_SEED = 2**64 - 1


def _require_positive_duration(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a finite number > 0, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class TotalDuration:
    """Span of the whole series in seconds."""

    seconds: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", _require_positive_duration("total_seconds", self.seconds))


@dataclass(frozen=True, slots=True)
class IntervalDuration:
    """Spacing between consecutive points in seconds."""

    seconds: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", _require_positive_duration("interval_seconds", self.seconds))


TimeSpec = Union[TotalDuration, IntervalDuration]


def time_spec_from_options(total_seconds: float | None, interval_seconds: float | None) -> TimeSpec:
    """Build the time variant from two nullable options, exactly one of which is set."""
    if total_seconds is not None and interval_seconds is not None:
        raise ConfigurationError("total_seconds and interval_seconds are mutually exclusive; supply only one")
    if total_seconds is not None:
        return TotalDuration(total_seconds)
    if interval_seconds is not None:
        return IntervalDuration(interval_seconds)
    raise ConfigurationError("one of total_seconds or interval_seconds is required")


def validate_num_points(num_points: Any) -> int:
    if isinstance(num_points, bool) or not isinstance(num_points, numbers.Integral):
        raise ConfigurationError(f"num_points must be an integer, got {num_points!r}")
    if num_points < 1:
        raise ConfigurationError(f"num_points must be >= 1, got {num_points}")
    return int(num_points)


def validate_seed(seed: Any) -> Optional[int]:
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise ConfigurationError(f"seed must be an integer, got {seed!r}")
    if seed < 0 or seed > MAX_SEED:
        raise ConfigurationError(f"seed must be an unsigned 64-bit integer (0..{MAX_SEED})")
    return int(seed)


@dataclass(frozen=True, slots=True)
class AccumulationSpec:
    """How sampled returns are compounded into a value path.

    At most one leverage mode may be set:

    - ``continuous_leverage``: exposure held constant, releveraged continuously
    - ``pointwise_leverage``: exposure reset to the target at every point
    - ``initial_leverage``: exposure set once at t=0 and never rebalanced
    """

    start_value: float = 1.0
    continuous_leverage: Optional[float] = None
    pointwise_leverage: Optional[float] = None
    initial_leverage: Optional[float] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.start_value):
            raise ConfigurationError("start_value must be finite")
        modes = [name for name in ("continuous_leverage", "pointwise_leverage", "initial_leverage") if getattr(self, name) is not None]
        if len(modes) > 1:
            raise ConfigurationError(f"leverage modes are mutually exclusive, got {', '.join(modes)}")

    @property
    def leverage_mode(self) -> Optional[str]:
        for mode in ("continuous", "pointwise", "initial"):
            if getattr(self, f"{mode}_leverage") is not None:
                return mode
        return None


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    num_points: int
    time_spec: TimeSpec
    accumulate: bool = False
    yearly_mean: float = 1.0
    yearly_stddev: float = 0.0
    seed: Optional[int] = None
    accumulation: AccumulationSpec = field(default_factory=AccumulationSpec)

    def __post_init__(self) -> None:
        validate_num_points(self.num_points)
        validate_seed(self.seed)
        if not isinstance(self.time_spec, (TotalDuration, IntervalDuration)):
            raise ConfigurationError("time_spec must be TotalDuration or IntervalDuration")
        if not self.yearly_mean > 0:
            raise ConfigurationError(f"yearly_mean must be a growth factor > 0, got {self.yearly_mean}")
        if not self.yearly_stddev >= 0:
            raise ConfigurationError(f"yearly_stddev must be >= 0, got {self.yearly_stddev}")

    @property
    def total_duration(self) -> float:
        if isinstance(self.time_spec, TotalDuration):
            return self.time_spec.seconds
        return self.time_spec.seconds * self.num_points

    @property
    def interval_duration(self) -> float:
        if isinstance(self.time_spec, IntervalDuration):
            return self.time_spec.seconds
        return self.time_spec.seconds / self.num_points

    @classmethod
    def from_options(
        cls,
        num_points: int,
        total_seconds: float | None = None,
        interval_seconds: float | None = None,
        accumulate: bool = False,
        yearly_mean: float = 1.0,
        yearly_stddev: float = 0.0,
        seed: int | None = None,
        start_value: float = 1.0,
        continuous_leverage: float | None = None,
        pointwise_leverage: float | None = None,
        initial_leverage: float | None = None,
    ) -> "GenerationRequest":
        return cls(
            num_points=num_points,
            time_spec=time_spec_from_options(total_seconds, interval_seconds),
            accumulate=accumulate,
            yearly_mean=yearly_mean,
            yearly_stddev=yearly_stddev,
            seed=seed,
            accumulation=AccumulationSpec(
                start_value=start_value,
                continuous_leverage=continuous_leverage,
                pointwise_leverage=pointwise_leverage,
                initial_leverage=initial_leverage,
            ),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "GenerationRequest":
        known = {
            "num_points",
            "total_seconds",
            "interval_seconds",
            "accumulate",
            "yearly_mean",
            "yearly_stddev",
            "seed",
            "start_value",
            "continuous_leverage",
            "pointwise_leverage",
            "initial_leverage",
        }
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown request fields: {sorted(unknown)}")
        return cls.from_options(**data)

    def to_dict(self) -> dict:
        is_total = isinstance(self.time_spec, TotalDuration)
        return {
            "num_points": self.num_points,
            "total_seconds": self.time_spec.seconds if is_total else None,
            "interval_seconds": None if is_total else self.time_spec.seconds,
            "accumulate": self.accumulate,
            "yearly_mean": self.yearly_mean,
            "yearly_stddev": self.yearly_stddev,
            "seed": self.seed,
            "start_value": self.accumulation.start_value,
            "continuous_leverage": self.accumulation.continuous_leverage,
            "pointwise_leverage": self.accumulation.pointwise_leverage,
            "initial_leverage": self.accumulation.initial_leverage,
        }

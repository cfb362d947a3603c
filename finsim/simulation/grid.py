"""Sampling grid resolution from partially redundant time parameters."""

from __future__ import annotations

from dataclasses import dataclass

from finsim.exceptions import ConfigurationError
from finsim.schema.request import IntervalDuration, TimeSpec, TotalDuration, time_spec_from_options, validate_num_points


@dataclass(frozen=True, slots=True)
class ResolvedGrid:
    interval_duration: float
    num_points: int

    @property
    def total_duration(self) -> float:
        return self.interval_duration * self.num_points


def resolve_time_spec(num_points: int, time_spec: TimeSpec) -> ResolvedGrid:
    """Resolve the canonical grid for an already-validated time variant.

    A total duration is split evenly; the exact quotient is kept, so the
    interval is not snapped to whole seconds.
    """
    validate_num_points(num_points)
    if isinstance(time_spec, TotalDuration):
        return ResolvedGrid(interval_duration=time_spec.seconds / num_points, num_points=num_points)
    if isinstance(time_spec, IntervalDuration):
        return ResolvedGrid(interval_duration=time_spec.seconds, num_points=num_points)
    raise ConfigurationError(f"unsupported time spec: {type(time_spec).__name__}")


def resolve(
    num_points: int,
    total_duration: float | None = None,
    interval_duration: float | None = None,
) -> ResolvedGrid:
    """Resolve ``(interval_duration, num_points)`` from exactly one duration."""
    validate_num_points(num_points)
    return resolve_time_spec(num_points, time_spec_from_options(total_duration, interval_duration))


__all__ = ["ResolvedGrid", "resolve", "resolve_time_spec"]

"""Return series generator."""

from __future__ import annotations

import numpy as np
from numpy.random import Generator

from finsim.distributions.params import PerIntervalParams, scale_yearly_params
from finsim.distributions.rng import make_rng
from finsim.mc.accumulate import accumulate as accumulate_returns
from finsim.schema.request import AccumulationSpec, GenerationRequest, validate_num_points
from finsim.simulation.grid import ResolvedGrid, resolve_time_spec
from finsim.utils.logging import get_logger

log = get_logger(__name__, component="generator")


def sample_returns(params: PerIntervalParams, num_points: int, rng: Generator) -> np.ndarray:
    """Draw ``num_points`` i.i.d. simple returns ``exp(x) - 1`` with ``x ~ N(mu, sigma)``."""
    log_returns = rng.normal(params.mean_log_return, params.stddev_log_return, size=num_points)
    return np.expm1(log_returns)


def generate(
    grid: ResolvedGrid,
    accumulate: bool,
    yearly_mean: float,
    yearly_stddev: float,
    seed: int | None = None,
    *,
    accumulation: AccumulationSpec | None = None,
    rng: Generator | None = None,
) -> np.ndarray:
    """Generate a return series on ``grid``.

    Without ``accumulate`` the per-interval simple returns are returned.
    With it, the returns are compounded into a value path starting from
    ``accumulation.start_value`` (default 1.0); the start value itself is
    not part of the output.

    An explicit ``rng`` takes precedence over ``seed``. Either way the
    generator belongs to this call only.
    """
    num_points = validate_num_points(grid.num_points)
    params = scale_yearly_params(grid.interval_duration, yearly_mean, yearly_stddev)
    if accumulation is None:
        accumulation = AccumulationSpec()
    if rng is None:
        rng = make_rng(seed)
    else:
        # a supplied generator makes the seed irrelevant
        seed = None

    log.info(
        "Sampling returns",
        extra={
            "num_points": num_points,
            "seed": seed,
            "mean_log_return": params.mean_log_return,
            "stddev_log_return": params.stddev_log_return,
        },
    )
    returns = sample_returns(params, num_points, rng)
    if not accumulate:
        return returns
    return accumulate_returns(returns, accumulation)


def generate_from_request(request: GenerationRequest, *, rng: Generator | None = None) -> np.ndarray:
    grid = resolve_time_spec(request.num_points, request.time_spec)
    return generate(
        grid,
        request.accumulate,
        request.yearly_mean,
        request.yearly_stddev,
        request.seed,
        accumulation=request.accumulation,
        rng=rng,
    )


__all__ = ["generate", "generate_from_request", "sample_returns"]

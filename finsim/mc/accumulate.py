"""Compounding of simple returns into value paths."""

from __future__ import annotations

import numpy as np

from finsim.schema.request import AccumulationSpec


def growth_factors(returns: np.ndarray, spec: AccumulationSpec) -> np.ndarray:
    """Per-interval multipliers applied to the running value."""
    gross = 1.0 + np.asarray(returns, dtype=float)
    if spec.continuous_leverage is not None:
        return np.power(gross, spec.continuous_leverage)
    if spec.pointwise_leverage is not None:
        # a levered position cannot lose more than everything
        return np.maximum(1.0 + (gross - 1.0) * spec.pointwise_leverage, 0.0)
    return gross


def accumulate(returns: np.ndarray, spec: AccumulationSpec | None = None) -> np.ndarray:
    """Compound ``returns`` into ``[v_1, ..., v_n]`` with ``v_0 = spec.start_value``.

    ``initial_leverage`` buys ``L`` times the start value once, financed by
    borrowing ``(L - 1)`` times it, and the debt is netted out of each value.
    """
    if spec is None:
        spec = AccumulationSpec()
    path = np.cumprod(growth_factors(returns, spec))
    if spec.initial_leverage is not None:
        exposure = spec.start_value * spec.initial_leverage
        return exposure * path - spec.start_value * (spec.initial_leverage - 1.0)
    return spec.start_value * path


__all__ = ["accumulate", "growth_factors"]

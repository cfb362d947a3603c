"""Locally owned pseudo-random generators."""

from __future__ import annotations

from numpy.random import PCG64, Generator

from finsim.schema.request import validate_seed


def make_rng(seed: int | None = None) -> Generator:
    """Return a fresh generator; seeded runs replay bit-for-bit, unseeded ones draw OS entropy."""
    seed = validate_seed(seed)
    return Generator(PCG64(seed))

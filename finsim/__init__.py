"""Synthetic financial return series generator."""

from finsim.exceptions import ConfigurationError, FinsimError
from finsim.mc.generator import generate
from finsim.simulation.grid import ResolvedGrid, resolve

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FinsimError",
    "ResolvedGrid",
    "generate",
    "resolve",
]

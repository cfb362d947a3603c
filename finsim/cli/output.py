"""Plain-text rendering of generated series."""

from __future__ import annotations

from typing import Iterable, TextIO

import numpy as np


def format_value(value: float) -> str:
    """Shortest round-trip decimal without exponent notation (``1.0``, ``0.000123``)."""
    return np.format_float_positional(value, unique=True, trim="0")


def write_series(series: Iterable[float], stream: TextIO) -> int:
    """Write one value per line, returning the number of lines written."""
    lines = [format_value(float(v)) for v in series]
    if lines:
        stream.write("\n".join(lines))
        stream.write("\n")
    stream.flush()
    return len(lines)

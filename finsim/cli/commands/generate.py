"""Generate CLI command wiring."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

import typer

from finsim.config.loader import load_config_with_precedence, parse_bool, parse_int
from finsim.cli.output import write_series
from finsim.exceptions import ConfigurationError
from finsim.mc.generator import generate_from_request
from finsim.schema.request import GenerationRequest
from finsim.utils.logging import configure_logging, get_logger
from finsim.utils.profiling import track_time

log = get_logger(__name__, component="cli_generate")

ENV_PREFIX = "FINSIM_"


class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


def _optional_float(value):
    return None if value is None else float(value)


def generate(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    num_points: int | None = typer.Option(None, "--num-points", "-n", help="How many data points to generate (equally spaced in time)"),
    total_seconds: float | None = typer.Option(
        None, "--total-seconds", "-t", help="Time from first to last data point in seconds. Incompatible with --interval-seconds"
    ),
    interval_seconds: float | None = typer.Option(
        None, "--interval-seconds", "-i", help="Time between data points in seconds. Incompatible with --total-seconds"
    ),
    accumulate: bool = typer.Option(False, "--accumulate", "-a", help="Emit the compounded value path instead of returns"),
    yearly_mean: float | None = typer.Option(None, "--yearly-mean", help="Yearly geometric mean return as a growth factor [default: 1.0]"),
    yearly_stddev: float | None = typer.Option(None, "--yearly-stddev", help="Yearly standard deviation of log-returns [default: 0.0]"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible output (unsigned 64-bit)"),
    start_value: float | None = typer.Option(None, "--start-value", help="Value at t=0 when accumulating [default: 1.0]"),
    continuous_leverage: float | None = typer.Option(
        None, "--continuous-leverage", help="Leverage held constant, releveraged continuously between points"
    ),
    pointwise_leverage: float | None = typer.Option(
        None, "--pointwise-leverage", help="Leverage held constant, releveraged discretely at every point"
    ),
    initial_leverage: float | None = typer.Option(None, "--initial-leverage", help="Leverage at t=0, never releveraged"),
    log_level: LogLevel = typer.Option(LogLevel.warning, "--log-level", envvar=f"{ENV_PREFIX}LOG_LEVEL", case_sensitive=False),
) -> None:
    """Generate a synthetic return series, one value per line."""
    configure_logging(component="cli", level=log_level.value)

    defaults = {
        "num_points": None,
        "total_seconds": None,
        "interval_seconds": None,
        "accumulate": False,
        "yearly_mean": 1.0,
        "yearly_stddev": 0.0,
        "seed": None,
        "start_value": 1.0,
        "continuous_leverage": None,
        "pointwise_leverage": None,
        "initial_leverage": None,
    }
    cli_values = {
        "num_points": num_points,
        "total_seconds": total_seconds,
        "interval_seconds": interval_seconds,
        "accumulate": True if accumulate else None,
        "yearly_mean": yearly_mean,
        "yearly_stddev": yearly_stddev,
        "seed": seed,
        "start_value": start_value,
        "continuous_leverage": continuous_leverage,
        "pointwise_leverage": pointwise_leverage,
        "initial_leverage": initial_leverage,
    }
    casters = {
        "num_points": parse_int,
        "total_seconds": float,
        "interval_seconds": float,
        "accumulate": parse_bool,
        "yearly_mean": float,
        "yearly_stddev": float,
        "seed": parse_int,
        "start_value": float,
        "continuous_leverage": _optional_float,
        "pointwise_leverage": _optional_float,
        "initial_leverage": _optional_float,
    }

    try:
        cfg = load_config_with_precedence(
            config_path=config,
            env_prefix=ENV_PREFIX,
            cli_values=cli_values,
            defaults=defaults,
            casters=casters,
        )
        if cfg.get("num_points") is None:
            raise ConfigurationError("num_points is required (CLI > ENV > config file)")
        request = GenerationRequest.from_dict(cfg)
        if not request.accumulate and request.accumulation.leverage_mode is not None:
            log.warning("Leverage has no effect without --accumulate")
        with track_time("generate"):
            series = generate_from_request(request)
    except ConfigurationError as exc:
        log.error(str(exc))
        raise typer.Exit(code=1)

    write_series(series, sys.stdout)

"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import numbers
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from finsim.exceptions import ConfigurationError
from finsim.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_int(value: Any) -> int:
    """Integer caster that refuses to truncate (``2.7``) or coerce booleans."""
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not an integer: {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(f"not an integer: {value!r}")


def _normalize_key(key: str) -> str:
    return str(key).strip().replace("-", "_").lower()


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        data = _load_yaml(path)
    elif suffix == ".json":
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        raise ConfigurationError(f"Unsupported config format '{suffix}' (use .yaml, .yml or .json)")
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
    return {_normalize_key(k): v for k, v in data.items()}


def _cast(key: str, value: Any, casters: Mapping[str, Caster], source: str) -> Any:
    if value is None or key not in casters:
        return value
    try:
        return casters[key](value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid value for {key} from {source}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
) -> Dict[str, Any]:
    """Merge settings; a CLI value of ``None`` means "not given on the command line"."""
    casters = casters or {}
    merged: Dict[str, Any] = dict(defaults)

    if config_path is not None:
        file_values = _load_file(Path(config_path))
        unknown = sorted(set(file_values) - set(defaults))
        if unknown:
            raise ConfigurationError(f"Unknown keys in {config_path}: {', '.join(unknown)}")
        for key, value in file_values.items():
            merged[key] = _cast(key, value, casters, str(config_path))
        log.info("Loaded config file", extra={"path": str(config_path), "keys": sorted(file_values)})

    for key in defaults:
        env_name = f"{env_prefix}{key.upper()}"
        raw = os.environ.get(env_name)
        if raw is not None and raw != "":
            merged[key] = _cast(key, raw, casters, env_name)

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters, "command line")

    return merged


__all__ = ["load_config_with_precedence", "parse_bool", "parse_int"]

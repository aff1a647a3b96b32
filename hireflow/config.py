"""
Configuration for hireflow.

Settings come from three places, later ones winning:

1. the defaults on :class:`EngineConfig`;
2. the ``engine:`` mapping of an optional YAML file;
3. ``HIREFLOW_*`` environment variables, after a ``.env`` file in the
   working directory has been loaded with python-dotenv.

Recognised environment variables:

* ``HIREFLOW_SIMULATE_LATENCY`` - ``true``/``false``.
* ``HIREFLOW_LATENCY_SCALE`` - factor applied to every delay.
* ``HIREFLOW_LOG_LEVEL`` - logging level name.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

OPERATIONS = ("score", "match", "questions", "rank")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineConfig:
    """Runtime settings for the scoring engine and CLI."""

    simulate_latency: bool = True
    score_delay: float = 1.5
    match_delay: float = 1.2
    questions_delay: float = 1.0
    rank_delay: float = 0.8
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for op in OPERATIONS:
            if getattr(self, f"{op}_delay") < 0:
                raise ConfigError(f"{op}_delay must not be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level '{self.log_level}'")

    def delay_for(self, operation: str) -> float:
        """Seconds to wait before answering ``operation``."""
        if operation not in OPERATIONS:
            raise KeyError(operation)
        if not self.simulate_latency:
            return 0.0
        return getattr(self, f"{operation}_delay")

    def scaled(self, factor: float) -> "EngineConfig":
        """Return a copy with every delay multiplied by ``factor``."""
        if factor < 0:
            raise ConfigError("latency scale must not be negative")
        return replace(
            self,
            **{f"{op}_delay": getattr(self, f"{op}_delay") * factor for op in OPERATIONS},
        )


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got '{value}'")


def _parse_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be a number, got '{value}'") from exc


def config_from_mapping(data: Mapping[str, Any]) -> EngineConfig:
    """Build an :class:`EngineConfig` from a plain mapping."""
    known = {f.name: f for f in fields(EngineConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"Unknown engine settings: {', '.join(unknown)}")
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "simulate_latency":
            values[key] = _parse_bool(value, key)
        elif key == "log_level":
            values[key] = str(value).upper()
        else:
            values[key] = _parse_float(value, key)
    return EngineConfig(**values)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    engine = raw.get("engine", {}) or {}
    if not isinstance(engine, dict):
        raise ConfigError(f"'engine' in {path} must be a mapping")
    return engine


def _apply_env_overrides(config: EngineConfig, environ: Mapping[str, str]) -> EngineConfig:
    simulate = environ.get("HIREFLOW_SIMULATE_LATENCY")
    if simulate:
        config = replace(config, simulate_latency=_parse_bool(simulate, "HIREFLOW_SIMULATE_LATENCY"))
    scale = environ.get("HIREFLOW_LATENCY_SCALE")
    if scale:
        config = config.scaled(_parse_float(scale, "HIREFLOW_LATENCY_SCALE"))
    level = environ.get("HIREFLOW_LOG_LEVEL")
    if level:
        config = replace(config, log_level=level.upper())
    return config


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """Load engine settings from YAML and the environment.

    Args:
        path: Optional YAML file.  A missing path argument means
            defaults plus environment.
        environ: Environment mapping; ``os.environ`` after loading
            ``.env`` when omitted.

    Raises:
        ConfigError: If the file or an override is invalid.
    """
    data: Dict[str, Any] = {}
    if path:
        data = _load_yaml(Path(path))
        logger.debug("Loaded engine settings from %s", path)
    config = config_from_mapping(data)
    if environ is None:
        load_dotenv()
        environ = os.environ
    return _apply_env_overrides(config, environ)

"""Helpers for loading and validating lifesim driver configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import logging
import threading

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError
from lifesim.utils.consts import (
    BUILTIN_PATTERNS,
    DEFAULT_GENERATIONS,
    DEFAULT_PATTERN,
    DEFAULT_UPDATE_INTERVAL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    update_interval: float = DEFAULT_UPDATE_INTERVAL
    pattern: str = DEFAULT_PATTERN
    center: bool = True
    generations: int = DEFAULT_GENERATIONS


@dataclass(frozen=True)
class LifeSimConfig:
    simulation: SimulationConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeSimConfig] = {}
_CACHE_LOCK = threading.RLock()

_DEFAULT_KEY = "default"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives next to this module
        path = str(Path(__file__).parent / "config.yaml")

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")

    return raw


def _require_number(section: dict[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"simulation.{key}", "must be a number")
    return float(value)


def _require_int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"simulation.{key}", "must be an integer")
    return value


def _build_simulation_cfg(sim_raw: dict[str, Any]) -> SimulationConfig:
    if not isinstance(sim_raw, dict):
        raise ConfigurationError("simulation", "section must be a mapping")

    center = sim_raw.get("center", True)
    if not isinstance(center, bool):
        raise ConfigurationError("simulation.center", "must be true or false")

    return SimulationConfig(
        update_interval=_require_number(sim_raw, "update_interval", DEFAULT_UPDATE_INTERVAL),
        pattern=str(sim_raw.get("pattern", DEFAULT_PATTERN)),
        center=center,
        generations=_require_int(sim_raw, "generations", DEFAULT_GENERATIONS),
    )


def _parse_lifesim_cfg_from_dict(raw: dict[str, Any]) -> LifeSimConfig:
    try:
        cfg = LifeSimConfig(simulation=_build_simulation_cfg(raw["simulation"]))
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc

    _validate_simulation_config(cfg.simulation)
    return cfg


def _validate_simulation_config(sim: SimulationConfig) -> None:
    """Basic sanity checks to fail fast on bad configs."""
    if sim.update_interval <= 0:
        raise ConfigurationError("simulation.update_interval", "must be positive")

    if sim.generations < 0:
        raise ConfigurationError("simulation.generations", "must be >= 0")

    if sim.pattern not in BUILTIN_PATTERNS:
        raise ConfigurationError(
            "simulation.pattern",
            f"unknown pattern '{sim.pattern}'",
            details={"available": sorted(BUILTIN_PATTERNS)},
        )


def load_config(path: Optional[str] = None) -> LifeSimConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            lifesim/utils/config.yaml.

    Returns:
        LifeSimConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    try:
        cfg = _parse_lifesim_cfg_from_dict(raw=_load_yaml_file(p))
    except ConfigurationError as exc:
        logger.error(f"Invalid config {p}: {exc}")
        raise

    logger.info(f"Loaded config from {p}")
    return cfg


def get_config() -> LifeSimConfig:
    """Return the bundled config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    with _CACHE_LOCK:
        if _DEFAULT_KEY not in _LOADER_CACHE:
            _LOADER_CACHE[_DEFAULT_KEY] = load_config()
        return _LOADER_CACHE[_DEFAULT_KEY]


def clear_config_cache() -> None:
    """Clear the cached configuration.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()

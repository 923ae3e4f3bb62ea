"""
Centralized configuration management for genetics.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import ValidationError

from genetics import Elitism, EvolverConfiguration
from genetics.crossover import crossover_for
from genetics.errors import InvalidConfigError
from genetics.selection import selection_for
from genetics_core.schemas import EvolutionSettingsInput, LoggingSettingsInput

logger = logging.getLogger(__name__)

DEFAULT_STATE_DIR = ".genetics"


@dataclass
class EvolutionSettings:
    """Evolution algorithm settings."""

    population_size: int = 10
    chromosome_length: int = 2
    selection_method: str = "rank"
    crossover_method: str = "point"
    crossover_points: int = 1
    elitism_count: int = 0
    crossover_rate: float = 0.5
    mutation_rate: float = 0.5
    max_generations: int = 100
    fitness_threshold: Optional[float] = None
    convergence_generations: Optional[int] = None
    convergence_threshold: float = 0.0
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    json_output: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    evolution: EvolutionSettings = field(default_factory=EvolutionSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    state_dir: str = DEFAULT_STATE_DIR

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary, validating every section."""
        try:
            evolution = EvolutionSettingsInput(**data.get("evolution", {}))
            logging_input = LoggingSettingsInput(**data.get("logging", {}))
        except ValidationError as e:
            raise InvalidConfigError(
                [
                    {"loc": list(err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ]
            ) from e

        return cls(
            evolution=EvolutionSettings(**evolution.model_dump(mode="json")),
            logging=LoggingSettings(**logging_input.model_dump(mode="json")),
            state_dir=data.get("state_dir", DEFAULT_STATE_DIR),
        )

    def save(self, path: Optional[Path] = None) -> Path:
        """Save config to file."""
        if path is None:
            path = Path(self.state_dir) / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load config from file."""
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)


def get_config(
    config_path: Optional[Path] = None,
    state_dir: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> Config:
    """Get configuration, loading from file if available.

    Priority:
    1. Explicit config_path
    2. Config in state_dir
    3. Config in current directory
    4. Defaults

    Environment variables override whichever source was used, and
    ``overrides`` (per-section values, e.g. from command line flags) win over
    both. Everything is validated together.
    """
    paths_to_try = []

    if config_path:
        paths_to_try.append(config_path)
    if state_dir:
        paths_to_try.append(state_dir / "config.json")
    paths_to_try.extend(
        [
            Path(DEFAULT_STATE_DIR) / "config.json",
            Path("genetics.json"),
        ]
    )

    data: Dict[str, Any] = {}
    for path in paths_to_try:
        if path.exists():
            logger.debug(f"Loading configuration from {path}")
            with open(path) as f:
                data = json.load(f)
            break

    _apply_env_overrides(data)
    for section, values in (overrides or {}).items():
        data.setdefault(section, {}).update(values)
    return Config.from_dict(data)


def _apply_env_overrides(data: Dict[str, Any]) -> None:
    """Apply environment variable overrides to raw config data."""
    env_mappings: Dict[str, Tuple[Optional[str], str, Callable[[str], Any]]] = {
        "GENETICS_POPULATION_SIZE": ("evolution", "population_size", int),
        "GENETICS_CHROMOSOME_LENGTH": ("evolution", "chromosome_length", int),
        "GENETICS_SELECTION_METHOD": ("evolution", "selection_method", str),
        "GENETICS_CROSSOVER_METHOD": ("evolution", "crossover_method", str),
        "GENETICS_CROSSOVER_RATE": ("evolution", "crossover_rate", float),
        "GENETICS_MUTATION_RATE": ("evolution", "mutation_rate", float),
        "GENETICS_CROSSOVER_POINTS": ("evolution", "crossover_points", int),
        "GENETICS_ELITISM_COUNT": ("evolution", "elitism_count", int),
        "GENETICS_MAX_GENERATIONS": ("evolution", "max_generations", int),
        "GENETICS_FITNESS_THRESHOLD": ("evolution", "fitness_threshold", float),
        "GENETICS_CONVERGENCE_GENERATIONS": (
            "evolution",
            "convergence_generations",
            int,
        ),
        "GENETICS_CONVERGENCE_THRESHOLD": ("evolution", "convergence_threshold", float),
        "GENETICS_SEED": ("evolution", "seed", int),
        "GENETICS_LOG_LEVEL": ("logging", "level", lambda x: x.upper()),
        "GENETICS_LOG_JSON": ("logging", "json_output", lambda x: x.lower() == "true"),
        "GENETICS_LOG_FILE": ("logging", "log_file", str),
        "GENETICS_STATE_DIR": (None, "state_dir", str),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        try:
            converted = converter(value)
        except (ValueError, TypeError):
            logger.warning(f"Ignoring invalid value for {env_var}: {value!r}")
            continue
        if section:
            data.setdefault(section, {})[key] = converted
        else:
            data[key] = converted


def build_evolver_configuration(settings: EvolutionSettings) -> EvolverConfiguration:
    """Turn evolution settings into an EvolverConfiguration."""
    return EvolverConfiguration(
        selection_method=selection_for(settings.selection_method),
        crossover_method=crossover_for(
            settings.crossover_method, settings.crossover_points
        ),
        elitism=Elitism(settings.elitism_count) if settings.elitism_count else None,
        crossover_rate=settings.crossover_rate,
        mutation_rate=settings.mutation_rate,
    )

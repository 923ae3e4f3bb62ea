"""
Pydantic schemas for settings input.
Validates settings files and environment overrides before they reach the engine.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SelectionName(str, Enum):
    """Selection methods available from settings."""

    RANK = "rank"
    ROULETTE = "roulette"
    TOURNAMENT = "tournament"


class CrossoverName(str, Enum):
    """Crossover methods available from settings."""

    POINT = "point"
    UNIFORM = "uniform"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ============= Settings Schemas =============


class EvolutionSettingsInput(BaseModel):
    """Evolution algorithm settings."""

    population_size: int = Field(
        default=10, ge=1, le=100000, description="Number of chromosomes"
    )
    chromosome_length: int = Field(
        default=2, ge=1, description="Number of genes per chromosome"
    )
    selection_method: SelectionName = Field(
        default=SelectionName.RANK, description="'rank', 'roulette' or 'tournament'"
    )
    crossover_method: CrossoverName = Field(
        default=CrossoverName.POINT, description="'point' or 'uniform'"
    )
    crossover_points: int = Field(
        default=1, ge=1, description="Cut points for point crossover"
    )
    elitism_count: int = Field(
        default=0, ge=0, description="Fittest chromosomes carried over unchanged"
    )
    crossover_rate: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Probability of crossover per child"
    )
    mutation_rate: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Probability of mutation per gene"
    )
    max_generations: int = Field(
        default=100, ge=1, description="Generation at which a run stops"
    )
    fitness_threshold: Optional[float] = Field(
        default=None, description="Stop once the best fitness reaches this value"
    )
    convergence_generations: Optional[int] = Field(
        default=None, ge=1, description="Window for convergence detection"
    )
    convergence_threshold: float = Field(
        default=0.0, ge=0.0, description="Minimum best-fitness improvement per window"
    )
    seed: Optional[int] = Field(
        default=None, description="Random seed for reproducible runs"
    )


class LoggingSettingsInput(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    json_output: bool = Field(default=False, description="JSON console output")
    use_colors: bool = Field(default=True, description="Colored console output")
    log_file: Optional[str] = Field(default=None, description="Optional log file")

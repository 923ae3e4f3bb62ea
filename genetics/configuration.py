"""
Evolver configuration: which strategies to use and at what rates.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from genetics.crossover import PointCrossover
from genetics.interfaces import (
    DEFAULT_CROSSOVER_RATE,
    DEFAULT_MUTATION_RATE,
    CrossoverStrategy,
    SelectionStrategy,
)
from genetics.selection import RankSelection


@dataclass(frozen=True)
class Elitism:
    """Carry the ``count`` fittest chromosomes into the next generation unchanged."""

    count: int = 0

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"Elitism count must be non-negative, got {self.count}")

    @classmethod
    def none(cls) -> "Elitism":
        return cls(0)


@dataclass
class EvolverConfiguration:
    """
    Configuration for an Evolver.

    Rates are probabilities and are not range-checked here: values above 1
    behave like 1 and values below 0 behave like 0. The settings layer in
    ``genetics_core.config`` rejects out-of-range values.
    """

    selection_method: SelectionStrategy = field(default_factory=RankSelection)
    crossover_method: CrossoverStrategy = field(default_factory=PointCrossover)
    elitism: Optional[Elitism] = None
    crossover_rate: float = DEFAULT_CROSSOVER_RATE
    mutation_rate: float = DEFAULT_MUTATION_RATE

    @property
    def elitism_count(self) -> int:
        return self.elitism.count if self.elitism is not None else 0

    def copy(self, **changes) -> "EvolverConfiguration":
        return replace(self, **changes)

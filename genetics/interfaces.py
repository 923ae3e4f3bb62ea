"""Genetics: Core Interface Definitions"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Callable, List

from genetics.chromosome import Chromosome
from genetics.random_source import RandomSource

if TYPE_CHECKING:
    from genetics.configuration import EvolverConfiguration
    from genetics.population import Population

# Enumerations


class SelectionMethod(Enum):
    """Built-in selection methods, by settings name."""

    RANK = "rank"
    ROULETTE = "roulette"
    TOURNAMENT = "tournament"


class CrossoverMethod(Enum):
    """Built-in crossover methods, by settings name."""

    POINT = "point"
    UNIFORM = "uniform"


# Callback signatures

FitnessFunction = Callable[[Chromosome], float]
MutationFunction = Callable[[Chromosome, int], float]
SelectionFunction = Callable[[List[Chromosome]], Chromosome]
CrossoverFunction = Callable[[Chromosome, Chromosome], Chromosome]
ContinuationHook = Callable[["EvolverConfiguration", "Population"], bool]


# Strategy interfaces


class SelectionStrategy(ABC):
    """Picks one parent from an evaluated, ascending-sorted chromosome list."""

    @abstractmethod
    def select(self, chromosomes: List[Chromosome], rng: RandomSource) -> Chromosome:
        pass


class CrossoverStrategy(ABC):
    """Combines two equal-length parents into one child."""

    @abstractmethod
    def combine(
        self, first: Chromosome, second: Chromosome, rng: RandomSource
    ) -> Chromosome:
        pass

    def validate(self, chromosome_length: int) -> None:
        """Raise if chromosomes of this length cannot be combined."""


# Defaults

DEFAULT_CROSSOVER_RATE = 0.5
DEFAULT_MUTATION_RATE = 0.5

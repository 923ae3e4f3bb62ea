"""
Genetics: a generic evolutionary-computation engine.
Provides population handling, selection, crossover and the evolver loop.
"""

from .chromosome import Chromosome
from .configuration import Elitism, EvolverConfiguration
from .crossover import CustomCrossover, PointCrossover, UniformCrossover
from .errors import (
    EmptyPopulationError,
    EvolverError,
    GeneticsWarning,
    InvalidConfigError,
    InvalidCrossoverPointCountError,
    InvalidElitismCountError,
    NegativeFitnessWarning,
    NegativeRouletteWeightWarning,
)
from .evolver import Evolver
from .history import GenerationHistory, GenerationRecord, stop_after
from .population import Population
from .random_source import RandomSource
from .selection import (
    CustomSelection,
    RankSelection,
    RouletteSelection,
    TournamentSelection,
)

__version__ = "0.1.0"

__all__ = [
    "Chromosome",
    "Population",
    "Evolver",
    "EvolverConfiguration",
    "Elitism",
    "RandomSource",
    "RankSelection",
    "RouletteSelection",
    "TournamentSelection",
    "CustomSelection",
    "PointCrossover",
    "UniformCrossover",
    "CustomCrossover",
    "GenerationHistory",
    "GenerationRecord",
    "stop_after",
    "EvolverError",
    "EmptyPopulationError",
    "InvalidCrossoverPointCountError",
    "InvalidElitismCountError",
    "InvalidConfigError",
    "GeneticsWarning",
    "NegativeFitnessWarning",
    "NegativeRouletteWeightWarning",
]

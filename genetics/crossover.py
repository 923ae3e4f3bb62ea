"""
Crossover strategies: combine two parent chromosomes into one child.
"""

from dataclasses import dataclass

from genetics.chromosome import Chromosome
from genetics.errors import InvalidCrossoverPointCountError
from genetics.interfaces import CrossoverFunction, CrossoverMethod, CrossoverStrategy
from genetics.random_source import RandomSource


@dataclass(frozen=True)
class PointCrossover(CrossoverStrategy):
    """
    k-point crossover.

    Picks ``count`` distinct cut points from ``1..L-1``, then copies the gene
    runs between consecutive cuts alternately from the first and second
    parent, starting with the first. ``count`` must be less than the
    chromosome length; the evolver checks this before a run.
    """

    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Point crossover needs at least one point, got {self.count}")

    def validate(self, chromosome_length: int) -> None:
        if self.count >= chromosome_length:
            raise InvalidCrossoverPointCountError(self.count, chromosome_length)

    def combine(
        self, first: Chromosome, second: Chromosome, rng: RandomSource
    ) -> Chromosome:
        length = len(first)
        child = Chromosome.zeros(length)

        candidates = list(range(1, length))
        rng.shuffle(candidates, count=self.count)
        points = sorted(candidates[: self.count])
        bounds = [0] + points + [length]

        for segment in range(len(bounds) - 1):
            parent = first if segment % 2 == 0 else second
            for i in range(bounds[segment], bounds[segment + 1]):
                child[i] = parent[i]

        return child


@dataclass(frozen=True)
class UniformCrossover(CrossoverStrategy):
    """Each gene comes from either parent with equal probability."""

    def combine(
        self, first: Chromosome, second: Chromosome, rng: RandomSource
    ) -> Chromosome:
        return Chromosome(
            first[i] if rng.coin() else second[i] for i in range(len(first))
        )


@dataclass(frozen=True)
class CustomCrossover(CrossoverStrategy):
    """Delegates to a caller function of the two parents."""

    function: CrossoverFunction

    def combine(
        self, first: Chromosome, second: Chromosome, rng: RandomSource
    ) -> Chromosome:
        return self.function(first, second)


def crossover_for(method: CrossoverMethod, points: int = 1) -> CrossoverStrategy:
    """Resolve a built-in crossover method by name."""
    if CrossoverMethod(method) is CrossoverMethod.POINT:
        return PointCrossover(points)
    return UniformCrossover()

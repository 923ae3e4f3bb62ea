"""
Parent selection strategies.

All built-in strategies expect the chromosome list to be evaluated and
sorted by ascending fitness. They overwrite the ``weight`` scratch field and
never touch fitness or genes. Tournament selection also reorders the list.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import List

from genetics.chromosome import Chromosome
from genetics.errors import NegativeRouletteWeightWarning
from genetics.interfaces import SelectionFunction, SelectionMethod, SelectionStrategy
from genetics.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankSelection(SelectionStrategy):
    """Selection probability proportional to fitness rank (1 for the worst, N for the best)."""

    def select(self, chromosomes: List[Chromosome], rng: RandomSource) -> Chromosome:
        for i, chromosome in enumerate(chromosomes):
            chromosome.weight = float(i + 1)

        total = int(sum(c.weight for c in chromosomes))
        rand = float(rng.randbelow(total))
        cumulative = 0.0

        for chromosome in chromosomes:
            cumulative += chromosome.weight
            if rand < cumulative:
                return chromosome

        # Unreachable with integral rank weights; kept as a deterministic default.
        logger.debug("Rank selection scan exhausted, returning an empty chromosome")
        return Chromosome()


@dataclass(frozen=True)
class RouletteSelection(SelectionStrategy):
    """
    Selection probability proportional to each chromosome's share of total weight.

    Weights start out as raw fitness. Negative shares are shifted up by the
    magnitude of the smallest one and reported with a warning.
    """

    def select(self, chromosomes: List[Chromosome], rng: RandomSource) -> Chromosome:
        total = sum(c.weight for c in chromosomes)
        if total == 0:
            for chromosome in chromosomes:
                chromosome.weight = 1.0 / len(chromosomes)
        else:
            for chromosome in chromosomes:
                chromosome.weight = chromosome.weight / total

        negative = sum(1 for c in chromosomes if c.weight < 0.0)
        if negative > 0:
            message = (
                f"Population contains {negative} chromosomes with negative roulette "
                "weight, shifting weights which may result in bad roulette selection"
            )
            logger.warning(message)
            # Attributed to whoever called select(); strategies are usable without an Evolver.
            warnings.warn(message, NegativeRouletteWeightWarning, stacklevel=2)

            offset = abs(min(c.weight for c in chromosomes))
            for chromosome in chromosomes:
                chromosome.weight += offset

        rand = rng.uniform()
        cumulative = 0.0

        for chromosome in chromosomes:
            cumulative += chromosome.weight
            if rand < cumulative:
                return chromosome

        return chromosomes[0]


@dataclass(frozen=True)
class TournamentSelection(SelectionStrategy):
    """
    Shuffle, take a random-size group from the front, return its heaviest member.

    The group size is uniform in ``[1, N - 1]`` (1 when N is 1).
    """

    def select(self, chromosomes: List[Chromosome], rng: RandomSource) -> Chromosome:
        rng.shuffle(chromosomes)
        size = len(chromosomes)
        group_size = rng.randbelow(size - 1) + 1 if size > 1 else 1
        group = chromosomes[:group_size]
        return max(group, key=lambda c: c.weight)


@dataclass(frozen=True)
class CustomSelection(SelectionStrategy):
    """Delegates to a caller function; the function sees a copy of the list."""

    function: SelectionFunction

    def select(self, chromosomes: List[Chromosome], rng: RandomSource) -> Chromosome:
        return self.function(list(chromosomes))


def selection_for(method: SelectionMethod) -> SelectionStrategy:
    """Resolve a built-in selection method by name."""
    strategies = {
        SelectionMethod.RANK: RankSelection,
        SelectionMethod.ROULETTE: RouletteSelection,
        SelectionMethod.TOURNAMENT: TournamentSelection,
    }
    return strategies[SelectionMethod(method)]()

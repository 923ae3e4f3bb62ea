"""
Population: the chromosomes of one generation plus a generation counter.
"""

import logging
from typing import Callable, Iterator, List, Optional, Sequence

from genetics.chromosome import Chromosome

logger = logging.getLogger(__name__)

GeneratingFunction = Callable[[int, int], float]


class Population:
    """
    A set of chromosomes.

    After each fitness pass the chromosomes are sorted by ascending fitness,
    so the fittest member is the last one.
    """

    def __init__(self, chromosomes: Optional[Sequence[Chromosome]] = None, generation: int = 1):
        self.chromosomes: List[Chromosome] = list(chromosomes) if chromosomes else []
        self.generation = generation

    @property
    def population_size(self) -> int:
        return len(self.chromosomes)

    @property
    def chromosome_length(self) -> int:
        """Length of the first chromosome, 0 for an empty population."""
        return len(self.chromosomes[0]) if self.chromosomes else 0

    @property
    def fittest(self) -> Optional[Chromosome]:
        """Highest-fitness member (assumes the population has been evaluated)."""
        if not self.chromosomes:
            return None
        return max(self.chromosomes, key=lambda c: c.fitness)

    def fitness_values(self) -> List[float]:
        return [c.fitness for c in self.chromosomes]

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(self.chromosomes)

    def __str__(self) -> str:
        lines = [f"Generation: {self.generation}"]
        for chromosome in self.chromosomes:
            lines.append(f"Chromosome: {chromosome}, fitness: {chromosome.fitness}")
        return "\n".join(lines)

    @classmethod
    def generate(
        cls,
        population_size: int,
        chromosome_length: int,
        generating_function: GeneratingFunction,
    ) -> "Population":
        """
        Generate a population of chromosomes.

        Args:
            population_size: Number of chromosomes to generate
            chromosome_length: Number of genes per chromosome
            generating_function: Called as ``fn(chromosome_index, gene_index)``
                for every gene, both indexes 0-based

        Returns:
            A new population at generation 1. If either size is not positive
            the population holds exactly one empty chromosome.
        """
        if population_size <= 0 or chromosome_length <= 0:
            logger.debug(
                f"Degenerate population request ({population_size}x{chromosome_length}), "
                "returning a single empty chromosome"
            )
            return cls([Chromosome()])

        chromosomes = [
            Chromosome(generating_function(i, j) for j in range(chromosome_length))
            for i in range(population_size)
        ]
        return cls(chromosomes)

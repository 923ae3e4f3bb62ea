"""
Evolver implementation for Genetics.
Central orchestrator for the genetic algorithm generation loop.
"""

import logging
import time
import warnings
from typing import Any, Callable, Dict, List, Optional, Tuple

from genetics.chromosome import Chromosome
from genetics.configuration import EvolverConfiguration
from genetics.errors import (
    EmptyPopulationError,
    InvalidElitismCountError,
    NegativeFitnessWarning,
)
from genetics.interfaces import ContinuationHook, FitnessFunction, MutationFunction
from genetics.population import Population
from genetics.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


class Evolver:
    """
    Evolves a population.

    Each generation: evaluate fitness, keep the elites, breed the remaining
    slots by selection, optional crossover and per-gene mutation, then
    evaluate the new generation.
    """

    def __init__(
        self,
        configuration: Optional[EvolverConfiguration],
        fitness_function: FitnessFunction,
        mutation_function: MutationFunction,
        random_source: Optional[RandomSource] = None,
    ):
        self.configuration = configuration or EvolverConfiguration()
        self.fitness_function = fitness_function
        self.mutation_function = mutation_function
        self.random_source = random_source or default_random_source()

        self.event_listeners: List[Tuple[str, Callable]] = []

    def evolve(
        self,
        population: Population,
        should_continue: Optional[ContinuationHook] = None,
    ) -> Population:
        """
        Evolve a population in place.

        Args:
            population: The population to evolve
            should_continue: Called after every generation with the evolver's
                configuration (which it may change) and the population. Its
                return value decides whether another generation is bred.
                Without it exactly one generation is bred.

        Returns:
            The same population object, for chaining.

        Raises:
            EmptyPopulationError: The population has no chromosomes
            InvalidCrossoverPointCountError: Point count >= chromosome length
            InvalidElitismCountError: Elitism count > population size
        """
        self.validate(population)

        start_time = time.monotonic()
        start_generation = population.generation
        logger.info(
            f"Starting evolution at generation {population.generation} "
            f"with {population.population_size} chromosomes"
        )
        self._emit_event(
            "evolution_started",
            {"generation": population.generation, "population": population},
        )

        self._calculate_fitnesses(population)

        while True:
            population.chromosomes = self._breed_single_generation(population)
            population.generation += 1
            self._calculate_fitnesses(population)

            logger.debug(
                f"Generation {population.generation} bred",
                extra={
                    "generation": population.generation,
                    "best_fitness": population.chromosomes[-1].fitness,
                },
            )
            self._emit_event(
                "generation_completed",
                {"generation": population.generation, "population": population},
            )

            if should_continue is None or not should_continue(
                self.configuration, population
            ):
                break

            # The hook may have changed the configuration.
            self.validate(population)

        duration = time.monotonic() - start_time
        logger.info(
            f"Evolution finished after {population.generation - start_generation} "
            f"generations in {duration:.3f}s"
        )
        self._emit_event(
            "evolution_completed",
            {
                "generation": population.generation,
                "population": population,
                "duration_seconds": duration,
            },
        )
        return population

    def validate(self, population: Population) -> None:
        """Check every precondition of ``evolve`` without touching the population."""
        if population.population_size == 0:
            raise EmptyPopulationError()

        self.configuration.crossover_method.validate(len(population.chromosomes[0]))

        elitism_count = self.configuration.elitism_count
        if elitism_count > population.population_size:
            raise InvalidElitismCountError(elitism_count, population.population_size)

    def _calculate_fitnesses(self, population: Population) -> None:
        """Set fitness and weight on every chromosome, then sort ascending."""
        for chromosome in population.chromosomes:
            fitness = self.fitness_function(chromosome)

            if fitness < 0.0:
                message = f"Negative fitness value {fitness} may cause strange results"
                logger.warning(message)
                warnings.warn(message, NegativeFitnessWarning, stacklevel=3)

            chromosome.fitness = fitness
            chromosome.weight = fitness

        population.chromosomes.sort(key=lambda c: c.fitness)

    def _breed_single_generation(self, population: Population) -> List[Chromosome]:
        new_chromosomes = self._apply_elitism(population)

        for _ in range(len(new_chromosomes), population.population_size):
            new_chromosomes.append(self._breed_child(population))

        return new_chromosomes

    def _apply_elitism(self, population: Population) -> List[Chromosome]:
        """Fittest chromosomes first, unchanged."""
        count = self.configuration.elitism_count
        size = population.population_size
        return [population.chromosomes[size - i - 1] for i in range(count)]

    def _breed_child(self, population: Population) -> Chromosome:
        if self._should_crossover():
            first = self._select_parent(population)
            second = self._select_parent(population)
            child = self.configuration.crossover_method.combine(
                first, second, self.random_source
            )
            if child is first or child is second:
                child = child.copy()
        else:
            child = self._select_parent(population).copy()

        for i in range(len(child)):
            if self._should_mutate():
                child[i] = self.mutation_function(child, i)

        return child

    def _select_parent(self, population: Population) -> Chromosome:
        return self.configuration.selection_method.select(
            population.chromosomes, self.random_source
        )

    def _should_crossover(self) -> bool:
        return self.random_source.uniform() < self.configuration.crossover_rate

    def _should_mutate(self) -> bool:
        return self.random_source.uniform() < self.configuration.mutation_rate

    def add_event_listener(self, event_type: str, callback: Callable):
        """Add event listener for evolution events"""
        self.event_listeners.append((event_type, callback))

    def _emit_event(self, event_type: str, data: Dict[str, Any]):
        """Emit event to all registered listeners"""
        for listener_type, callback in self.event_listeners:
            if listener_type == event_type:
                try:
                    callback(data)
                except Exception as e:
                    logger.error(f"Event listener error: {e}")

"""Shared fixtures for the genetics test suite."""

import logging
from typing import Iterable, List, Optional

import pytest

from genetics import Chromosome, Population, RandomSource


class ScriptedRandom(RandomSource):
    """
    RandomSource that replays queued draws, then falls back to a seeded generator.
    Records every ``randbelow`` bound it was asked for.
    """

    def __init__(
        self,
        ints: Optional[Iterable[int]] = None,
        floats: Optional[Iterable[float]] = None,
        seed: int = 0,
    ):
        super().__init__(seed)
        self.ints: List[int] = list(ints or [])
        self.floats: List[float] = list(floats or [])
        self.randbelow_calls: List[int] = []

    def randbelow(self, upper: int) -> int:
        self.randbelow_calls.append(upper)
        if self.ints:
            return self.ints.pop(0)
        return super().randbelow(upper)

    def uniform(self) -> float:
        if self.floats:
            return self.floats.pop(0)
        return super().uniform()


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


def make_population(rows, fitness=None) -> Population:
    """Population from gene rows; optional fitness list also seeds weights."""
    chromosomes = [Chromosome(row) for row in rows]
    if fitness is not None:
        for chromosome, value in zip(chromosomes, fitness):
            chromosome.fitness = value
            chromosome.weight = value
    return Population(chromosomes)


@pytest.fixture
def population_factory():
    return make_population


@pytest.fixture(autouse=True)
def restore_genetics_loggers():
    """Undo configure_logging side effects between tests."""
    names = ["genetics", "genetics_core"]
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in names
    }
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)

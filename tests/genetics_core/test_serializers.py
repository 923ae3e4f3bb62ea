"""
Unit tests for serialization helpers.
"""

import json

from genetics import Chromosome, GenerationRecord, Population
from genetics_core.serializers import (
    serialize_chromosome,
    serialize_population,
    to_json,
)


def _population():
    population = Population(
        [Chromosome([0.1, 0.2]), Chromosome([0.9, 0.8]), Chromosome([0.5, 0.5])],
        generation=7,
    )
    for chromosome, fitness in zip(population.chromosomes, [0.3, 1.7, 1.0]):
        chromosome.fitness = fitness
        chromosome.weight = 99.0
    return population


def test_serialize_chromosome_omits_weight():
    chromosome = Chromosome([1.0, 2.0], fitness=0.5)
    chromosome.weight = 3.0
    assert serialize_chromosome(chromosome) == {"genes": [1.0, 2.0], "fitness": 0.5}


def test_serialize_population_fittest_first():
    data = serialize_population(_population())

    assert data["generation"] == 7
    assert data["population_size"] == 3
    assert data["chromosome_length"] == 2
    assert data["best_fitness"] == 1.7
    assert [c["fitness"] for c in data["chromosomes"]] == [1.7, 1.0, 0.3]


def test_serialize_population_limit():
    data = serialize_population(_population(), limit=1)
    assert data["chromosomes"] == [{"genes": [0.9, 0.8], "fitness": 1.7}]
    assert data["population_size"] == 3


def test_serialize_empty_population():
    data = serialize_population(Population())
    assert data["best_fitness"] is None
    assert data["chromosomes"] == []


def test_to_json_handles_engine_types():
    record = GenerationRecord(
        generation=1,
        population_size=3,
        best_fitness=1.0,
        worst_fitness=0.0,
        mean_fitness=0.5,
    )
    payload = json.loads(
        to_json({"chromosome": Chromosome([1.0]), "population": _population(), "record": record})
    )

    assert payload["chromosome"] == {"genes": [1.0], "fitness": 0.0}
    assert payload["population"]["generation"] == 7
    assert payload["record"]["generation"] == 1
    assert isinstance(payload["record"]["timestamp"], str)

"""
Serialization utilities for display and export.
Handles chromosome, population and dataclass conversion to JSON-safe formats.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from genetics import Chromosome, Population


class GeneticsJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for genetics types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Chromosome):
            return serialize_chromosome(obj)
        if isinstance(obj, Population):
            return serialize_population(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)
        return super().default(obj)


def serialize_chromosome(chromosome: Chromosome) -> Dict[str, Any]:
    """Convert a Chromosome to a JSON-safe dict (weight is internal and left out)."""
    return {
        "genes": chromosome.to_list(),
        "fitness": chromosome.fitness,
    }


def serialize_population(
    population: Population, limit: Optional[int] = None
) -> Dict[str, Any]:
    """Convert a Population to a JSON-safe dict, fittest first.

    Args:
        population: Population to convert
        limit: Keep only the ``limit`` fittest chromosomes

    Returns:
        JSON-serializable dictionary
    """
    ranked = sorted(population.chromosomes, key=lambda c: c.fitness, reverse=True)
    if limit is not None:
        ranked = ranked[:limit]

    fittest = population.fittest
    return {
        "generation": population.generation,
        "population_size": population.population_size,
        "chromosome_length": population.chromosome_length,
        "best_fitness": fittest.fitness if fittest is not None else None,
        "chromosomes": [serialize_chromosome(c) for c in ranked],
    }


def to_json(obj: Any, **kwargs) -> str:
    """Serialize with GeneticsJSONEncoder."""
    return json.dumps(obj, cls=GeneticsJSONEncoder, **kwargs)

"""
Generation history and continuation helpers.
Records per-generation fitness statistics and builds stop conditions.
"""

import csv
import json
import logging
import statistics
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from genetics.configuration import EvolverConfiguration
from genetics.interfaces import ContinuationHook
from genetics.population import Population

logger = logging.getLogger(__name__)


@dataclass
class GenerationRecord:
    """Fitness statistics of one evaluated generation."""

    generation: int
    population_size: int
    best_fitness: float
    worst_fitness: float
    mean_fitness: float
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


class GenerationHistory:
    """
    Collects a GenerationRecord per generation.

    Attach it with ``evolver.add_event_listener("generation_completed",
    history.on_generation)`` or call ``record`` from a continuation hook.
    """

    def __init__(self, max_records: Optional[int] = None):
        self.max_records = max_records
        self.records: List[GenerationRecord] = []

    def record(self, population: Population) -> GenerationRecord:
        """Record the current state of an evaluated population."""
        fitnesses = population.fitness_values()
        if not fitnesses:
            raise ValueError("Cannot record an empty population")

        entry = GenerationRecord(
            generation=population.generation,
            population_size=population.population_size,
            best_fitness=max(fitnesses),
            worst_fitness=min(fitnesses),
            mean_fitness=statistics.fmean(fitnesses),
        )
        self.records.append(entry)

        if self.max_records is not None and len(self.records) > self.max_records:
            del self.records[: len(self.records) - self.max_records]

        logger.debug(
            f"Recorded generation {entry.generation}: best={entry.best_fitness:.4f}, "
            f"mean={entry.mean_fitness:.4f}"
        )
        return entry

    def on_generation(self, event: Dict[str, Any]) -> None:
        """Event listener adapter for ``generation_completed``."""
        self.record(event["population"])

    @property
    def best(self) -> Optional[GenerationRecord]:
        if not self.records:
            return None
        return max(self.records, key=lambda r: r.best_fitness)

    def best_fitness_trend(self) -> List[float]:
        return [r.best_fitness for r in self.records]

    def has_converged(self, generations: int, threshold: float = 0.0) -> bool:
        """
        True when best fitness improved by no more than ``threshold`` over
        the last ``generations`` records.
        """
        if generations < 1 or len(self.records) <= generations:
            return False
        window = self.records[-(generations + 1) :]
        improvement = max(r.best_fitness for r in window[1:]) - window[0].best_fitness
        return improvement <= threshold

    def clear(self) -> None:
        self.records.clear()

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.records]

    def export_to_json(self, path: str) -> Dict[str, Any]:
        """Export records and a summary to a JSON file."""
        best = self.best
        export_data = {
            "export_timestamp": datetime.now().isoformat(),
            "summary": {
                "generations": len(self.records),
                "best_fitness": best.best_fitness if best else None,
                "best_generation": best.generation if best else None,
            },
            "records": self.to_dicts(),
        }

        with open(path, "w") as f:
            json.dump(export_data, f, indent=2)

        logger.info(f"Exported {len(self.records)} generation records to JSON: {path}")
        return export_data

    def export_to_csv(self, path: str) -> None:
        fieldnames = [
            "generation",
            "population_size",
            "best_fitness",
            "worst_fitness",
            "mean_fitness",
            "timestamp",
        ]
        with open(path, "w", newline="") as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(self.to_dicts())

        logger.info(f"Exported {len(self.records)} generation records to CSV: {path}")


def stop_after(
    max_generations: int,
    fitness_threshold: Optional[float] = None,
    history: Optional[GenerationHistory] = None,
    convergence_generations: Optional[int] = None,
    convergence_threshold: float = 0.0,
) -> ContinuationHook:
    """
    Build a continuation hook.

    The hook stops once the population reaches ``max_generations``, once the
    best fitness reaches ``fitness_threshold``, or once the history reports
    convergence. When a history is given, every generation is recorded in it.
    """
    if convergence_generations is not None and history is None:
        history = GenerationHistory()

    def should_continue(
        configuration: EvolverConfiguration, population: Population
    ) -> bool:
        if history is not None:
            history.record(population)

        if population.generation >= max_generations:
            return False

        if fitness_threshold is not None:
            best = max(population.fitness_values())
            if best >= fitness_threshold:
                logger.info(
                    f"Fitness threshold {fitness_threshold} reached at generation "
                    f"{population.generation}"
                )
                return False

        if (
            convergence_generations is not None
            and history is not None
            and history.has_converged(convergence_generations, convergence_threshold)
        ):
            logger.info(f"Converged at generation {population.generation}")
            return False

        return True

    return should_continue

"""
Error and warning types for the genetics engine.
Every precondition failure of an evolution run maps to one named error.
"""

from typing import Any, Dict, List, Optional


class EvolverError(Exception):
    """Base exception for evolver errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain error payload."""
        return {
            "error": {
                "code": self.code,
                "message": str(self),
                "details": self.details,
            }
        }


class EmptyPopulationError(EvolverError):
    """Raised when evolving a population with no chromosomes."""

    def __init__(self):
        super().__init__(
            "A population must have at least one member.",
            "EMPTY_POPULATION",
        )


class InvalidCrossoverPointCountError(EvolverError):
    """Raised when a point crossover count is not less than the chromosome length."""

    def __init__(self, count: int, chromosome_length: int):
        super().__init__(
            f"Crossover point count {count} must be less than "
            f"chromosome length {chromosome_length}.",
            "INVALID_CROSSOVER_POINT_COUNT",
            {"count": count, "chromosome_length": chromosome_length},
        )


class InvalidElitismCountError(EvolverError):
    """Raised when the elitism count exceeds the population size."""

    def __init__(self, count: int, population_size: int):
        super().__init__(
            f"Elitism count {count} must be less than or equal to "
            f"population size {population_size}.",
            "INVALID_ELITISM_COUNT",
            {"count": count, "population_size": population_size},
        )


class InvalidConfigError(EvolverError):
    """Raised when settings fail validation."""

    def __init__(self, errors: List[Any]):
        super().__init__(
            "Invalid configuration",
            "INVALID_CONFIG",
            {"errors": errors},
        )


class GeneticsWarning(UserWarning):
    """Base category for non-fatal engine conditions."""


class NegativeFitnessWarning(GeneticsWarning):
    """A fitness function returned a negative value."""


class NegativeRouletteWeightWarning(GeneticsWarning):
    """Roulette selection had to shift negative weights."""

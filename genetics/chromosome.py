"""
Chromosome: a fixed-length vector of real-valued genes.
"""

from collections.abc import MutableSequence
from typing import Iterable, List, Optional, Union, overload


class Chromosome(MutableSequence):
    """
    An ordered set of genes representing one candidate solution.

    ``fitness`` is written once per generation by the evolver, right after
    breeding. Changing it before the next ``evolve`` call affects selection.

    ``weight`` is scratch space for the selection strategies. It is
    overwritten on every selection call and carries no meaning for callers.
    """

    __slots__ = ("_genes", "fitness", "weight")

    def __init__(self, genes: Optional[Iterable[float]] = None, fitness: float = 0.0):
        self._genes: List[float] = [float(g) for g in genes] if genes is not None else []
        self.fitness = fitness
        self.weight = 0.0

    @classmethod
    def zeros(cls, length: int) -> "Chromosome":
        return cls([0.0] * length)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> List[float]: ...

    def __getitem__(self, index: Union[int, slice]):
        return self._genes[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._genes[index] = [float(v) for v in value]
        else:
            self._genes[index] = float(value)

    def __delitem__(self, index) -> None:
        del self._genes[index]

    def __len__(self) -> int:
        return len(self._genes)

    def insert(self, index: int, value: float) -> None:
        self._genes.insert(index, float(value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chromosome):
            return self._genes == other._genes
        if isinstance(other, (list, tuple)):
            return self._genes == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Chromosome({self._genes!r}, fitness={self.fitness!r})"

    def __str__(self) -> str:
        return str(self._genes)

    def copy(self) -> "Chromosome":
        """Copy genes, fitness and weight."""
        clone = Chromosome(self._genes, fitness=self.fitness)
        clone.weight = self.weight
        return clone

    def to_list(self) -> List[float]:
        return list(self._genes)

"""
Unit tests for the selection strategies.
Uses scripted random draws to pin down exact picks.
"""

import warnings
from unittest.mock import Mock

import pytest

from genetics import (
    Chromosome,
    CustomSelection,
    NegativeRouletteWeightWarning,
    RandomSource,
    RankSelection,
    RouletteSelection,
    TournamentSelection,
)
from genetics.interfaces import SelectionMethod
from genetics.selection import selection_for


def _identity_in(item, items):
    return any(item is other for other in items)


class TestRankSelection:
    """Rank selection over an ascending-sorted population."""

    def setup_method(self):
        self.strategy = RankSelection()

    @pytest.mark.parametrize(
        "draw,expected_index", [(0, 0), (1, 1), (2, 1), (3, 2), (5, 2), (6, 3), (9, 3)]
    )
    def test_cumulative_rank_scan(self, scripted, population_factory, draw, expected_index):
        population = population_factory(
            [[0.0], [1.0], [2.0], [3.0]], fitness=[0.1, 0.2, 0.3, 0.4]
        )
        rng = scripted(ints=[draw])

        chosen = self.strategy.select(population.chromosomes, rng)

        assert chosen is population.chromosomes[expected_index]
        assert rng.randbelow_calls == [10]

    def test_weights_are_ranks(self, scripted, population_factory):
        population = population_factory([[0.0]] * 3, fitness=[-5.0, 0.0, 100.0])
        self.strategy.select(population.chromosomes, scripted(ints=[0]))
        assert [c.weight for c in population.chromosomes] == [1.0, 2.0, 3.0]

    def test_fitness_and_genes_untouched(self, population_factory):
        population = population_factory([[1.0], [2.0]], fitness=[3.0, 4.0])
        self.strategy.select(population.chromosomes, RandomSource(seed=1))
        assert population.fitness_values() == [3.0, 4.0]
        assert [c.to_list() for c in population] == [[1.0], [2.0]]

    def test_exhausted_scan_returns_empty_chromosome(self, scripted, population_factory):
        # A draw outside [0, total) cannot come from a real source; the strategy
        # still returns a deterministic default instead of failing.
        population = population_factory([[1.0], [2.0]], fitness=[1.0, 2.0])
        chosen = self.strategy.select(population.chromosomes, scripted(ints=[3]))
        assert isinstance(chosen, Chromosome)
        assert len(chosen) == 0


class TestRouletteSelection:
    """Roulette selection on fitness-seeded weights."""

    def setup_method(self):
        self.strategy = RouletteSelection()

    def test_normalizes_weights(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0], [2.0]], fitness=[1.0, 1.0, 2.0])
        self.strategy.select(population.chromosomes, scripted(floats=[0.0]))
        assert [c.weight for c in population] == [0.25, 0.25, 0.5]

    @pytest.mark.parametrize("draw,expected_index", [(0.0, 0), (0.3, 1), (0.5, 2), (0.99, 2)])
    def test_picks_first_cumulative_share_above_draw(
        self, scripted, population_factory, draw, expected_index
    ):
        population = population_factory([[0.0], [1.0], [2.0]], fitness=[1.0, 1.0, 2.0])
        chosen = self.strategy.select(population.chromosomes, scripted(floats=[draw]))
        assert chosen is population.chromosomes[expected_index]

    def test_negative_weights_are_shifted_and_reported(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0], [2.0]], fitness=[-1.0, 1.0, 2.0])

        with pytest.warns(NegativeRouletteWeightWarning):
            chosen = self.strategy.select(population.chromosomes, scripted(floats=[0.5]))

        assert [c.weight for c in population] == [0.0, 1.0, 1.5]
        assert chosen is population.chromosomes[1]

    def test_negative_weight_warning_points_at_caller(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0]], fitness=[-1.0, 2.0])

        with pytest.warns(NegativeRouletteWeightWarning) as record:
            self.strategy.select(population.chromosomes, scripted(floats=[0.5]))

        assert record[0].filename == __file__

    def test_draw_beyond_total_falls_back_to_first(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0]], fitness=[1.0, 3.0])
        chosen = self.strategy.select(population.chromosomes, scripted(floats=[1.0]))
        assert chosen is population.chromosomes[0]

    def test_zero_total_weight_is_uniform(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0]], fitness=[0.0, 0.0])
        chosen = self.strategy.select(population.chromosomes, scripted(floats=[0.6]))
        assert [c.weight for c in population] == [0.5, 0.5]
        assert chosen is population.chromosomes[1]

    def test_no_warning_for_positive_weights(self, population_factory):
        population = population_factory([[0.0], [1.0]], fitness=[1.0, 3.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.strategy.select(population.chromosomes, RandomSource(seed=2))


class TestTournamentSelection:
    """Tournament selection over a shuffled population."""

    def setup_method(self):
        self.strategy = TournamentSelection()

    def test_heaviest_of_front_group_wins(self, scripted, population_factory):
        population = population_factory(
            [[0.0], [1.0], [2.0], [3.0]], fitness=[5.0, 9.0, 1.0, 20.0]
        )
        # three no-op shuffle draws, then group size 1 + 1
        rng = scripted(ints=[0, 0, 0, 1])

        chosen = self.strategy.select(population.chromosomes, rng)

        assert chosen is population.chromosomes[1]
        assert rng.randbelow_calls == [4, 3, 2, 3]

    def test_group_size_never_reaches_population_size(self, scripted, population_factory):
        population = population_factory(
            [[0.0], [1.0], [2.0]], fitness=[1.0, 2.0, 30.0]
        )
        # largest possible group is 2 of 3, so the last member can never win
        rng = scripted(ints=[0, 0, 1])
        chosen = self.strategy.select(population.chromosomes, rng)
        assert chosen is population.chromosomes[1]

    def test_reorders_population_in_place(self, scripted, population_factory):
        population = population_factory([[0.0], [1.0], [2.0]], fitness=[1.0, 2.0, 3.0])
        self.strategy.select(population.chromosomes, scripted(ints=[2, 0, 0]))
        assert [c[0] for c in population] == [2.0, 1.0, 0.0]

    def test_single_member(self, scripted, population_factory):
        population = population_factory([[4.0]], fitness=[1.0])
        rng = scripted()
        assert self.strategy.select(population.chromosomes, rng) is population.chromosomes[0]
        assert rng.randbelow_calls == []


class TestCustomSelection:
    """Caller-supplied selection."""

    def test_delegates_to_function(self, population_factory):
        population = population_factory([[1.0], [2.0]], fitness=[1.0, 2.0])
        function = Mock(side_effect=lambda chromosomes: chromosomes[-1])

        chosen = CustomSelection(function).select(population.chromosomes, RandomSource())

        assert chosen is population.chromosomes[1]
        function.assert_called_once()

    def test_function_cannot_reorder_population(self, population_factory):
        population = population_factory([[1.0], [2.0], [3.0]], fitness=[1.0, 2.0, 3.0])

        def reverse_and_pick(chromosomes):
            chromosomes.reverse()
            return chromosomes[0]

        CustomSelection(reverse_and_pick).select(population.chromosomes, RandomSource())
        assert [c[0] for c in population] == [1.0, 2.0, 3.0]


@pytest.mark.parametrize(
    "strategy", [RankSelection(), RouletteSelection(), TournamentSelection()]
)
def test_built_in_strategies_return_members(strategy, population_factory):
    population = population_factory(
        [[float(i), float(i)] for i in range(8)],
        fitness=[float(i) for i in range(8)],
    )
    members = list(population.chromosomes)
    rng = RandomSource(seed=11)

    for _ in range(200):
        chosen = strategy.select(population.chromosomes, rng)
        assert _identity_in(chosen, members)


def test_rank_selection_favours_higher_rank(population_factory):
    population = population_factory([[0.0], [1.0]], fitness=[0.0, 1.0])
    rng = RandomSource(seed=4)
    picks = [RankSelection().select(population.chromosomes, rng)[0] for _ in range(3000)]
    # weights 1 and 2 -> the fitter member is picked about two thirds of the time
    assert 0.6 < picks.count(1.0) / len(picks) < 0.73


@pytest.mark.parametrize(
    "name,expected",
    [
        ("rank", RankSelection),
        ("roulette", RouletteSelection),
        (SelectionMethod.TOURNAMENT, TournamentSelection),
    ],
)
def test_selection_for(name, expected):
    assert isinstance(selection_for(name), expected)

"""Tests for heuristic functions."""

import math

import pytest

from graph_astar.core.data_models import GridCell
from graph_astar.grid import OccupancyGrid
from graph_astar.search import AStarSearcher, CountingHeuristic, get_heuristic
from graph_astar.search.heuristics import (
    HEURISTICS, chebyshev_distance, euclidean_distance, manhattan_distance,
    octile_distance, zero_heuristic
)


class TestDistanceHeuristics:
    """Test grid distance heuristics."""

    def test_zero(self):
        assert zero_heuristic(object(), object()) == 0

    def test_values_on_tuples(self):
        a, b = (0, 0), (3, 4)
        assert manhattan_distance(a, b) == 7
        assert euclidean_distance(a, b) == 5.0
        assert chebyshev_distance(a, b) == 4
        assert octile_distance(a, b) == pytest.approx(4 + 3 * (math.sqrt(2) - 1))

    def test_values_on_cells(self):
        assert manhattan_distance(GridCell(1, 1), GridCell(4, 5)) == 7

    def test_distance_to_self_is_zero(self):
        for func in HEURISTICS.values():
            assert func((2, 3), (2, 3)) == 0

    def test_unsupported_state(self):
        with pytest.raises(TypeError):
            manhattan_distance(42, (0, 0))

    def test_ordering(self):
        """Chebyshev is the loosest bound and manhattan the tightest."""
        a, b = (1, 2), (7, 5)
        assert chebyshev_distance(a, b) <= octile_distance(a, b) <= manhattan_distance(a, b)
        assert euclidean_distance(a, b) <= octile_distance(a, b)


class TestHeuristicRegistry:
    """Test heuristic lookup."""

    def test_lookup(self):
        assert get_heuristic('manhattan') is manhattan_distance
        assert get_heuristic('zero') is zero_heuristic

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown heuristic"):
            get_heuristic('magic')


class TestCountingHeuristic:
    """Test the counting wrapper."""

    def test_counts_calls(self):
        counting = CountingHeuristic(manhattan_distance)
        assert counting((0, 0), (2, 2)) == 4
        counting((1, 0), (2, 2))

        stats = counting.get_stats()
        assert stats['name'] == 'manhattan_distance'
        assert stats['computation_count'] == 2
        assert stats['total_time'] >= 0.0

    def test_empty_stats(self):
        stats = CountingHeuristic(zero_heuristic, name='h0').get_stats()
        assert stats['name'] == 'h0'
        assert stats['average_time'] == 0.0

    def test_informed_search_expands_less(self):
        """On an open grid, manhattan expands fewer cells than the zero heuristic."""
        grid = OccupancyGrid.random(15, 15, obstacle_ratio=0.0, seed=0)
        start, goal = GridCell(0, 7), GridCell(14, 7)

        blind = CountingHeuristic(zero_heuristic)
        informed = CountingHeuristic(manhattan_distance)
        r_blind = AStarSearcher().inc_search(start, goal, grid.neighbours, blind)
        r_informed = AStarSearcher().inc_search(start, goal, grid.neighbours, informed)

        assert r_blind.cost == r_informed.cost == 14
        assert r_informed.nodes_expanded < r_blind.nodes_expanded
        assert informed.computation_count < blind.computation_count

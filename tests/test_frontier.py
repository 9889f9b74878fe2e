"""Tests for the priority frontier."""

import pytest

from puzzle_solver.core.exceptions import EmptyFrontier
from puzzle_solver.search.frontier import PriorityFrontier


class TestPriorityFrontier:
    """Test PriorityFrontier ordering and emptiness."""

    @pytest.fixture
    def frontier(self):
        return PriorityFrontier()

    def test_empty_frontier(self, frontier):
        assert len(frontier) == 0
        assert not frontier

        with pytest.raises(EmptyFrontier):
            frontier.pop_min()
        with pytest.raises(EmptyFrontier):
            frontier.peek_cost()

    def test_empty_frontier_is_index_error(self, frontier):
        """Callers catching IndexError also catch an empty pop."""
        with pytest.raises(IndexError):
            frontier.pop_min()

    def test_pops_lowest_cost_first(self, frontier):
        for item, cost in [('c', 3.0), ('a', 1.0), ('d', 4.0), ('b', 2.0)]:
            frontier.push(item, cost)

        assert frontier.peek_cost() == 1.0
        popped = [frontier.pop_min() for _ in range(4)]
        assert popped == [('a', 1.0), ('b', 2.0), ('c', 3.0), ('d', 4.0)]
        assert not frontier

    def test_equal_costs_pop_in_insertion_order(self, frontier):
        for item in ['first', 'second', 'third']:
            frontier.push(item, 5)

        assert [frontier.pop_min()[0] for _ in range(3)] == ['first', 'second', 'third']

    def test_tie_breaker_orders_equal_costs(self, frontier):
        frontier.push('shallow', 5, tie_breaker=3)
        frontier.push('deep', 5, tie_breaker=1)
        frontier.push('cheaper', 4, tie_breaker=10)

        assert frontier.pop_min()[0] == 'cheaper'
        assert frontier.pop_min()[0] == 'deep'
        assert frontier.pop_min()[0] == 'shallow'

    def test_duplicate_items_coexist(self, frontier):
        frontier.push('state', 7)
        frontier.push('state', 3)

        assert len(frontier) == 2
        assert frontier.pop_min() == ('state', 3)
        assert frontier.pop_min() == ('state', 7)

    def test_unorderable_items(self, frontier):
        """Items are never compared, so unorderable payloads are fine."""
        frontier.push({'a': 1}, 1)
        frontier.push({'b': 2}, 1)

        assert frontier.pop_min()[0] == {'a': 1}
        assert frontier.pop_min()[0] == {'b': 2}

    def test_deterministic_for_fixed_insertion_order(self):
        def drain(pushes):
            frontier = PriorityFrontier()
            for item, cost in pushes:
                frontier.push(item, cost)
            return [frontier.pop_min() for _ in range(len(pushes))]

        pushes = [('x', 2), ('y', 1), ('z', 2), ('w', 1), ('v', 2)]
        assert drain(pushes) == drain(pushes)
        assert drain(pushes) == [('y', 1), ('w', 1), ('x', 2), ('z', 2), ('v', 2)]

"""Tests for the transition rule."""

import numpy as np
import pytest

from termlife.core.rules import apply_rule, transition_rule


class TestTransitionRule:
    """Test cases for the B3/S23 rule."""

    @pytest.mark.parametrize("count", range(9))
    def test_live_cell(self, count):
        """Test that a live cell survives only with 2 or 3 neighbors."""
        assert transition_rule(True, count) is (count in (2, 3))

    @pytest.mark.parametrize("count", range(9))
    def test_dead_cell(self, count):
        """Test that a dead cell is born only with exactly 3 neighbors."""
        assert transition_rule(False, count) is (count == 3)

    def test_apply_rule_matches_scalar_rule(self):
        """Test that the vectorized rule agrees with the scalar one."""
        counts = np.array([list(range(9)), list(range(9))])
        cells = np.array([[True] * 9, [False] * 9])

        result = apply_rule(cells, counts)

        for row in range(2):
            for col in range(9):
                assert result[row, col] == transition_rule(bool(cells[row, col]), int(counts[row, col]))

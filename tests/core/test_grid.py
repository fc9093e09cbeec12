"""
Unit tests for cnhet.core.grid.
"""

import numpy as np
import pytest

from cnhet.core.config import SearchConfig
from cnhet.core.grid import GridPoint, ParameterGrid, inclusive_range


class TestInclusiveRange:
    """Evenly spaced candidate axes."""

    def test_endpoints_included(self):
        axis = inclusive_range(0.2, 1.0, 0.2)
        assert np.allclose(axis, [0.2, 0.4, 0.6, 0.8, 1.0])
        assert axis[-1] == 1.0

    def test_single_value(self):
        assert np.array_equal(inclusive_range(2.0, 2.0, 0.1), [2.0])

    def test_stop_before_start(self):
        assert inclusive_range(2.0, 1.0, 0.1).size == 0

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            inclusive_range(1.0, 2.0, 0.0)


class TestDefaultGrid:
    """Default ploidy and purity ranges."""

    def test_default_shape(self):
        grid = ParameterGrid.build()
        assert grid.shape == (351, 81)
        assert len(grid) == 351 * 81

    def test_default_endpoints(self):
        grid = ParameterGrid.build()
        assert grid.ploidy[0] == 1.5
        assert grid.ploidy[-1] == 5.0
        assert grid.purity[0] == 0.2
        assert grid.purity[-1] == 1.0

    def test_default_values_are_clean(self):
        """Axis values equal their decimal counterparts exactly."""
        grid = ParameterGrid.build()
        assert grid.ploidy[50] == 2.0
        assert grid.ploidy[150] == 3.0
        assert grid.purity[30] == 0.5
        assert grid.purity[40] == 0.6

    def test_fixed_axis_is_singleton(self):
        grid = ParameterGrid.build(ploidy=np.array([2.0]))
        assert grid.shape == (1, 81)
        grid = ParameterGrid.build(ploidy=np.array([2.0]), purity=np.array([0.5]))
        assert grid.shape == (1, 1)

    def test_config_ranges(self):
        config = SearchConfig(ploidy_start=2.0, ploidy_stop=3.0, ploidy_step=0.5,
                              purity_start=0.5, purity_stop=1.0, purity_step=0.25)
        grid = ParameterGrid.build(config=config)
        assert np.array_equal(grid.ploidy, [2.0, 2.5, 3.0])
        assert np.array_equal(grid.purity, [0.5, 0.75, 1.0])

    def test_build_is_deterministic(self):
        a = ParameterGrid.build()
        b = ParameterGrid.build()
        assert np.array_equal(a.ploidy, b.ploidy)
        assert np.array_equal(a.purity, b.purity)

    def test_grid_is_hashable(self):
        grid = ParameterGrid.build()
        assert hash(grid) == hash(grid)
        assert grid == grid
        assert grid != ParameterGrid.build()


class TestEnumeration:
    """Ploidy-outer, purity-inner enumeration order."""

    @pytest.fixture
    def grid(self):
        return ParameterGrid(ploidy=np.array([1.0, 2.0]), purity=np.array([0.5, 1.0]))

    def test_iter_points_order(self, grid):
        points = list(grid.iter_points())
        assert points == [
            GridPoint(0, 1.0, 0.5),
            GridPoint(1, 1.0, 1.0),
            GridPoint(2, 2.0, 0.5),
            GridPoint(3, 2.0, 1.0),
        ]

    def test_as_given_order_preserved(self):
        grid = ParameterGrid(ploidy=np.array([3.0, 2.0]), purity=np.array([1.0, 0.5]))
        points = [(p.ploidy, p.purity) for p in grid.iter_points()]
        assert points == [(3.0, 1.0), (3.0, 0.5), (2.0, 1.0), (2.0, 0.5)]

    def test_flat_parameters_match_iteration(self, grid):
        ploidy, purity = grid.flat_parameters()
        for point in grid.iter_points():
            assert ploidy[point.index] == point.ploidy
            assert purity[point.index] == point.purity

    def test_empty_axis(self):
        grid = ParameterGrid(ploidy=np.array([2.0]), purity=np.empty(0))
        assert len(grid) == 0
        assert list(grid.iter_points()) == []

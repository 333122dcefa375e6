"""Tests for the boundary enforcer."""

import numpy as np
import pytest

from solvers.stable_fluids.core import SCALAR, VELOCITY_X, VELOCITY_Y, cell_index, set_boundary

N = 6


def at(field, x, y):
    return field[cell_index(x, y, N)]


@pytest.fixture
def ramp():
    """Distinct value per cell so copies are easy to tell apart."""
    return np.arange(1, N * N + 1, dtype=np.float32)


class TestEdges:
    """Edge cells mirror or negate their interior neighbour depending on kind."""

    def test_scalar_mirrors_all_edges(self, ramp, no_obstacles):
        set_boundary(SCALAR, ramp, no_obstacles(N), N)
        for i in range(1, N - 1):
            assert at(ramp, i, 0) == at(ramp, i, 1)
            assert at(ramp, i, N - 1) == at(ramp, i, N - 2)
            assert at(ramp, 0, i) == at(ramp, 1, i)
            assert at(ramp, N - 1, i) == at(ramp, N - 2, i)

    def test_velocity_x_negates_vertical_edges(self, ramp, no_obstacles):
        set_boundary(VELOCITY_X, ramp, no_obstacles(N), N)
        for i in range(1, N - 1):
            assert at(ramp, 0, i) == -at(ramp, 1, i)
            assert at(ramp, N - 1, i) == -at(ramp, N - 2, i)
            # horizontal edges mirror
            assert at(ramp, i, 0) == at(ramp, i, 1)
            assert at(ramp, i, N - 1) == at(ramp, i, N - 2)

    def test_velocity_y_negates_horizontal_edges(self, ramp, no_obstacles):
        set_boundary(VELOCITY_Y, ramp, no_obstacles(N), N)
        for i in range(1, N - 1):
            assert at(ramp, i, 0) == -at(ramp, i, 1)
            assert at(ramp, i, N - 1) == -at(ramp, i, N - 2)
            # vertical edges mirror
            assert at(ramp, 0, i) == at(ramp, 1, i)
            assert at(ramp, N - 1, i) == at(ramp, N - 2, i)

    def test_interior_untouched(self, ramp, no_obstacles):
        before = ramp.copy()
        set_boundary(VELOCITY_X, ramp, no_obstacles(N), N)
        for i in range(1, N - 1):
            for j in range(1, N - 1):
                assert at(ramp, i, j) == at(before, i, j)


class TestCorners:
    """Corners average the two already-fixed adjacent edge cells."""

    @pytest.mark.parametrize("kind", [SCALAR, VELOCITY_X, VELOCITY_Y])
    def test_corner_average(self, ramp, no_obstacles, kind):
        set_boundary(kind, ramp, no_obstacles(N), N)
        corners = [
            ((0, 0), (1, 0), (0, 1)),
            ((0, N - 1), (1, N - 1), (0, N - 2)),
            ((N - 1, 0), (N - 2, 0), (N - 1, 1)),
            ((N - 1, N - 1), (N - 2, N - 1), (N - 1, N - 2)),
        ]
        for corner, a, b in corners:
            expected = 0.5 * (at(ramp, *a) + at(ramp, *b))
            assert at(ramp, *corner) == pytest.approx(expected)


class TestObstacles:
    """Obstacle cells are zero after enforcement regardless of kind."""

    @pytest.mark.parametrize("kind", [SCALAR, VELOCITY_X, VELOCITY_Y])
    def test_obstacles_zeroed(self, ramp, kind):
        obstacles = np.zeros(N * N, dtype=np.bool_)
        solid = [(2, 2), (3, 4), (0, 3), (N - 1, N - 1)]
        for x, y in solid:
            obstacles[cell_index(x, y, N)] = True

        set_boundary(kind, ramp, obstacles, N)

        for x, y in solid:
            assert at(ramp, x, y) == 0.0
        # interior fluid cells keep their values
        for i in range(1, N - 1):
            for j in range(1, N - 1):
                if (i, j) not in solid:
                    assert at(ramp, i, j) == i + j * N + 1

    def test_tiny_grids_do_not_fail(self, no_obstacles):
        for n in (1, 2, 3):
            field = np.ones(n * n, dtype=np.float32)
            set_boundary(SCALAR, field, no_obstacles(n), n)
            assert np.all(field == 1.0)

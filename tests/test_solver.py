import numpy as np
import pytest

from burgerslab.functions import FunctionKind
from burgerslab.solver import solve


def _solve(**overrides):
    params = dict(n_x=11, n_y=21, k=1, k1=1, k2=1, nu=0.0,
                  x_a=0.0, x_b=1.0, y_a=0.0, y_b=1.0)
    params.update(overrides)
    return solve(**params)


@pytest.mark.parametrize(
    "overrides",
    [
        {"n_x": 2},
        {"n_y": 2},
        {"x_a": 1.0, "x_b": 1.0},
        {"y_a": 2.0, "y_b": 1.0},
        {"k": 8},
        {"k1": -1},
        {"k2": 9},
    ],
)
def test_invalid_input_raises(overrides):
    with pytest.raises(ValueError):
        _solve(**overrides)


def test_grid_shape_and_steps():
    sol = _solve(n_x=6, n_y=9, x_a=-1.0, x_b=1.0, y_a=0.0, y_b=4.0)
    assert sol.grid.shape == (6, 9)
    assert sol.h_x == pytest.approx(2.0 / 5)
    assert sol.h_y == pytest.approx(4.0 / 8)


def test_zero_data_stays_zero():
    sol = _solve(k=1, k1=1, k2=1, nu=0.3)
    assert float(np.abs(sol.grid).max()) == 0.0
    assert sol.value_at(0.5, 0.5) == 0.0


def test_constant_data_without_viscosity_stays_constant():
    sol = _solve(k=0, k1=0, k2=0, nu=0.0)
    assert float(sol.grid.min()) == 1.0
    assert float(sol.grid.max()) == 1.0
    assert sol.value_at(0.5, 0.5) == 1.0


def test_boundaries_follow_selected_functions():
    sol = _solve(k=2, k1=3, k2=5, nu=0.1)
    xs = np.arange(sol.n_x) * sol.h_x
    ts = np.arange(1, sol.n_y) * sol.h_y
    assert np.allclose(sol.grid[:, 0], FunctionKind.COS(xs))
    assert np.allclose(sol.grid[0, 1:], FunctionKind.SQUARE(ts))
    assert np.allclose(sol.grid[-1, 1:], FunctionKind.IDENTITY(ts))


def test_diffusion_enters_only_next_to_boundary_first():
    sol = _solve(k=1, k1=0, k2=0, nu=0.05)
    column = sol.grid[1:-1, 1]
    assert column[0] > 0
    assert column[-1] > 0
    assert np.all(column[1:-1] == 0)


def test_linear_data_first_step():
    sol = _solve(k=3, k1=3, k2=3, nu=0.0)
    interior_start = sol.grid[1:-1, 0]
    assert np.allclose(sol.grid[1:-1, 1], interior_start * (1 + sol.h_y))


def test_value_at_clamps_to_grid():
    sol = _solve(k=5, k1=6, k2=2, nu=0.02)
    assert sol.value_at(-10.0, -10.0) == sol.grid[0, 0]
    assert sol.value_at(sol.x_b, sol.y_b) == sol.grid[sol.n_x - 2, sol.n_y - 2]
    assert sol.value_at(50.0, -3.0) == sol.grid[sol.n_x - 2, 0]


def test_value_at_picks_containing_cell():
    sol = _solve(k=6, k1=2, k2=7, nu=0.01, x_a=-1.0, x_b=1.0)
    x = sol.x_a + 3.5 * sol.h_x
    y = sol.y_a + 4.5 * sol.h_y
    assert sol.value_at(x, y) == sol.grid[3, 4]


def test_kinds_are_stored_as_enum():
    sol = _solve(k=4, k1=7, k2=6)
    assert (sol.k, sol.k1, sol.k2) == (
        FunctionKind.SQRT_ABS, FunctionKind.RUNGE, FunctionKind.EXP)
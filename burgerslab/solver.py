"""Explicit finite-difference solution of u_t = nu*u_xx + u*u_x on a grid."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .functions import FunctionKind, function_for


@dataclass(eq=False)
class Solution:
    """Grid values of the computed solution, indexed as ``grid[i, j]`` (x, t)."""

    n_x: int
    n_y: int
    k: FunctionKind
    k1: FunctionKind
    k2: FunctionKind
    nu: float
    x_a: float
    x_b: float
    y_a: float
    y_b: float
    grid: np.ndarray = field(repr=False)

    @property
    def h_x(self) -> float:
        return (self.x_b - self.x_a) / (self.n_x - 1)

    @property
    def h_y(self) -> float:
        return (self.y_b - self.y_a) / (self.n_y - 1)

    def value_at(self, x: float, y: float) -> float:
        """Value of the grid cell containing ``(x, y)``, clamped to the grid."""
        i = int((x - self.x_a) / self.h_x)
        j = int((y - self.y_a) / self.h_y)
        i = min(max(i, 0), self.n_x - 2)
        j = min(max(j, 0), self.n_y - 2)
        return float(self.grid[i, j])


def _march(grid: np.ndarray, a: float, b: float) -> None:
    """Advance every interior node one time layer at a time, in place."""
    for j in range(1, grid.shape[1]):
        prev = grid[:, j - 1]
        u = prev[1:-1]
        forward = prev[2:] - u
        backward = u - prev[:-2]
        slope = np.where(u >= 0, forward, backward)
        grid[1:-1, j] = u + a * slope * u + b * (prev[:-2] - 2 * u + prev[2:])


def solve(n_x, n_y, k, k1, k2, nu, x_a, x_b, y_a, y_b) -> Solution:
    """Solve on ``n_x`` by ``n_y`` nodes with initial data ``k`` and boundaries ``k1``, ``k2``.

    ``k`` gives u(x, 0), ``k1`` the right boundary u(x_b, t) and ``k2`` the
    left boundary u(x_a, t). Raises ValueError for invalid sizes, segments or
    function numbers.
    """
    if n_x < 3 or n_y < 3:
        raise ValueError("at least three nodes are needed in each direction")
    if x_a >= x_b or y_a >= y_b:
        raise ValueError("segment start must be less than its end")
    initial = function_for(k)
    right = function_for(k1)
    left = function_for(k2)

    solution = Solution(
        n_x=n_x, n_y=n_y, k=initial, k1=right, k2=left, nu=nu,
        x_a=x_a, x_b=x_b, y_a=y_a, y_b=y_b,
        grid=np.empty((n_x, n_y), dtype=float),
    )
    h_x, h_y = solution.h_x, solution.h_y
    a = h_y / h_x
    b = a / h_x * nu

    grid = solution.grid
    with np.errstate(all="ignore"):
        grid[:, 0] = initial(np.arange(n_x) * h_x)
        t = np.arange(1, n_y) * h_y
        grid[0, 1:] = left(t)
        grid[n_x - 1, 1:] = right(t)
        _march(grid, a, b)
    return solution
"""View state of the solution surface: function choice, grid size, zoom and rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from .functions import FunctionKind, function_for
from .solver import Solution, solve

SURFACE_STEPS = 1000
NU_STEP = 0.01
MIN_NODES = 5
_TINY = 1e-15

EQUATION = "u_t=nu*u_xx+u*u_x"

KEY_HELP = (
    "nu-: Tab",
    "nu+: 1",
    "Increase scale: 2",
    "Decrease scale: 3",
    "Double points: 4",
    "Half points: 5",
    "Next a(t): 8",
    "Next b(t): 9",
    "Next u0: 0",
    "Exit: Esc",
)

_FORMULA_TEXT = {
    FunctionKind.ONE: "1",
    FunctionKind.ZERO: "0",
    FunctionKind.COS: "cos {v}",
    FunctionKind.IDENTITY: "{v}",
    FunctionKind.SQRT_ABS: "sqrt({v})",
    FunctionKind.SQUARE: "{v} * {v}",
    FunctionKind.EXP: "exp({v})",
    FunctionKind.RUNGE: "1/(25*{v}*{v}+1)",
}


def _describe(prefix: str, variable: str, kind: FunctionKind) -> str:
    return f"{prefix} = " + _FORMULA_TEXT[kind].format(v=variable)


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass(eq=False)
class Surface:
    """Sampled surface: ``zs[i, j]`` is the value at ``(xs[i], ys[j])``."""

    xs: np.ndarray = field(repr=False)
    ys: np.ndarray = field(repr=False)
    zs: np.ndarray = field(repr=False)
    sup: float
    inf: float
    abs_max: float


class Scene:
    """Interactive state of the computed solution and of the way it is shown."""

    def __init__(self, n_x, n_y, k, k1, k2, nu, x_a, x_b, y_a, y_b):
        self.x_rot = -90.0
        self.y_rot = 0.0
        self.z_rot = 90.0
        self.z_tra = 0.0
        self.n_sca = 0.8

        self.n_x = int(n_x)
        self.n_y = int(n_y)
        self.k = function_for(k)
        self.k1 = function_for(k1)
        self.k2 = function_for(k2)
        self.nu = float(nu)
        self.x_a = float(x_a)
        self.x_b = float(x_b)
        self.y_a = float(y_a)
        self.y_b = float(y_b)

        self.sup = 0.0
        self.inf = 0.0
        self.last_sup = 0.0
        self.last_inf = 0.0
        self.scale = 1.0
        self.closed = False

        self.solution: Solution = self._solve()
        self._reset()

    # -- solution -------------------------------------------------------

    def _solve(self) -> Solution:
        return solve(self.n_x, self.n_y, self.k, self.k1, self.k2, self.nu,
                     self.x_a, self.x_b, self.y_a, self.y_b)

    def _rebuild(self) -> None:
        self.solution = self._solve()

    def _reset(self) -> None:
        """Recompute the solution and restore the full view window."""
        self.scale = 1.0
        self._rebuild()
        self.view_x_a, self.view_x_b = self.x_a, self.x_b
        self.view_y_a, self.view_y_b = self.y_a, self.y_b
        self.last_inf = 0.0
        self.last_sup = 0.0

    def method(self, x, y) -> float:
        """Value of the solution at ``(x, y)``, with tiny values shown as zero."""
        res = self.solution.value_at(x, y)
        if abs(res) < _TINY:
            res = 0.0
        return res

    def _values(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        sol = self.solution
        i = np.clip(np.trunc((xs - sol.x_a) / sol.h_x), 0, sol.n_x - 2).astype(int)
        j = np.clip(np.trunc((ys - sol.y_a) / sol.h_y), 0, sol.n_y - 2).astype(int)
        z = sol.grid[i[:, None], j[None, :]]
        return np.where(np.abs(z) < _TINY, 0.0, z)

    # -- function choice ------------------------------------------------

    @property
    def function_name(self) -> str:
        return _describe("u0(x)", "x", self.k)

    @property
    def function_name1(self) -> str:
        return _describe("a(t)", "t", self.k1)

    @property
    def function_name2(self) -> str:
        return _describe("b(t)", "t", self.k2)

    def change_function(self) -> None:
        """Switch to the next initial function u0."""
        self.k = FunctionKind((self.k + 1) % len(FunctionKind))
        self._reset()

    def change_function1(self) -> None:
        """Switch to the next right boundary function a(t)."""
        self.k1 = FunctionKind((self.k1 + 1) % len(FunctionKind))
        self._reset()

    def change_function2(self) -> None:
        """Switch to the next left boundary function b(t)."""
        self.k2 = FunctionKind((self.k2 + 1) % len(FunctionKind))
        self._reset()

    # -- zoom and grid --------------------------------------------------

    def zoom_in(self) -> None:
        """Halve the view window around its centre."""
        self.scale *= 2
        cx = (self.view_x_a + self.view_x_b) / 2
        wx = (self.view_x_b - self.view_x_a) / 4
        self.view_x_a, self.view_x_b = cx - wx, cx + wx
        cy = (self.view_y_a + self.view_y_b) / 2
        wy = (self.view_y_b - self.view_y_a) / 4
        self.view_y_a, self.view_y_b = cy - wy, cy + wy
        self.last_inf = 0.0
        self.last_sup = 0.0

    def zoom_out(self) -> None:
        """Double the view window around its centre."""
        self.scale /= 2
        cx = (self.view_x_a + self.view_x_b) / 2
        wx = self.view_x_b - self.view_x_a
        self.view_x_a, self.view_x_b = cx - wx, cx + wx
        cy = (self.view_y_a + self.view_y_b) / 2
        wy = self.view_y_b - self.view_y_a
        self.view_y_a, self.view_y_b = cy - wy, cy + wy
        self.last_inf = 0.0
        self.last_sup = 0.0

    def double_n(self) -> None:
        """Double the number of nodes in both directions."""
        self.n_x *= 2
        self.n_y *= 2
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    def half_n(self) -> None:
        """Halve the number of nodes, keeping at least five in each direction."""
        self.n_x = max(self.n_x // 2, MIN_NODES)
        self.n_y = max(self.n_y // 2, MIN_NODES)
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    # -- rotation -------------------------------------------------------

    def rotate_z(self, factor) -> None:
        self.z_rot += factor * 15

    def rotate_up(self) -> None:
        self.x_rot += 15.0

    def rotate_down(self) -> None:
        self.x_rot -= 15.0

    def rotate_left(self) -> None:
        self.z_rot += 1.0

    def rotate_right(self) -> None:
        self.z_rot -= 1.0

    # -- viscosity ------------------------------------------------------

    def plus_change_nu(self) -> None:
        """Increase nu by one step and recompute."""
        self.nu += NU_STEP
        if abs(self.nu) < _TINY:
            self.nu = 0.0
        self._rebuild()

    def minus_change_nu(self) -> None:
        """Decrease nu by one step, never below zero, and recompute."""
        self.nu -= NU_STEP
        if self.nu < _TINY:
            self.nu = 0.0
        self._rebuild()

    # -- input ----------------------------------------------------------

    def _close(self) -> None:
        self.closed = True

    def handle_key(self, key) -> bool:
        """Apply the action bound to ``key``; return whether one was bound."""
        actions: dict[str, Callable[[], None]] = {
            "up": self.rotate_up,
            "down": self.rotate_down,
            "left": self.rotate_left,
            "right": self.rotate_right,
            "escape": self._close,
            "0": self.change_function,
            "1": self.plus_change_nu,
            "tab": self.minus_change_nu,
            "2": self.zoom_in,
            "3": self.zoom_out,
            "4": self.double_n,
            "5": self.half_n,
            "8": self.change_function1,
            "9": self.change_function2,
        }
        action = actions.get(str(key).lower())
        if action is None:
            return False
        action()
        return True

    # -- output ---------------------------------------------------------

    def sample_surface(self, steps=SURFACE_STEPS) -> Surface:
        """Sample the view window on ``steps`` by ``steps`` cells and update sup/inf."""
        steps = int(steps)
        if steps < 1:
            raise ValueError("at least one step is needed")
        s_x = (self.view_x_b - self.view_x_a) / steps
        s_y = (self.view_y_b - self.view_y_a) / steps
        xs = self.view_x_a + np.arange(steps + 1) * s_x
        ys = self.view_y_a + np.arange(steps + 1) * s_y
        zs = self._values(xs, ys)

        finite = zs[~np.isnan(zs)]
        self.sup = max(0.0, float(finite.max())) if finite.size else 0.0
        self.inf = min(0.0, float(finite.min())) if finite.size else 0.0
        abs_max = max(abs(self.sup), abs(self.inf))
        if abs_max < _TINY:
            abs_max = 10.0
        return Surface(xs=xs, ys=ys, zs=zs, sup=self.sup, inf=self.inf, abs_max=abs_max)

    @property
    def angle(self) -> float:
        return self.z_rot - 360 * math.floor(self.z_rot / 360)

    def labels(self) -> list[str]:
        """Text lines describing the current state, in display order."""
        return [
            self.function_name,
            self.function_name1,
            self.function_name2,
            EQUATION,
            f"n_x = {self.n_x}",
            f"n_t = {self.n_y}",
            f"nu = {_number(self.nu)}",
            f"scale = {_number(self.scale)}",
            f"angle = {_number(self.angle)} degree",
            f"max = {_number(self.sup)}",
            f"min = {_number(self.inf)}",
            f"x: ({_number(self.view_x_a)}, {_number(self.view_x_b)})",
            f"t: ({_number(self.view_y_a)}, {_number(self.view_y_b)})",
        ]
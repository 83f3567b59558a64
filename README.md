# burgerslab

`burgerslab` solves the equation

    u_t = nu * u_xx + u * u_x

on a rectangle in (x, t) with an explicit finite-difference scheme. It then shows the solution as a 3D surface in a matplotlib window that you control from the keyboard.

The initial profile `u0(x)` and the two boundary functions `a(t)` (right edge, `x = x_b`) and `b(t)` (left edge, `x = x_a`) are each picked from a fixed list of eight functions. These are the members of `burgerslab.functions.FunctionKind`:

| code | member     | function          |
|------|------------|-------------------|
| 0    | `ONE`      | 1                 |
| 1    | `ZERO`     | 0                 |
| 2    | `COS`      | cos t             |
| 3    | `IDENTITY` | t                 |
| 4    | `SQRT_ABS` | sqrt(\|t\|)       |
| 5    | `SQUARE`   | t * t             |
| 6    | `EXP`      | exp(t)            |
| 7    | `RUNGE`    | 1 / (25 t² + 1)   |

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    burgerslab N_X N_T K K1 K2 NU X_A X_B T_A T_B

`python -m burgerslab.cli` with the same arguments does the same thing.

- `N_X`, `N_T`: the number of grid points in x and t. Each must be at least 5.
- `K`, `K1`, `K2`: function codes from 0 to 7 for `u0`, `a` and `b`.
- `NU`: the viscosity.
- `X_A X_B`, `T_A T_B`: the x and t intervals. The lower bound must not be greater than the upper bound, and the length of each interval must lie between 1e-6 and 1e9.

A numeric argument is read from its leading number, so `12abc` counts as `12`. If there are too few or too many arguments, or one is invalid, the command prints a message (for example `Not enough amount of points` or `Incorrect segment`) and exits with a non-zero status. Otherwise it opens the viewer and exits with status 0 once the window is closed.

Example:

    burgerslab 100 100 4 0 1 0.01 -1 1 -10 10

### Keys in the viewer

| key       | action                                                     |
|-----------|------------------------------------------------------------|
| 1 / Tab   | increase / decrease nu by 0.01 (Tab never goes below 0)    |
| 2 / 3     | zoom in / zoom out around the centre of the view           |
| 4 / 5     | double / halve the number of grid points (at least 5)      |
| 8 / 9 / 0 | next a(t) / next b(t) / next u0(x)                         |
| Up / Down | tilt the view by 15 degrees                                |
| Left / Right | turn the view by 1 degree                               |
| Esc       | close the window                                           |

Picking a new function recomputes the solution and resets the zoom. Changing nu or the number of points recomputes the solution and keeps the zoom. The text in the window shows the current functions, the equation, `n_x`, `n_t`, `nu`, scale, angle, the maximum and minimum of the shown surface, and the visible x and t ranges.

## Library use

```python
from burgerslab.solver import solve
from burgerslab.scene import Scene
from burgerslab.viewer import show

solution = solve(50, 50, 2, 0, 1, 0.01, -1.0, 1.0, 0.0, 1.0)
print(solution.grid.shape)          # (50, 50), indexed as grid[i, j] = (x, t)
print(solution.value_at(0.0, 0.5))

scene = Scene(50, 50, 2, 0, 1, 0.01, -1.0, 1.0, 0.0, 1.0)
surface = scene.sample_surface(100)  # xs, ys, zs, sup, inf, abs_max
print(scene.labels())
scene.handle_key("2")                # same actions as the viewer keys
show(scene)                          # blocks until the window is closed
```

- `solve(...)` returns a `Solution`. It raises `ValueError` if a size is below 3, if a segment is empty or reversed, or if a function code is unknown.
- `Solution.value_at(x, y)` returns the grid value at the lower-left node of the cell that holds `(x, y)`. Points outside the grid are clamped to the nearest cell.
- `Scene` holds the solution together with the view state. It has one method per viewer action: `zoom_in`, `zoom_out`, `double_n`, `half_n`, `plus_change_nu`, `minus_change_nu`, `change_function`, `change_function1`, `change_function2` and the `rotate_*` methods. `Scene.method(x, y)` is `value_at` with values below 1e-15 in magnitude shown as 0.
- `burgerslab.functions.function_for(code)` returns the `FunctionKind` for a code and raises `ValueError` if there is none. A `FunctionKind` can be called on a number or a numpy array.

## Notes on the scheme

- The initial values are `u0(i * h_x)` and the boundary values are `a(j * h_t)` and `b(j * h_t)`. The arguments are offsets from the grid origin, not the coordinates `x_a + i * h_x` and `t_a + j * h_t`.
- The scheme is explicit and does not check stability. If `nu * h_t / h_x²` is large, or the solution is steep, the values can grow without bound or turn into `inf` or `nan`. The viewer leaves `nan` values out of the maximum and minimum.
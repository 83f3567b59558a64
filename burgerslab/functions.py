"""The eight elementary functions used as initial and boundary data."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

import numpy as np


class FunctionKind(IntEnum):
    """Selectable function of one variable, numbered as on the command line."""

    ONE = 0
    ZERO = 1
    COS = 2
    IDENTITY = 3
    SQRT_ABS = 4
    SQUARE = 5
    EXP = 6
    RUNGE = 7

    def __call__(self, x):
        """Evaluate the function at ``x`` (a number or a numpy array)."""
        with np.errstate(all="ignore"):
            return _FORMULAS[self](x)


_FORMULAS: dict[FunctionKind, Callable] = {
    FunctionKind.ONE: lambda x: x * 0 + 1,
    FunctionKind.ZERO: lambda x: x * 0,
    FunctionKind.COS: np.cos,
    FunctionKind.IDENTITY: lambda x: x,
    FunctionKind.SQRT_ABS: lambda x: np.sqrt(np.abs(x)),
    FunctionKind.SQUARE: lambda x: x * x,
    FunctionKind.EXP: np.exp,
    FunctionKind.RUNGE: lambda x: 1 / (25 * x * x + 1),
}


def function_for(kind) -> FunctionKind:
    """Return the function numbered ``kind``; raise ValueError if there is none."""
    try:
        return FunctionKind(kind)
    except ValueError:
        raise ValueError(f"unknown function number: {kind!r}") from None
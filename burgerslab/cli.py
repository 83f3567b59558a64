"""Command line entry: validate the arguments and open the viewer."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from .scene import Scene
from .viewer import show

ARGUMENT_COUNT = 10
MIN_POINTS = 5
FUNCTION_COUNT = 8
MAX_SEGMENT = 1e9
MIN_SEGMENT = 1e-6

_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class UsageError(Exception):
    """Raised when the command line arguments are missing or invalid."""


@dataclass(frozen=True)
class Arguments:
    """Validated command line arguments."""

    n_x: int
    n_y: int
    k: int
    k1: int
    k2: int
    nu: float
    x_a: float
    x_b: float
    y_a: float
    y_b: float


def _int_prefix(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group()) if match else None


def _float_prefix(text: str) -> float | None:
    match = _FLOAT.match(text)
    return float(match.group()) if match else None


def _points(text: str) -> int:
    value = _int_prefix(text)
    if value is None:
        raise UsageError("Error in the data type in the amount of points")
    if value < MIN_POINTS:
        raise UsageError("Not enough amount of points")
    return value


def _function(text: str) -> int:
    value = _int_prefix(text)
    if value is None:
        raise UsageError("Error in the data type in the function")
    if not 0 <= value < FUNCTION_COUNT:
        raise UsageError("Invalid function")
    return value


def _segment(start_text: str, end_text: str) -> tuple[float, float]:
    start = _float_prefix(start_text)
    end = _float_prefix(end_text)
    if start is None or end is None:
        raise UsageError("Error in the data type in the segment")
    width = end - start
    if start > end or width > MAX_SEGMENT or width < MIN_SEGMENT:
        raise UsageError("Incorrect segment")
    return start, end


def parse_args(argv) -> Arguments:
    """Validate ``n_x n_y k k1 k2 nu x_a x_b y_a y_b``; raise UsageError if invalid."""
    argv = list(argv)
    if len(argv) < ARGUMENT_COUNT:
        raise UsageError("Not enough arguments")
    if len(argv) > ARGUMENT_COUNT:
        raise UsageError("Exceeding the number of arguments")

    n_x = _points(argv[0])
    n_y = _points(argv[1])
    k = _function(argv[2])
    k1 = _function(argv[3])
    k2 = _function(argv[4])
    nu = _float_prefix(argv[5])
    if nu is None:
        raise UsageError("Error in the data type in the function")
    x_a, x_b = _segment(argv[6], argv[7])
    y_a, y_b = _segment(argv[8], argv[9])
    return Arguments(n_x, n_y, k, k1, k2, nu, x_a, x_b, y_a, y_b)


def main(argv=None) -> int:
    """Run the program; return -1 on invalid arguments, 0 after the window closes."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except UsageError as error:
        print(error)
        return -1
    scene = Scene(args.n_x, args.n_y, args.k, args.k1, args.k2, args.nu,
                  args.x_a, args.x_b, args.y_a, args.y_b)
    show(scene)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Finite-difference solver for u_t = nu*u_xx + u*u_x with a matplotlib 3D viewer and command line."""

__version__ = "0.1.0"
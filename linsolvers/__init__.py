"""Gaussian elimination, LU decomposition and Jacobi/Seidel iteration for square linear systems."""

__version__ = "0.1.0"
__all__ = ["cli", "elimination", "iterative", "lu"]
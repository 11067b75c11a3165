"""Gauss-Jacobi and Gauss-Seidel iterative solvers."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from linsolvers.elimination import SingularMatrixError

_Sweep = Callable[[list[list[float]], list[float], list[float]], list[float]]


def _jacobi_sweep(rows: list[list[float]], rhs: list[float], previous: list[float]) -> list[float]:
    return [
        (value - sum(coef * xj for j, (coef, xj) in enumerate(zip(row, previous)) if j != i))
        / row[i]
        for i, (row, value) in enumerate(zip(rows, rhs))
    ]


def _seidel_sweep(rows: list[list[float]], rhs: list[float], previous: list[float]) -> list[float]:
    current = list(previous)
    for i, (row, value) in enumerate(zip(rows, rhs)):
        partial = sum(coef * xj for j, (coef, xj) in enumerate(zip(row, current)) if j != i)
        current[i] = (value - partial) / row[i]
    return current


def _relative_change(change: float, largest: float) -> float:
    if largest == 0:
        return math.nan if change == 0 else math.inf
    return change / largest


def _iterate(a: Sequence[Sequence[float]], b: Sequence[float], precision: float, sweep: _Sweep) -> list[float]:
    rows = [[float(value) for value in row] for row in a]
    rhs = [float(value) for value in b]
    order = len(rows)
    if any(len(row) != order for row in rows) or len(rhs) != order:
        raise ValueError("system must be square with a matching right-hand side")
    if order == 0:
        return []
    for i, row in enumerate(rows):
        if row[i] == 0:
            raise SingularMatrixError(f"zero diagonal entry in row {i}")

    current = [value / row[i] for i, (row, value) in enumerate(zip(rows, rhs))]
    error = precision + 1
    while error > precision:
        following = sweep(rows, rhs, current)
        largest = max(abs(v) for v in following)
        change = max(abs(new - old) for new, old in zip(following, current))
        error = _relative_change(change, largest)
        current = following
    return current


def gauss_jacobi(a: Sequence[Sequence[float]], b: Sequence[float], precision: float) -> list[float]:
    """Solve ``a x = b`` by Jacobi iteration until the relative change drops to ``precision``."""
    return _iterate(a, b, precision, _jacobi_sweep)


def gauss_seidel(a: Sequence[Sequence[float]], b: Sequence[float], precision: float) -> list[float]:
    """Solve ``a x = b`` by Gauss-Seidel iteration until the relative change drops to ``precision``."""
    return _iterate(a, b, precision, _seidel_sweep)
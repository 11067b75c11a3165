"""LU factorisation (Doolittle, no pivoting) and the matching solver."""

from __future__ import annotations

from collections.abc import Sequence

from linsolvers.elimination import SingularMatrixError

Matrix = list[list[float]]


def lu_decompose(a: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Factor ``a`` into a unit lower triangular and an upper triangular matrix."""
    upper = [[float(value) for value in row] for row in a]
    order = len(upper)
    if any(len(row) != order for row in upper):
        raise ValueError("matrix must be square")
    lower = [[1.0 if i == j else 0.0 for j in range(order)] for i in range(order)]

    for i in range(order - 1):
        pivot_row = upper[i]
        if pivot_row[i] == 0:
            raise SingularMatrixError(f"zero pivot in column {i}")
        for j in range(i + 1, order):
            factor = upper[j][i] / pivot_row[i]
            lower[j][i] = factor
            upper[j][i:] = [
                value - factor * p for value, p in zip(upper[j][i:], pivot_row[i:])
            ]
    return lower, upper


def lu_solve(
    lower: Sequence[Sequence[float]],
    upper: Sequence[Sequence[float]],
    b: Sequence[float],
) -> list[float]:
    """Solve ``L U x = b`` by forward and then backward substitution."""
    order = len(upper)
    if len(lower) != order or len(b) != order:
        raise ValueError("factor and right-hand side sizes do not match")

    y: list[float] = []
    for row, value in zip(lower, b):
        y.append(float(value) - sum(coef * yj for coef, yj in zip(row, y)))

    x = [0.0] * order
    for i in reversed(range(order)):
        row = upper[i]
        if row[i] == 0:
            raise SingularMatrixError(f"zero diagonal entry in row {i}")
        partial = sum(coef * xj for coef, xj in zip(row[i + 1:], x[i + 1:]))
        x[i] = (y[i] - partial) / row[i]
    return x
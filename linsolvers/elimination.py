"""Gaussian elimination with partial pivoting."""

from __future__ import annotations

from collections.abc import Sequence


class SingularMatrixError(ZeroDivisionError):
    """Raised when a solver meets a zero pivot or a zero diagonal entry."""


def _square_copy(a: Sequence[Sequence[float]], b: Sequence[float]) -> tuple[list[list[float]], list[float]]:
    rows = [[float(value) for value in row] for row in a]
    rhs = [float(value) for value in b]
    order = len(rows)
    if any(len(row) != order for row in rows):
        raise ValueError("coefficient matrix must be square")
    if len(rhs) != order:
        raise ValueError("right-hand side length does not match the matrix order")
    return rows, rhs


def gauss_elimination(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting.

    The inputs are left untouched; the solution vector is returned.
    """
    rows, rhs = _square_copy(a, b)
    order = len(rows)

    for k in range(order - 1):
        pivot = max(range(k, order), key=lambda i: abs(rows[i][k]))
        if pivot != k:
            rows[k], rows[pivot] = rows[pivot], rows[k]
            rhs[k], rhs[pivot] = rhs[pivot], rhs[k]

        pivot_row = rows[k]
        for i in range(k + 1, order):
            if pivot_row[k] == 0:
                raise SingularMatrixError(
                    "Erro: Divisão por zero detectada após pivotamento!"
                )
            factor = rows[i][k] / pivot_row[k]
            rows[i][k:] = [
                value - factor * p for value, p in zip(rows[i][k:], pivot_row[k:])
            ]
            rhs[i] -= factor * rhs[k]

    x = [0.0] * order
    for i in reversed(range(order)):
        row = rows[i]
        partial = sum(coef * xj for coef, xj in zip(row[i + 1:], x[i + 1:]))
        if row[i] == 0:
            raise SingularMatrixError(
                "Erro: Divisão por zero na substituição regressiva!"
            )
        x[i] = (rhs[i] - partial) / row[i]
    return x
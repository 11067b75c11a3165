"""Command line driver that solves several systems with every method and times them."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from linsolvers.elimination import SingularMatrixError, gauss_elimination
from linsolvers.iterative import gauss_jacobi, gauss_seidel
from linsolvers.lu import lu_decompose, lu_solve

Solver = Callable[[list[float]], list[float]]


@dataclass
class Problem:
    """A coefficient matrix shared by several right-hand sides."""

    precision: float
    matrix: list[list[float]]
    rhs: list[list[float]] = field(default_factory=list)

    @property
    def order(self) -> int:
        return len(self.matrix)


def _numbers(tokens: Iterator[str], convert: Callable[[str], float | int], what: str):
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def parse_problem(text: str) -> Problem:
    """Parse the system count, order, precision, matrix and right-hand sides."""
    tokens = iter(text.split())
    systems = _numbers(tokens, int, "number of systems")
    order = _numbers(tokens, int, "matrix order")
    precision = _numbers(tokens, float, "precision")
    if systems < 0 or order < 0:
        raise ValueError("counts must not be negative")
    matrix = [
        [_numbers(tokens, float, "matrix entry") for _ in range(order)]
        for _ in range(order)
    ]
    rhs = [
        [_numbers(tokens, float, "right-hand side entry") for _ in range(order)]
        for _ in range(systems)
    ]
    return Problem(precision=precision, matrix=matrix, rhs=rhs)


def _report(out: TextIO, title: str, label: str, problem: Problem, prepare: Callable[[], Solver]) -> None:
    print(f"\nResultados e tempo de execução da {title}:", file=out)
    start = time.process_time()
    solve = prepare()
    for number, b in enumerate(problem.rhs, start=1):
        print(f"\nSistema {number}:", file=out)
        x = solve(list(b))
        print("Vetor solução X:", file=out)
        for i, value in enumerate(x):
            print(f"x[{i}] = {value:f}", file=out)
    elapsed = time.process_time() - start
    print(f"Tempo de execução {label}: {elapsed:f}", file=out)


def run(problem: Problem, out: TextIO) -> None:
    """Solve every system with each method, writing solutions and timings to ``out``."""
    matrix = problem.matrix
    precision = problem.precision

    def prepare_lu() -> Solver:
        lower, upper = lu_decompose(matrix)
        return lambda b: lu_solve(lower, upper, b)

    _report(out, "Eliminação de Gauss", "Eliminação de Gauss", problem,
            lambda: lambda b: gauss_elimination(matrix, b))
    _report(out, "Fatoração LU", "FatoraçãoLU", problem, prepare_lu)
    _report(out, "Gauss Seidel", "GaussSeidel", problem,
            lambda: lambda b: gauss_seidel(matrix, b, precision))
    _report(out, "Gauss Jacobi", "GaussJacobi", problem,
            lambda: lambda b: gauss_jacobi(matrix, b, precision))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solvers on the input file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Uso: linsolvers <arquivo_entrada>")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Nao foi possivel abrir o arquivo!")
        return 1
    try:
        problem = parse_problem(text)
    except ValueError as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    try:
        run(problem, sys.stdout)
    except SingularMatrixError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
# linsolvers

Solve square linear systems `A x = b` with four classic methods:

- **Gaussian elimination** with partial pivoting: `linsolvers.elimination.gauss_elimination(a, b)`
- **LU decomposition** (Doolittle, no pivoting): factor once with
  `linsolvers.lu.lu_decompose(a)`, then solve each right-hand side with
  `linsolvers.lu.lu_solve(lower, upper, b)`
- **Gauss–Jacobi** iteration: `linsolvers.iterative.gauss_jacobi(a, b, precision)`
- **Gauss–Seidel** iteration: `linsolvers.iterative.gauss_seidel(a, b, precision)`

Matrices are sequences of rows and vectors are sequences of numbers; every
function returns plain lists of floats. The package uses only the standard
library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from linsolvers.elimination import SingularMatrixError, gauss_elimination
from linsolvers.lu import lu_decompose, lu_solve
from linsolvers.iterative import gauss_jacobi, gauss_seidel

a = [[4.0, 1.0], [2.0, 3.0]]
b = [1.0, 2.0]

x = gauss_elimination(a, b)

lower, upper = lu_decompose(a)
x = lu_solve(lower, upper, b)

x = gauss_jacobi(a, b, 1e-6)
x = gauss_seidel(a, b, 1e-6)
```

The inputs are never changed in place.

### Errors

- `SingularMatrixError` (a subclass of `ZeroDivisionError`, defined in
  `linsolvers.elimination`) is raised when a division by zero would occur:
  - `gauss_elimination`: a zero pivot remains after row swapping, or a zero
    diagonal entry is met during back substitution;
  - `lu_decompose`: a zero pivot is met (there is no row swapping);
  - `lu_solve`: the upper factor has a zero diagonal entry;
  - `gauss_jacobi` / `gauss_seidel`: the matrix has a zero diagonal entry.
- `ValueError` is raised when the matrix is not square or the right-hand side
  does not match its order.

### Iterative methods

Both iterative methods start from `x_i = b_i / a_ii` and stop once the
largest change between two iterates, divided by the largest absolute
component of the new iterate, is no greater than `precision`. A system of
order 0 gives an empty list. There is no iteration limit: on a system for
which the method does not converge (diagonally dominant systems are the
safe case), the call does not return.

## Command line

```
linsolvers systems.txt
```

The input file holds whitespace-separated numbers:

1. the number of right-hand sides `s`;
2. the order `n` of the matrix and the precision for the iterative methods;
3. the `n × n` entries of `A`, row by row;
4. `s` vectors `b`, each with `n` entries.

For example:

```
2
3 0.0001
10 2 1
1 5 1
2 3 10
7 -8 6
1 2 3
```

The command runs Gaussian elimination, LU decomposition, Gauss–Seidel and
Gauss–Jacobi in that order. For each method it prints, in Portuguese, a
heading, then for every system a `Sistema <k>:` block with the solution
lines `x[i] = <value>`, and finally the processor time the method took.
The LU factorisation is computed once per run and reused for every system.

The command exits with status 1, after printing a message, when it is not
given exactly one argument, when the file cannot be opened, when the input
is malformed or ends early, or when a method meets a division by zero.

From Python, `linsolvers.cli.parse_problem(text)` reads such text into a
`Problem` (with `precision`, `matrix`, `rhs` and the `order` property), and
`linsolvers.cli.run(problem, out)` writes the same report to any text
stream. `linsolvers.cli.main(argv)` is the command itself and returns its
exit status.

## What it does not do

The LU factorisation does not pivot, and the iterative methods have no
iteration cap or divergence check. Only one coefficient matrix per input file
is supported; every right-hand side in the file is solved against it.
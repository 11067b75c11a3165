import io
import re

import pytest

from linsolvers.cli import Problem, main, parse_problem, run

INPUT = """2
3 0.00000001
10 2 1
1 5 1
2 3 10
13 2 27
1 1 1
"""


def _multiply(a, x):
    return [sum(coef * xj for coef, xj in zip(row, x)) for row in a]


def _solutions(text):
    blocks = re.split(r"Sistema \d+:", text)[1:]
    return [
        [float(v) for v in re.findall(r"x\[\d+\] = (\S+)", block)]
        for block in blocks
    ]


def test_parse_problem_reads_all_fields():
    problem = parse_problem(INPUT)
    assert problem.order == 3
    assert problem.precision == pytest.approx(0.00000001)
    assert problem.matrix == [[10, 2, 1], [1, 5, 1], [2, 3, 10]]
    assert problem.rhs == [[13, 2, 27], [1, 1, 1]]


def test_parse_problem_truncated_raises():
    with pytest.raises(ValueError, match="end of input"):
        parse_problem("1\n2 0.1\n1 0\n0")


def test_parse_problem_bad_token_raises():
    with pytest.raises(ValueError, match="invalid"):
        parse_problem("1\n1 0.1\nabc\n1")


def test_run_reports_every_method_and_system():
    out = io.StringIO()
    run(parse_problem(INPUT), out)
    text = out.getvalue()
    assert text.count("Sistema 1:") == 4
    assert text.count("Sistema 2:") == 4
    assert "Tempo de execução FatoraçãoLU:" in text
    assert "Tempo de execução GaussJacobi:" in text


def test_run_solutions_satisfy_systems():
    problem = parse_problem(INPUT)
    out = io.StringIO()
    run(problem, out)
    solutions = _solutions(out.getvalue())
    assert len(solutions) == 8
    for index, x in enumerate(solutions):
        b = problem.rhs[index % 2]
        assert _multiply(problem.matrix, x) == pytest.approx(b, abs=1e-4)


def test_run_formats_identity_solution():
    problem = Problem(precision=1e-6, matrix=[[1.0, 0.0], [0.0, 1.0]], rhs=[[2.0, 3.0]])
    out = io.StringIO()
    run(problem, out)
    assert out.getvalue().count("x[0] = 2.000000") == 4


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Uso:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Nao foi possivel abrir o arquivo!" in capsys.readouterr().out


def test_main_solves_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(INPUT, encoding="utf-8")
    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    assert len(_solutions(output)) == 8


def test_main_singular_matrix_reports_error(tmp_path, capsys):
    path = tmp_path / "singular.txt"
    path.write_text("1\n2 0.001\n1 2\n2 4\n1 2\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Erro: Divisão por zero" in capsys.readouterr().out
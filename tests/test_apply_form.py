import pytest

from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.expression import Expression


def numbers(*values):
    return Expression.from_list(Expression(v) for v in values)


# -----------------------------
# apply
# -----------------------------


def test_apply_builtin_with_list(run):
    # (apply + (list 1 2 3)) => 6
    assert run("(apply + (list 1 2 3))") == Expression(6)


def test_apply_builtin_with_empty_list(run):
    assert run("(apply + (list))") == Expression(0)


def test_apply_lambda(run):
    run("(define sq (lambda (x) (* x x)))")
    assert run("(apply sq (list 3))") == Expression(9)


def test_apply_lambda_arity_is_checked(run):
    run("(define sq (lambda (x) (* x x)))")
    with pytest.raises(PlotscriptArityError):
        run("(apply sq (list 1 2))")


@pytest.mark.parametrize(
    "program",
    [
        "(apply foo (list 1))",
        "(apply 1 (list 1))",
        "(apply (+ 1) (list 1))",
        '(apply "+" (list 1))',
    ],
)
def test_apply_first_argument_must_be_procedure(run, program):
    with pytest.raises(PlotscriptTypeError, match="first argument to apply not a procedure"):
        run(program)


def test_apply_second_argument_must_be_list(run):
    with pytest.raises(PlotscriptTypeError, match="second argument to apply not a list"):
        run("(apply + 3)")


def test_apply_arity(run):
    with pytest.raises(PlotscriptArityError):
        run("(apply + (list 1) (list 2))")


# -----------------------------
# map
# -----------------------------


def test_map_lambda(run):
    run("(define sq (lambda (x) (* x x)))")
    assert run("(map sq (list 1 2 3))") == numbers(1, 4, 9)


def test_map_builtin(run):
    assert run("(map - (list 1 2 3))") == numbers(-1, -2, -3)


def test_map_over_empty_list(run):
    result = run("(map sqrt (list))")
    assert result.is_list()
    assert len(result) == 0


def test_map_preserves_order(run):
    run("(define tag (lambda (x) (list x (* 10 x))))")
    result = run("(map tag (list 3 1 2))")
    assert [item.tail[0] for item in result] == [Expression(3), Expression(1), Expression(2)]


def test_map_first_argument_must_be_procedure(run):
    with pytest.raises(PlotscriptTypeError, match="first argument to map not a procedure"):
        run("(map 3 (list 1))")


def test_map_second_argument_must_be_list(run):
    run("(define sq (lambda (x) (* x x)))")
    with pytest.raises(PlotscriptTypeError, match="second argument to map not a list"):
        run("(map sq 3)")


def test_map_arity(run):
    with pytest.raises(PlotscriptArityError):
        run("(map sqrt)")

import pytest

from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.expression import Expression


def test_property_round_trip(run):
    assert run('(get-property "k" (set-property "k" 7 (list 1 2)))') == Expression(7)


def test_absent_property_is_none(run):
    result = run('(get-property "missing" (list 1 2))')
    assert result.is_none()
    assert str(result) == "NONE"


def test_set_property_returns_copy(run):
    run("(define base (list 1 2))")
    run('(define tagged (set-property "note" "hello" base))')
    assert run('(get-property "note" tagged)') == Expression.string("hello")
    assert run('(get-property "note" base)').is_none()
    # properties do not take part in equality
    assert run("tagged") == run("base")


def test_last_write_wins(run):
    program = '(get-property "k" (set-property "k" 2 (set-property "k" 1 (list))))'
    assert run(program) == Expression(2)


def test_property_value_is_evaluated(run):
    run("(define v 3)")
    assert run('(get-property "k" (set-property "k" (+ v 1) 0))') == Expression(4)


def test_target_is_evaluated_before_value(run):
    # the value refers to a binding made while evaluating the target
    program = '(set-property "k" later (begin (define later 5) (list)))'
    assert run(program).get_property("k") == Expression(5)


def test_property_on_any_value(run):
    result = run('(set-property "size" 2 "label")')
    assert result == Expression.string("label")
    assert result.get_numerical_property("size") == 2


@pytest.mark.parametrize(
    "program",
    [
        "(set-property k 1 (list))",
        "(set-property 1 1 (list))",
        "(get-property k (list))",
    ],
)
def test_key_must_be_a_string(run, program):
    with pytest.raises(PlotscriptTypeError, match="not a string"):
        run(program)


@pytest.mark.parametrize(
    "program",
    [
        '(set-property "k" 1)',
        '(get-property "k")',
        '(get-property "k" (list) (list))',
    ],
)
def test_property_form_arity(run, program):
    with pytest.raises(PlotscriptArityError):
        run(program)

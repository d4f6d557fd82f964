import sys

import pytest
from hypothesis import given, strategies as st

from plotscript.types.atom import Atom, AtomKind

EPS = sys.float_info.epsilon


def test_default_atom_is_none():
    a = Atom()
    assert a.is_none()
    assert not a.is_number() and not a.is_symbol() and not a.is_string()


def test_number_constructors():
    assert Atom(1).is_number()
    assert Atom(2.5).as_number() == 2.5
    assert Atom(-3).kind is AtomKind.NUMBER


def test_complex_constructor():
    a = Atom(complex(1, 2))
    assert a.is_complex()
    assert a.as_complex() == complex(1, 2)
    assert a.as_number() == 1.0


def test_string_constructor_is_always_a_symbol():
    assert Atom("hello").is_symbol()
    assert Atom("42").is_symbol()


@pytest.mark.parametrize(
    "token, kind, value",
    [
        ("1", AtomKind.NUMBER, 1.0),
        ("-4.5", AtomKind.NUMBER, -4.5),
        ("1e3", AtomKind.NUMBER, 1000.0),
        (".5", AtomKind.NUMBER, 0.5),
        ("x", AtomKind.SYMBOL, "x"),
        ("+", AtomKind.SYMBOL, "+"),
        ("-", AtomKind.SYMBOL, "-"),
        ("make-point", AtomKind.SYMBOL, "make-point"),
        ('"a string"', AtomKind.STRING, "a string"),
        ('""', AtomKind.STRING, ""),
    ],
)
def test_from_token(token, kind, value):
    a = Atom.from_token(token)
    assert a.kind is kind
    assert a.value == value


@pytest.mark.parametrize("token", ["1abc", "2x", "3.4.5"])
def test_from_token_malformed_number_is_none(token):
    assert Atom.from_token(token).is_none()
    assert Atom.from_token(token) == Atom()


def test_projections_never_fail():
    s = Atom("sym")
    assert s.as_number() == 0.0
    assert s.as_complex() == 0j
    n = Atom(3)
    assert n.as_symbol() == ""
    assert n.as_complex() == complex(3, 0)
    assert Atom().as_string() == ""


def test_as_symbol_strips_quotes_from_strings():
    assert Atom.string("hi").as_symbol() == "hi"
    assert Atom("hi").as_symbol() == "hi"


def test_formatting():
    assert Atom(1).as_string() == "1"
    assert Atom(3.14159265).as_string() == "3.14159"
    assert Atom(1e6).as_string() == "1e+06"
    assert Atom(complex(1, -2)).as_string() == "(1,-2)"
    assert Atom("x").as_string() == "x"
    assert Atom.string("x").as_string() == '"x"'
    assert str(Atom.string("a b")) == '"a b"'


def test_numeric_tolerance():
    assert Atom(1.0) == Atom(1.0 + EPS)
    assert Atom(1.0) == Atom(1.0 + 2 * EPS)
    assert Atom(1.0) != Atom(1.0 + 4 * EPS)
    assert Atom(complex(1, 1)) == Atom(complex(1 + EPS, 1 - EPS))
    assert Atom(complex(1, 1)) != Atom(complex(1, 1.001))


def test_tolerance_is_not_transitive():
    a, b, c = Atom(0.0), Atom(2 * EPS), Atom(4 * EPS)
    assert a == b and b == c
    assert a != c


def test_nan_is_never_equal():
    assert Atom(float("nan")) != Atom(float("nan"))


def test_kinds_never_compare_equal():
    assert Atom("x") != Atom.string("x")
    assert Atom(1) != Atom(complex(1, 0))
    assert Atom() == Atom()
    assert Atom() != Atom(0)


finite = st.floats(allow_nan=False, allow_infinity=False)


@given(finite)
def test_numeric_equality_is_reflexive(x):
    assert Atom(x) == Atom(x)


@given(finite, finite)
def test_numeric_equality_is_symmetric(x, y):
    assert (Atom(x) == Atom(y)) == (Atom(y) == Atom(x))


@given(finite, finite)
def test_numeric_equality_matches_tolerance(x, y):
    assert (Atom(x) == Atom(y)) == (abs(x - y) <= 2 * EPS)

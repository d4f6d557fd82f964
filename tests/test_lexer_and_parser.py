import pytest

from plotscript.errors import PlotscriptSyntaxError
from plotscript.reader.parser import lex, parse
from plotscript.types.atom import Atom
from plotscript.types.expression import Expression


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ('"hello world"', [("string", '"hello world"')]),
        ("(+ 1 -2.5)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "-2.5"), ("rparen", ")")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("(f)(g)", [("lparen", "("), ("atom", "f"), ("rparen", ")"), ("lparen", "("), ("atom", "g"), ("rparen", ")")]),
        ("   ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_lexer_rejects_unterminated_string():
    with pytest.raises(PlotscriptSyntaxError):
        list(lex('(f "abc)'))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Expression(123)),
        ("-45", Expression(-45)),
        ("x", Expression("x")),
        ('"s"', Expression.string("s")),
        ("(+ 1 2)", Expression(Atom("+"), [Expression(1), Expression(2)])),
        (
            "(define f (lambda (x) x))",
            Expression(
                Atom("define"),
                [
                    Expression("f"),
                    Expression(Atom("lambda"), [Expression("x"), Expression("x")]),
                ],
            ),
        ),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_parse_keeps_strings_distinct_from_symbols():
    expr = parse('(set-property "k" 1 x)')
    assert expr.tail[0].head.is_string()
    assert expr.tail[2].head.is_symbol()


def test_parse_lambda_parameter_form():
    expr = parse("(lambda (a b c) a)")
    params = expr.tail[0]
    assert params.head == Atom("a")
    assert [p.head.as_symbol() for p in params.tail] == ["b", "c"]


@pytest.mark.parametrize(
    "source",
    [
        "",
        "  ; only a comment",
        "(",
        ")",
        "()",
        "(1abc 2)",
        "((f) 1)",
        "(+ 1 2))",
        "(+ 1 2) (+ 3 4)",
        "(+ 1 (* 2 3)",
        '"unterminated',
    ],
)
def test_parse_failures(source):
    with pytest.raises(PlotscriptSyntaxError):
        parse(source)


def test_interpreter_parse_stream_reports_failure(interp):
    import io

    assert interp.parse_stream(io.StringIO("(+ 1 2)"))
    assert not interp.parse_stream(io.StringIO("(+ 1 2"))
    assert interp.ast is None

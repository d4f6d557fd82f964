"""Built-in procedures for the plotscript runtime environment.

This module defines core arithmetic, complex-number helpers, list processing,
the graphic primitive constructors used by the plot forms, and the
registration utility that installs them (plus the constants pi, e and I).

Every procedure takes the list of evaluated argument Expressions and returns
a single Expression.
"""
from __future__ import annotations

import cmath
import math

from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.atom import Atom
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def _require_arity(name: str, args: list[Expression], *counts: int) -> None:
    if len(args) not in counts:
        raise PlotscriptArityError(f"Error in call to {name}: invalid number of arguments.")


def _numeric(name: str, args: list[Expression]) -> bool:
    """Check every argument is numeric; return True when any is complex."""
    if not all(a.is_head_numeric() for a in args):
        raise PlotscriptTypeError(f"Error in call to {name}, argument not a number")
    return any(a.is_head_complex() for a in args)


def _number(name: str, arg: Expression) -> float:
    if not arg.is_head_number():
        raise PlotscriptTypeError(f"Error in call to {name}, argument not a number")
    return arg.head.as_number()


def _complex(name: str, arg: Expression) -> complex:
    if not arg.is_head_complex():
        raise PlotscriptTypeError(f"Error in call to {name}, argument not a complex number")
    return arg.head.as_complex()


def _list(name: str, arg: Expression) -> tuple[Expression, ...]:
    if not arg.is_list():
        raise PlotscriptTypeError(f"Error in call to {name}, argument not a list")
    return arg.tail


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Expression]) -> Expression:
    """Sum of all arguments; complex if any argument is complex."""
    if _numeric("add", args):
        return Expression(sum((a.head.as_complex() for a in args), 0j))
    return Expression(math.fsum(a.head.as_number() for a in args))


def mul(args: list[Expression]) -> Expression:
    """Product of all arguments; complex if any argument is complex."""
    if _numeric("mul", args):
        result = complex(1, 0)
        for a in args:
            result *= a.head.as_complex()
        return Expression(result)
    return Expression(math.prod(a.head.as_number() for a in args))


def subneg(args: list[Expression]) -> Expression:
    """Negation with one argument, subtraction with two."""
    _require_arity("subneg", args, 1, 2)
    if _numeric("subneg", args):
        values = [a.head.as_complex() for a in args]
    else:
        values = [a.head.as_number() for a in args]
    if len(values) == 1:
        return Expression(-values[0])
    return Expression(values[0] - values[1])


def div(args: list[Expression]) -> Expression:
    """Reciprocal with one argument, quotient with two."""
    _require_arity("division", args, 1, 2)
    if _numeric("division", args):
        values = [a.head.as_complex() for a in args]
    else:
        values = [a.head.as_number() for a in args]
    if len(values) == 1:
        values.insert(0, 1.0)
    try:
        return Expression(values[0] / values[1])
    except ZeroDivisionError:
        raise PlotscriptTypeError("Error in call to division: division by zero")


def sqrt(args: list[Expression]) -> Expression:
    """Square root; negative numbers give a complex result."""
    _require_arity("sqrt", args, 1)
    if _numeric("sqrt", args):
        return Expression(cmath.sqrt(args[0].head.as_complex()))
    value = args[0].head.as_number()
    if value < 0:
        return Expression(cmath.sqrt(value))
    return Expression(math.sqrt(value))


def power(args: list[Expression]) -> Expression:
    _require_arity("pow", args, 2)
    if _numeric("pow", args):
        base, exponent = (a.head.as_complex() for a in args)
        try:
            return Expression(base ** exponent)
        except ZeroDivisionError:
            raise PlotscriptTypeError("Error in call to pow: zero to a negative or complex power")
    base, exponent = (a.head.as_number() for a in args)
    try:
        return Expression(math.pow(base, exponent))
    except (ValueError, OverflowError) as ex:
        raise PlotscriptTypeError(f"Error in call to pow: {ex}")


def ln(args: list[Expression]) -> Expression:
    _require_arity("ln", args, 1)
    value = _number("ln", args[0])
    if value <= 0:
        raise PlotscriptTypeError("Error in call to ln: argument not positive")
    return Expression(math.log(value))


def sin(args: list[Expression]) -> Expression:
    _require_arity("sin", args, 1)
    return Expression(math.sin(_number("sin", args[0])))


def cos(args: list[Expression]) -> Expression:
    _require_arity("cos", args, 1)
    return Expression(math.cos(_number("cos", args[0])))


def tan(args: list[Expression]) -> Expression:
    _require_arity("tan", args, 1)
    return Expression(math.tan(_number("tan", args[0])))


# -------------------------------
# Complex numbers
# -------------------------------
def real(args: list[Expression]) -> Expression:
    _require_arity("real", args, 1)
    return Expression(_complex("real", args[0]).real)


def imag(args: list[Expression]) -> Expression:
    _require_arity("imag", args, 1)
    return Expression(_complex("imag", args[0]).imag)


def mag(args: list[Expression]) -> Expression:
    _require_arity("mag", args, 1)
    return Expression(abs(_complex("mag", args[0])))


def arg(args: list[Expression]) -> Expression:
    _require_arity("arg", args, 1)
    return Expression(cmath.phase(_complex("arg", args[0])))


def conj(args: list[Expression]) -> Expression:
    _require_arity("conj", args, 1)
    return Expression(_complex("conj", args[0]).conjugate())


# -------------------------------
# List operations
# -------------------------------
def first(args: list[Expression]) -> Expression:
    _require_arity("first", args, 1)
    items = _list("first", args[0])
    if not items:
        raise PlotscriptTypeError("Error in call to first, argument is an empty list")
    return items[0]


def rest(args: list[Expression]) -> Expression:
    _require_arity("rest", args, 1)
    items = _list("rest", args[0])
    if not items:
        raise PlotscriptTypeError("Error in call to rest, argument is an empty list")
    return Expression.from_list(items[1:])


def length(args: list[Expression]) -> Expression:
    _require_arity("length", args, 1)
    return Expression(len(_list("length", args[0])))


def append(args: list[Expression]) -> Expression:
    """(append lst item) => new list with item at the end."""
    _require_arity("append", args, 2)
    return Expression.from_list((*_list("append", args[0]), args[1]))


def join(args: list[Expression]) -> Expression:
    _require_arity("join", args, 2)
    return Expression.from_list((*_list("join", args[0]), *_list("join", args[1])))


def range_builtin(args: list[Expression]) -> Expression:
    """(range begin end step) => begin, begin+step, ... up to and including end."""
    _require_arity("range", args, 3)
    begin, end, step = (_number("range", a) for a in args)
    if begin > end:
        raise PlotscriptTypeError("Error in call to range: begin greater than end")
    if step <= 0:
        raise PlotscriptTypeError("Error in call to range: negative or zero increment")
    # absorb rounding in the quotient so an end hit exactly by the step is kept
    count = math.floor((end - begin) / step + 1e-9) + 1
    return Expression.from_list(Expression(begin + i * step) for i in range(count))


# -------------------------------
# Graphic primitives
# -------------------------------
def make_point(args: list[Expression]) -> Expression:
    """(make-point x y) => (list x y) tagged as a point of size 0."""
    _require_arity("make-point", args, 2)
    if not all(a.is_head_number() for a in args):
        raise PlotscriptTypeError("Error in call to make-point, argument not a number")
    point = Expression.from_list(args)
    point.properties["object-name"] = Expression.string("point")
    point.properties["size"] = Expression(0)
    return point


def make_line(args: list[Expression]) -> Expression:
    """(make-line p1 p2) => (list p1 p2) tagged as a line of thickness 1."""
    _require_arity("make-line", args, 2)
    if not all(a.check_property("object-name", "point") for a in args):
        raise PlotscriptTypeError("Error in call to make-line, argument not a point")
    line = Expression.from_list(args)
    line.properties["object-name"] = Expression.string("line")
    line.properties["thickness"] = Expression(1)
    return line


def make_text(args: list[Expression]) -> Expression:
    """(make-text "str") => the string tagged as text at the origin."""
    _require_arity("make-text", args, 1)
    if not args[0].head.is_string():
        raise PlotscriptTypeError("Error in call to make-text, argument not a string")
    text = args[0].copy()
    text.properties["object-name"] = Expression.string("text")
    text.properties["position"] = make_point([Expression(0), Expression(0)])
    text.properties["text-scale"] = Expression(1)
    text.properties["text-rotation"] = Expression(0)
    return text


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update(
        {
            "+": add,
            "*": mul,
            "-": subneg,
            "/": div,
            "sqrt": sqrt,
            "^": power,
            "ln": ln,
            "sin": sin,
            "cos": cos,
            "tan": tan,
            "real": real,
            "imag": imag,
            "mag": mag,
            "arg": arg,
            "conj": conj,
            "first": first,
            "rest": rest,
            "length": length,
            "append": append,
            "join": join,
            "range": range_builtin,
            "make-point": make_point,
            "make-line": make_line,
            "make-text": make_text,
        }
    )
    env.add_exp(Atom("pi"), Expression(math.pi))
    env.add_exp(Atom("e"), Expression(math.e))
    env.add_exp(Atom("I"), Expression(complex(0, 1)))

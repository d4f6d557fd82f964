from plotscript import EvaluatorFn
from plotscript.errors import (
    PlotscriptArityError,
    PlotscriptRedefinitionError,
    PlotscriptTypeError,
)
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression

RESERVED_FORMS = frozenset({"define", "begin", "lambda", "list"})
RESERVED_CONSTANTS = frozenset({"pi", "e", "I"})


def define_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value)
    Binds name in the current environment and returns the bound value.
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error during define: invalid number of arguments to define")

    name, val_expr = tail
    if not name.head.is_symbol():
        raise PlotscriptTypeError("Error during define: first argument to define not symbol")

    s = name.head.as_symbol()
    if s in RESERVED_FORMS:
        raise PlotscriptRedefinitionError("Error during define: attempt to redefine a special-form")
    if env.is_proc(name.head):
        raise PlotscriptRedefinitionError("Error during define: attempt to redefine a built-in procedure")
    if s in RESERVED_CONSTANTS:
        raise PlotscriptRedefinitionError("Error during define: attempt to redefine a built-in symbol")

    value = evaluate_fn(val_expr, env)
    env.add_exp(name.head, value)
    return value

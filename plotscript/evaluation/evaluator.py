"""Core evaluator for the plotscript interpreter.

Dispatch order for an expression:
1. `(list ...)` builds a list, even when empty.
2. A node with no tail is a terminal: symbols are looked up, literals
   evaluate to themselves.
3. A head naming a special form is handled by its entry in SPECIAL_FORMS.
4. Anything else is a procedure call: operands are evaluated left to right
   and handed to the apply protocol together with the unevaluated head.
"""

from __future__ import annotations

from plotscript.errors import PlotscriptTypeError, PlotscriptUnboundSymbol
from plotscript.types.atom import Atom
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.evaluation.apply import apply
from plotscript.evaluation.special_forms import SPECIAL_FORMS
from plotscript.evaluation.special_forms.list_form import list_form


def lookup(head: Atom, env: Environment) -> Expression:
    """Evaluate a terminal expression."""
    if head.is_symbol():
        if env.is_exp(head):
            return env.get_exp(head)
        raise PlotscriptUnboundSymbol(
            f"Error during evaluation: unknown symbol {head.as_string()}"
        )
    if head.is_number() or head.is_complex() or head.is_string():
        return Expression(head)
    raise PlotscriptTypeError("Error during evaluation: Invalid type in terminal expression")


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` against `env`, honouring the environment's interrupt token."""
    env.interrupt.check()

    head = expr.head
    name = head.as_symbol() if head.is_symbol() else None

    if name == "list":
        return list_form(expr.tail, env, evaluate)

    if not expr.tail:
        return lookup(head, env)

    handler = SPECIAL_FORMS.get(name)
    if handler is not None:
        return handler(expr.tail, env, evaluate)

    args = [evaluate(arg, env) for arg in expr.tail]
    return apply(head, args, env, evaluate)

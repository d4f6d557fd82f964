"""Application engine for plotscript.

This module centralizes procedure application for the interpreter:
- User lambdas run against a snapshot of the *call-site* environment extended
  with the parameter bindings. Lambdas capture nothing when they are created,
  so a body sees whatever the caller can see (dynamic-scope flavoured).
- Built-in procedures are looked up in the environment's procedure registry
  and called with the evaluated argument list.

Special forms (apply, map, the plot forms) and the evaluator all go through
here so arity and operator checks are reported consistently.
"""

from __future__ import annotations

from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.atom import Atom
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def apply_lambda(
    fn: Expression,
    args: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply a Lambda value.

    Parameters:
    - fn: the Lambda expression (tail[0] formals, tail[1] body).
    - args: the already-evaluated argument values.
    - env: the environment at the call site; it is snapshotted, never mutated.
    - evaluate_fn: evaluator used for the body.
    """
    formals, body = fn.tail
    if len(args) != len(formals):
        raise PlotscriptArityError(
            "Error: during apply: Error in call to procedure: invalid number of arguments."
        )
    inner_scope = env.copy()
    for formal, arg in zip(formals, args):
        inner_scope.add_exp(formal.head, arg)
    return evaluate_fn(body, inner_scope)


def apply(
    op: Atom,
    args: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply the procedure named by `op` to `args`.

    - If `op` is bound to a Lambda, defer to apply_lambda.
    - Otherwise `op` must be a symbol naming a registered built-in.
    """
    fn = env.get_exp(op)
    if fn.is_lambda():
        return apply_lambda(fn, args, env, evaluate_fn)

    if not op.is_symbol():
        raise PlotscriptTypeError("Error during evaluation: not a symbol")

    proc = env.get_proc(op)
    if proc is None:
        raise PlotscriptTypeError("Error during evaluation: symbol does not name a procedure")

    try:
        return proc(args)
    except (ArithmeticError, ValueError) as ex:
        # math domain and overflow failures on otherwise valid numbers
        raise PlotscriptTypeError(f"Error in call to {op.as_symbol()}: {ex}") from ex


def is_procedure(operator: Expression, env: Environment) -> bool:
    """True when `operator` (unevaluated) names a lambda or a bare built-in."""
    if env.get_exp(operator.head).is_lambda():
        return True
    return env.is_proc(operator.head) and not operator.tail

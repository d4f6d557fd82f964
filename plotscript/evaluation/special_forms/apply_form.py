from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.evaluation.apply import apply as apply_engine, is_procedure


def apply_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (apply fn (list args...))
    fn must name a lambda or a built-in procedure; the second operand must
    evaluate to a list, whose items become the arguments.
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error during apply: invalid number of arguments")

    fn_expr, args_expr = tail
    if not is_procedure(fn_expr, env):
        raise PlotscriptTypeError("Error: first argument to apply not a procedure")

    args_val = evaluate_fn(args_expr, env)
    if not args_val.is_list():
        raise PlotscriptTypeError("Error: second argument to apply not a list")

    return apply_engine(fn_expr.head, list(args_val.tail), env, evaluate_fn)


def map_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (map fn (list items...))
    Calls fn once per item, in order, and returns the list of results.
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error during map: invalid number of arguments")

    fn_expr, list_expr = tail
    if not is_procedure(fn_expr, env):
        raise PlotscriptTypeError("Error: first argument to map not a procedure")

    items = evaluate_fn(list_expr, env)
    if not items.is_list():
        raise PlotscriptTypeError("Error: second argument to map not a list")

    return Expression.from_list(
        apply_engine(fn_expr.head, [item], env, evaluate_fn) for item in items.tail
    )

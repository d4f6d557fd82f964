from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def set_property_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (set-property "key" value target)
    Returns a copy of the evaluated target carrying the property; the target
    is evaluated before the value.
    """
    if len(tail) != 3:
        raise PlotscriptArityError("Error: invalid number of arguments for set-property")

    key_expr, value_expr, target_expr = tail
    if not key_expr.head.is_string():
        raise PlotscriptTypeError("Error: first argument to set-property not a string")

    target = evaluate_fn(target_expr, env)
    value = evaluate_fn(value_expr, env)
    return target.with_property(key_expr.head.as_symbol(), value)


def get_property_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (get-property "key" target)
    Returns the property value, or NONE when the target does not carry it.
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error: invalid number of arguments for get-property")

    key_expr, target_expr = tail
    if not key_expr.head.is_string():
        raise PlotscriptTypeError("Error: first argument to get-property not a string")

    target = evaluate_fn(target_expr, env)
    return target.get_property(key_expr.head.as_symbol())

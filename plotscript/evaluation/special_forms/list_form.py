from plotscript import EvaluatorFn
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def list_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (list a b ...)
    Evaluates every item in order; (list) is the empty list.
    """
    return Expression.from_list(evaluate_fn(e, env) for e in tail)

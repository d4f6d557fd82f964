from plotscript import EvaluatorFn
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def begin_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    result = Expression()
    for e in tail:
        result = evaluate_fn(e, env)
    return result

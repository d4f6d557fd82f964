from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


def lambda_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (lambda (x y ...) body)
    The parameter list parses as a form whose head is the first formal and whose
    tail holds the rest; it is flattened into the lambda's list of formals.
    The body is kept unevaluated and no environment is captured.
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error during lambda: invalid number of arguments to lambda")

    params, body = tail
    formals = [Expression(params.head), *params.tail]
    for formal in formals:
        if not formal.head.is_symbol() or formal.tail:
            raise PlotscriptTypeError("Error during lambda: parameter is not a symbol")

    return Expression.make_lambda(formals, body)

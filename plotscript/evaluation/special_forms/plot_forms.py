from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptArityError, PlotscriptTypeError
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.plotting.discrete import discrete_plot
from plotscript.plotting.continuous import continuous_plot


def discrete_plot_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (discrete-plot (list (list x y) ...) (list (list "key" value) ...))
    """
    if len(tail) != 2:
        raise PlotscriptArityError("Error: invalid number of arguments for discrete-plot")

    data = evaluate_fn(tail[0], env)
    options = evaluate_fn(tail[1], env)
    if not data.is_list() or not options.is_list():
        raise PlotscriptTypeError("Error: An argument to discrete-plot is not a list")

    return discrete_plot(data, options, env, evaluate_fn)


def continuous_plot_form(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (continuous-plot fn (list lower upper) [(list (list "key" value) ...)])
    """
    if len(tail) not in (2, 3):
        raise PlotscriptArityError("Error: invalid number of arguments for continuous-plot")

    fn = evaluate_fn(tail[0], env)
    if not fn.is_lambda():
        raise PlotscriptTypeError("Error: first argument to continuous-plot not a lambda")
    bounds = evaluate_fn(tail[1], env)
    if not bounds.is_list():
        raise PlotscriptTypeError("Error: second argument to continuous-plot not a list")
    options = None
    if len(tail) == 3:
        options = evaluate_fn(tail[2], env)
        if not options.is_list():
            raise PlotscriptTypeError("Error: third argument to continuous-plot not a list")

    return continuous_plot(fn, bounds, options, env, evaluate_fn)

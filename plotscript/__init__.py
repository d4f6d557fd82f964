# Core type aliases for plotscript's data model.
# Code and runtime values share one representation: every program fragment and
# every evaluated value is an Expression (see plotscript.types.expression).
#
# Naming guidance:
# - Procedure:   a built-in host function registered in an Environment.
# - EvaluatorFn: the evaluator handed to special forms and the apply protocol,
#                so they can recurse without importing the evaluator module.

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from plotscript.types.expression import Expression
    from plotscript.types.environment import Environment

# Built-in procedure: takes the evaluated argument list, returns one Expression
Procedure = Callable[[list["Expression"]], "Expression"]

# Evaluator function type: (expression, environment) -> value
EvaluatorFn = Callable[["Expression", "Environment"], "Expression"]

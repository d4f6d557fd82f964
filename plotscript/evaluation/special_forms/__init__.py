"""Registry of special forms for the plotscript evaluator.

Maps head symbol names to handler functions that implement non-standard
evaluation rules. Every handler has the signature
``handler(tail, env, evaluate_fn) -> Expression``; the evaluator consults this
table once per compound expression, before ordinary procedure application.
"""

from plotscript.evaluation.special_forms.list_form import list_form
from plotscript.evaluation.special_forms.begin_form import begin_form
from plotscript.evaluation.special_forms.define_form import define_form
from plotscript.evaluation.special_forms.lambda_form import lambda_form
from plotscript.evaluation.special_forms.apply_form import apply_form, map_form
from plotscript.evaluation.special_forms.property_forms import (
    set_property_form,
    get_property_form,
)
from plotscript.evaluation.special_forms.plot_forms import (
    discrete_plot_form,
    continuous_plot_form,
)

SPECIAL_FORMS = {
    "list": list_form,
    "begin": begin_form,
    "define": define_form,
    "lambda": lambda_form,
    "apply": apply_form,
    "map": map_form,
    "set-property": set_property_form,
    "get-property": get_property_form,
    "discrete-plot": discrete_plot_form,
    "continuous-plot": continuous_plot_form,
}

"""Continuous plot scene construction.

The function is sampled at SAMPLES + 1 evenly spaced points across the bounds
and drawn as a polyline, inside a box scaled to SCALE x SCALE scene units.
The y axis of the scene points down, so ordinates are scaled by -SCALE.
"""

from __future__ import annotations

import numpy as np

from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptTypeError
from plotscript.evaluation.apply import apply_lambda
from plotscript.types.atom import format_number
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.plotting.geometry import BoundingBox, SceneBuilder, pairs

SAMPLES = 50
SCALE = 20.0
# Label offsets, in scene units
TITLE_OFFSET = 3.0  # A
ORDINATE_LABEL_OFFSET = 3.0  # B
ABSCISSA_BOUND_OFFSET = 2.0  # C
ORDINATE_BOUND_OFFSET = 2.0  # D
SNAP = 0.001


def _bounds(bounds: Expression) -> tuple[float, float]:
    if len(bounds.tail) != 2 or not all(b.is_head_number() for b in bounds.tail):
        raise PlotscriptTypeError("Error: bounds of continuous-plot must be two numbers")
    lower, upper = sorted(b.head.as_number() for b in bounds.tail)
    if lower == upper:
        raise PlotscriptTypeError("Error: bounds of continuous-plot must not be equal")
    return lower, upper


def sample(
    fn: Expression,
    lower: float,
    upper: float,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate `fn` over SAMPLES + 1 points in [lower, upper]."""
    domain = np.linspace(lower, upper, SAMPLES + 1)
    values = []
    for x in domain:
        y = apply_lambda(fn, [Expression(float(x))], env, evaluate_fn)
        if not y.is_head_number():
            raise PlotscriptTypeError("Error: function in continuous-plot did not return a number")
        values.append(y.head.as_number())
    return domain, np.array(values)


def continuous_plot(
    fn: Expression,
    bounds: Expression,
    options: Expression | None,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    al, au = _bounds(bounds)
    xs, ys = sample(fn, al, au, env, evaluate_fn)
    ol, ou = float(ys.min()), float(ys.max())

    xscale = SCALE / (au - al)
    yscale = -SCALE / ((ou - ol) or 1.0)
    box = BoundingBox(al * xscale, au * xscale, ol * yscale, ou * yscale)
    scene = SceneBuilder(env, evaluate_fn)

    result = scene.box_lines(box)
    if ol <= 0 <= ou:
        result.append(scene.segment((box.xmax, 0.0), (box.xmin, 0.0)))
    if al <= 0 <= au:
        result.append(scene.segment((0.0, box.ymax), (0.0, box.ymin)))

    scaled_x = xs * xscale
    scaled_y = ys * yscale
    scaled_x[np.abs(scaled_x) < SNAP] = 0.0
    scaled_y[np.abs(scaled_y) < SNAP] = 0.0
    curve = [scene.point(float(x), float(y)) for x, y in zip(scaled_x, scaled_y)]
    result.extend(scene.line(a, b) for a, b in zip(curve, curve[1:]))

    labels = [
        (format_number(al), (box.xmin, box.ymin + ABSCISSA_BOUND_OFFSET), 0.0),
        (format_number(au), (box.xmax, box.ymin + ABSCISSA_BOUND_OFFSET), 0.0),
        (format_number(ol), (box.xmin - ORDINATE_BOUND_OFFSET, box.ymin), 0.0),
        (format_number(ou), (box.xmin - ORDINATE_BOUND_OFFSET, box.ymax), 0.0),
    ]
    top, bottom, left = (box.midpoints()[edge] for edge in ("top", "bottom", "left"))
    placements = {
        "title": ((top[0], top[1] - TITLE_OFFSET), 0.0),
        "abscissa-label": ((bottom[0], bottom[1] + TITLE_OFFSET), 0.0),
        "ordinate-label": ((left[0] - ORDINATE_LABEL_OFFSET, left[1]), -90.0),
    }

    option_pairs = pairs(options, "option", "continuous-plot") if options is not None else []
    text_scale = None
    passthrough = []
    for key, value in option_pairs:
        name = key.head.as_symbol()
        if name in placements and value.head.is_string():
            position, rotation = placements[name]
            labels.append((value.head.as_symbol(), position, rotation))
        elif name == "text-scale":
            text_scale = value
        else:
            passthrough.append(value)

    for content, position, rotation in labels:
        item = scene.text(content).with_text_position(scene.point(*position), rotation)
        if text_scale is not None:
            item.properties["text-scale"] = text_scale
        result.append(item)
    result.extend(passthrough)

    plot = Expression.make_plot("CP", result)
    plot.properties["numpoints"] = Expression(len(curve))
    plot.properties["numoptions"] = Expression(len(option_pairs))
    return plot

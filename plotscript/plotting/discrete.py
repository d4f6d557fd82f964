"""Discrete plot scene construction.

Layout of the produced Plot, in order:
  4 bounding-box lines (left, right, top, bottom),
  4 bound labels (xmin, xmax, ymin, ymax) as "%f" strings,
  every option value, verbatim,
  per data point: a marker at (x, -y) and its stem line,
  the x axis and/or y axis when zero lies within the data range.
"""

from __future__ import annotations

from plotscript import EvaluatorFn
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.plotting.geometry import BoundingBox, SceneBuilder, pairs

# Initial extremes of the bounds scan. Data lying entirely beyond +/-999 on an
# axis yields a bound stuck at the seed.
SEED_MIN = 999.0
SEED_MAX = -999.0


def data_bounds(points: list[tuple[float, float]]) -> BoundingBox:
    xmin, xmax, ymin, ymax = SEED_MIN, SEED_MAX, SEED_MIN, SEED_MAX
    for x, y in points:
        xmin, xmax = min(x, xmin), max(x, xmax)
        ymin, ymax = min(y, ymin), max(y, ymax)
    return BoundingBox(xmin, xmax, ymin, ymax)


def discrete_plot(
    data: Expression,
    options: Expression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    points = [
        (x.head.as_number(), y.head.as_number())
        for x, y in pairs(data, "data point", "discrete-plot")
    ]
    option_values = [value for _, value in pairs(options, "option", "discrete-plot")]

    box = data_bounds(points)
    scene = SceneBuilder(env, evaluate_fn)

    result = scene.box_lines(box)
    result.extend(
        Expression.string(f"{bound:f}")
        for bound in (box.xmin, box.xmax, box.ymin, box.ymax)
    )
    result.extend(option_values)

    # Stems end on the x axis, or on the box bottom when the box is above it
    stem_bottom = -max(0.0, box.ymin)
    for x, y in points:
        marker = scene.point(x, -y)
        result.append(marker)
        result.append(scene.line(marker, scene.point(x, stem_bottom)))

    if box.ymin <= 0 <= box.ymax:
        result.append(scene.segment((box.xmax, 0.0), (box.xmin, 0.0)))
    if box.xmin <= 0 <= box.xmax:
        result.append(scene.segment((0.0, box.ymax), (0.0, box.ymin)))

    plot = Expression.make_plot("DP", result)
    plot.properties["numpoints"] = Expression(len(points))
    plot.properties["numoptions"] = Expression(len(option_values))
    return plot

"""Shared geometry helpers for the plot special forms.

Scene primitives are always produced through the `make-point`, `make-line` and
`make-text` procedures, so every plot item carries the same property schema as
one built by user code.
"""

from __future__ import annotations

from dataclasses import dataclass

from plotscript import EvaluatorFn
from plotscript.errors import PlotscriptTypeError
from plotscript.evaluation.apply import apply
from plotscript.types.atom import Atom
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression


@dataclass(frozen=True)
class BoundingBox:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def xmiddle(self) -> float:
        return (self.xmin + self.xmax) / 2

    @property
    def ymiddle(self) -> float:
        return (self.ymin + self.ymax) / 2

    def corners(self) -> dict[str, tuple[float, float]]:
        return {
            "top-left": (self.xmin, self.ymax),
            "top-right": (self.xmax, self.ymax),
            "bottom-left": (self.xmin, self.ymin),
            "bottom-right": (self.xmax, self.ymin),
        }

    def midpoints(self) -> dict[str, tuple[float, float]]:
        return {
            "top": (self.xmiddle, self.ymax),
            "bottom": (self.xmiddle, self.ymin),
            "left": (self.xmin, self.ymiddle),
            "right": (self.xmax, self.ymiddle),
        }

    @property
    def center(self) -> tuple[float, float]:
        return self.xmiddle, self.ymiddle


class SceneBuilder:
    """Builds scene items by applying the graphic primitive procedures."""

    def __init__(self, env: Environment, evaluate_fn: EvaluatorFn):
        self.env = env
        self.evaluate_fn = evaluate_fn

    def _call(self, name: str, args: list[Expression]) -> Expression:
        return apply(Atom(name), args, self.env, self.evaluate_fn)

    def point(self, x: float, y: float) -> Expression:
        return self._call("make-point", [Expression(x), Expression(y)])

    def line(self, start: Expression, end: Expression) -> Expression:
        return self._call("make-line", [start, end])

    def segment(self, start: tuple[float, float], end: tuple[float, float]) -> Expression:
        return self.line(self.point(*start), self.point(*end))

    def text(self, content: str) -> Expression:
        return self._call("make-text", [Expression.string(content)])

    def box_lines(self, box: BoundingBox) -> list[Expression]:
        """Left, right, top and bottom edges of `box`, in that order."""
        c = {name: self.point(*xy) for name, xy in box.corners().items()}
        return [
            self.line(c["top-left"], c["bottom-left"]),
            self.line(c["top-right"], c["bottom-right"]),
            self.line(c["top-left"], c["top-right"]),
            self.line(c["bottom-left"], c["bottom-right"]),
        ]


def pairs(items: Expression, what: str, form: str) -> list[tuple[Expression, Expression]]:
    """Unpack a list of two-element lists, e.g. data points or options."""
    result = []
    for item in items.tail:
        if len(item.tail) != 2:
            raise PlotscriptTypeError(f"Error: {what} in {form} is not a pair")
        result.append((item.tail[0], item.tail[1]))
    return result

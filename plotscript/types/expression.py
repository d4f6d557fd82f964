"""Expression: the single node type for both parsed code and runtime values.

An Expression has a kind, a head Atom, an ordered tail of child Expressions
and a string-keyed property map. Tails are tuples and property maps are copied
on write, so passing Expressions around by value is cheap.

The property map also carries the plot schema consumed by renderers:
``object-name`` (point / line / text), ``size``, ``thickness``, ``position``,
``text-scale``, ``text-rotation`` and, on plots, ``type`` / ``numpoints`` /
``numoptions``.
"""

from __future__ import annotations

import math
from enum import Enum
from io import StringIO
from typing import Iterable

from plotscript.types.atom import Atom


class ExpressionKind(Enum):
    NONE = "none"
    SINGLETON = "singleton"
    LIST = "list"
    LAMBDA = "lambda"
    PLOT = "plot"


class Expression:
    __slots__ = ("kind", "head", "tail", "properties")

    def __init__(
        self,
        head: Atom | float | complex | str | None = None,
        tail: Iterable[Expression] = (),
    ):
        if head is None:
            self.kind = ExpressionKind.NONE
            self.head = Atom()
        else:
            self.kind = ExpressionKind.SINGLETON
            self.head = head if isinstance(head, Atom) else Atom(head)
        self.tail: tuple[Expression, ...] = tuple(tail)
        self.properties: dict[str, Expression] = {}

    @classmethod
    def _build(
        cls,
        kind: ExpressionKind,
        items: Iterable[Expression],
        properties: dict[str, Expression] | None = None,
    ) -> Expression:
        expr = cls()
        expr.kind = kind
        expr.tail = tuple(items)
        if properties:
            expr.properties = dict(properties)
        return expr

    @classmethod
    def from_list(cls, items: Iterable[Expression]) -> Expression:
        return cls._build(ExpressionKind.LIST, items)

    @classmethod
    def make_lambda(cls, parameters: Iterable[Expression], body: Expression) -> Expression:
        """Lambda value: tail[0] is the list of formal names, tail[1] the body."""
        return cls._build(ExpressionKind.LAMBDA, (cls.from_list(parameters), body))

    @classmethod
    def make_plot(cls, plot_type: str, items: Iterable[Expression]) -> Expression:
        return cls._build(
            ExpressionKind.PLOT, items, {"type": Expression(Atom.string(plot_type))}
        )

    @classmethod
    def string(cls, text: str) -> Expression:
        return cls(Atom.string(text))

    # --- Kind predicates ---
    def is_none(self) -> bool:
        return self.kind is ExpressionKind.NONE

    def is_singleton(self) -> bool:
        return self.kind is ExpressionKind.SINGLETON

    def is_list(self) -> bool:
        return self.kind is ExpressionKind.LIST

    def is_lambda(self) -> bool:
        return self.kind is ExpressionKind.LAMBDA

    def is_plot(self) -> bool:
        return self.kind is ExpressionKind.PLOT

    def is_head_number(self) -> bool:
        return self.head.is_number()

    def is_head_complex(self) -> bool:
        return self.head.is_complex()

    def is_head_numeric(self) -> bool:
        return self.head.is_number() or self.head.is_complex()

    def is_dp(self) -> bool:
        if "type" in self.properties:
            return self.properties["type"] == Expression.string("DP")
        return self.kind is ExpressionKind.PLOT

    def is_cp(self) -> bool:
        # Decides on the first property (in key order) that is *not* "type".
        # Plots built by continuous-plot therefore report False here; renderers
        # should test the "type" property directly.
        for key in sorted(self.properties):
            if key != "type":
                return self.properties[key] == Expression.string("CP")
        return False

    # --- Properties ---
    def with_property(self, key: str, value: Expression) -> Expression:
        """Return a copy of this expression with `key` set to `value`."""
        copy = self.copy()
        copy.properties[key] = value
        return copy

    def get_property(self, key: str) -> Expression:
        """Property value for `key`, or a NONE expression when absent."""
        return self.properties.get(key, Expression())

    def check_property(self, key: str, value: str) -> bool:
        return self.get_property(key) == Expression.string(value)

    def get_numerical_property(self, key: str) -> float:
        if key in self.properties:
            return self.properties[key].head.as_number()
        return -1.0

    def get_text_properties(self) -> tuple[float, float, float, float]:
        """(x, y, scale, rotation) of a text item; scale is at least 1."""
        position = self.properties.get("position")
        if position is None:
            return 0.0, 0.0, 1.0, 0.0
        scale, rotation = 1.0, 0.0
        if "text-scale" in self.properties:
            scale = max(self.properties["text-scale"].head.as_number(), 1.0)
        if "text-rotation" in self.properties:
            rotation = self.properties["text-rotation"].head.as_number()
        x, y = (p.head.as_number() for p in position.tail[:2])
        return x, y, scale, rotation

    def with_text_position(self, point: Expression, degrees: float = 0.0) -> Expression:
        """Copy of a text item moved to `point` and rotated by `degrees`."""
        copy = self.with_property("position", point)
        copy.properties["text-rotation"] = Expression(degrees * math.pi / 180)
        return copy

    # --- Value semantics ---
    def copy(self) -> Expression:
        expr = Expression()
        expr.kind = self.kind
        expr.head = self.head
        expr.tail = self.tail
        expr.properties = dict(self.properties)
        return expr

    def __len__(self) -> int:
        return len(self.tail)

    def __iter__(self):
        return iter(self.tail)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        if self.head != other.head or len(self.tail) != len(other.tail):
            return False
        return all(a == b for a, b in zip(self.tail, other.tail))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __str__(self) -> str:
        if self.kind is ExpressionKind.NONE:
            return "NONE"
        with StringIO() as buffer:
            bracketed = not self.head.is_complex()
            if bracketed:
                buffer.write("(")
            parts = []
            if self.kind is ExpressionKind.SINGLETON:
                parts.append(self.head.as_string())
            parts.extend(str(e) for e in self.tail)
            buffer.write(" ".join(parts))
            if bracketed:
                buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Expression {self.kind.value} {self}>"

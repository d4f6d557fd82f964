"""Terminal values of plotscript expressions.

An Atom holds exactly one of: nothing, a real number, a complex number, a
symbol or a string. Numbers compare with a tolerance of twice the machine
epsilon so that values produced by different arithmetic paths still match.
"""

from __future__ import annotations

import re
import sys
from enum import Enum

_TOLERANCE = sys.float_info.epsilon * 2

# Decimal literal: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent.
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class AtomKind(Enum):
    NONE = "none"
    NUMBER = "number"
    COMPLEX = "complex"
    SYMBOL = "symbol"
    STRING = "string"


def format_number(value: float) -> str:
    """Render a float the way a default-configured C++ stream would (%g)."""
    return f"{value:g}"


def format_complex(value: complex) -> str:
    return f"({format_number(value.real)},{format_number(value.imag)})"


class Atom:
    __slots__ = ("kind", "value")

    def __init__(self, value: float | int | complex | str | None = None):
        if value is None:
            self.kind = AtomKind.NONE
            self.value = None
        elif isinstance(value, complex):
            self.kind = AtomKind.COMPLEX
            self.value = value
        elif isinstance(value, (int, float)):
            self.kind = AtomKind.NUMBER
            self.value = float(value)
        elif isinstance(value, str):
            # Intern to ensure fast equality/hash for symbol names
            self.kind = AtomKind.SYMBOL
            self.value = sys.intern(value)
        else:
            raise TypeError(f"Cannot build an Atom from {value!r}")

    @classmethod
    def string(cls, text: str) -> Atom:
        atom = cls()
        atom.kind = AtomKind.STRING
        atom.value = text
        return atom

    @classmethod
    def from_token(cls, token: str) -> Atom:
        """Build an Atom from a token's text.

        Quoted text becomes a String, a well-formed number becomes a Number and
        anything else not starting with a digit becomes a Symbol. A malformed
        number such as ``1abc`` yields the NONE atom; callers that need a real
        value must check ``is_none``.
        """
        if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
            return cls.string(token[1:-1])
        if NUMBER_RE.fullmatch(token):
            return cls(float(token))
        if token and not token[0].isdigit():
            return cls(token)
        return cls()

    # --- Predicates ---
    def is_none(self) -> bool:
        return self.kind is AtomKind.NONE

    def is_number(self) -> bool:
        return self.kind is AtomKind.NUMBER

    def is_complex(self) -> bool:
        return self.kind is AtomKind.COMPLEX

    def is_symbol(self) -> bool:
        return self.kind is AtomKind.SYMBOL

    def is_string(self) -> bool:
        return self.kind is AtomKind.STRING

    # --- Projections (total, never raise) ---
    def as_number(self) -> float:
        if self.kind is AtomKind.COMPLEX:
            return self.value.real
        return self.value if self.kind is AtomKind.NUMBER else 0.0

    def as_complex(self) -> complex:
        if self.kind is AtomKind.NUMBER:
            return complex(self.value, 0.0)
        return self.value if self.kind is AtomKind.COMPLEX else 0j

    def as_symbol(self) -> str:
        """Text of a symbol or string, without quote characters."""
        if self.kind in (AtomKind.SYMBOL, AtomKind.STRING):
            return self.value.replace('"', "")
        return ""

    def as_string(self) -> str:
        """Formatted text of the atom; strings keep their quotes."""
        if self.kind is AtomKind.SYMBOL:
            return self.value
        if self.kind is AtomKind.STRING:
            return f'"{self.value}"'
        if self.kind is AtomKind.NUMBER:
            return format_number(self.value)
        if self.kind is AtomKind.COMPLEX:
            return format_complex(self.value)
        return ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom) or self.kind is not other.kind:
            return False
        if self.kind is AtomKind.NUMBER:
            # NaN differences fail the comparison
            return abs(self.value - other.value) <= _TOLERANCE
        if self.kind is AtomKind.COMPLEX:
            diff = self.value - other.value
            return abs(diff.real) <= _TOLERANCE and abs(diff.imag) <= _TOLERANCE
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # tolerant equality cannot be hashed consistently

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        if self.kind is AtomKind.NONE:
            return "Atom()"
        return f"Atom({self.kind.value}, {self.as_string()})"

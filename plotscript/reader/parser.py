"""
  plotscript Lexer and Parser

- A program is exactly one expression: an atom, or a parenthesised form
  whose first element is an atom (the head) followed by child expressions.
- Emits Expression trees directly:

    - numbers       -> Singleton(Number)
    - "text"        -> Singleton(String)      (no escape sequences)
    - other tokens  -> Singleton(Symbol)
    - (head a b ..) -> Singleton(head) with tail [a, b, ..]

- `;` starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from plotscript.errors import PlotscriptSyntaxError
from plotscript.types.atom import Atom
from plotscript.types.expression import Expression


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted strings
    r'|(?P<atom>[^\s()";]+)'  # numbers and symbols
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:]
            if rest.isspace():
                break
            bad = pos + len(rest) - len(rest.lstrip())
            if source[bad] == '"':
                raise PlotscriptSyntaxError(f"Unterminated string at {bad}")
            raise PlotscriptSyntaxError(f"Unexpected char at {bad}: {source[bad]!r}")
        pos = m.end()
        kind = next(name for name, value in m.groupdict().items() if value is not None)
        if kind == "comment":
            continue
        yield kind, m.group(kind)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    @staticmethod
    def _atom(tok_val: str) -> Atom:
        atom = Atom.from_token(tok_val)
        if atom.is_none():
            raise PlotscriptSyntaxError(f"Invalid token {tok_val!r}")
        return atom

    def parse_expr(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise PlotscriptSyntaxError("Unexpected end of input")

        if tok_type in ("atom", "string"):
            return Expression(self._atom(tok_val))

        if tok_type == "rparen":
            raise PlotscriptSyntaxError("Unexpected ')'")

        # Compound form: the head must be an atom
        head_type, head_val = self.advance()
        if head_type not in ("atom", "string"):
            raise PlotscriptSyntaxError("Expected an atom after '('")
        head = self._atom(head_val)
        children: list[Expression] = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise PlotscriptSyntaxError("Unmatched '('")
            if next_type == "rparen":
                self.advance()
                break
            children.append(self.parse_expr())
        return Expression(head, children)

    def parse_program(self) -> Expression:
        """Parse exactly one expression and require the input to end after it."""
        if self.peek()[0] is None:
            raise PlotscriptSyntaxError("Empty program")
        expr = self.parse_expr()
        if self.peek()[0] is not None:
            raise PlotscriptSyntaxError("Unexpected input after the program expression")
        return expr


def parse(source: str) -> Expression:
    """Parse `source` into a single Expression or raise PlotscriptSyntaxError."""
    return TokenStream(lex(source)).parse_program()

"""Runtime environment for plotscript.

The Environment stores bindings of symbol names to Expression values and the
registry of built-in procedures. A procedure call runs against a snapshot of
the caller's environment: `copy` layers an empty frame over the current one,
and every write lands in the innermost frame, so the caller never observes the
callee's bindings while the callee sees everything visible at the call site.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from plotscript import Procedure
from plotscript.types.atom import Atom
from plotscript.types.expression import Expression
from plotscript.types.interrupt import Interrupt


class Environment:
    """Layered mapping from symbol names to Expressions, plus built-in procedures."""

    __slots__ = ("expressions", "procedures", "outer", "interrupt")

    def __init__(self, outer: Optional[Environment] = None, interrupt: Interrupt | None = None):
        self.expressions: dict[str, Expression] = {}
        self.outer: Environment | None = outer
        # The procedure registry is fixed after startup; every snapshot shares it
        self.procedures: dict[str, Procedure] = outer.procedures if outer is not None else {}
        if interrupt is None:
            interrupt = outer.interrupt if outer is not None else Interrupt()
        self.interrupt: Interrupt = interrupt

    def copy(self) -> Environment:
        """Snapshot for a procedure call; cost is independent of the binding count."""
        return Environment(outer=self)

    def _find(self, name: str) -> Optional[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.expressions:
                return env
            env = env.outer
        return None

    # --- Expressions ---
    def is_exp(self, sym: Atom) -> bool:
        return sym.is_symbol() and self._find(sym.as_symbol()) is not None

    def get_exp(self, sym: Atom) -> Expression:
        """Bound value of `sym`, or a NONE expression when unbound."""
        if sym.is_symbol():
            env = self._find(sym.as_symbol())
            if env is not None:
                return env.expressions[sym.as_symbol()]
        return Expression()

    def add_exp(self, sym: Atom, value: Expression) -> None:
        """Bind `sym` in the innermost frame, shadowing any outer binding."""
        self.expressions[sym.as_symbol()] = value

    # --- Procedures ---
    def is_proc(self, sym: Atom) -> bool:
        return sym.is_symbol() and sym.as_symbol() in self.procedures

    def get_proc(self, sym: Atom) -> Procedure | None:
        if not sym.is_symbol():
            return None
        return self.procedures.get(sym.as_symbol())

    def update(self, mapping: dict[str, Procedure]) -> None:
        """Bulk-register a mapping of name -> procedure."""
        self.procedures.update(mapping)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.expressions.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()

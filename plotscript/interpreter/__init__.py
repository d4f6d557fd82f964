from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, TextIO

from plotscript.errors import PlotscriptRecursionError, PlotscriptSyntaxError, SemanticError
from plotscript.reader.parser import parse
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.types.interrupt import Interrupt
from plotscript.evaluation.evaluator import evaluate
from plotscript.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Parses and evaluates plotscript programs against one persistent Environment.

    Typical use mirrors the parser collaborator contract:

        if interp.parse_stream(stream):
            result = interp.evaluate()

    The interrupt token is shared with every environment snapshot taken during
    evaluation; setting it from another thread aborts the running program.
    """

    def __init__(
        self,
        startup: Iterable[str | Path] | None = None,
        interrupt: Interrupt | None = None,
    ):
        self.interrupt: Interrupt = interrupt if interrupt is not None else Interrupt()
        self.env: Environment = Environment(interrupt=self.interrupt)
        register(self.env)
        self.ast: Expression | None = None

        for path in startup or ():
            self.load_startup(path)

    def parse_stream(self, stream: TextIO | str) -> bool:
        """Parse one program from `stream`; return False when it is not well formed."""
        source = stream if isinstance(stream, str) else stream.read()
        try:
            self.ast = parse(source)
        except (PlotscriptSyntaxError, RecursionError) as ex:
            logger.debug("parse failed: %s", ex)
            self.ast = None
            return False
        return True

    def evaluate(self) -> Expression:
        """Evaluate the last successfully parsed program."""
        if self.ast is None:
            raise SemanticError("Error: no program to evaluate")
        try:
            return evaluate(self.ast, self.env)
        except RecursionError:
            # bindings committed before the failure stay in place
            raise PlotscriptRecursionError(
                "Error during evaluation: maximum recursion depth exceeded"
            ) from None

    def eval(self, code: str) -> Expression:
        """Parse and evaluate `code`; raises PlotscriptSyntaxError or SemanticError."""
        if not self.parse_stream(io.StringIO(code)):
            raise PlotscriptSyntaxError("Invalid Program. Could not parse.")
        return self.evaluate()

    def load_startup(self, path: str | Path) -> Expression:
        """Evaluate a startup program file in this interpreter's environment."""
        logger.debug("loading startup program %s", path)
        with open(path, encoding="utf-8") as stream:
            if not self.parse_stream(stream):
                raise PlotscriptSyntaxError("Invalid Startup Program. Could not parse.")
        return self.evaluate()

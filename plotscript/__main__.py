"""Command line entry point.

    plotscript                 interactive REPL
    plotscript <file>          evaluate a program file
    plotscript -e <expr>       evaluate a program given on the command line

Startup programs (see plotscript.config) are evaluated first in every mode.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import TextIO

from plotscript import config
from plotscript.errors import PlotscriptSyntaxError, SemanticError
from plotscript.interpreter import Interpreter
from plotscript.repl import repl

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def eval_from_stream(stream: TextIO, interp: Interpreter) -> int:
    if not interp.parse_stream(stream):
        error("Invalid Program. Could not parse.")
        return EXIT_FAILURE
    try:
        print(interp.evaluate())
    except SemanticError as ex:
        print(ex, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


def eval_from_file(filename: str, interp: Interpreter) -> int:
    try:
        with open(filename, encoding="utf-8") as stream:
            return eval_from_stream(stream, interp)
    except OSError:
        error("Could not open file for reading.")
        return EXIT_FAILURE


def eval_from_command(argexp: str, interp: Interpreter) -> int:
    return eval_from_stream(io.StringIO(argexp), interp)


def startup(interp: Interpreter) -> bool:
    for path in config.get_startup_files():
        try:
            interp.load_startup(path)
        except (OSError, PlotscriptSyntaxError):
            error("Invalid Startup Program. Could not parse.")
            return False
        except SemanticError as ex:
            print("Start-up failed", file=sys.stderr)
            print(ex, file=sys.stderr)
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.get_log_level())

    interp = Interpreter()
    if not startup(interp):
        return EXIT_FAILURE

    if len(argv) == 1:
        return eval_from_file(argv[0], interp)
    if len(argv) == 2 and argv[0] == "-e":
        return eval_from_command(argv[1], interp)
    if argv:
        error("Incorrect number of command line arguments.")
        return EXIT_FAILURE

    repl(interp)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

import threading

import pytest

from plotscript.errors import PlotscriptInterrupted, SemanticError
from plotscript.interpreter import Interpreter
from plotscript.types.environment import Environment
from plotscript.types.expression import Expression
from plotscript.types.interrupt import Interrupt


def test_token_starts_clear():
    token = Interrupt()
    assert not token.is_set()
    token.check()


def test_set_and_clear():
    token = Interrupt()
    token.set()
    assert token.is_set()
    with pytest.raises(PlotscriptInterrupted, match="interpreter kernel interrupted"):
        token.check()
    token.clear()
    token.check()


def test_interrupted_is_a_semantic_error():
    assert issubclass(PlotscriptInterrupted, SemanticError)


def test_snapshots_share_the_token():
    token = Interrupt()
    env = Environment(interrupt=token)
    assert env.copy().interrupt is token
    assert env.copy().copy().interrupt is token


def test_interpreter_uses_supplied_token():
    token = Interrupt()
    interp = Interpreter(interrupt=token)
    assert interp.interrupt is token
    assert interp.env.interrupt is token


def test_set_token_aborts_evaluation(interp):
    interp.interrupt.set()
    with pytest.raises(PlotscriptInterrupted):
        interp.eval("(+ 1 2)")
    # stays set until the owner clears it
    with pytest.raises(PlotscriptInterrupted):
        interp.eval("1")
    interp.interrupt.clear()
    assert interp.eval("(+ 1 2)") == Expression(3)


def test_interrupt_from_another_thread(interp):
    interp.eval("(define slow (lambda (x) (+ x 1)))")
    outcome = {}

    def worker():
        try:
            outcome["result"] = interp.eval("(map slow (range 0 1000000 1))")
        except PlotscriptInterrupted as ex:
            outcome["error"] = ex

    thread = threading.Thread(target=worker)
    thread.start()
    interp.interrupt.set()
    thread.join(timeout=60)

    assert not thread.is_alive()
    assert "error" in outcome
    interp.interrupt.clear()
    # the interpreter is usable again and earlier bindings are intact
    assert interp.eval("(slow 1)") == Expression(2)

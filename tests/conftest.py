import pytest

from plotscript.interpreter import Interpreter
from plotscript.types.environment import Environment
from plotscript.builtin.env_builtin import register


@pytest.fixture
def interp():
    """Fresh interpreter with builtins and constants, no startup program."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(interp):
    """Parse and evaluate a program in the shared interpreter."""
    return interp.eval

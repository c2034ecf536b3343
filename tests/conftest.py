import pytest

from chispa.builtin.env_builtin import register
from chispa.interpreter import Interpreter
from chispa.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without prelude so tests may declare any name."""
    return Interpreter(prelude=None)


@pytest.fixture
def run(interp):
    """Evaluate a program and return the plain host value of its result."""
    def _run(code: str):
        return interp.eval(code).pintar()
    return _run

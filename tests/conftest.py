import pytest

from byol.types.environment import Environment
from byol.builtin.env_builtin import register
from byol.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate a line in the session and return its printed form."""
    def _run(source: str) -> str:
        return str(interp.eval(source))
    return _run

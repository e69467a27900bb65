import pytest

from malt.builtin.env_builtin import register
from malt.interpreter import Interpreter
from malt.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()

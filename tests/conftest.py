import pytest

from telescope.builtin.env_builtin import register
from telescope.interpreter import Interpreter
from telescope.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()

import pytest

from lispy.builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def bare():
    """Interpreter with builtins only."""
    return Interpreter(prelude=None)


@pytest.fixture
def std():
    """Interpreter with the standard prelude loaded."""
    return Interpreter()

import pytest

from littlelisp.builtin.env_builtin import make_global_env
from littlelisp.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with the builtin library loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    """Interpreter session without the prelude."""
    return Interpreter(prelude=None)

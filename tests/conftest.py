import pytest

from minilisp.evaluation.evaluator import Evaluator
from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment for each test."""
    return Environment()


@pytest.fixture
def evaluator(env):
    """Evaluator with the built-in operations, rooted at `env`."""
    return Evaluator(env)


@pytest.fixture
def interp(monkeypatch):
    """Interpreter isolated from any MINILISP_* settings of the host shell."""
    monkeypatch.delenv("MINILISP_TRACE", raising=False)
    return Interpreter()

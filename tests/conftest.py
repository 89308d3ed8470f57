import pytest

from schemy.interpreter import Interpreter
from schemy.reader.parser import read
from schemy.types.environment import Environment
from schemy.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh top-level environment; builtins live in a separate table, not here."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def ev(env):
    """Read and evaluate a single expression in the shared `env` fixture."""
    def _ev(source):
        return evaluate(read(source), env)
    return _ev

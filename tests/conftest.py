import pytest

from skeme.config import Scoping
from skeme.evaluation.evaluator import evaluate_sequence
from skeme.interpreter import Interpreter
from skeme.reader.parser import read
from skeme.types.environment import Environment

# Behavior that does not depend on closure capture is checked under both
# scoping modes: tests taking `interp` or `env` run once per mode.


@pytest.fixture(params=[Scoping.DYNAMIC, Scoping.LEXICAL], ids=["dynamic", "lexical"])
def scoping(request):
    return request.param


@pytest.fixture
def env(scoping):
    """Fresh root environment with builtins loaded."""
    return Environment.root(scoping)


@pytest.fixture
def interp(scoping):
    return Interpreter(scoping)


@pytest.fixture
def run(env):
    """Evaluate source text in the shared `env` fixture and return the last value."""
    def _run(source: str):
        return evaluate_sequence(read(source), env)

    return _run

import pytest

from schemer.builtin.env_builtin import primitive_bindings
from schemer.evaluation.evaluator import evaluate
from schemer.reader.parser import read_all


@pytest.fixture
def env():
    """Fresh global environment with every primitive bound."""
    return primitive_bindings()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string in `env`; return the last value."""
    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run

import pytest

from risp.builtin.env_builtin import standard_env
from risp.evaluation.evaluator import evaluate
from risp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return standard_env()


@pytest.fixture
def run(env):
    """Parse and evaluate one form in the shared `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run

import pytest

from mlisp.evaluation.evaluator import evaluate
from mlisp.reader.parser import read
from mlisp.types.environment import Environment


@pytest.fixture
def env():
    """Default environment (True/False) with a program scope pushed on top."""
    e = Environment.default()
    e.push_scope()
    return e


@pytest.fixture
def ev(env):
    """Parse and evaluate source text against the shared `env` fixture."""
    def _ev(source: str):
        return evaluate(read(source), env)
    return _ev

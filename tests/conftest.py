import pytest

from tatu.builtin.registry import create_natives
from tatu.interpreter import Interpreter
from tatu.reader.parser import parse_source
from tatu.evaluation.evaluator import evaluate
from tatu.types.environment import Environment
from tatu.types.nil import Nil


@pytest.fixture(scope="session")
def natives():
    """The default native registry; read-only, so one per session is enough."""
    return create_natives()


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env, natives):
    """Evaluate source against the shared env/natives, returning the last value."""

    def _run(source: str):
        result = Nil
        for expr in parse_source(source):
            result = evaluate(expr, env, natives)
        return result

    return _run

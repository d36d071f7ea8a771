import pytest

from tailscheme.builtin.env_builtin import primitive_environment
from tailscheme.evaluation.evaluator import evaluate
from tailscheme.interpreter import Interpreter
from tailscheme.printer import render
from tailscheme.reader.parser import read
from tailscheme.runtime_context import set_output


@pytest.fixture
def env():
    """Fresh primitive environment."""
    return primitive_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read one expression, evaluate it in the primitive environment, return the value."""
    def _run(source: str):
        return evaluate(read(source), env)
    return _run


@pytest.fixture
def run_str(run):
    """Like `run` but renders the result."""
    def _run_str(source: str) -> str:
        return render(run(source))
    return _run_str


@pytest.fixture(autouse=True)
def _default_output():
    # print writes to whatever sys.stdout is at call time (capsys friendly)
    set_output(None)
    yield
    set_output(None)

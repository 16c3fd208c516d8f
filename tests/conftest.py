import pytest

from reduct.interpreter import Interpreter
from reduct.reader.parser import read


@pytest.fixture
def interp():
    return Interpreter(prompt="> ")


@pytest.fixture
def identity():
    """The one-argument table that returns its argument."""
    return read("{$x = $x}")


@pytest.fixture
def chain():
    """A nested record that takes three lookups to reach `d`."""
    return "{a = {b = {c = d}}} a b c"

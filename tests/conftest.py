import pytest

from guessing_game import Console


class FixedSource:
    """Secret number provider that always returns the same value and counts draws"""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def __call__(self, low, high):
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def output():
    return []


@pytest.fixture
def make_console(output):
    def factory(*lines):
        return Console.scripted(list(lines), output.append)
    return factory

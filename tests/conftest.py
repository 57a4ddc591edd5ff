import pytest


class FixedRolls:
    """Random source that replays a fixed sequence of die values."""

    def __init__(self, *values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self._values.pop(0)


@pytest.fixture
def fixed_rolls():
    return FixedRolls

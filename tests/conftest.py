"""Pytest configuration and shared fixtures for pathfinder tests."""

import random

import pytest
from PIL import Image

from pathfinder import Coordinate, Node


class RecordingRandom(random.Random):
    """Seeded random source that records every randrange call."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.calls = []

    def randrange(self, start, stop=None, step=1):
        value = super().randrange(start, stop, step)
        self.calls.append((start, stop, value))
        return value


class ScriptedRandom(random.Random):
    """Random source whose randrange returns queued values in order."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, start, stop=None, step=1):
        return self.values.pop(0)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def recording_rng():
    """Random source that records its draws."""
    return RecordingRandom(42)


@pytest.fixture
def scripted_rng():
    """Factory for random sources returning fixed values."""
    return ScriptedRandom


@pytest.fixture
def named_nodes():
    """Six distinctly named nodes."""
    return [
        Node("A", Coordinate(0, 0)),
        Node("B", Coordinate(10, 5)),
        Node("C", Coordinate(20, 0)),
        Node("D", Coordinate(5, 15)),
        Node("E", Coordinate(25, 20)),
        Node("F", Coordinate(30, 30)),
    ]


@pytest.fixture
def surface():
    """Transparent 32x32 RGBA surface."""
    return Image.new("RGBA", (32, 32), (0, 0, 0, 0))

import numpy as np
import pytest


class RecordingCanvas:
    """Collects every draw_pixel call a World makes."""

    def __init__(self):
        self.calls = []
        self.renders = 0

    def draw_pixel(self, i, j, colour):
        self.calls.append((i, j, colour))

    def render(self):
        self.renders += 1

    def clear(self):
        self.calls = []


class ScriptedRng:
    """Returns pre-recorded draws from integers(), checking each range."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.requests = []

    def integers(self, low, high):
        self.requests.append((low, high))
        value = self.draws.pop(0)
        assert low <= value < high
        return value


def brute_force_counts(alive):
    """Live neighbours of every cell of a bounded 0/1 grid."""
    alive = np.asarray(alive, dtype=np.int32)
    padded = np.pad(alive, 1)
    h, w = alive.shape
    counts = np.zeros_like(alive)
    for di in (-1, 0, 1):
        for dj in (-1, 0, 1):
            if di == 0 and dj == 0:
                continue
            counts += padded[1 + di:1 + di + h, 1 + dj:1 + dj + w]
    return counts


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)

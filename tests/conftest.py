import numpy as np
import pytest

from conway.core import Grid


@pytest.fixture
def make_grid():
    """Build a grid of the given size with only the listed (y, x) cells alive."""
    def _make(width, height, alive=()):
        cells = np.zeros((height, width), dtype=bool)
        for y, x in alive:
            cells[y, x] = True
        return Grid(cells)
    return _make


@pytest.fixture
def rng():
    """Deterministic generator for random grids."""
    return np.random.default_rng(1234)

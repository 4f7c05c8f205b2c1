"""Fixed-size Game of Life grid with Conway's B3/S23 rule."""
from typing import Iterable, Iterator, Optional, Sequence, Tuple
import logging

import numpy as np

from .errors import TooManyElements, NotEnoughElements, InvalidElement
from ..utils.config import Config

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.DEBUG)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
LOG.addHandler(handler)

# Moore neighborhood as (dy, dx)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 1), (-1, -1), (1, -1), (-1, 1),
    (0, 1), (1, 0), (0, -1), (-1, 0),
)


class Grid:
    """Immutable boolean grid of fixed width and height.

    Cells are held in a read-only (height, width) NumPy array. Every edit
    produces a new grid; there is no way to resize or modify one in place.
    """

    def __init__(self, cells: np.ndarray):
        """Wrap a 2D array of cells.

        Args:
            cells: Array-like of shape (height, width); copied and cast to bool
        """
        cells = np.array(cells, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"Grid cells must be 2-dimensional, got shape {cells.shape}")
        cells.setflags(write=False)
        self._cells = cells

    @classmethod
    def empty(cls, width: int = Config.GRID_WIDTH,
              height: int = Config.GRID_HEIGHT) -> "Grid":
        """Create a grid with every cell dead."""
        return cls(np.zeros((height, width), dtype=bool))

    @classmethod
    def random(cls, width: int = Config.GRID_WIDTH,
               height: int = Config.GRID_HEIGHT,
               rng: Optional[np.random.Generator] = None) -> "Grid":
        """Create a grid where each cell is independently alive.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            rng: Generator to draw from; a fresh OS-seeded one by default

        Returns:
            New grid with roughly half of the cells alive
        """
        if rng is None:
            rng = np.random.default_rng()
        cells = rng.random((height, width)) < Config.RANDOM_DENSITY
        grid = cls(cells)
        LOG.debug(f"Random {width}x{height} grid, population={grid.population}")
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]]) -> "Grid":
        """Build a grid from nested rows of truthy values."""
        if len(rows) == 0:
            return cls.empty(0, 0)
        try:
            cells = np.array([[bool(v) for v in row] for row in rows], dtype=bool)
        except ValueError as e:
            raise ValueError(f"Rows must all have the same length: {e}") from e
        return cls(cells)

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width) of the grid."""
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        return self._cells

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._cells))

    def at(self, y: int, x: int) -> bool:
        """Cell value at row y, column x; dead when out of bounds."""
        if 0 <= y < self.height and 0 <= x < self.width:
            return bool(self._cells[y, x])
        return False

    def count_neighbors(self, y: int, x: int) -> int:
        """Count live cells in the Moore neighborhood of (y, x).

        Offsets below zero are skipped; offsets past the far edges fall
        through to `at`, which reports them dead. The grid does not wrap.
        """
        count = 0
        for dy, dx in NEIGHBOR_OFFSETS:
            ny, nx = y + dy, x + dx
            if ny < 0 or nx < 0:
                continue
            if self.at(ny, nx):
                count += 1
        return count

    def next_at(self, y: int, x: int) -> bool:
        """State of (y, x) in the next generation."""
        alive = self.at(y, x)
        neighbors = self.count_neighbors(y, x)
        return neighbors == 3 or (alive and neighbors == 2)

    def _neighbor_counts(self) -> np.ndarray:
        # Zero padding makes everything outside the grid dead
        padded = np.pad(self._cells.astype(np.uint8), 1)
        counts = np.zeros(self.shape, dtype=np.uint8)
        for dy, dx in NEIGHBOR_OFFSETS:
            counts += padded[1 + dy:1 + dy + self.height, 1 + dx:1 + dx + self.width]
        return counts

    def step(self) -> "Grid":
        """Compute the next generation as a new grid.

        Same result as calling `next_at` on every coordinate, evaluated for
        the whole array at once.
        """
        counts = self._neighbor_counts()
        cells = (counts == 3) | (self._cells & (counts == 2))
        new_grid = Grid(cells)
        LOG.debug(f"Step: population {self.population} -> {new_grid.population}")
        return new_grid

    def generations(self) -> Iterator["Grid"]:
        """Endless iterator of successive generations.

        The iterator keeps its own current grid, starting after this one.
        This grid is never modified, and calling again restarts from it.
        """
        current = self
        while True:
            current = current.step()
            yield current

    def to_sequence(self) -> list:
        """Flatten to width*height bools in row-major order."""
        return [bool(v) for v in self._cells.ravel()]

    @classmethod
    def from_sequence(cls, values: Iterable[object],
                      width: int = Config.GRID_WIDTH,
                      height: int = Config.GRID_HEIGHT) -> "Grid":
        """Rebuild a grid from a flat row-major sequence of bools.

        The dimensions are not part of the data and must be known up front.

        Args:
            values: Booleans, row 0 first; consumed lazily
            width: Expected grid width
            height: Expected grid height

        Returns:
            Decoded grid

        Raises:
            TooManyElements: As soon as a value past width*height is seen
            NotEnoughElements: If the input ends early
            InvalidElement: If a value is not a boolean
        """
        total = width * height
        flat = np.zeros(total, dtype=bool)
        count = 0
        for value in values:
            if count == total:
                raise TooManyElements(width, height)
            if not isinstance(value, (bool, np.bool_)):
                raise InvalidElement(count, value)
            flat[count] = value
            count += 1
        if count != total:
            raise NotEnoughElements(width, height, count)
        return cls(flat.reshape(height, width))

    def to_display_string(self) -> str:
        """Render as a bordered text block for monospace display."""
        border = "=" * self.width
        lines = ["/" + border + "\\"]
        for row in self._cells:
            cells = "".join(Config.ALIVE_CHAR if v else Config.DEAD_CHAR for v in row)
            lines.append("|" + cells + "|")
        lines.append("\\" + border + "/")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

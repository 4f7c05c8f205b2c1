"""Text envelope for persisting grids.

A grid is stored as a JSON array of width*height booleans in row-major
order, with no dimensions attached. Both sides must agree on the size.
"""
import json

from .errors import GridDecodeError
from .grid import Grid
from ..utils.config import Config


def encode(grid: Grid) -> list:
    """Flat row-major list of cell values."""
    return grid.to_sequence()


def decode(values, width: int = Config.GRID_WIDTH,
           height: int = Config.GRID_HEIGHT) -> Grid:
    """Inverse of `encode` for a grid of the given size."""
    return Grid.from_sequence(values, width, height)


def dumps(grid: Grid) -> str:
    """Serialize a grid to its JSON text form."""
    return json.dumps(encode(grid), separators=(",", ":"))


def loads(text: str, width: int = Config.GRID_WIDTH,
          height: int = Config.GRID_HEIGHT) -> Grid:
    """Parse a grid from JSON text.

    Raises:
        GridDecodeError: If the text is not a JSON array of exactly
            width*height booleans
    """
    try:
        values = json.loads(text)
    except (TypeError, ValueError) as e:
        raise GridDecodeError(f"invalid grid data: {e}") from e
    if not isinstance(values, list):
        raise GridDecodeError(f"expected sequence of bool, got {type(values).__name__}")
    return decode(values, width, height)

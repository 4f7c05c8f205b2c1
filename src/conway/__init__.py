"""Conway's Game of Life on a fixed 16x16 grid."""

__version__ = "0.1.0"
__author__ = "Conway App"

from .core.grid import Grid
from .core.errors import GridDecodeError, TooManyElements, NotEnoughElements, InvalidElement

__all__ = ['Grid', 'GridDecodeError', 'TooManyElements', 'NotEnoughElements',
           'InvalidElement', '__version__']

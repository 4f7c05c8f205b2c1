"""Core module for the Game of Life grid engine."""
from .grid import Grid
from .errors import GridDecodeError, TooManyElements, NotEnoughElements, InvalidElement
from .serialization import encode, decode, dumps, loads

__all__ = ['Grid', 'GridDecodeError', 'TooManyElements', 'NotEnoughElements',
           'InvalidElement', 'encode', 'decode', 'dumps', 'loads']

"""Terminal Conway's Game of Life."""

__version__ = "0.1.0"

from .core.errors import IndexOutOfRange, InvalidDimension, LifeError, UnknownPatternName
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Orientation, Pattern, PatternBuilder, PatternLibrary
from .core.rules import transition_rule

__all__ = [
    "Grid",
    "GameOfLife",
    "Orientation",
    "Pattern",
    "PatternBuilder",
    "PatternLibrary",
    "transition_rule",
    "LifeError",
    "InvalidDimension",
    "IndexOutOfRange",
    "UnknownPatternName",
]

"""Core simulation logic."""

from .errors import IndexOutOfRange, InvalidDimension, LifeError, UnknownPatternName
from .grid import Grid
from .game import GameOfLife
from .patterns import Orientation, Pattern, PatternBuilder, PatternLibrary, rotate_cells
from .rules import apply_rule, transition_rule

__all__ = [
    "Grid",
    "GameOfLife",
    "Orientation",
    "Pattern",
    "PatternBuilder",
    "PatternLibrary",
    "rotate_cells",
    "apply_rule",
    "transition_rule",
    "LifeError",
    "InvalidDimension",
    "IndexOutOfRange",
    "UnknownPatternName",
]

"""Seed patterns, clockwise rotation and the pattern builder."""

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union
import numpy as np

from .errors import UnknownPatternName


def to_dense(rows: Sequence[Sequence[bool]]) -> np.ndarray:
    """Normalize hand-written rows into a dense boolean rectangle.

    Shorter rows are padded on the right with dead cells.
    """
    if len(rows) == 0:
        return np.zeros((0, 0), dtype=bool)

    width = max(len(row) for row in rows)
    dense = np.zeros((len(rows), width), dtype=bool)
    for i, row in enumerate(rows):
        dense[i, : len(row)] = [bool(cell) for cell in row]
    return dense


def _from_picture(*lines: str) -> List[List[bool]]:
    return [[char == "X" for char in line] for line in lines]


def _rotate_quarter(cells: np.ndarray) -> np.ndarray:
    # rotated[j][R-1-i] = cells[i][j]: reverse the rows, then transpose
    return cells[::-1].T.copy()


def rotate_cells(cells: np.ndarray, degrees: int) -> np.ndarray:
    """Rotate a cell array clockwise.

    Args:
        cells: 2D boolean array, R x C
        degrees: One of 0, 90, 180, 270

    Returns:
        New array (C x R for 90 and 270); never a view of the input

    Raises:
        ValueError: If degrees is not a multiple of 90 in [0, 270]
    """
    if degrees not in (0, 90, 180, 270):
        raise ValueError(f"Rotation must be 0, 90, 180 or 270 degrees, got {degrees}")
    if degrees == 0 or cells.size == 0:
        return cells.copy()
    return rotate_cells(_rotate_quarter(cells), degrees - 90)


class Orientation(Enum):
    """Facing of a pattern, as clockwise rotation from its catalog form."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def degrees(self) -> int:
        return {"up": 0, "right": 90, "down": 180, "left": 270}[self.value]

    @classmethod
    def parse(cls, value: Union["Orientation", str]) -> "Orientation":
        """Accept an Orientation or its name in any case.

        Raises:
            ValueError: If the name is not a known orientation
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class Pattern:
    """A named, dense rectangular seed configuration."""

    def __init__(self, name: str, rows: Sequence[Sequence[bool]] = (), description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            rows: Row-major cell values; ragged rows are padded with dead cells
            description: Optional description
        """
        self.name = name
        self.description = description
        if isinstance(rows, np.ndarray) and rows.ndim == 2:
            self._cells = rows.astype(bool, copy=True)
        else:
            self._cells = to_dense(rows)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def size(self) -> Tuple[int, int]:
        """Pattern dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self._cells))

    @property
    def is_empty(self) -> bool:
        return self._cells.size == 0

    def rotated(self, degrees: int) -> "Pattern":
        """Return a clockwise-rotated copy of this pattern."""
        return Pattern(self.name, rotate_cells(self._cells, degrees), self.description)

    def copy(self) -> "Pattern":
        return Pattern(self.name, self._cells, self.description)

    def to_list(self) -> List[List[bool]]:
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._cells.shape == other._cells.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {self.height}x{self.width}, population={self.population})"


# Built-in catalog, name -> (rows, description)
CATALOG: Dict[str, Tuple[List[List[bool]], str]] = {
    "glider": (
        _from_picture(
            ".X.",
            "..X",
            "XXX",
        ),
        "Smallest spaceship, period-4",
    ),
    "blinker": (
        _from_picture(
            "X",
            "X",
            "X",
        ),
        "Period-2 oscillator",
    ),
    "toad": (
        _from_picture(
            ".XXX",
            "XXX.",
        ),
        "Period-2 oscillator",
    ),
    "beacon": (
        _from_picture(
            "XX..",
            "XX..",
            "..XX",
            "..XX",
        ),
        "Period-2 oscillator",
    ),
    "pulsar": (
        _from_picture(
            "...X...X...",
            "...X...X...",
            "...X...X...",
            "XXX.XXX.XXX",
            "...X...X...",
            "...X...X...",
            "...X...X...",
            "XXX.XXX.XXX",
            "...X...X...",
            "...X...X...",
            "...X...X...",
        ),
        "Symmetric cross pattern",
    ),
    # A lone row of three; it only oscillates as a blinker once it has room
    # above and below, it is not a distinct oscillator.
    "oscillator": (
        _from_picture("XXX"),
        "Horizontal blinker phase",
    ),
    "spaceship": (
        _from_picture(
            ".XX.",
            "X..X",
            ".X.X",
            "..XX",
        ),
        "Small travelling pattern",
    ),
}

CATEGORIES: Dict[str, List[str]] = {
    "Oscillators": ["blinker", "toad", "beacon", "pulsar", "oscillator"],
    "Spaceships": ["glider", "spaceship"],
}


class PatternLibrary:
    """Lookup over the built-in pattern catalog."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {
            name: Pattern(name, rows, description) for name, (rows, description) in CATALOG.items()
        }

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a copy of a pattern by name, or None if it is not in the catalog."""
        pattern = self._patterns.get(name)
        return pattern.copy() if pattern is not None else None

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category, empty categories removed."""
        return {
            category: [name for name in names if name in self._patterns]
            for category, names in CATEGORIES.items()
            if any(name in self._patterns for name in names)
        }


class PatternBuilder:
    """Staged construction of a seed pattern: select, rotate, build.

    Example:
        pattern = PatternBuilder().select_type("glider").rotate("right").build()
    """

    def __init__(self, library: Optional[PatternLibrary] = None) -> None:
        self._library = library or PatternLibrary()
        self._pattern = Pattern("empty")

    def select_type(self, name: str) -> "PatternBuilder":
        """Make a catalog pattern the current pattern.

        Raises:
            UnknownPatternName: If name is not in the catalog
        """
        pattern = self._library.get_pattern(name)
        if pattern is None:
            available = ", ".join(self._library.list_patterns())
            raise UnknownPatternName(f"Unknown pattern '{name}' (available: {available})")
        self._pattern = pattern
        return self

    def rotate(self, orientation: Union[Orientation, str]) -> "PatternBuilder":
        """Rotate the current pattern clockwise to the given orientation."""
        self._pattern = self._pattern.rotated(Orientation.parse(orientation).degrees)
        return self

    def build(self) -> Pattern:
        """Return a copy of the current pattern (empty if none was selected)."""
        return self._pattern.copy()

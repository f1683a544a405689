"""Grid data structure for the Game of Life."""

from typing import List, Optional, Sequence, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import IndexOutOfRange, InvalidDimension
from .patterns import Pattern, to_dense
from .rules import apply_rule

# Moore neighborhood, center excluded
_MOORE_KERNEL = torch.tensor(
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32
).unsqueeze(0).unsqueeze(0)

MOORE_OFFSETS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)
]


class Grid:
    """A fixed-size rectangular grid of cells.

    Cells are stored row-major in a boolean numpy array of shape
    (height, width) and addressed as (row, col). Everything outside the
    grid counts as permanently dead; edges never wrap.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimension: If width or height is not a positive integer
        """
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimension(f"Grid {label} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimension(f"Grid {label} must be positive, got {value}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros((self._height, self._width), dtype=bool)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid from nested row data.

        Args:
            rows: Equal-length rows of truthy/falsy cell values

        Returns:
            New Grid holding a copy of the data

        Raises:
            InvalidDimension: If there are no rows or the rows are empty
            ValueError: If rows differ in length
        """
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidDimension("Grid data must contain at least one cell")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Grid rows must all have the same length")

        grid = cls(len(rows[0]), len(rows))
        grid._cells[:] = np.array(rows, dtype=bool)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (height, width)."""
        return (self._height, self._width)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexOutOfRange: If (row, col) is outside the grid
        """
        if not self._in_bounds(row, col):
            raise IndexOutOfRange(f"Cell ({row}, {col}) is outside {self._height}x{self._width} grid")
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexOutOfRange: If (row, col) is outside the grid
        """
        if not self._in_bounds(row, col):
            raise IndexOutOfRange(f"Cell ({row}, {col}) is outside {self._height}x{self._width} grid")
        self._cells[row, col] = bool(alive)

    def is_alive(self, row: int, col: int) -> bool:
        """Return the state of a cell, treating anything off-grid as dead."""
        if not self._in_bounds(row, col):
            return False
        return bool(self._cells[row, col])

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count living cells in the Moore neighborhood of (row, col).

        Returns:
            Number of living neighbors (0-8)
        """
        return sum(1 for dr, dc in MOORE_OFFSETS if self.is_alive(row + dr, col + dc))

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for every cell with a single convolution.

        Zero padding gives the dead border.

        Returns:
            Integer array of shape (height, width)
        """
        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, _MOORE_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def next_generation(self) -> "Grid":
        """Compute the next generation as a new grid.

        The receiver is left untouched.
        """
        successor = Grid(self._width, self._height)
        successor._cells[:] = apply_rule(self._cells, self.count_all_neighbors())
        return successor

    def stamp(
        self,
        pattern: Union[Pattern, Sequence[Sequence[bool]], np.ndarray],
        row_offset: int,
        col_offset: int,
    ) -> None:
        """Copy a pattern onto the grid with its top-left at (row_offset, col_offset).

        The target region is overwritten, so dead pattern cells clear live
        grid cells. Nothing is written unless the whole pattern fits.

        Args:
            pattern: A Pattern, a 2D array, or rows of cell values; ragged
                rows are padded with dead cells
            row_offset: Grid row of the pattern's first row
            col_offset: Grid column of the pattern's first column

        Raises:
            TypeError: If an offset is not an integer
            IndexOutOfRange: If any pattern cell would land outside the grid
        """
        for label, value in (("row", row_offset), ("column", col_offset)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Stamp {label} offset must be an integer, got {value!r}")

        if isinstance(pattern, Pattern):
            cells = pattern.cells
        elif isinstance(pattern, np.ndarray):
            cells = pattern.astype(bool)
        else:
            cells = to_dense(pattern)

        if cells.size == 0:
            return
        if cells.ndim != 2:
            raise ValueError(f"Pattern must be two-dimensional, got {cells.ndim} dimensions")

        rows, cols = cells.shape
        if not (self._in_bounds(row_offset, col_offset)
                and self._in_bounds(row_offset + rows - 1, col_offset + cols - 1)):
            raise IndexOutOfRange(
                f"{rows}x{cols} pattern at ({row_offset}, {col_offset}) "
                f"does not fit in {self._height}x{self._width} grid"
            )

        self._cells[row_offset:row_offset + rows, col_offset:col_offset + cols] = cells

    def render(self, alive_glyph: str = "*", dead_glyph: str = "-") -> str:
        """Render the grid as text.

        Args:
            alive_glyph: Text for a living cell (any length)
            dead_glyph: Text for a dead cell (any length)

        Returns:
            One line per row joined with newlines, no trailing newline
        """
        return "\n".join(
            "".join(alive_glyph if cell else dead_glyph for cell in row)
            for row in self._cells
        )

    def clear(self) -> None:
        """Set all cells dead."""
        self._cells.fill(False)

    def copy(self) -> "Grid":
        duplicate = Grid(self._width, self._height)
        duplicate._cells[:] = self._cells
        return duplicate

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested lists of booleans, row-major."""
        return self._cells.tolist()

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None
        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

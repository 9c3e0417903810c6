"""Toroidal grid data structure for the Game of Life."""

import logging
from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import ALIVE_GLYPH, DEAD_GLYPH, Cell

logger = logging.getLogger(__name__)

# Flat indices are 32-bit unsigned, so a grid may hold at most this many cells.
MAX_CELLS = 2**32 - 1


class GridConstructionError(ValueError):
    """Raised when a grid cannot be built from the requested dimensions or cells."""


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise GridConstructionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise GridConstructionError(f"{name} must be positive, got {value}")
    return int(value)


def validate_dimensions(width: int, height: int) -> Tuple[int, int]:
    """Check grid dimensions before any buffer is allocated.

    Returns:
        The dimensions as plain ints

    Raises:
        GridConstructionError: If a dimension is not a positive integer or
            the cell count overflows the index space
    """
    width = _check_dimension("width", width)
    height = _check_dimension("height", height)
    if width * height > MAX_CELLS:
        raise GridConstructionError(f"Grid of {width}x{height} cells exceeds the index space ({MAX_CELLS} cells)")
    return width, height


def check_glyphs(alive_glyph: str, dead_glyph: str) -> None:
    """Validate a pair of render glyphs.

    Raises:
        ValueError: If either glyph is not a single character or both are equal
    """
    for label, glyph in (("alive", alive_glyph), ("dead", dead_glyph)):
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"{label.capitalize()} glyph must be a single character, got {glyph!r}")
    if alive_glyph == dead_glyph:
        raise ValueError(f"Alive and dead glyphs must differ, both are {alive_glyph!r}")


class Grid:
    """A fixed-size toroidal grid of cells.

    Cells live in a flat row-major ``numpy.int8`` buffer where the cell at
    ``(x, y)`` sits at index ``x + y * width``. The buffer never changes
    length; every coordinate passed in wraps around both edges.
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional flat buffer of ``width * height`` cell values;
                all cells start dead when omitted

        Raises:
            GridConstructionError: If a dimension is not a positive integer,
                the cell count overflows the index space, or ``cells`` has
                the wrong length
        """
        width, height = validate_dimensions(width, height)
        self.width = width
        self.height = height

        if cells is None:
            self._cells = np.zeros(width * height, dtype=np.int8)
        else:
            buffer = np.asarray(cells).reshape(-1)
            if buffer.size != width * height:
                raise GridConstructionError(
                    f"Expected {width * height} cells for a {width}x{height} grid, got {buffer.size}"
                )
            self._cells = (buffer != 0).astype(np.int8)

        # 3x3 neighbor-sum kernel for count_all_neighbors()
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        logger.debug("Created %dx%d grid with %d live cells", width, height, self.population)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat cell buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._cells.size

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def get_index(self, x: int, y: int) -> int:
        """Flat buffer index of ``(x, y)`` after wrapping both coordinates."""
        return (x % self.width) + (y % self.height) * self.width

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the state of a cell."""
        return Cell(int(self._cells[self.get_index(x, y)]))

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate (wraps)
            y: Row coordinate (wraps)
            alive: Whether the cell should be alive; a ``Cell`` works too
        """
        self._cells[self.get_index(x, y)] = Cell.from_bool(bool(alive))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(Cell.DEAD)

    def commit(self, next_cells: np.ndarray) -> None:
        """Replace the whole buffer with a freshly computed generation.

        The grid keeps its own copy; any nonzero value counts as alive.

        Raises:
            ValueError: If ``next_cells`` has the wrong length
        """
        buffer = np.asarray(next_cells)
        if buffer.shape != self._cells.shape:
            raise ValueError(f"Next generation has shape {buffer.shape}, expected {self._cells.shape}")
        self._cells = (buffer != 0).astype(np.int8)

    def live_neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell on the torus.

        On grids one or two cells wide, a wrapped offset can land on the
        same cell more than once; each landing is counted.

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx = (x + dx + self.width) % self.width
                ny = (y + dy + self.height) % self.height
                count += int(self._cells[nx + ny * self.width])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Flat row-major array with the live neighbor count of each cell
        """
        # Row-major buffer reshapes straight into (height, width)
        board = self._cells.reshape(self.height, self.width).astype(np.float32)
        board_input = torch.from_numpy(board).view(1, 1, self.height, self.width)

        padded = F.pad(board_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors.reshape(-1).numpy().astype(np.int8)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living = np.flatnonzero(self._cells)
        if living.size == 0:
            return None

        xs = living % self.width
        ys = living // self.width
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def to_rows(self) -> List[List[int]]:
        """Cell values as a list of rows, indexed ``[y][x]``."""
        return self._cells.reshape(self.height, self.width).tolist()

    def copy(self) -> "Grid":
        """Independent grid with the same dimensions and cells."""
        return Grid(self.width, self.height, self._cells.copy())

    def render(self, alive_glyph: str = ALIVE_GLYPH, dead_glyph: str = DEAD_GLYPH) -> str:
        """Render the grid as text, one line per row.

        Every row, including the last, ends with a newline.

        Raises:
            ValueError: If the glyphs are not two distinct single characters
        """
        check_glyphs(alive_glyph, dead_glyph)
        table = np.array([dead_glyph, alive_glyph])
        rows = table[self._cells.reshape(self.height, self.width)]
        return "".join("".join(row) + "\n" for row in rows)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

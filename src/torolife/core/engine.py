"""Grid engine: the three operations drivers call.

``create`` builds a grid, ``step`` advances it one generation in place and
``render`` turns it into text. Drivers own the grid exclusively and must not
overlap ``step`` calls on it.
"""

import logging
from typing import Optional

import numpy as np

from .cell import ALIVE_GLYPH, DEAD_GLYPH, Cell
from .grid import Grid, GridConstructionError, validate_dimensions
from .seeding import Seed, modulo_seed

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64


def create(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, seed: Optional[Seed] = None) -> Grid:
    """Create a new grid.

    Args:
        width: Number of columns
        height: Number of rows
        seed: Seeding strategy; defaults to ``modulo_seed`` where cell ``i``
            is alive when ``i % 2 == 0`` or ``i % 7 == 0``

    Returns:
        Newly seeded grid

    Raises:
        GridConstructionError: If the dimensions are invalid or the seed
            returns the wrong number of cells
    """
    width, height = validate_dimensions(width, height)
    seed = seed or modulo_seed

    cells = np.asarray(seed(width, height))
    if cells.size != width * height:
        raise GridConstructionError(
            f"Seed {getattr(seed, '__name__', seed)!r} produced {cells.size} cells, expected {width * height}"
        )

    logger.debug("Seeding %dx%d grid with %s", width, height, getattr(seed, "__name__", repr(seed)))
    return Grid(width, height, cells)


def next_generation(cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
    """Apply Conway's rules to a snapshot of cells.

    Live cells survive with 2 or 3 neighbors, dead cells are born with
    exactly 3, everything else is dead in the result. Inputs are not
    modified.

    Returns:
        New buffer holding the next generation
    """
    alive = cells == Cell.ALIVE
    survives = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
    born = ~alive & (neighbor_counts == 3)
    return (survives | born).astype(np.int8)


def step(grid: Grid) -> None:
    """Advance the grid one generation in place.

    The next generation is computed in full from the current cells before
    it replaces them.
    """
    snapshot = grid.cells
    grid.commit(next_generation(snapshot, grid.count_all_neighbors()))


def render(grid: Grid, alive_glyph: str = ALIVE_GLYPH, dead_glyph: str = DEAD_GLYPH) -> str:
    """Render the grid as ``height`` lines of ``width`` glyphs.

    Raises:
        ValueError: If the glyphs are not two distinct single characters
    """
    return grid.render(alive_glyph, dead_glyph)

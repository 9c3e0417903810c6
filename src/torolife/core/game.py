"""Conway's Game of Life driver."""

import logging
from typing import Any, Callable, Dict, Optional

from . import engine
from .cell import ALIVE_GLYPH, DEAD_GLYPH
from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Drives a grid through successive generations.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Only the current generation is kept; the game tracks how many steps it
    has taken but not what earlier generations looked like.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        engine.step(self.grid)
        self._generation += 1

    def run(self, generations: int, callback: Optional[Callable[["GameOfLife"], None]] = None) -> int:
        """Advance several generations, one after another.

        Args:
            generations: Number of generations to run
            callback: Called with the game after each generation

        Returns:
            Generation number reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        start = self._generation
        for _ in range(generations):
            self.step()
            if callback is not None:
                callback(self)

        logger.debug(
            "Ran generations %d-%d, population %d", start, self._generation, self.population
        )
        return self._generation

    def render(self, alive_glyph: str = ALIVE_GLYPH, dead_glyph: str = DEAD_GLYPH) -> str:
        """Render the current generation."""
        return engine.render(self.grid, alive_glyph, dead_glyph)

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the current generation.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.grid.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self.grid.shape,
            "population_density": self.population / self.grid.size,
            "bounding_box": bbox,
        }

        if bbox:
            box_width = bbox[2] - bbox[0] + 1
            box_height = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_width, box_height)
        else:
            stats["bounding_box_size"] = (0, 0)

        return stats

"""Simulation configuration shared by the drivers."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from . import engine
from .cell import ALIVE_GLYPH, DEAD_GLYPH
from .grid import MAX_CELLS, Grid, check_glyphs
from .patterns import PatternLibrary
from .seeding import SEED_NAMES, Seed, get_seed, pattern_seed

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a single simulation run."""

    width: int = engine.DEFAULT_WIDTH
    height: int = engine.DEFAULT_HEIGHT
    generations: int = 10
    seed: str = "default"
    probability: float = 0.5
    random_seed: Optional[int] = None
    pattern: Optional[str] = None
    pattern_x: int = 0
    pattern_y: int = 0
    interval: float = 0.0
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH
    final_only: bool = False

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of error messages, empty when the configuration is usable
        """
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if self.width > 0 and self.height > 0 and self.width * self.height > MAX_CELLS:
            errors.append(f"Grid may hold at most {MAX_CELLS} cells")

        if self.generations < 0:
            errors.append("Generations must be non-negative")

        if self.seed not in SEED_NAMES:
            errors.append(f"Seed must be one of: {', '.join(SEED_NAMES)}")

        if not 0.0 <= self.probability <= 1.0:
            errors.append("Probability must be between 0.0 and 1.0")

        if self.interval < 0:
            errors.append("Interval must be non-negative")

        try:
            check_glyphs(self.alive_glyph, self.dead_glyph)
        except ValueError as e:
            errors.append(str(e))

        return errors

    def build_seed(self, library: Optional[PatternLibrary] = None) -> Seed:
        """Resolve the seeding strategy for this configuration.

        A named pattern takes precedence over ``seed``.

        Raises:
            ValueError: If the pattern or seed name is unknown
        """
        if self.pattern:
            library = library or PatternLibrary()
            found = library.get_pattern(self.pattern)
            if found is None:
                raise ValueError(f"Pattern '{self.pattern}' not found")
            logger.debug("Placing pattern '%s' at (%d, %d)", found.name, self.pattern_x, self.pattern_y)
            return pattern_seed(found, self.pattern_x, self.pattern_y)

        return get_seed(self.seed, self.probability, self.random_seed)

    def build_grid(self, library: Optional[PatternLibrary] = None) -> Grid:
        """Create the initial grid for this configuration."""
        return engine.create(self.width, self.height, self.build_seed(library))

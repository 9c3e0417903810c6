"""Initial-state seeding strategies.

A seed is any callable taking ``(width, height)`` and returning a flat
row-major buffer of ``width * height`` cell values. ``modulo_seed`` is the
default used by :func:`torolife.core.engine.create`.
"""

from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from .cell import Cell

if TYPE_CHECKING:
    from .patterns import Pattern

Seed = Callable[[int, int], np.ndarray]


def modulo_seed(width: int, height: int) -> np.ndarray:
    """Cell ``i`` is alive when ``i % 2 == 0`` or ``i % 7 == 0``."""
    index = np.arange(width * height, dtype=np.int64)
    return ((index % 2 == 0) | (index % 7 == 0)).astype(np.int8)


def blank_seed(width: int, height: int) -> np.ndarray:
    """All cells dead."""
    return np.zeros(width * height, dtype=np.int8)


def random_seed(probability: float = 0.5, seed: Optional[int] = None) -> Seed:
    """Create a seed that makes each cell alive with the given probability.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Optional random seed for reproducible grids

    Returns:
        Seeding callable

    Raises:
        ValueError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    def build(width: int, height: int) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return (rng.random(width * height) < probability).astype(np.int8)

    return build


def pattern_seed(pattern: "Pattern", offset_x: int = 0, offset_y: int = 0) -> Seed:
    """Create a seed that places a pattern on an otherwise dead grid.

    Pattern cells wrap around the grid edges.
    """

    def build(width: int, height: int) -> np.ndarray:
        cells = np.zeros(width * height, dtype=np.int8)
        for x, y in pattern.cells:
            cells[(x + offset_x) % width + ((y + offset_y) % height) * width] = Cell.ALIVE
        return cells

    return build


SEED_NAMES = ("default", "blank", "random")


def get_seed(name: str, probability: float = 0.5, seed: Optional[int] = None) -> Seed:
    """Look up a seeding strategy by name.

    Args:
        name: One of ``SEED_NAMES``
        probability: Alive probability, used by ``"random"`` only
        seed: Random seed, used by ``"random"`` only

    Raises:
        ValueError: If the name is unknown
    """
    if name == "default":
        return modulo_seed
    if name == "blank":
        return blank_seed
    if name == "random":
        return random_seed(probability, seed)
    raise ValueError(f"Unknown seed '{name}'. Available: {', '.join(SEED_NAMES)}")

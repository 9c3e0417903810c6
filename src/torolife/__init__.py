"""Conway's Game of Life on a fixed-size toroidal grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid, GridConstructionError
from .core.engine import create, step, render
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "Grid",
    "GridConstructionError",
    "create",
    "step",
    "render",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]

"""Core cellular automata logic."""

from .cell import Cell
from .grid import Grid, GridConstructionError
from .engine import create, step, render
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary
from .config import SimulationConfig

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
    "SimulationConfig",
]

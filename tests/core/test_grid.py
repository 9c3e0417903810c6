"""Tests for the Grid class."""

import numpy as np
import pytest
import torch

from torolife.core.cell import Cell
from torolife.core.grid import MAX_CELLS, Grid, GridConstructionError, check_glyphs


class TestGridConstruction:
    """Test cases for building grids."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.size == 200
        assert len(grid.cells) == 200
        assert grid.population == 0

    def test_initialization_with_cells(self):
        """Test grid initialization from a flat buffer."""
        grid = Grid(3, 2, [1, 0, 0, 0, 0, 1])
        assert grid.get_cell(0, 0) is Cell.ALIVE
        assert grid.get_cell(2, 1) is Cell.ALIVE
        assert grid.population == 2

    def test_nonzero_cells_normalized(self):
        """Any nonzero buffer value counts as alive."""
        grid = Grid(2, 1, [5, 0])
        assert list(grid.cells) == [1, 0]

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5), (5, -3), (0, 0)])
    def test_non_positive_dimensions(self, width, height):
        """Zero or negative dimensions are rejected."""
        with pytest.raises(GridConstructionError):
            Grid(width, height)

    @pytest.mark.parametrize("width,height", [(2.5, 4), (4, "4"), (True, 4), (None, 4)])
    def test_non_integer_dimensions(self, width, height):
        """Dimensions must be real integers."""
        with pytest.raises(GridConstructionError):
            Grid(width, height)

    def test_index_space_overflow(self):
        """A cell count past the 32-bit index space is rejected before allocating."""
        assert 2**16 * 2**16 > MAX_CELLS
        with pytest.raises(GridConstructionError, match="index space"):
            Grid(2**16, 2**16)

    def test_wrong_cell_count(self):
        """A buffer of the wrong length is rejected."""
        with pytest.raises(GridConstructionError):
            Grid(3, 3, [1, 0, 1])

    def test_construction_error_is_value_error(self):
        assert issubclass(GridConstructionError, ValueError)


class TestGridCells:
    """Test cases for cell access."""

    def test_get_index_row_major(self):
        """Flat index is x + y * width."""
        grid = Grid(4, 3)
        assert grid.get_index(0, 0) == 0
        assert grid.get_index(3, 0) == 3
        assert grid.get_index(0, 1) == 4
        assert grid.get_index(1, 2) == 9

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 5)

        grid.set_cell(1, 1, True)
        grid.set_cell(2, 3, Cell.ALIVE)

        assert grid.get_cell(1, 1)
        assert grid.get_cell(2, 3)
        assert not grid.get_cell(0, 0)
        assert grid.cells[grid.get_index(2, 3)] == 1

        grid.set_cell(1, 1, False)
        assert grid.get_cell(1, 1) is Cell.DEAD

    def test_wrap_coordinates(self):
        """Coordinates wrap around both edges."""
        grid = Grid(3, 3)

        grid.set_cell(-1, -1, True)
        assert grid.get_cell(2, 2)

        grid.set_cell(3, 4, True)
        assert grid.get_cell(0, 1)

        assert grid.get_cell(-1, -1)
        assert grid.get_cell(3, 4)

    def test_cells_view_is_read_only(self):
        """The exposed buffer cannot be written through."""
        grid = Grid(3, 3)
        with pytest.raises(ValueError):
            grid.cells[0] = 1

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5, np.ones(25))
        assert grid.population == 25

        grid.clear()
        assert grid.population == 0

    def test_commit_replaces_buffer(self):
        grid = Grid(2, 2)
        grid.commit(np.array([1, 1, 0, 1], dtype=np.int8))
        assert grid.to_rows() == [[1, 1], [0, 1]]

    def test_commit_normalizes_values(self):
        """Any nonzero committed value is stored as alive."""
        grid = Grid(3, 1)
        grid.commit(np.array([5, 0, 0.5]))

        assert list(grid.cells) == [1, 0, 1]
        assert grid.get_cell(0, 0) is Cell.ALIVE
        assert grid.render("#", ".") == "#.#\n"

    def test_commit_keeps_own_copy(self):
        """Changing the committed array afterwards leaves the grid alone."""
        grid = Grid(2, 2)
        next_cells = np.array([1, 0, 0, 1], dtype=np.int8)
        grid.commit(next_cells)

        next_cells[:] = 0
        assert grid.to_rows() == [[1, 0], [0, 1]]

    def test_only_kernel_tensor_kept(self):
        """Grids hold no per-cell tensor between neighbor counts."""
        grid = Grid(30, 20)
        tensors = [value for value in vars(grid).values() if isinstance(value, torch.Tensor)]

        assert len(tensors) == 1
        assert tensors[0].numel() == 9

    def test_commit_wrong_shape(self):
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.commit(np.zeros(3, dtype=np.int8))

    def test_copy_is_independent(self):
        grid = Grid(4, 4)
        grid.set_cell(1, 2, True)

        clone = grid.copy()
        assert clone == grid

        clone.set_cell(0, 0, True)
        assert clone != grid
        assert not grid.get_cell(0, 0)

    def test_bounding_box(self):
        grid = Grid(10, 10)
        assert grid.get_bounding_box() is None

        grid.set_cell(2, 7, True)
        grid.set_cell(6, 3, True)
        assert grid.get_bounding_box() == (2, 3, 6, 7)


# Offsets of the 8 neighbors of a cell
NEIGHBOR_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


class TestNeighborCounting:
    """Test cases for toroidal neighbor counting."""

    def test_empty_grid(self):
        grid = Grid(5, 5)
        assert grid.live_neighbor_count(2, 2) == 0
        assert not grid.count_all_neighbors().any()

    def test_opposite_corner_is_diagonal_neighbor(self):
        """(0, 0) counts (width-1, height-1) as a neighbor."""
        grid = Grid(6, 4)
        grid.set_cell(5, 3, True)
        assert grid.live_neighbor_count(0, 0) == 1

    @pytest.mark.parametrize("corner", [(0, 0), (4, 0), (0, 3), (4, 3)])
    def test_corners_see_every_wrapped_neighbor(self, corner):
        """A live corner is a neighbor of all 8 cells around it, across both edges."""
        grid = Grid(5, 4)
        cx, cy = corner
        grid.set_cell(cx, cy, True)

        for dx, dy in NEIGHBOR_OFFSETS:
            assert grid.live_neighbor_count(cx + dx, cy + dy) == 1

        # Only the corner's own neighbors count it
        counts = grid.count_all_neighbors()
        assert counts.sum() == 8

    @pytest.mark.parametrize("edge_cell", [(2, 0), (2, 3), (0, 2), (4, 1)])
    def test_edges_wrap(self, edge_cell):
        """Cells on each edge see the opposite edge."""
        grid = Grid(5, 4)
        x, y = edge_cell
        grid.set_cell(x, y, True)
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = (x + dx) % 5, (y + dy) % 4
            assert grid.count_all_neighbors()[grid.get_index(nx, ny)] == 1

    def test_full_grid(self):
        grid = Grid(5, 5, np.ones(25))
        assert grid.live_neighbor_count(0, 0) == 8
        assert (grid.count_all_neighbors() == 8).all()

    def test_vectorized_matches_scalar(self):
        """Convolution counts agree with the per-cell reference count."""
        rng = np.random.default_rng(42)
        grid = Grid(17, 11, rng.random(17 * 11) < 0.4)

        counts = grid.count_all_neighbors()
        for y in range(grid.height):
            for x in range(grid.width):
                assert counts[grid.get_index(x, y)] == grid.live_neighbor_count(x, y)

    @pytest.mark.parametrize("width,height", [(1, 1), (1, 4), (4, 1), (2, 2), (2, 3)])
    def test_degenerate_tori(self, width, height):
        """On tiny tori a cell may neighbor itself or the same cell twice."""
        grid = Grid(width, height, np.ones(width * height))

        counts = grid.count_all_neighbors()
        for y in range(height):
            for x in range(width):
                assert counts[grid.get_index(x, y)] == grid.live_neighbor_count(x, y) == 8


class TestGridRendering:
    """Test cases for text rendering."""

    def test_render_shape(self):
        grid = Grid(7, 3)
        grid.set_cell(1, 1, True)

        text = grid.render()
        lines = text.splitlines()
        assert text.endswith("\n")
        assert len(lines) == 3
        assert all(len(line) == 7 for line in lines)
        assert set(text.replace("\n", "")) == {"◼", "◻"}

    def test_render_row_major(self):
        grid = Grid(3, 2, [1, 0, 0, 0, 1, 1])
        assert grid.render("#", ".") == "#..\n.##\n"

    def test_str_uses_default_glyphs(self):
        grid = Grid(2, 1, [0, 1])
        assert str(grid) == "◻◼\n"

    def test_render_does_not_mutate(self):
        grid = Grid(4, 4, np.arange(16) % 3 == 0)
        before = grid.cells.copy()
        grid.render()
        assert np.array_equal(grid.cells, before)

    @pytest.mark.parametrize("alive,dead", [("##", "."), ("#", ""), ("#", "#"), (1, ".")])
    def test_invalid_glyphs(self, alive, dead):
        with pytest.raises(ValueError):
            check_glyphs(alive, dead)
        with pytest.raises(ValueError):
            Grid(2, 2).render(alive, dead)

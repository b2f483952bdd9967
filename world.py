# world.py
# Bounded Game of Life board with incrementally maintained neighbour counts.

import numpy as np

from canvas import Canvas, ON_COLOUR, OFF_COLOUR
from cell import ALIVE_BIT, Cell, CellRangeError

# 8 possible directions, cell itself omitted
OFFSETS = tuple((di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1)
                if not (di == 0 and dj == 0))


class WorldSizeError(ValueError):
    pass


class InvariantViolation(AssertionError):
    """A stored neighbour count no longer matches the board."""


class World:
    """
    Row-major grid of packed cells plus a scratch buffer of the same size.

    Every cell carries the number of its live neighbours. The count is
    never recomputed: births and deaths push +1/-1 into the neighbours
    as they happen, so the next generation can read it straight away.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise WorldSizeError(f"degenerate grid {width}x{height}")
        self._width = width
        self._height = height
        cell_count = width * height
        self._cells = np.zeros(cell_count, dtype=np.uint8)
        self._temp_cells = np.zeros(cell_count, dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @classmethod
    def random(cls, width: int, height: int, rng) -> "World":
        """
        Seed width*height/2 random points. A point drawn twice is only set
        once, so the population usually ends up below half the grid.
        `rng` needs numpy Generator's integers(low, high).
        """
        world = cls(width, height)
        init_length = (width * height) // 2
        for _ in range(init_length):
            i = int(rng.integers(0, height))
            j = int(rng.integers(0, width))
            if world.cell_state(i, j) == 0:
                world._set_cell(i, j)
        return world

    @classmethod
    def from_grid(cls, grid) -> "World":
        grid = np.asarray(grid)
        if grid.ndim != 2:
            raise WorldSizeError(f"expected a 2-D grid, got shape {grid.shape}")
        height, width = grid.shape
        world = cls(width, height)
        for i, j in np.argwhere(grid != 0):
            world._set_cell(int(i), int(j))
        return world

    def advance_generation(self, canvas: Canvas, skip_empty: bool = True) -> None:
        """
        Apply B3/S23 once. Rules are evaluated against a snapshot of the
        previous generation; every change is written to the live grid
        and reported to `canvas.draw_pixel`.
        """
        np.copyto(self._temp_cells, self._cells)
        snapshot = self._temp_cells
        w = self._width

        if skip_empty:
            # skim past off cells with no neighbours
            positions = np.flatnonzero(snapshot)
        else:
            positions = range(snapshot.size)

        for k in positions:
            k = int(k)
            curr_cell = self._cell_at(snapshot, k)
            if skip_empty and curr_cell.is_empty():
                continue
            i, j = divmod(k, w)
            count = curr_cell.neighbours().get()
            if curr_cell.is_alive():
                # turn off unless it has 2 or 3 neighbours
                if count != 2 and count != 3:
                    self._clear_cell(i, j)
                    canvas.draw_pixel(i, j, OFF_COLOUR)
            elif count == 3:
                self._set_cell(i, j)
                canvas.draw_pixel(i, j, ON_COLOUR)

    def cell_state(self, i: int, j: int) -> int:
        return int(self._cells[self._index(i, j)] & ALIVE_BIT)

    def cell_at(self, i: int, j: int) -> Cell:
        """Copy of the cell at (i, j); changing it does not touch the board."""
        return self._cell_at(self._cells, self._index(i, j))

    def population(self) -> int:
        return int(np.count_nonzero(self._cells & ALIVE_BIT))

    def alive_grid(self) -> np.ndarray:
        return (self._cells & ALIVE_BIT).reshape(self._height, self._width)

    def neighbour_grid(self) -> np.ndarray:
        counts = [self._cell_at(self._cells, k).neighbours().get()
                  for k in range(self._cells.size)]
        return np.array(counts, dtype=np.uint8).reshape(self._height,
                                                        self._width)

    def paint(self, canvas: Canvas) -> None:
        """Draw every live cell, e.g. onto a fresh canvas."""
        for i, j in np.argwhere(self.alive_grid()):
            canvas.draw_pixel(int(i), int(j), ON_COLOUR)

    def neighbour_positions(self, i: int, j: int):
        for di, dj in OFFSETS:
            ni, nj = i + di, j + dj
            if 0 <= ni < self._height and 0 <= nj < self._width:
                yield ni, nj

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._height and 0 <= j < self._width):
            raise IndexError(f"({i}, {j}) outside {self._height}x"
                             f"{self._width} grid")
        return i * self._width + j

    @staticmethod
    def _cell_at(buffer: np.ndarray, k: int) -> Cell:
        try:
            return Cell(buffer[k])
        except CellRangeError as err:
            raise InvariantViolation(f"corrupt cell at index {k}") from err

    def _set_cell(self, i: int, j: int) -> None:
        w = self._width
        cell = self._cell_at(self._cells, i * w + j)
        cell.set_alive()
        self._cells[i * w + j] = cell.value
        for ni, nj in self.neighbour_positions(i, j):
            neighbour = self._cell_at(self._cells, ni * w + nj)
            # saturates at 8
            neighbour.try_increment()
            self._cells[ni * w + nj] = neighbour.value

    def _clear_cell(self, i: int, j: int) -> None:
        w = self._width
        cell = self._cell_at(self._cells, i * w + j)
        cell.set_dead()
        self._cells[i * w + j] = cell.value
        for ni, nj in self.neighbour_positions(i, j):
            neighbour = self._cell_at(self._cells, ni * w + nj)
            if not neighbour.try_decrement():
                raise InvariantViolation(
                    f"neighbour ({ni}, {nj}) of ({i}, {j}) already has "
                    f"no live neighbours")
            self._cells[ni * w + nj] = neighbour.value

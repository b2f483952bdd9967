# canvas.py
# Pixel sinks that receive per-cell colour changes from a World.

import sys
from typing import Protocol

import numpy as np

ON_COLOUR = 1  # on-cell pixel colour
OFF_COLOUR = 0  # off-cell pixel colour


class Canvas(Protocol):
    def draw_pixel(self, i: int, j: int, colour: int) -> None: ...

    def render(self) -> None: ...


class ConsoleCanvas:
    """Keeps a pixel buffer and writes it to the terminal on render()."""

    def __init__(self, width: int, height: int, out=None):
        self.width = width
        self.height = height
        self.grid = np.full((height, width), OFF_COLOUR, dtype=np.uint8)
        self._out = out

    def draw_pixel(self, i: int, j: int, colour: int) -> None:
        if colour != ON_COLOUR and colour != OFF_COLOUR:
            raise ValueError(f"unknown colour {colour!r}")
        self.grid[i, j] = colour

    def frame(self) -> str:
        rows = []
        for row in self.grid:
            rows.append(''.join(' @ ' if pixel == ON_COLOUR else ' . '
                                for pixel in row))
        return '\n'.join(rows) + '\n'

    def render(self) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(self.frame())
        out.flush()

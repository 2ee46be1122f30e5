#!/usr/bin/env python3
"""
Character grid for the plot area.

Cells carry a glyph and a semantic color tag. Turning tags into terminal
escape codes is the renderer's job.
"""

from dataclasses import dataclass
from typing import List, Optional

from .errors import ChartValidationError

BLANK = ' '


@dataclass(frozen=True)
class Cell:
    """One character of output and its color tag."""
    glyph: str = BLANK
    tag: Optional[str] = None


Row = List[Cell]


def text_cells(text: str, tag: Optional[str] = None) -> Row:
    """Split a string into cells sharing the same tag."""
    return [Cell(char, tag) for char in text]


def blank_cells(count: int) -> Row:
    return [Cell() for _ in range(max(0, count))]


def pad_row(row: Row, width: int) -> Row:
    """Right-pad a row with blank cells up to width."""
    return row + blank_cells(width - len(row))


def row_text(row: Row) -> str:
    """Glyphs of a row without any color."""
    return ''.join(cell.glyph for cell in row)


class Canvas:
    """A height x width grid of cells, blank on creation."""

    def __init__(self, height: int, width: int):
        for name, size in (('height', height), ('width', width)):
            if not isinstance(size, int) or isinstance(size, bool) or size < 1:
                raise ChartValidationError(f'Canvas {name} must be a positive integer, got {size!r}')
        self.height = height
        self.width = width
        self._grid = [[Cell() for _ in range(width)] for _ in range(height)]

    def set(self, row: int, col: int, glyph: str, tag: Optional[str] = None) -> None:
        """Write a glyph at (row, col), replacing whatever was there."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f'Cell ({row}, {col}) is outside the {self.height}x{self.width} canvas')
        self._grid[row][col] = Cell(glyph, tag)

    def get(self, row: int, col: int) -> Cell:
        return self._grid[row][col]

    def rows(self) -> List[Row]:
        return [list(row) for row in self._grid]

    def text(self) -> List[str]:
        """Uncolored rows, mostly useful for tests and debugging."""
        return [row_text(row) for row in self._grid]

#!/usr/bin/env python3
"""
Axis labels, ticks and frame rows for dot and line charts.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, NamedTuple

from .canvas import Row, text_cells, blank_cells
from .colors import MUTED
from .errors import ChartValidationError
from .formatting import format_date, format_number

Formatter = Callable[[Any], str]


def default_formatter(kind: str) -> Formatter:
    """Thousands separators for numbers, YYYY-MM-DD for dates."""
    if kind == 'date':
        return lambda d: format_date(d, 'YYYY-MM-DD', utc=True)
    return format_number


@dataclass
class Axis:
    """The domain of one field on one panel, with its label formatter."""
    field: str
    minimum: Any
    maximum: Any
    formatter: Formatter

    @property
    def min_label(self) -> str:
        return str(self.formatter(self.minimum))

    @property
    def max_label(self) -> str:
        return str(self.formatter(self.maximum))


class XAxis(NamedTuple):
    frame: Row
    ticks: Row
    labels: Row


def build_x_axis(axis: Axis, width: int) -> XAxis:
    """Frame, tick and label rows for the horizontal axis, each `width` cells long.

    Raises:
        ChartValidationError: if the first and last labels don't fit side by side.
    """
    first = axis.min_label
    last = axis.max_label
    if len(first) + len(last) > width:
        raise ChartValidationError(
            f'The labels of "{axis.field}" ("{first}" and "{last}") overlap on a {width} '
            f'characters wide axis. Increase the width or shorten the labels with a formatting function.'
        )

    labels = text_cells(first, MUTED) + blank_cells(width - len(first) - len(last)) + text_cells(last, MUTED)
    ticks = text_cells('─' * width, MUTED)
    frame = text_cells('─' * width, MUTED)
    return XAxis(frame=frame, ticks=ticks, labels=labels)


def build_y_axis(axis: Axis, height: int) -> List[Row]:
    """Prefix cells for every row of a panel: top frame, canvas rows, ticks and labels.

    The max label sits on the first canvas row and the min label on the last,
    both right-aligned.
    """
    top = axis.max_label
    bottom = axis.min_label
    label_width = max(len(top), len(bottom))
    padding = blank_cells(label_width)

    column: List[Row] = [padding + text_cells('┌', MUTED)]
    for i in range(height):
        if i == 0:
            label = text_cells(top.rjust(label_width), MUTED)
        elif i == height - 1:
            label = text_cells(bottom.rjust(label_width), MUTED)
        else:
            label = list(padding)
        column.append(label + text_cells('│', MUTED))

    column.append(list(padding) + text_cells('└', MUTED))
    column.append(list(padding) + blank_cells(1))
    return column

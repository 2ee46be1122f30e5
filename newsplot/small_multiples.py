#!/usr/bin/env python3
"""
Panels for dot and line charts, and their layout as small multiples.

A chart without a split field is a single untitled panel. With a split
field, records are partitioned by category (first-seen order) and every
category gets its own panel, tiled `per_row` panels at a time.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .axis import Axis, Formatter, build_x_axis, build_y_axis, default_formatter
from .canvas import Canvas, Cell, Row, blank_cells, pad_row, text_cells
from .colors import ACCENT, MUTED, assign_colors, first_seen
from .errors import ChartValidationError
from .rasterize import add_dots, add_lines, validate_records
from .scale import LinearScale, extent, round_half_up

Record = Mapping[str, Any]

GUTTER = 3

RASTERIZERS: Dict[str, Callable] = {
    'dot': add_dots,
    'line': add_lines,
}


@dataclass
class Panel:
    """One canvas with its own pair of axes."""
    title: Optional[str]
    x_axis: Axis
    y_axis: Axis
    canvas: Canvas

    def rows(self) -> List[Row]:
        """Title, frame, canvas rows, ticks and labels, all the same length."""
        x_axis = build_x_axis(self.x_axis, self.canvas.width)
        y_column = build_y_axis(self.y_axis, self.canvas.height)

        body = [x_axis.frame + [Cell('┐', MUTED)]]
        body += [row + [Cell('│', MUTED)] for row in self.canvas.rows()]
        body.append(x_axis.ticks + [Cell('┘', MUTED)])
        body.append(x_axis.labels)

        rows = [prefix + row for prefix, row in zip(y_column, body)]
        if self.title is not None:
            rows.insert(0, text_cells(self.title, 'dim'))

        width = max(len(row) for row in rows)
        return [pad_row(row, width) for row in rows]


def categories(records: Sequence[Record], field: str) -> List[Any]:
    """Distinct values of a field, in order of first appearance."""
    for i, row in enumerate(records):
        if row.get(field) is None:
            raise ChartValidationError(f'Row {i}: category field "{field}" is missing or None.')
        if isinstance(row[field], float) and math.isnan(row[field]):
            raise ChartValidationError(f'Row {i}: category field "{field}" is NaN.')
    return first_seen(row[field] for row in records)


def build_panels(kind: str, records: Sequence[Record], x: str, y: str, *,
                 width: int = 60, height: int = 20,
                 small_multiples: Optional[str] = None,
                 fixed_scales: bool = False,
                 small_multiples_per_row: int = 3,
                 format_x: Optional[Formatter] = None,
                 format_y: Optional[Formatter] = None,
                 color: Optional[str] = None) -> List[Panel]:
    """Validate the records and rasterize every panel.

    Args:
        kind: "dot" or "line"
        records: List of dicts
        x: Field for the horizontal axis (numbers or dates)
        y: Field for the vertical axis (numbers)
        width: Total chart width in characters, shared between the panels of a row
        height: Canvas height of every panel in lines
        small_multiples: Field splitting the records into panels
        fixed_scales: Share the x and y domains between all panels
        small_multiples_per_row: Number of panels per row
        format_x: Formatter for the x-axis labels
        format_y: Formatter for the y-axis labels
        color: Field splitting the records into colored series
    """
    draw = RASTERIZERS.get(kind)
    if draw is None:
        raise ChartValidationError(f'The type {kind} is not supported.')
    if not isinstance(small_multiples_per_row, int) or small_multiples_per_row < 1:
        raise ChartValidationError(
            f'small_multiples_per_row must be a positive integer, got {small_multiples_per_row!r}'
        )

    x_kind = validate_records(records, x, y)
    format_x = format_x or default_formatter(x_kind)
    format_y = format_y or default_formatter('number')

    series_colors = assign_colors(categories(records, color)) if color else None

    if small_multiples:
        groups = [
            (category, [row for row in records if row[small_multiples] == category])
            for category in categories(records, small_multiples)
        ]
        panel_width = round_half_up(width / small_multiples_per_row)
        panel_colors = assign_colors(category for category, _ in groups)
    else:
        groups = [(None, list(records))]
        panel_width = width
        panel_colors = {None: ACCENT}

    x_extent = extent(row[x] for row in records)
    y_extent = extent(row[y] for row in records)

    panels = []
    for category, rows in groups:
        if small_multiples and not fixed_scales:
            x_min, x_max = extent(row[x] for row in rows)
            y_min, y_max = extent(row[y] for row in rows)
        else:
            x_min, x_max = x_extent
            y_min, y_max = y_extent

        canvas = Canvas(height, panel_width)
        x_scale = LinearScale(x_min, x_max, panel_width)
        y_scale = LinearScale(y_min, y_max, height, invert=True)

        if series_colors is None:
            draw(canvas, [(row[x], row[y]) for row in rows], x_scale, y_scale, panel_colors[category])
        elif kind == 'dot':
            # Input order across series, so overlapping dots stay deterministic
            for row in rows:
                draw(canvas, [(row[x], row[y])], x_scale, y_scale, series_colors[row[color]])
        else:
            for series, tag in series_colors.items():
                points = [(row[x], row[y]) for row in rows if row[color] == series]
                if points:
                    draw(canvas, points, x_scale, y_scale, tag)

        panel = Panel(
            title=str(category) if small_multiples else None,
            x_axis=Axis(x, x_min, x_max, format_x),
            y_axis=Axis(y, y_min, y_max, format_y),
            canvas=canvas,
        )
        # Fail on overlapping labels before anything is rendered
        build_x_axis(panel.x_axis, panel_width)
        panels.append(panel)

    return panels


def tile(panels: Sequence[Panel], per_row: int = 3) -> List[Row]:
    """Lay panels out left to right, `per_row` at a time, with a blank line between rows."""
    lines: List[Row] = []
    for start in range(0, len(panels), per_row):
        if start:
            lines.append([])
        group = [panel.rows() for panel in panels[start:start + per_row]]
        for i in range(max(len(rows) for rows in group)):
            line: Row = []
            for j, rows in enumerate(group):
                if j:
                    line += blank_cells(GUTTER)
                line += rows[i] if i < len(rows) else blank_cells(len(rows[0]))
            lines.append(line)
    return lines

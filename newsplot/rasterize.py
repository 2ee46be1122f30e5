#!/usr/bin/env python3
"""
Rasterizers writing data series onto a canvas, plus the horizontal bar layout.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .canvas import Canvas, Row, text_cells, blank_cells
from .colors import MUTED
from .errors import ChartValidationError
from .formatting import format_number, round_number
from .scale import LinearScale, kind_of, round_half_up, to_number

Point = Tuple[Any, Any]
Record = Mapping[str, Any]

DOT = '●'
BAR = '█'


def validate_records(records: Sequence[Record], x: str, y: str) -> str:
    """Check that every record has a number or date for x and a number for y.

    Returns:
        The kind of the x values, "number" or "date".
    """
    if len(records) == 0:
        raise ChartValidationError('No records to chart.')

    x_kinds = set()
    for i, row in enumerate(records):
        x_value = row.get(x)
        if x_value is None:
            raise ChartValidationError(f'Row {i}: x-axis value "{x}" is missing or None.')
        x_kind = kind_of(x_value)
        if x_kind == 'other':
            raise ChartValidationError(
                f'Row {i}: x-axis value "{x}" must be a number or a date. '
                f'Got: {type(x_value).__name__} ({x_value!r})'
            )
        x_kinds.add(x_kind)

        y_value = row.get(y)
        if y_value is None:
            raise ChartValidationError(f'Row {i}: y-axis value "{y}" is missing or None.')
        if kind_of(y_value) != 'number':
            raise ChartValidationError(
                f'Row {i}: y-axis value "{y}" must be a number. '
                f'Got: {type(y_value).__name__} ({y_value!r})'
            )

    if len(x_kinds) > 1:
        raise ChartValidationError(
            f'x-axis values "{x}" mix numbers and dates. Use one type for every record.'
        )
    return x_kinds.pop()


def add_dots(canvas: Canvas, points: Sequence[Point], x_scale: LinearScale,
             y_scale: LinearScale, tag: Optional[str] = None) -> None:
    """One dot per point, in input order. Points sharing a cell: last one wins."""
    for x_value, y_value in points:
        canvas.set(y_scale.index(y_value), x_scale.index(x_value), DOT, tag)


def _draw_step(canvas: Canvas, col: int, row: int, next_row: int, tag: Optional[str]) -> None:
    if next_row == row:
        canvas.set(row, col, '─', tag)
    elif next_row > row:
        # Going down the screen
        canvas.set(row, col, '┐', tag)
        for r in range(row + 1, next_row):
            canvas.set(r, col, '│', tag)
        canvas.set(next_row, col, '└', tag)
    else:
        canvas.set(row, col, '┘', tag)
        for r in range(next_row + 1, row):
            canvas.set(r, col, '│', tag)
        canvas.set(next_row, col, '┌', tag)


def _spread_columns(columns: List[int], cells: int) -> List[int]:
    """Nudge sorted columns apart so that each one is distinct, keeping their order."""
    spread: List[int] = []
    for col in columns:
        spread.append(col if not spread else max(col, spread[-1] + 1))
    limit = cells - 1
    for i in range(len(spread) - 1, -1, -1):
        spread[i] = min(spread[i], limit)
        limit = spread[i] - 1
    return spread


def line_path(points: Sequence[Point], x_scale: LinearScale,
              y_scale: LinearScale) -> List[Tuple[int, int]]:
    """(column, row) for every column between the first and last point.

    When there are no more distinct x values than columns, every x value
    gets a column of its own, as close as possible to its place on the
    scale. Otherwise points falling in the same column are averaged. Columns
    without points are interpolated linearly between their neighbours.
    """
    by_x: Dict[float, List[float]] = {}
    for x_value, y_value in points:
        by_x.setdefault(to_number(x_value), []).append(to_number(y_value))

    buckets: Dict[int, List[float]] = {}
    if len(by_x) > x_scale.cells:
        for x_number, values in by_x.items():
            buckets.setdefault(x_scale.index(x_number), []).extend(values)
    else:
        xs = sorted(by_x)
        columns = _spread_columns([x_scale.index(x_number) for x_number in xs], x_scale.cells)
        buckets = {col: by_x[x_number] for col, x_number in zip(columns, xs)}

    rows = {
        col: y_scale.index(sum(values) / len(values))
        for col, values in buckets.items()
    }
    columns = sorted(rows)
    if not columns:
        return []

    path: List[Tuple[int, int]] = []
    for left, right in zip(columns, columns[1:]):
        start, end = rows[left], rows[right]
        span = right - left
        for col in range(left, right):
            path.append((col, round_half_up(start + (end - start) * (col - left) / span)))
    path.append((columns[-1], rows[columns[-1]]))
    return path


def add_lines(canvas: Canvas, points: Sequence[Point], x_scale: LinearScale,
              y_scale: LinearScale, tag: Optional[str] = None) -> None:
    """Connect the points with box-drawing characters."""
    path = line_path(points, x_scale, y_scale)
    if not path:
        return
    if len(path) == 1:
        col, row = path[0]
        canvas.set(row, col, DOT, tag)
        return

    for (col, row), (_, next_row) in zip(path, path[1:]):
        _draw_step(canvas, col, row, next_row, tag)
    last_col, last_row = path[-1]
    canvas.set(last_row, last_col, '─', tag)


def bar_values(records: Sequence[Record], values: str) -> List[float]:
    """Validated bar values: present, numeric and non-negative."""
    if len(records) == 0:
        raise ChartValidationError('No records to chart.')

    numbers = []
    for i, row in enumerate(records):
        value = row.get(values)
        if kind_of(value) != 'number':
            raise ChartValidationError(
                f'Row {i}: "{values}" must be a number. Got: {type(value).__name__} ({value!r})'
            )
        if value < 0:
            raise ChartValidationError(f'Row {i}: "{values}" must not be negative. Got: {value!r}')
        numbers.append(value)
    return numbers


def bar_length(value: float, max_value: float, width: int) -> int:
    if max_value <= 0:
        return 0
    return round_half_up(value / max_value * width)


def make_bars(records: Sequence[Record], labels: str, values: str,
              format_labels: Callable[[Any], str], format_values: Callable[[Any], str],
              width: int, compact: bool = False, tag: Optional[str] = None) -> List[Row]:
    """Rows of a horizontal bar chart, one bar per record in input order."""
    numbers = bar_values(records, values)

    label_strings = []
    for i, row in enumerate(records):
        if labels not in row:
            raise ChartValidationError(f'Row {i}: label field "{labels}" is missing.')
        label_strings.append(str(format_labels(row[labels])))

    max_length = max(len(label) for label in label_strings)
    max_value = max(numbers)
    total = sum(numbers)

    rows: List[Row] = [blank_cells(max_length) + text_cells(' ┌', MUTED)]
    for i, (label, value) in enumerate(zip(label_strings, numbers)):
        share = value / total * 100 if total else 0
        rows.append(
            text_cells(label.rjust(max_length))
            + text_cells(' ┤', MUTED)
            + text_cells(BAR * bar_length(value, max_value, width), tag)
            + text_cells(f' {format_values(value)} ')
            + text_cells(format_number(share, decimals=2, suffix='%'), MUTED)
        )
        if i == len(numbers) - 1:
            rows.append(blank_cells(max_length) + text_cells(' └', MUTED))
        elif not compact:
            rows.append(blank_cells(max_length) + text_cells(' │', MUTED))
    return rows


def _decimals(value: float) -> int:
    """Decimals needed to write a float as it was given."""
    return max(0, -Decimal(repr(value)).as_tuple().exponent)


def bar_total_line(records: Sequence[Record], labels: str, values: str,
                   format_labels: Callable[[Any], str], format_values: Callable[[Any], str],
                   width: int, total_label: Optional[str] = None) -> Row:
    """The sum of all values, centred under the bars."""
    numbers = bar_values(records, values)
    total = sum(numbers)
    if isinstance(total, float):
        # 0.1 + 0.2 is written 0.3, not 0.30000000000000004
        total = round_number(total, decimals=max(_decimals(v) for v in numbers))
    text = f'{total_label}: {format_values(total)}' if total_label else f'Total "{values}": {format_values(total)}'
    max_length = max(len(str(format_labels(row.get(labels)))) for row in records)
    indent = round_half_up(max_length + 1 + width / 2 - len(text) / 2)
    return blank_cells(indent) + text_cells(text, MUTED)

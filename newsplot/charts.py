#!/usr/bin/env python3
"""
Terminal charts for quick looks at data.

Every chart comes in two flavours: `build_*` returns the chart as a string
and `log_*` prints it. Building never prints, so invalid input raises before
any output.

Example:
    data = [{"category": "A", "value": 10}, {"category": "B", "value": 20}]
    log_bar_chart(data, "category", "value")
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .axis import Formatter
from .canvas import Row, blank_cells, text_cells
from .colors import BAR, assign_colors
from .errors import ChartValidationError
from .formatting import format_number
from .rasterize import bar_total_line, make_bars
from .renderer import Renderer, create_renderer
from .small_multiples import build_panels, categories, tile

Record = Mapping[str, Any]
RendererLike = Union[str, Renderer, None]


def _legend(records: Sequence[Record], color: str) -> Row:
    """Colored bullet and name for every series."""
    cells: Row = []
    for i, (series, tag) in enumerate(assign_colors(categories(records, color)).items()):
        if i:
            cells += blank_cells(2)
        cells += text_cells('●', tag) + text_cells(f' {series}')
    return cells


def build_bar_chart(records: Sequence[Record], labels: str, values: str, *,
                    width: int = 40,
                    title: Optional[str] = None,
                    total_label: Optional[str] = None,
                    compact: bool = False,
                    format_labels: Optional[Callable[[Any], str]] = None,
                    format_values: Optional[Callable[[Any], str]] = None,
                    renderer: RendererLike = 'ansi') -> str:
    """Horizontal bar chart, one bar per record, in input order.

    The longest bar is `width` characters long. Each bar is followed by its
    value and its share of the total, and the total is written under the
    chart.

    Args:
        records: List of dicts
        labels: Field holding the bar labels
        values: Field holding the (non-negative) bar values
        width: Length of the longest bar in characters
        title: Chart title, defaults to 'Bar chart: "values" per "labels"'
        total_label: Text before the total, defaults to 'Total "values"'
        compact: Drop the separator rows between bars
        format_labels: Formatter for the labels (default: str)
        format_values: Formatter for the values and total (default: format_number)
        renderer: "ansi", "plain" or a Renderer instance
    """
    if not isinstance(width, int) or isinstance(width, bool) or width < 1:
        raise ChartValidationError(f'Chart width must be a positive integer, got {width!r}')
    output = create_renderer(renderer)
    format_labels = format_labels or str
    format_values = format_values or format_number

    bars = make_bars(records, labels, values, format_labels, format_values, width, compact, BAR)
    total = bar_total_line(records, labels, values, format_labels, format_values, width, total_label)

    heading = title if title else f'Bar chart: "{values}" per "{labels}"'
    rows: List[Row] = [text_cells(heading, 'bold'), []]
    rows += bars
    rows += [[], total]
    return output.render(rows)


def _build_xy_chart(kind: str, records: Sequence[Record], x: str, y: str, *,
                    width: int, height: int, small_multiples: Optional[str],
                    fixed_scales: bool, small_multiples_per_row: int,
                    format_x: Optional[Formatter], format_y: Optional[Formatter],
                    title: Optional[str], color: Optional[str],
                    renderer: RendererLike) -> str:
    output = create_renderer(renderer)
    panels = build_panels(
        kind, records, x, y,
        width=width,
        height=height,
        small_multiples=small_multiples,
        fixed_scales=fixed_scales,
        small_multiples_per_row=small_multiples_per_row,
        format_x=format_x,
        format_y=format_y,
        color=color,
    )

    if not title:
        split = f', for each "{small_multiples}"' if small_multiples else ''
        title = f'{kind.capitalize()} chart of "{y}" over "{x}"{split}:'

    rows: List[Row] = [text_cells(title), []]
    if color:
        rows += [_legend(records, color), []]
    rows += tile(panels, small_multiples_per_row)
    return output.render(rows)


def build_dot_chart(records: Sequence[Record], x: str, y: str, *,
                    width: int = 60,
                    height: int = 20,
                    small_multiples: Optional[str] = None,
                    fixed_scales: bool = False,
                    small_multiples_per_row: int = 3,
                    format_x: Optional[Formatter] = None,
                    format_y: Optional[Formatter] = None,
                    title: Optional[str] = None,
                    color: Optional[str] = None,
                    renderer: RendererLike = 'ansi') -> str:
    """Scatter chart of y over x.

    x values are numbers or dates (not both), y values are numbers. When
    several records fall on the same cell, the last one is drawn.

    Args:
        records: List of dicts
        x: Field for the horizontal axis
        y: Field for the vertical axis
        width: Width in characters, split between the panels of a row
        height: Height of the plot area in lines
        small_multiples: Field used to draw one panel per category
        fixed_scales: Share the same scales between panels
        small_multiples_per_row: Number of panels per row
        format_x: Formatter for x labels (default: thousands separators or YYYY-MM-DD)
        format_y: Formatter for y labels (default: thousands separators)
        title: Chart title
        color: Field used to color the dots by series, with a legend
        renderer: "ansi", "plain" or a Renderer instance
    """
    return _build_xy_chart(
        'dot', records, x, y,
        width=width, height=height, small_multiples=small_multiples,
        fixed_scales=fixed_scales, small_multiples_per_row=small_multiples_per_row,
        format_x=format_x, format_y=format_y, title=title, color=color,
        renderer=renderer,
    )


def build_line_chart(records: Sequence[Record], x: str, y: str, *,
                     width: int = 60,
                     height: int = 20,
                     small_multiples: Optional[str] = None,
                     fixed_scales: bool = False,
                     small_multiples_per_row: int = 3,
                     format_x: Optional[Formatter] = None,
                     format_y: Optional[Formatter] = None,
                     title: Optional[str] = None,
                     color: Optional[str] = None,
                     renderer: RendererLike = 'ansi') -> str:
    """Line chart of y over x.

    Same options as `build_dot_chart`. When there are more x values than
    columns, the values falling in the same column are averaged, so the line
    is a smoothed approximation of the data.
    """
    return _build_xy_chart(
        'line', records, x, y,
        width=width, height=height, small_multiples=small_multiples,
        fixed_scales=fixed_scales, small_multiples_per_row=small_multiples_per_row,
        format_x=format_x, format_y=format_y, title=title, color=color,
        renderer=renderer,
    )


CHART_BUILDERS: Dict[str, Callable[..., str]] = {
    'bar': build_bar_chart,
    'dot': build_dot_chart,
    'line': build_line_chart,
}


def build_chart(records: Sequence[Record], chart_type: str, x: str, y: str, **options) -> str:
    """Build any chart by type name. For bar charts, x holds the labels and y the values."""
    builder = CHART_BUILDERS.get(chart_type)
    if builder is None:
        raise ChartValidationError(
            f'The type {chart_type} is not supported. Use one of: {", ".join(CHART_BUILDERS)}'
        )
    return builder(records, x, y, **options)


def log_bar_chart(records: Sequence[Record], labels: str, values: str, **options) -> None:
    """Print a horizontal bar chart. See `build_bar_chart` for the options."""
    print(build_bar_chart(records, labels, values, **options))


def log_dot_chart(records: Sequence[Record], x: str, y: str, **options) -> None:
    """Print a dot chart. See `build_dot_chart` for the options."""
    print(build_dot_chart(records, x, y, **options))


def log_line_chart(records: Sequence[Record], x: str, y: str, **options) -> None:
    """Print a line chart. See `build_dot_chart` for the options."""
    print(build_line_chart(records, x, y, **options))


def log_chart(records: Sequence[Record], chart_type: str, x: str, y: str, **options) -> None:
    """Print any chart by type name."""
    print(build_chart(records, chart_type, x, y, **options))

#!/usr/bin/env python3
"""
Command line interface: chart a CSV, TSV, JSON or Parquet file, or JSON
piped on stdin, straight in the terminal.

    newsplot bar category value --file data.csv
    newsplot line date value --file temperatures.json --small-multiples city
    cat data.json | newsplot dot x y --plain
"""

import os
import sys
from datetime import date
from typing import Any, Dict, Optional

import click
import duckdb

from . import __version__
from .charts import log_chart
from .config import chart_options, load_config
from .console import error, status, warn
from .data_sources import load_json_stdin, load_records
from .formatting import DATE_FORMATS, format_date, format_number


def parse_dimension(value: Optional[str], terminal_size: int) -> Optional[int]:
    """Parse a dimension value that can be a number or percentage.

    Args:
        value: String value like "100", "80%", or None
        terminal_size: The terminal dimension to use for percentage calculation

    Returns:
        Parsed integer value or None
    """
    if not value:
        return None

    value = value.strip()

    # Check if it's a percentage
    if value.endswith('%'):
        try:
            percentage = float(value[:-1])
        except ValueError:
            warn(f"Invalid percentage value: {value}")
            return None
        if 0 < percentage <= 100:
            return max(1, int(terminal_size * percentage / 100))
        warn(f"Percentage must be between 0 and 100, got {percentage}%")
        return None

    try:
        size = int(value)
    except ValueError:
        warn(f"Invalid size value: {value}")
        return None
    if size > 0:
        return size
    warn(f"Size must be positive, got {size}")
    return None


def terminal_size() -> os.terminal_size:
    try:
        return os.get_terminal_size()
    except OSError:
        return os.terminal_size((80, 24))


def date_formatter(date_format: str):
    """Formatter for x labels using a named date format, numbers left as they are."""
    def formatter(value: Any) -> str:
        if isinstance(value, date):
            return format_date(value, date_format, utc=True)
        return format_number(value)
    return formatter


@click.command()
@click.argument('chart_type', type=click.Choice(['bar', 'dot', 'line']))
@click.argument('x')
@click.argument('y')
@click.option('--file', '-f', 'file_path', help='CSV, TSV, JSON or Parquet file (reads JSON from stdin if omitted)')
@click.option('--query', '-q', help='SQL query over the table "data" (e.g., "SELECT * FROM data WHERE y > 0")')
@click.option('--config', '-c', default='newsplot.yaml', help='Config file path')
@click.option('--title', help='Chart title')
@click.option('--width', help='Chart width in characters (e.g., 60) or percentage of terminal (e.g., "80%")')
@click.option('--height', help='Chart height in lines (e.g., 20) or percentage of terminal (e.g., "50%")')
@click.option('--small-multiples', '-s', help='Field used to draw one panel per category')
@click.option('--fixed-scales', is_flag=True, help='Share scales between small multiples')
@click.option('--per-row', type=int, help='Small multiples per row')
@click.option('--color', help='Field used to color series')
@click.option('--compact/--no-compact', default=None, help='Bar chart without separator rows')
@click.option('--total-label', help='Label of the total under a bar chart')
@click.option('--plain', is_flag=True, help='No colors')
@click.option('--x-date-format', type=click.Choice(DATE_FORMATS), help='Date format for x labels')
@click.version_option(__version__, prog_name='newsplot')
def main(chart_type: str, x: str, y: str, file_path: Optional[str], query: Optional[str],
         config: str, title: Optional[str], width: Optional[str], height: Optional[str],
         small_multiples: Optional[str], fixed_scales: bool, per_row: Optional[int],
         color: Optional[str], compact: Optional[bool], total_label: Optional[str],
         plain: bool, x_date_format: Optional[str]):
    """Terminal charts for quick looks at data.

    CHART_TYPE: bar, dot or line
    X: Field for the x axis (the labels for bar charts)
    Y: Field for the y axis (the values for bar charts)
    """
    try:
        config_data = load_config(config)
        options: Dict[str, Any] = chart_options(config_data, chart_type)

        if file_path:
            records = load_records(file_path, query)
        else:
            records = load_json_stdin(query)
            if records is None:
                error("No data. Use --file or pipe a JSON array on stdin.")
                sys.exit(1)
        status(f"Loaded {len(records)} rows")

        size = terminal_size()
        parsed_width = parse_dimension(width, size.columns)
        if parsed_width:
            options['width'] = parsed_width
        if title:
            options['title'] = title
        if plain:
            options['renderer'] = 'plain'

        if chart_type == 'bar':
            if compact is not None:
                options['compact'] = compact
            if total_label:
                options['total_label'] = total_label
        else:
            parsed_height = parse_dimension(height, size.lines)
            if parsed_height:
                options['height'] = parsed_height
            if per_row:
                options['small_multiples_per_row'] = per_row
            if small_multiples:
                options['small_multiples'] = small_multiples
            if color:
                options['color'] = color
            if x_date_format:
                options['format_x'] = date_formatter(x_date_format)
            options['fixed_scales'] = fixed_scales

        log_chart(records, chart_type, x, y, **options)
    except (ValueError, OSError, duckdb.Error) as e:
        error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()

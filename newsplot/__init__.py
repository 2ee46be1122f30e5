"""newsplot - Terminal charts and formatting helpers for data journalists"""

__version__ = "0.1.0"
__author__ = "newsplot contributors"
__description__ = "Bar, dot and line charts rendered as text in the terminal"

from .charts import (
    build_bar_chart,
    build_chart,
    build_dot_chart,
    build_line_chart,
    log_bar_chart,
    log_chart,
    log_dot_chart,
    log_line_chart,
)
from .errors import ChartValidationError
from .formatting import format_date, format_number, round_number
from .ids import IdGenerator
from .renderer import AnsiRenderer, PlainRenderer, Renderer

# Import main entry point
from .main import main

__all__ = [
    'build_bar_chart',
    'build_chart',
    'build_dot_chart',
    'build_line_chart',
    'log_bar_chart',
    'log_chart',
    'log_dot_chart',
    'log_line_chart',
    'ChartValidationError',
    'format_date',
    'format_number',
    'round_number',
    'IdGenerator',
    'AnsiRenderer',
    'PlainRenderer',
    'Renderer',
    'main',
]

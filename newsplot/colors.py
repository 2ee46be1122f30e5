#!/usr/bin/env python3
"""Series color assignment."""

from typing import Any, Dict, Iterable, List

# Semantic tags, mapped to escape codes by the ANSI renderer
PALETTE = [
    'red',
    'green',
    'yellow',
    'blue',
    'magenta',
    'cyan',
    'bright_red',
    'bright_green',
    'bright_yellow',
    'bright_blue',
    'bright_magenta',
    'bright_cyan',
]

ACCENT = 'orange'   # single series
BAR = 'purple'      # bar charts
MUTED = 'muted'     # axes, ticks, labels


def first_seen(values: Iterable[Any]) -> List[Any]:
    """Distinct values in order of first appearance."""
    return list(dict.fromkeys(values))


def assign_colors(categories: Iterable[Any]) -> Dict[Any, str]:
    """Give each category a palette tag, cycling when there are more categories than colors."""
    return {
        category: PALETTE[i % len(PALETTE)]
        for i, category in enumerate(first_seen(categories))
    }

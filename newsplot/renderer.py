#!/usr/bin/env python3
"""
Renderers turning rows of tagged cells into text.
"""

from typing import Dict, Iterable, List, Optional, Union

from .canvas import Row
from .errors import ChartValidationError

RESET = '\033[0m'

ANSI_CODES: Dict[str, str] = {
    'bold': '\033[1m',
    'dim': '\033[2m',
    'muted': '\033[90m',
    'orange': '\033[38;5;208m',
    'purple': '\033[38;5;55m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'blue': '\033[34m',
    'magenta': '\033[35m',
    'cyan': '\033[36m',
    'bright_red': '\033[91m',
    'bright_green': '\033[92m',
    'bright_yellow': '\033[93m',
    'bright_blue': '\033[94m',
    'bright_magenta': '\033[95m',
    'bright_cyan': '\033[96m',
}


class Renderer:
    """Base class for renderers."""

    def style(self, text: str, tag: Optional[str]) -> str:
        raise NotImplementedError

    def render_row(self, row: Row) -> str:
        """Render a row, grouping consecutive cells with the same tag."""
        parts: List[str] = []
        run: List[str] = []
        current: Optional[str] = None
        for cell in row:
            if run and cell.tag != current:
                parts.append(self.style(''.join(run), current))
                run = []
            current = cell.tag
            run.append(cell.glyph)
        if run:
            parts.append(self.style(''.join(run), current))
        return ''.join(parts)

    def render(self, rows: Iterable[Row]) -> str:
        return '\n'.join(self.render_row(row) for row in rows)


class AnsiRenderer(Renderer):
    """Terminal output with ANSI color codes, reset after every colored run."""

    def __init__(self, codes: Optional[Dict[str, str]] = None):
        self.codes = dict(ANSI_CODES)
        if codes:
            self.codes.update(codes)

    def style(self, text: str, tag: Optional[str]) -> str:
        if tag is None or not text.strip():
            return text
        code = self.codes.get(tag)
        if code is None:
            raise ChartValidationError(f'Unknown color tag: {tag}')
        return f'{code}{text}{RESET}'


class PlainRenderer(Renderer):
    """Text only, tags are dropped."""

    def style(self, text: str, tag: Optional[str]) -> str:
        return text


RENDERERS = {
    'ansi': AnsiRenderer,
    'plain': PlainRenderer,
}


def create_renderer(renderer: Union[str, Renderer, None] = 'ansi') -> Renderer:
    """Resolve a renderer name ("ansi" or "plain") or pass an instance through."""
    if isinstance(renderer, Renderer):
        return renderer
    if renderer is None:
        renderer = 'ansi'
    renderer_class = RENDERERS.get(str(renderer).lower())
    if renderer_class is None:
        raise ChartValidationError(
            f'Unsupported renderer: {renderer}. Use one of: {", ".join(RENDERERS)}'
        )
    return renderer_class()

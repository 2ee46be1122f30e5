#!/usr/bin/env python3
"""
Scale mapping from data values to character cells.

Values are either all numbers or all dates. Dates are converted to seconds
since the epoch so that both kinds share the same linear interpolation.
"""

import calendar
import math
from datetime import date, datetime
from typing import Any, Iterable, List, Sequence, Tuple

from .errors import ChartValidationError
from .formatting import is_number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def kind_of(value: Any) -> str:
    """Return "number", "date" or "other" for a single value."""
    if is_number(value):
        return 'number' if math.isfinite(value) else 'other'
    if isinstance(value, date):
        return 'date'
    return 'other'


def value_kind(values: Sequence[Any], field: str = 'value') -> str:
    """Validate a sequence of axis values and return its kind.

    Raises:
        ChartValidationError: if the sequence is empty, holds non-numeric
            values or mixes numbers and dates.
    """
    if len(values) == 0:
        raise ChartValidationError(f'No values for "{field}".')

    kinds = set()
    for i, value in enumerate(values):
        kind = kind_of(value)
        if kind == 'other':
            raise ChartValidationError(
                f'Row {i}: non-numeric value for "{field}": {value!r}'
            )
        kinds.add(kind)

    if len(kinds) > 1:
        raise ChartValidationError(
            f'Values for "{field}" mix numbers and dates. Use one type for the whole axis.'
        )
    return kinds.pop()


def to_number(value: Any) -> float:
    """Convert a number or a date to a float. Naive dates are read as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.timestamp()
        return calendar.timegm(value.timetuple()) + value.microsecond / 1_000_000
    if isinstance(value, date):
        return float(calendar.timegm(value.timetuple()))
    return float(value)


def extent(values: Iterable[Any]) -> Tuple[Any, Any]:
    """Raw (min, max) of numbers or dates, compared on their numeric value."""
    values = list(values)
    if not values:
        raise ChartValidationError('Cannot compute the extent of no values.')
    return min(values, key=to_number), max(values, key=to_number)


class LinearScale:
    """Maps a [min, max] domain onto cell indices in [0, cells)."""

    def __init__(self, domain_min: Any, domain_max: Any, cells: int, invert: bool = False):
        if not isinstance(cells, int) or isinstance(cells, bool) or cells < 1:
            raise ChartValidationError(f'Scale size must be a positive integer, got {cells!r}')
        self.domain_min = domain_min
        self.domain_max = domain_max
        self.cells = cells
        self.invert = invert
        self._low = to_number(domain_min)
        self._high = to_number(domain_max)
        if self._low > self._high:
            raise ChartValidationError(
                f'Scale minimum {domain_min!r} is greater than its maximum {domain_max!r}'
            )

    def index(self, value: Any) -> int:
        """Cell index of a value, clipped to the scale."""
        if self._low == self._high:
            return (self.cells - 1) // 2

        ratio = (to_number(value) - self._low) / (self._high - self._low)
        ratio = min(1.0, max(0.0, ratio))
        position = round_half_up(ratio * (self.cells - 1))
        if self.invert:
            return self.cells - 1 - position
        return position

    def indices(self, values: Iterable[Any]) -> List[int]:
        return [self.index(v) for v in values]

    def __repr__(self) -> str:
        return (f"LinearScale({self.domain_min!r}, {self.domain_max!r}, "
                f"cells={self.cells}, invert={self.invert})")

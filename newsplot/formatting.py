#!/usr/bin/env python3
"""
Number and date formatting used for axis labels, bar values and percentages.

Two house styles are supported: "cbc" (English, comma thousands separator)
and "rc" (French, space thousands separator and decimal comma).
"""

import math
import numbers
import re
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union
from zoneinfo import ZoneInfo

THOUSANDS = re.compile(r'\B(?=(\d{3})+(?!\d))')

MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]
WEEKDAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']

CBC_ABBREVIATIONS = {
    'January': 'Jan.',
    'February': 'Feb.',
    'August': 'Aug.',
    'September': 'Sep.',
    'October': 'Oct.',
    'November': 'Nov.',
    'December': 'Dec.',
}

RC_MONTHS = {
    'January': ('janvier', 'janv.'),
    'February': ('février', 'fév.'),
    'March': ('mars', 'mars'),
    'April': ('avril', 'avr.'),
    'May': ('mai', 'mai'),
    'June': ('juin', 'juin'),
    'July': ('juillet', 'juill.'),
    'August': ('août', 'août'),
    'September': ('septembre', 'sept.'),
    'October': ('octobre', 'oct.'),
    'November': ('novembre', 'nov.'),
    'December': ('décembre', 'déc.'),
}

DATE_FORMATS = (
    'YYYY-MM-DD',
    'YYYY-MM-DD HH:MM:SS TZ',
    'DayOfWeek, Month Day',
    'Month DD',
    'Month DD, YYYY',
    'Month DD, HH:MM period',
    'Month DD, HH:MM period TZ',
    'Month DD, YYYY, at HH:MM period',
    'Month DD, YYYY, at HH:MM period TZ',
    'DayOfWeek, HH:MM period',
    'DayOfWeek, HH:MM period TZ',
    'DayOfWeek',
    'Month',
    'YYYY',
    'MM',
    'DD',
    'HH:MM period',
    'HH:MM period TZ',
)


def is_number(value) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _quantize(number: float, exponent: int) -> float:
    step = Decimal(1).scaleb(exponent)
    return float(Decimal(repr(float(number))).quantize(step, rounding=ROUND_HALF_UP))


def round_number(number: float, decimals: Optional[int] = None,
                 nearest_integer: Optional[int] = None,
                 significant_digits: Optional[int] = None) -> float:
    """Round half up to decimals, to the nearest multiple of an integer or to significant digits.

    Args:
        number: Value to round
        decimals: Number of decimals to keep (default 0)
        nearest_integer: Round to the nearest multiple of this integer (e.g., 5, 100)
        significant_digits: Number of significant digits to keep
    """
    if decimals and decimals > 0 and nearest_integer and nearest_integer > 1:
        raise ValueError("You can't use decimals and nearest_integer at the same time. Use just one option.")
    if not math.isfinite(number):
        raise ValueError(f"Cannot round {number!r}: not a finite number.")

    if significant_digits is not None:
        if number == 0:
            return 0.0
        magnitude = math.floor(math.log10(abs(number)))
        return _quantize(number, magnitude - significant_digits + 1)

    if nearest_integer and nearest_integer > 1:
        return math.floor(number / nearest_integer + 0.5) * nearest_integer

    return _quantize(number, -(decimals or 0))


def _plain_string(number: Union[int, float]) -> str:
    """String representation without scientific notation or a trailing '.0'."""
    if isinstance(number, numbers.Integral):
        return str(int(number))
    number = float(number)
    if not math.isfinite(number):
        return str(number)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), 'f')


def format_number(number: Union[int, float], *, style: str = 'cbc', sign: bool = False,
                  round_value: bool = False, decimals: Optional[int] = None,
                  significant_digits: Optional[int] = None, fixed: bool = False,
                  nearest_integer: Optional[int] = None, prefix: str = '',
                  suffix: str = '') -> str:
    """Format a number with thousands separators.

    Negative numbers always use an en dash instead of a hyphen.

    Args:
        number: Value to format
        style: "cbc" (1,234.5) or "rc" (1 234,5)
        sign: Prefix positive numbers with "+"
        round_value: Round to an integer when no other rounding option is set
        decimals: Round to this number of decimals
        significant_digits: Round to this number of significant digits
        fixed: Always show `decimals` decimals, padding with zeros
        nearest_integer: Round to the nearest multiple of this integer
        prefix: Text placed before the number (e.g., "$")
        suffix: Text placed after the number (e.g., "%")
    """
    if not is_number(number):
        raise TypeError(f"Not a number: {number!r}")

    if round_value or decimals is not None or nearest_integer is not None or significant_digits is not None:
        number = round_number(number, decimals=decimals, nearest_integer=nearest_integer,
                              significant_digits=significant_digits)

    string = f"{number:.{decimals or 0}f}" if fixed else _plain_string(number)
    integers, _, fraction = string.partition('.')

    if style == 'cbc':
        formatted = THOUSANDS.sub(',', integers)
        if fraction:
            formatted = f"{formatted}.{fraction}"
    elif style == 'rc':
        if len(string) == 4:
            formatted = string.replace('.', ',')
        else:
            formatted = THOUSANDS.sub(' ', integers)
            if fraction:
                formatted = f"{formatted},{fraction}"
    else:
        raise ValueError(f"Unknown style: {style}")

    if sign and number > 0:
        formatted = f"+{formatted}"
    if number < 0:
        formatted = formatted.replace('-', '–', 1)

    return f"{prefix}{formatted}{suffix}"


def _to_datetime(value: date, utc: bool, time_zone: Optional[str]) -> datetime:
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)

    zone = time_zone or ('UTC' if utc else None)
    if zone is None:
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc if zone == 'UTC' else ZoneInfo(zone))


def _render_date(d: datetime, date_format: str, style: str, no_zero_padding: bool) -> str:
    cbc = style == 'cbc'
    month = MONTHS[d.month - 1]
    weekday = WEEKDAYS[d.weekday()]
    period = 'AM' if d.hour < 12 else 'PM'
    time_12 = f"{d.hour % 12 or 12}:{d.minute:02d} {period}"
    time_24 = f"{d.hour} h {d.minute:02d}"
    zone = d.tzname() or ''

    if date_format == 'YYYY-MM-DD':
        return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
    if date_format == 'YYYY-MM-DD HH:MM:SS TZ':
        return f"{d.year:04d}-{d.month:02d}-{d.day:02d} {d.hour:02d}:{d.minute:02d}:{d.second:02d} {zone}"
    if date_format.endswith(' TZ'):
        return f"{_render_date(d, date_format[:-3], style, no_zero_padding)} {zone}"
    if date_format == 'DayOfWeek, Month Day':
        return f"{weekday}, {month} {d.day}" if cbc else f"{weekday} {d.day} {month}"
    if date_format == 'Month DD':
        return f"{month} {d.day}" if cbc else f"{d.day} {month}"
    if date_format == 'Month DD, YYYY':
        return f"{month} {d.day}, {d.year}" if cbc else f"{d.day} {month} {d.year}"
    if date_format == 'Month DD, HH:MM period':
        return f"{month} {d.day}, {time_12}" if cbc else f"{d.day} {month}, {time_24}"
    if date_format == 'Month DD, YYYY, at HH:MM period':
        return f"{month} {d.day}, {d.year}, at {time_12}" if cbc else f"{d.day} {month} {d.year} à {time_24}"
    if date_format == 'DayOfWeek, HH:MM period':
        return f"{weekday}, {time_12}" if cbc else f"{weekday}, {time_24}"
    if date_format == 'DayOfWeek':
        return weekday
    if date_format == 'Month':
        return month
    if date_format == 'YYYY':
        return f"{d.year:04d}"
    if date_format == 'MM':
        return str(d.month) if no_zero_padding else f"{d.month:02d}"
    if date_format == 'DD':
        return str(d.day) if no_zero_padding else f"{d.day:02d}"
    if date_format == 'HH:MM period':
        return time_12 if cbc else time_24
    raise ValueError(f"Unknown format: {date_format}")


def format_date(value: date, date_format: str = 'YYYY-MM-DD', *, style: str = 'cbc',
                abbreviations: bool = False, no_zero_padding: bool = False,
                three_letter_month: bool = False, utc: bool = False,
                time_zone: Optional[str] = None) -> str:
    """Format a date or datetime in CBC or RC style.

    Naive datetimes are read as UTC when `utc` or `time_zone` is given. The
    formats ending in " TZ" add the time zone abbreviation (e.g., "UTC",
    "EST"). `three_letter_month` writes CBC months as "Jan", "Feb"...; RC
    months use their usual abbreviations instead.
    """
    if not isinstance(value, date):
        raise ValueError(f"{value!r} is not a valid date.")
    if style not in ('cbc', 'rc'):
        raise ValueError(f"Unknown style: {style}")
    if date_format not in DATE_FORMATS:
        raise ValueError(f"Unknown format: {date_format}")

    d = _to_datetime(value, utc, time_zone)
    formatted = _render_date(d, date_format, style, no_zero_padding)

    if style == 'cbc':
        formatted = formatted.replace('AM', 'a.m.', 1).replace('PM', 'p.m.', 1).replace(':00', '', 1).strip()
        if three_letter_month:
            for month in MONTHS:
                formatted = formatted.replace(month, month[:3], 1)
        elif abbreviations:
            for month, short in CBC_ABBREVIATIONS.items():
                formatted = formatted.replace(month, short, 1)
        return formatted

    formatted = formatted.replace(' h 00', ' h', 1).strip()
    for month, (full, short) in RC_MONTHS.items():
        formatted = formatted.replace(month, short if abbreviations or three_letter_month else full, 1)
    return formatted

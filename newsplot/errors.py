"""Exceptions raised by newsplot."""


class ChartValidationError(ValueError):
    """Raised when records or options cannot be turned into a chart.

    The message always names the offending field or value so that calling
    scripts can print it as is.
    """

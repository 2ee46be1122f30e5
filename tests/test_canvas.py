"""Tests for the canvas, the axis builders and the renderers."""

from datetime import date

import pytest

from newsplot.axis import Axis, build_x_axis, build_y_axis, default_formatter
from newsplot.canvas import Canvas, Cell, row_text, text_cells
from newsplot.errors import ChartValidationError
from newsplot.renderer import AnsiRenderer, PlainRenderer, create_renderer


def test_canvas_starts_blank():
    canvas = Canvas(3, 4)
    assert canvas.text() == ["    ", "    ", "    "]


def test_canvas_last_write_wins():
    canvas = Canvas(2, 2)
    canvas.set(0, 1, "a", "red")
    canvas.set(0, 1, "b", "blue")
    assert canvas.get(0, 1) == Cell("b", "blue")
    assert canvas.text() == [" b", "  "]


def test_canvas_rejects_out_of_range_writes():
    canvas = Canvas(2, 2)
    with pytest.raises(IndexError):
        canvas.set(2, 0, "x")
    with pytest.raises(IndexError):
        canvas.set(0, -1, "x")


@pytest.mark.parametrize("height,width", [(0, 5), (5, 0), (-1, 3), (2.5, 3)])
def test_canvas_dimensions_must_be_positive_integers(height, width):
    with pytest.raises(ChartValidationError):
        Canvas(height, width)


def test_x_axis_labels_are_aligned_to_both_ends():
    axis = Axis("x", 0, 1000, default_formatter("number"))
    x_axis = build_x_axis(axis, 20)
    assert row_text(x_axis.labels) == "0" + " " * 14 + "1,000"
    assert row_text(x_axis.ticks) == "─" * 20
    assert len(x_axis.frame) == 20


def test_x_axis_date_labels():
    axis = Axis("date", date(2023, 1, 1), date(2023, 4, 1), default_formatter("date"))
    labels = row_text(build_x_axis(axis, 30).labels)
    assert labels.startswith("2023-01-01")
    assert labels.endswith("2023-04-01")


def test_x_axis_overlap_raises():
    axis = Axis("date", date(2023, 1, 1), date(2023, 4, 1), default_formatter("date"))
    with pytest.raises(ChartValidationError, match="overlap"):
        build_x_axis(axis, 19)
    # Labels touching each other still fit
    assert len(build_x_axis(axis, 20).labels) == 20


def test_y_axis_column():
    axis = Axis("value", 5, 1500, default_formatter("number"))
    column = [row_text(prefix) for prefix in build_y_axis(axis, 4)]
    assert column == [
        "     ┌",
        "1,500│",
        "     │",
        "     │",
        "    5│",
        "     └",
        "      ",
    ]


def test_ansi_renderer_groups_runs():
    row = [Cell("a", "red"), Cell("b", "red"), Cell("c")]
    assert AnsiRenderer().render_row(row) == "\x1b[31mab\x1b[0mc"


def test_ansi_renderer_leaves_blank_runs_uncolored():
    assert AnsiRenderer().render_row(text_cells("   ", "muted")) == "   "


def test_plain_renderer_drops_tags():
    rows = [text_cells("ab", "red"), text_cells("c", "muted")]
    assert PlainRenderer().render(rows) == "ab\nc"


def test_unknown_tag_raises():
    with pytest.raises(ChartValidationError):
        AnsiRenderer().render_row([Cell("x", "ultraviolet")])


def test_create_renderer():
    assert isinstance(create_renderer("plain"), PlainRenderer)
    assert isinstance(create_renderer(None), AnsiRenderer)
    custom = PlainRenderer()
    assert create_renderer(custom) is custom
    with pytest.raises(ChartValidationError):
        create_renderer("html")

"""Tests for the dot, line and bar rasterizers."""

from datetime import date

import pytest

from newsplot.canvas import Canvas, row_text
from newsplot.errors import ChartValidationError
from newsplot.formatting import format_number
from newsplot.rasterize import (
    add_dots,
    add_lines,
    bar_total_line,
    line_path,
    make_bars,
    validate_records,
)
from newsplot.scale import LinearScale


def test_validate_records_returns_x_kind(time_series):
    assert validate_records(time_series, "date", "value") == "date"
    assert validate_records([{"x": 1, "y": 2}], "x", "y") == "number"


@pytest.mark.parametrize("records,message", [
    ([], "No records"),
    ([{"y": 1}], 'x-axis value "x" is missing'),
    ([{"x": "a", "y": 1}], "must be a number or a date"),
    ([{"x": 1}], 'y-axis value "y" is missing'),
    ([{"x": 1, "y": "12"}], "must be a number"),
    ([{"x": 1, "y": float("-inf")}], "must be a number"),
    ([{"x": 1, "y": 1}, {"x": date(2023, 1, 1), "y": 2}], "mix numbers and dates"),
])
def test_validate_records_errors(records, message):
    with pytest.raises(ChartValidationError, match=message):
        validate_records(records, "x", "y")


def test_dots_land_on_their_cells():
    canvas = Canvas(3, 3)
    add_dots(canvas, [(0, 0), (1, 5), (2, 10)], LinearScale(0, 2, 3), LinearScale(0, 10, 3, invert=True), "red")
    assert canvas.text() == ["  ●", " ● ", "●  "]
    assert canvas.get(0, 2).tag == "red"


def test_later_dot_wins():
    canvas = Canvas(1, 1)
    add_dots(canvas, [(0, 0)], LinearScale(0, 0, 1), LinearScale(0, 0, 1), "red")
    add_dots(canvas, [(0, 0)], LinearScale(0, 0, 1), LinearScale(0, 0, 1), "blue")
    assert canvas.get(0, 0).tag == "blue"


def test_line_goes_up_and_down():
    canvas = Canvas(3, 3)
    points = [(0, 0), (1, 10), (2, 0)]
    add_lines(canvas, points, LinearScale(0, 2, 3), LinearScale(0, 10, 3, invert=True))
    assert canvas.text() == [
        "┌┐ ",
        "││ ",
        "┘└─",
    ]


def test_line_path_averages_crowded_columns():
    points = [(0, 0), (1, 10), (2, 20), (3, 30)]
    path = line_path(points, LinearScale(0, 3, 2), LinearScale(0, 30, 31, invert=True))
    assert path == [(0, 25), (1, 5)]


def test_line_path_interpolates_sparse_columns():
    path = line_path([(0, 0), (4, 4)], LinearScale(0, 4, 5), LinearScale(0, 4, 5, invert=True))
    assert path == [(0, 4), (1, 3), (2, 2), (3, 1), (4, 0)]


def test_line_path_sorts_by_column():
    path = line_path([(4, 4), (0, 0)], LinearScale(0, 4, 5), LinearScale(0, 4, 5, invert=True))
    assert path[0] == (0, 4)
    assert path[-1] == (4, 0)


def test_single_point_line_is_a_dot():
    canvas = Canvas(3, 3)
    add_lines(canvas, [(1, 1)], LinearScale(1, 1, 3), LinearScale(1, 1, 3, invert=True))
    assert canvas.text() == ["   ", " ● ", "   "]


def test_bar_lengths(bar_records):
    rows = [row_text(row) for row in make_bars(bar_records, "category", "value", str, format_number, 40)]
    assert rows[0] == "  ┌"
    assert rows[1] == "A ┤" + "█" * 20 + " 10 33.33%"
    assert rows[2] == "  │"
    assert rows[3] == "B ┤" + "█" * 40 + " 20 66.67%"
    assert rows[4] == "  └"


def test_bar_length_is_rounded():
    records = [{"c": "a", "v": 1}, {"c": "b", "v": 3}]
    rows = [row_text(row) for row in make_bars(records, "c", "v", str, format_number, 10)]
    # 1 / 3 * 10 = 3.33
    assert rows[1].count("█") == 3
    assert rows[3].count("█") == 10


def test_compact_bars_have_no_separators(bar_records):
    rows = [row_text(row) for row in make_bars(bar_records, "category", "value", str, format_number, 40, compact=True)]
    assert len(rows) == 4
    assert not any(row.endswith("│") for row in rows)


def test_labels_are_right_aligned():
    records = [{"c": "Quebec", "v": 2}, {"c": "PEI", "v": 1}]
    rows = [row_text(row) for row in make_bars(records, "c", "v", str, format_number, 4)]
    assert rows[1].startswith("Quebec ┤")
    assert rows[3].startswith("   PEI ┤")


def test_all_zero_bars():
    records = [{"c": "a", "v": 0}, {"c": "b", "v": 0}]
    rows = [row_text(row) for row in make_bars(records, "c", "v", str, format_number, 10)]
    assert rows[1] == "a ┤ 0 0%"


@pytest.mark.parametrize("records,message", [
    ([], "No records"),
    ([{"c": "a"}], r'"v" must be a number.*None'),
    ([{"c": "a", "v": "10"}], r'"v" must be a number.*\'10\''),
    ([{"c": "a", "v": -1}], "must not be negative"),
    ([{"v": 1}], 'label field "c" is missing'),
])
def test_bar_errors(records, message):
    with pytest.raises(ChartValidationError, match=message):
        make_bars(records, "c", "v", str, format_number, 10)


def test_total_line(bar_records):
    total = row_text(bar_total_line(bar_records, "category", "value", str, format_number, 40))
    assert total.strip() == 'Total "value": 30'
    custom = row_text(bar_total_line(bar_records, "category", "value", str, format_number, 40, "All"))
    assert custom.strip() == "All: 30"


def test_sparse_points_keep_their_own_columns():
    # x=0 and x=1 both round to column 0 on the scale
    path = line_path([(0, 1), (1, 5), (1000, 3)], LinearScale(0, 1000, 20), LinearScale(1, 5, 5, invert=True))
    assert path[:2] == [(0, 4), (1, 0)]
    assert path[-1] == (19, 2)
    assert len(path) == 20


def test_crowded_right_edge_is_pushed_back():
    path = line_path([(0, 0), (999, 1), (1000, 2)], LinearScale(0, 1000, 5), LinearScale(0, 2, 3, invert=True))
    assert [col for col, _ in path] == [0, 1, 2, 3, 4]
    assert path[3] == (3, 1)
    assert path[-1] == (4, 0)


def test_infinite_bar_value_raises():
    records = [{"c": "a", "v": float("inf")}, {"c": "b", "v": 1}]
    with pytest.raises(ChartValidationError, match=r'"v" must be a number.*inf'):
        make_bars(records, "c", "v", str, format_number, 10)


def test_float_total_is_rounded():
    records = [{"c": "a", "v": 0.1}, {"c": "b", "v": 0.2}]
    line = bar_total_line(records, "c", "v", str, format_number, 20)
    assert row_text(line).strip() == 'Total "v": 0.3'

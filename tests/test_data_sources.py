"""Tests for loading records through DuckDB."""

from datetime import date

import duckdb
import pytest

from newsplot.data_sources import (
    from_clause,
    load_json_records,
    load_records,
    parse_json_records,
)


def test_load_csv(sample_csv_file):
    records = load_records(sample_csv_file)
    assert len(records) == 4
    assert records[0]["category"] == "Alice"
    assert records[0]["value"] == 100
    assert records[0]["date"] == date(2024, 1, 1)


def test_query_filters_records(sample_csv_file):
    records = load_records(sample_csv_file, "SELECT category, value FROM data WHERE value > 150 ORDER BY value")
    assert records == [
        {"category": "Bob", "value": 200},
        {"category": "David", "value": 300},
    ]


def test_decimals_become_floats(sample_csv_file):
    records = load_records(sample_csv_file, "SELECT CAST(value AS DECIMAL(6, 1)) / 4 AS v FROM data LIMIT 1")
    assert isinstance(records[0]["v"], float)
    assert records[0]["v"] == 25.0


def test_load_json(sample_json_file):
    records = load_records(sample_json_file)
    assert [row["city"] for row in records] == ["Montreal", "Montreal", "Toronto", "Toronto"]
    assert records[1]["y"] == 3.5


def test_load_parquet_folder(temp_dir):
    folder = temp_dir / "parts"
    folder.mkdir()
    conn = duckdb.connect(":memory:")
    conn.execute(f"COPY (SELECT 1 AS a) TO '{folder / 'one.parquet'}' (FORMAT PARQUET)")
    conn.execute(f"COPY (SELECT 2 AS a) TO '{folder / 'two.parquet'}' (FORMAT PARQUET)")
    conn.close()
    records = load_records(str(folder), "SELECT a FROM data ORDER BY a")
    assert records == [{"a": 1}, {"a": 2}]


def test_missing_file(temp_dir):
    with pytest.raises(FileNotFoundError):
        from_clause(str(temp_dir / "missing.csv"))


def test_unsupported_extension(temp_dir):
    path = temp_dir / "data.xlsx"
    path.write_text("x")
    with pytest.raises(ValueError, match="Unsupported file type"):
        from_clause(str(path))


def test_parse_json_records():
    assert parse_json_records('{"a": 1}') == [{"a": 1}]
    assert parse_json_records('[{"a": 1}, {"a": 2}]') == [{"a": 1}, {"a": 2}]
    with pytest.raises(ValueError, match="array of objects"):
        parse_json_records("[1, 2]")
    with pytest.raises(ValueError):
        parse_json_records("not json")


def test_load_json_records_with_query():
    records = load_json_records([{"x": 1, "y": 2}, {"x": 2, "y": 5}], "SELECT * FROM data WHERE y > 3")
    assert records == [{"x": 2, "y": 5}]


def test_load_nested_parquet_folder(temp_dir):
    folder = temp_dir / "parts"
    nested = folder / "nested"
    nested.mkdir(parents=True)
    conn = duckdb.connect(":memory:")
    conn.execute(f"COPY (SELECT 1 AS a) TO '{folder / 'one.parquet'}' (FORMAT PARQUET)")
    conn.execute(f"COPY (SELECT 2 AS a) TO '{nested / 'two.parquet'}' (FORMAT PARQUET)")
    conn.close()
    records = load_records(str(folder), "SELECT a FROM data ORDER BY a")
    assert records == [{"a": 1}, {"a": 2}]

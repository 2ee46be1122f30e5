#!/usr/bin/env python3
"""
Record loading for the command line.
CSV, TSV, JSON and Parquet files are read through an in-memory DuckDB
database, exposed to queries as a view named "data".
"""

import json
import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import duckdb

DEFAULT_QUERY = "SELECT * FROM data"

READERS = {
    '.csv': "read_csv_auto('{path}')",
    '.tsv': "read_csv_auto('{path}', delim='\\t')",
    '.json': "read_json_auto('{path}')",
    '.ndjson': "read_json_auto('{path}')",
    '.parquet': "read_parquet('{path}')",
}


def from_clause(path: str) -> str:
    """DuckDB table function reading a file (or a folder of Parquet files)."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    abs_path = str(file_path.resolve()).replace("'", "''")
    if file_path.is_dir():
        return f"read_parquet('{abs_path}/**/*.parquet')"

    reader = READERS.get(file_path.suffix.lower())
    if reader is None:
        raise ValueError(
            f"Unsupported file type: {file_path.suffix or path}. Use one of: {', '.join(READERS)}"
        )
    return reader.format(path=abs_path)


def _normalize(value: Any) -> Any:
    # DuckDB returns DECIMAL columns as Decimal
    if isinstance(value, Decimal):
        return float(value)
    return value


def execute_query(conn: duckdb.DuckDBPyConnection, query: str) -> List[Dict[str, Any]]:
    """Execute query and return results as list of dictionaries."""
    result = conn.execute(query).fetchall()
    columns = [desc[0] for desc in conn.description]
    return [{col: _normalize(value) for col, value in zip(columns, row)} for row in result]


def load_records(path: str, query: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load a file as records, optionally filtered through a SQL query on "data"."""
    conn = duckdb.connect(':memory:')
    try:
        conn.execute(f"CREATE VIEW data AS SELECT * FROM {from_clause(path)}")
        return execute_query(conn, query or DEFAULT_QUERY)
    finally:
        conn.close()


def parse_json_records(text: str) -> List[Dict[str, Any]]:
    """Validate JSON text holding an array of objects or a single object."""
    json_data = json.loads(text)
    if isinstance(json_data, dict):
        return [json_data]
    if isinstance(json_data, list) and all(isinstance(item, dict) for item in json_data):
        return json_data
    raise ValueError("JSON input must be an array of objects or a single object")


def load_json_records(json_data: List[Dict[str, Any]], query: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load JSON records through DuckDB so that dates and numbers get typed columns."""
    # Write JSON to a temporary file for read_json_auto
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump(json_data, f)
        temp_file = f.name

    try:
        return load_records(temp_file, query)
    finally:
        if os.path.exists(temp_file):
            os.unlink(temp_file)


def load_json_stdin(query: Optional[str] = None) -> Optional[List[Dict[str, Any]]]:
    """Records from JSON piped on stdin, or None when stdin is a terminal or empty."""
    if sys.stdin.isatty():
        return None
    stdin_data = sys.stdin.read().strip()
    if not stdin_data:
        return None
    return load_json_records(parse_json_records(stdin_data), query)

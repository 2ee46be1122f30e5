"""Pytest configuration and shared fixtures for newsplot tests."""

import csv
import json
import re
import tempfile
from datetime import date
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def bar_records():
    return [
        {"category": "A", "value": 10},
        {"category": "B", "value": 20},
    ]


@pytest.fixture
def time_series():
    """Four monthly values."""
    return [
        {"date": date(2023, 1, 1), "value": 10},
        {"date": date(2023, 2, 1), "value": 20},
        {"date": date(2023, 3, 1), "value": 30},
        {"date": date(2023, 4, 1), "value": 40},
    ]


@pytest.fixture
def multi_category():
    """Two categories with very different ranges."""
    return [
        {"x": 0, "y": 0, "category": "A"},
        {"x": 5, "y": 5, "category": "A"},
        {"x": 10, "y": 10, "category": "A"},
        {"x": 0, "y": 50, "category": "B"},
        {"x": 50, "y": 250, "category": "B"},
        {"x": 100, "y": 500, "category": "B"},
    ]


@pytest.fixture
def sample_csv_file(temp_dir):
    """Create a sample CSV file for testing."""
    csv_path = temp_dir / "test_data.csv"
    data = [
        ["category", "value", "date"],
        ["Alice", "100", "2024-01-01"],
        ["Bob", "200", "2024-01-02"],
        ["Charlie", "150", "2024-01-03"],
        ["David", "300", "2024-01-04"],
    ]
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerows(data)
    return str(csv_path)


@pytest.fixture
def sample_json_file(temp_dir):
    """Create a sample JSON file for testing."""
    json_path = temp_dir / "test_data.json"
    data = [
        {"x": 1, "y": 2.5, "city": "Montreal"},
        {"x": 2, "y": 3.5, "city": "Montreal"},
        {"x": 1, "y": 10.0, "city": "Toronto"},
        {"x": 2, "y": 12.0, "city": "Toronto"},
    ]
    with open(json_path, 'w') as f:
        json.dump(data, f)
    return str(json_path)


@pytest.fixture
def mock_config_file(temp_dir):
    """Create a mock configuration file."""
    config_path = temp_dir / "newsplot.yaml"
    config = {
        "chart_defaults": {
            "width": 30,
            "height": 8,
            "small_multiples_per_row": 2,
            "renderer": "plain",
        }
    }

    import yaml
    with open(config_path, 'w') as f:
        yaml.dump(config, f)

    return str(config_path)


def strip_ansi_codes(text):
    """Remove ANSI escape codes from text for testing."""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)

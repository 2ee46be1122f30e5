#!/usr/bin/env python3
"""
Configuration file for the command line: chart defaults in YAML.

Example newsplot.yaml:

    chart_defaults:
      width: 80
      height: 15
      small_multiples_per_row: 2
      renderer: plain
"""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "chart_defaults": {
        "width": None,          # None = the chart type's own default
        "height": None,
        "small_multiples_per_row": 3,
        "renderer": "ansi",
        "compact": False,
    }
}


def load_config(config_path: str = "newsplot.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file, merged over the defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file = Path(config_path)
    if not config_file.exists():
        return config

    with open(config_file, 'r') as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid config file {config_path}: expected a mapping at the top level")

    chart_defaults = loaded.get("chart_defaults") or {}
    if not isinstance(chart_defaults, dict):
        raise ValueError(f"Invalid config file {config_path}: chart_defaults must be a mapping")
    config["chart_defaults"].update(chart_defaults)

    for key, value in loaded.items():
        if key != "chart_defaults":
            config[key] = value
    return config


def chart_options(config: Dict[str, Any], chart_type: str) -> Dict[str, Any]:
    """Keyword arguments for a chart builder from the configured defaults."""
    defaults = config.get("chart_defaults", {})
    options: Dict[str, Any] = {"renderer": defaults.get("renderer") or "ansi"}
    if defaults.get("width"):
        options["width"] = int(defaults["width"])
    if chart_type == "bar":
        options["compact"] = bool(defaults.get("compact", False))
    else:
        if defaults.get("height"):
            options["height"] = int(defaults["height"])
        options["small_multiples_per_row"] = int(defaults.get("small_multiples_per_row") or 3)
    return options

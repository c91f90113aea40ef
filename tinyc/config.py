"""tinyc Configuration — project-level .tinycrc.yml support.

Loads CLI defaults from .tinycrc.yml (or .tinycrc.yaml, .tinycrc.json),
searching upward from the working directory.

Example .tinycrc.yml:
    format: json          # "text" or "json"
    log_level: INFO
    echo_input: false     # omit the "Input:" line in text output
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass
class TinycConfig:
    """CLI configuration. The compiler itself takes none."""
    format: str = "text"
    log_level: str = "WARNING"
    echo_input: bool = True


# ---------------------------------------------------------------------------
# Config file names (in priority order)
# ---------------------------------------------------------------------------

_CONFIG_FILES = [
    ".tinycrc.yml",
    ".tinycrc.yaml",
    ".tinycrc.json",
]


def find_config(start_dir: str = ".") -> Optional[str]:
    """Find the nearest config file by walking up from start_dir."""
    current = os.path.abspath(start_dir)
    while True:
        for name in _CONFIG_FILES:
            path = os.path.join(current, name)
            if os.path.isfile(path):
                return path
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Optional[str] = None, start_dir: str = ".") -> TinycConfig:
    """Load configuration from a file.

    If no path is given, searches for a config file starting from start_dir.
    If no config file is found, or it cannot be read, returns defaults.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return TinycConfig()

    try:
        with open(path, "r") as f:
            content = f.read()
    except OSError as e:
        logger.warning("could not read config file %s: %s", path, e)
        return TinycConfig()

    try:
        if path.endswith(".json"):
            data = json.loads(content)
        else:
            data = yaml.safe_load(content) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.warning("ignoring malformed config file %s: %s", path, e)
        return TinycConfig()

    if not isinstance(data, dict):
        logger.warning("ignoring config file %s: expected a mapping", path)
        return TinycConfig()

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> TinycConfig:
    """Convert a parsed dict to TinycConfig."""
    config = TinycConfig()

    if "format" in data:
        fmt = str(data["format"]).lower()
        config.format = fmt if fmt in FORMATS else "text"
    if "log_level" in data:
        config.log_level = str(data["log_level"]).upper()
    if "echo_input" in data:
        config.echo_input = bool(data["echo_input"])

    return config

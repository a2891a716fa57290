#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing for the tracker's storage records.
Writes are atomic: data lands in a temporary sibling file which then replaces
the target, so an interrupted write never leaves a half-written record.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, ensure_ascii: bool = False) -> None:
    """
    Atomically write data to a JSON file with standard pretty-printing.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        ensure_ascii: If True, escape non-ASCII characters (default: False)

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
        TypeError: If data is not JSON serializable
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=ensure_ascii)
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, sort_keys: bool = False) -> str:
    """Format data as a pretty-printed JSON string."""
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)

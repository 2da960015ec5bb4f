"""Reader for the JSON translations file handed to the generator."""

import json
from pathlib import Path
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def load(path: str | Path) -> Any:
    """Load and parse a translations JSON file.

    The parsed value is returned as-is; its shape is only meaningful to the
    generation script.

    Args:
        path: File path to the translations file.

    Returns:
        Parsed JSON value.

    Raises:
        OSError: If the file does not exist or cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        json.JSONDecodeError: If the file contains invalid JSON.
        ValueError: If the file uses NaN, Infinity or -Infinity.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    return json.loads(raw, parse_constant=_reject_constant)

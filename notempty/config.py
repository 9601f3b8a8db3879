"""
TOML options loader.

Options live in a ``[notempty]`` table, or at the top level when that table is
absent:

    [notempty]
    type = ["zero", "string", "boolean"]
    value_obscured = false

    [notempty.messages]
    isEmpty = "'%value%' is blank"
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from .errors import ConfigurationError

TABLE = "notempty"


def load_options(path: str | Path) -> dict[str, Any]:
    """
    Load validator options from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Options mapping suitable for ``NotEmpty(options)``

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the TOML is malformed or the table has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Failed to parse options TOML: {e}") from e

    return options_from_dict(data)


def options_from_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Pick the options table out of parsed TOML data."""
    table = data.get(TABLE, data)
    if not isinstance(table, dict):
        raise ConfigurationError(f"[{TABLE}] must be a table, got {type(table).__name__}")
    return dict(table)

"""
Rule introspection command.

Lists every emptiness rule with its flag value and whether it is active in the
selected rule set.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import ConfigurationError
from ..flags import DEFAULT_TYPE, TYPE_NAMES
from ..normalize import normalize

console = Console()
err = Console(stderr=True)


def run_types_list(types: tuple[str, ...] = (), output_json: bool = False) -> int:
    """
    List all rule names.

    Args:
        types: Rule names selecting the rule set to mark (default rule set when empty)
        output_json: Output as JSON

    Returns:
        Exit code (0 = success, 2 = unknown rule name)
    """
    try:
        mask = normalize(list(types)) if types else DEFAULT_TYPE
    except ConfigurationError as e:
        err.print(f"Configuration error: {escape(str(e))}", style="bold red")
        return 2

    entries = [
        {
            "name": name,
            "value": int(flag),
            "active": (mask & flag) == flag,
            "default": (DEFAULT_TYPE & flag) == flag,
        }
        for name, flag in TYPE_NAMES.items()
    ]

    if output_json:
        print(json.dumps({"type": int(mask), "rules": entries}, indent=2))
        return 0

    table = Table(title="Emptiness Rules")
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Active")
    table.add_column("Default")

    for e in entries:
        table.add_row(
            e["name"],
            str(e["value"]),
            "Yes" if e["active"] else "No",
            "Yes" if e["default"] else "No",
            style=None if e["active"] else "dim",
        )

    console.print(table)
    console.print(f"\n[dim]Selected type: {int(mask)}[/dim]")
    return 0

"""Check command implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import ConfigurationError
from ..flags import describe, name_of
from ..validator import NotEmpty

console = Console()
err = Console(stderr=True)


def parse_value(text: str, raw: bool = False) -> Any:
    """Parse a command-line value as JSON, falling back to the literal string."""
    if raw:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def build_validator(types: tuple[str, ...] = (), config: Path | None = None) -> NotEmpty:
    """Validator from an optional options file, with ``types`` overriding its rule set."""
    validator = NotEmpty.from_config(config) if config is not None else NotEmpty()
    if types:
        validator.set_type(list(types))
    return validator


def run_check(
    values: tuple[str, ...],
    types: tuple[str, ...] = (),
    config: Path | None = None,
    output_json: bool = False,
    raw: bool = False,
) -> int:
    """Check each value for emptiness.

    Args:
        values: Values as typed on the command line
        types: Rule names to use instead of the default/configured rule set
        config: Optional TOML options file
        output_json: Output results as JSON instead of a table
        raw: Treat every value as a literal string (no JSON parsing)

    Returns:
        Exit code (0 = nothing empty, 1 = at least one empty value, 2 = bad configuration)
    """
    try:
        validator = build_validator(types, config)
    except (ConfigurationError, FileNotFoundError) as e:
        err.print(f"Configuration error: {escape(str(e))}", style="bold red")
        return 2

    rows: list[dict[str, Any]] = []
    for text in values:
        value = parse_value(text, raw=raw)
        valid = validator.is_valid(value)
        verdict = validator.get_verdict()
        rows.append(
            {
                "input": text,
                "value": value,
                "valid": valid,
                "rule": name_of(verdict.rule) if verdict.rule is not None else None,
                "messages": validator.get_messages(),
            }
        )

    empty_count = sum(1 for r in rows if not r["valid"])

    if output_json:
        output = {
            "type": int(validator.get_type()),
            "rules": describe(validator.get_type()),
            "results": rows,
        }
        print(json.dumps(output, indent=2, default=str))
    else:
        _print_table(rows, validator)

    return 1 if empty_count else 0


def _print_table(rows: list[dict[str, Any]], validator: NotEmpty) -> None:
    table = Table(title="Emptiness Check")
    table.add_column("Input", style="cyan")
    table.add_column("Parsed As")
    table.add_column("Result")
    table.add_column("Rule")
    table.add_column("Message", style="dim")

    for r in rows:
        table.add_row(
            escape(r["input"]),
            type(r["value"]).__name__,
            "[green]not empty[/green]" if r["valid"] else "[red]empty[/red]",
            r["rule"] or "-",
            escape("; ".join(r["messages"].values())),
        )

    console.print(table)
    empty_count = sum(1 for r in rows if not r["valid"])
    console.print(
        f"\n[dim]Rules: {', '.join(describe(validator.get_type())) or '(none)'}[/dim]"
        f"\n[dim]Total: {len(rows)} values, {empty_count} empty[/dim]"
    )

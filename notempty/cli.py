"""CLI entrypoint for notempty."""

import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="notempty")
def cli() -> None:
    """notempty - Decide whether values count as empty.

    Check values against a configurable set of emptiness rules.
    """


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--type",
    "-t",
    "types",
    multiple=True,
    metavar="NAME",
    help="Emptiness rule to apply (repeatable, e.g. -t zero -t string). Defaults to the default rule set.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML options file ([notempty] table)",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Treat values as literal strings instead of parsing them as JSON",
)
def check(values: tuple[str, ...], types: tuple[str, ...], config: Path | None, output_json: bool, raw: bool) -> None:
    """Check VALUES for emptiness.

    Values are parsed as JSON, so 0, 0.0, false, null, [] and '""' keep their
    types. Anything that is not valid JSON is checked as a string.

    Exits 1 if any value is empty.
    """
    from .commands.check import run_check

    exit_code = run_check(values, types=types, config=config, output_json=output_json, raw=raw)
    sys.exit(exit_code)


@cli.command("types")
@click.option(
    "--type",
    "-t",
    "types",
    multiple=True,
    metavar="NAME",
    help="Rule names to mark as active (defaults to the default rule set)",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output as JSON",
)
def types_cmd(types: tuple[str, ...], output_json: bool) -> None:
    """List emptiness rules and their flag values."""
    from .commands.types_cmd import run_types_list

    sys.exit(run_types_list(types=types, output_json=output_json))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

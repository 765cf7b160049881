"""CLI entry point: depscope.

Subcommands:
    depscope analyze                        # analyze ./package.json
    depscope analyze path/to/project        # analyze another project
    depscope analyze --depth 2 --json out.json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from depscope.core.logging import setup_logging
from depscope.exceptions import ManifestError


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """depscope: circular dependency and reference analysis for package.json trees."""
    setup_logging("DEBUG" if verbose else None)


@main.command("analyze")
@click.argument("base", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--depth",
    type=click.IntRange(min=0),
    default=None,
    envvar="DEPSCOPE_DEPTH",
    help="Maximum expansion depth below the root (default: unlimited)",
)
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also save the result as a JSON file",
)
@click.option("--stats", is_flag=True, help="Print per-phase statistics to stderr")
def analyze_cmd(base: Path, depth: int | None, json_path: Path | None, stats: bool) -> None:
    """Analyze the dependency tree of the project in BASE."""
    from depscope.api import analyze

    try:
        result = analyze(base, depth=depth)
    except ManifestError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    payload = json.dumps(result.to_dict())
    click.echo(payload)
    if json_path is not None:
        json_path.write_text(payload)
        click.echo(f"Result written to {json_path}", err=True)
    if stats:
        for p in result.progress.phases:
            line = f"  {p.phase}: {p.packages} packages in {p.duration}s"
            if p.circular_entries is not None:
                line += (
                    f", {p.circular_entries} circular, "
                    f"has_circular_dependency={p.has_circular_dependency}"
                )
            click.echo(line, err=True)


if __name__ == "__main__":
    main()

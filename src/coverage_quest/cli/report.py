"""Report command: show the coverage counts of one source file."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..coverage import CoverageReportLookup
from ..logging_config import get_logger
from . import app
from ._common import (
    CONFIG_OPTION,
    JSON_OPTION,
    LOG_FILE_OPTION,
    QUIET_OPTION,
    REPORT_DIR_OPTION,
    VERBOSE_OPTION,
    WORKSPACE_ARGUMENT,
    console,
    resolve_config,
)

logger = get_logger(__name__)


@app.command()
def report(
    source_path: str = typer.Argument(
        ...,
        help="Repository-relative source path, e.g. src/main/java/com/example/Cart.java",
    ),
    workspace: Path = WORKSPACE_ARGUMENT,
    report_dir: Optional[str] = REPORT_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    json_output: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    Show where a source file's coverage report lives and what it contains.

    [bold cyan]Examples:[/bold cyan]

      coverage-quest report src/main/java/com/example/Cart.java

      coverage-quest report src/main/java/com/example/Cart.java /path/to/repo --json
    """
    settings = resolve_config(
        config=config, report_dir=report_dir, verbose=verbose, quiet=quiet, log_file=log_file
    )
    lookup = CoverageReportLookup(settings.report_root(workspace), naming=settings.naming_strategy())

    location = lookup.locate(source_path)
    if location is None:
        console.print(f"[red]Error:[/red] {source_path} does not name a class")
        raise typer.Exit(1)
    coverage = lookup.lookup_location(location)
    logger.debug("Report for %s: %s", source_path, coverage)

    if json_output:
        print(
            json.dumps(
                {
                    "source_path": source_path,
                    "class": location.class_name,
                    "package": location.package_name,
                    "report_path": str(location.report_path),
                    "found": coverage.found,
                    "covered_lines": coverage.covered,
                    "partially_covered_lines": coverage.partial,
                    "uncovered_lines": coverage.uncovered,
                    "eligible": coverage.has_missed_lines,
                },
                indent=2,
            )
        )
        return

    console.print(f"[bold]{location.class_name}[/bold] [dim]({location.package_name or 'default package'})[/dim]")
    console.print(f"  Report:   {location.report_path}")
    if not coverage.found:
        console.print("  [yellow]No coverage data[/yellow] (report missing or unreadable)")
        return
    console.print(
        f"  Lines:    {coverage.covered} covered, {coverage.partial} partial, "
        f"{coverage.uncovered} missed ({coverage.coverage:.0%} covered)"
    )
    verdict = "[green]eligible[/green]" if coverage.has_missed_lines else "[dim]fully covered[/dim]"
    console.print(f"  Challenge: {verdict}")

"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import ChallengeConfig, load_config
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging

console = Console()

# Exit status when generation ran but found nothing to challenge
EXIT_NO_CHALLENGE = 2


def resolve_config(
    config: Optional[Path] = None,
    report_dir: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> ChallengeConfig:
    """Build configuration from CLI options and set up logging at its verbosity.

    Exits with status 1 if the configuration is invalid. ``--quiet`` wins over
    ``--verbose``; with neither, the configured verbosity applies.
    """
    try:
        settings = load_config(
            config_file=config, report_dir=report_dir, verbose=verbose, quiet=quiet
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    setup_logging(settings.verbosity, log_file=log_file)
    return settings


WORKSPACE_ARGUMENT = typer.Argument(
    Path("."),
    help="Git working copy to scan (default: current directory)",
    exists=True,
    file_okay=False,
    dir_okay=True,
    readable=True,
)

USER_OPTION = typer.Option(
    ...,
    "--user",
    "-u",
    help="Author name, matched exactly against commit authors",
)

CONFIG_OPTION = typer.Option(
    None,
    "-c",
    "--config",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)

REPORT_DIR_OPTION = typer.Option(
    None,
    "--report-dir",
    help="Coverage report directory relative to the workspace",
)

JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Output in machine-readable JSON format",
)

VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable debug logging",
)

QUIET_OPTION = typer.Option(
    False,
    "--quiet",
    "-q",
    help="Only log errors",
)

LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    help="Also append log records to this file",
    dir_okay=False,
)

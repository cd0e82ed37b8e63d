"""Changes command: list the files a user recently changed."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import CoverageQuestError
from ..history import scan_user_changes
from ..logging_config import get_logger
from . import app
from ._common import (
    CONFIG_OPTION,
    JSON_OPTION,
    LOG_FILE_OPTION,
    QUIET_OPTION,
    USER_OPTION,
    VERBOSE_OPTION,
    WORKSPACE_ARGUMENT,
    console,
    resolve_config,
)

logger = get_logger(__name__)


@app.command()
def changes(
    workspace: Path = WORKSPACE_ARGUMENT,
    user: str = USER_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    json_output: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    List the non-test files a user changed in their recent commits.

    These are the candidates a challenge is drawn from.

    [bold cyan]Examples:[/bold cyan]

      coverage-quest changes --user "Alice Example"

      coverage-quest changes /path/to/repo -u "Alice Example" --json
    """
    settings = resolve_config(config=config, verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        changed = scan_user_changes(workspace, user, config=settings)
    except CoverageQuestError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps({"user": user, "files": changed.to_list()}, indent=2))
        return

    if not changed:
        console.print(f"[yellow]No recently changed files found for {user}.[/yellow]")
        return

    table = Table(show_header=True, title=f"Recent changes by {user}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("File")
    for position, path in enumerate(changed, start=1):
        table.add_row(str(position), path)
    console.print(table)

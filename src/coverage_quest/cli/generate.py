"""Generate command: pick a coverage challenge for one user."""

import json
import random
from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel

from ..exceptions import CoverageQuestError, NoEligibleCandidateError
from ..logging_config import get_logger
from ..selection import Challenge, select_challenge
from . import app
from ._common import (
    CONFIG_OPTION,
    EXIT_NO_CHALLENGE,
    JSON_OPTION,
    LOG_FILE_OPTION,
    QUIET_OPTION,
    REPORT_DIR_OPTION,
    USER_OPTION,
    VERBOSE_OPTION,
    WORKSPACE_ARGUMENT,
    console,
    resolve_config,
)

logger = get_logger(__name__)


def _output_rich(challenge: Challenge) -> None:
    report = challenge.report
    body = (
        f"{challenge.describe()}\n\n"
        f"[dim]Source:[/dim]  {challenge.source_path}\n"
        f"[dim]Lines:[/dim]   {report.covered} covered, "
        f"[yellow]{report.partial} partial[/yellow], [red]{report.uncovered} missed[/red] "
        f"({report.coverage:.0%} covered)\n"
        f"[dim]Score:[/dim]   {challenge.score}"
    )
    console.print(
        Panel(body, title=f"[bold cyan]{challenge.qualified_name}[/bold cyan]", expand=False)
    )


@app.command()
def generate(
    workspace: Path = WORKSPACE_ARGUMENT,
    user: str = USER_OPTION,
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the candidate draw for reproducible output",
    ),
    report_dir: Optional[str] = REPORT_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    json_output: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    Generate a class coverage challenge from a user's recent commits.

    Exits with status 2 when none of the user's recently changed classes has
    missed lines.

    [bold cyan]Examples:[/bold cyan]

      coverage-quest generate --user "Alice Example"

      coverage-quest generate /path/to/repo -u "Alice Example" --seed 42 --json
    """
    settings = resolve_config(
        config=config, report_dir=report_dir, verbose=verbose, quiet=quiet, log_file=log_file
    )
    rng = random.Random(seed) if seed is not None else None

    try:
        challenge = select_challenge(workspace, user, config=settings, rng=rng)

    except NoEligibleCandidateError as e:
        logger.info("%s", e)
        if json_output:
            print(json.dumps({"challenge": None, "evaluated": e.evaluated}, indent=2))
        else:
            console.print(
                f"[yellow]No challenge could be generated for {user} this time.[/yellow] "
                "Commit more changes and try again."
            )
        raise typer.Exit(EXIT_NO_CHALLENGE)

    except CoverageQuestError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps({"challenge": challenge.to_dict()}, indent=2))
    else:
        _output_rich(challenge)

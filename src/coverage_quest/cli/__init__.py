"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="coverage-quest",
    help="Coverage Quest - coverage challenges from your own recent commits",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]Coverage Quest[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Turn the classes you recently changed into coverage challenges.
    """


# Import subcommands to register them
from .generate import generate as _generate  # noqa: F401, E402
from .changes import changes as _changes  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402

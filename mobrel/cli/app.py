from __future__ import annotations

import typer

from mobrel import __version__
from mobrel.cli.commands.bump import bump
from mobrel.cli.commands.changelog import changelog
from mobrel.cli.commands.validate import validate


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Version bumps, changelogs and store releases for Flutter apps.",
)


# Commands
app.command()(bump)
app.command()(validate)
app.command()(changelog)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()

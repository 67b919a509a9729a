"""CLI entry point using Typer."""

import json
from pathlib import Path
from typing import Annotated

import typer

from littlemock import __version__
from littlemock.config import Settings

app = typer.Typer(
    name="littlemock",
    help="Inspect littlemock configuration",
    no_args_is_help=True,
)


def main() -> None:
    """Entry point for the CLI."""
    app()


@app.command()
def config(
    project: Annotated[
        Path | None,
        typer.Option("--project", "-p", help="Project directory to read settings from"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print settings as JSON")] = False,
) -> None:
    """Show the effective settings for a project."""
    if project is not None and not project.is_dir():
        typer.echo(f"Project directory not found: {project}", err=True)
        raise typer.Exit(1)

    try:
        settings = Settings.load(project)
    except ValueError as e:
        typer.echo(f"Invalid settings: {e}", err=True)
        raise typer.Exit(1) from e

    values = settings.as_dict()
    if as_json:
        typer.echo(json.dumps(values, indent=2))
        return
    for name, value in values.items():
        typer.echo(f"{name} = {str(value).lower()}")


@app.command()
def version() -> None:
    """Show the installed littlemock version."""
    typer.echo(__version__)


if __name__ == "__main__":
    main()

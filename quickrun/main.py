#!/usr/bin/env python3
"""
Main CLI entry point for quickrun
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from quickrun import __version__
from quickrun.config.commands_config import (
    LauncherConfig,
    load_commands_config,
    write_example_config,
)
from quickrun.config.settings import get_commands_path, get_env_var, validate_all_env_vars
from quickrun.exceptions import QuickrunError
from quickrun.launcher.dispatch import SubprocessLauncher
from quickrun.launcher.filter_engine import FilterEngine
from quickrun.launcher.models import Catalog
from quickrun.utils.logging_utils import setup_logging
from quickrun.utils.output import console, err_console

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    windowed = "windowed"
    centered = "centered"


app = typer.Typer(
    help="Filterable command launcher for the terminal.",
    add_completion=False,
)


def _load(commands: Optional[Path]) -> tuple[LauncherConfig, Catalog]:
    """Load the command table and build the catalog, exiting on errors."""
    try:
        config = load_commands_config(commands)
        catalog = Catalog.from_mapping(config.commands)
    except QuickrunError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    return config, catalog


def _run_launcher(commands: Optional[Path], mode: Optional[RenderMode]) -> None:
    from quickrun.ui.launcher_screen import LauncherApp

    config, catalog = _load(commands)
    if not catalog:
        err_console.print(
            "[yellow]No commands configured.[/yellow] Run [cyan]quickrun init[/cyan] "
            "to create an example command table."
        )
        raise typer.Exit(1)

    render_mode = mode.value if mode else config.render_mode
    try:
        request = LauncherApp(catalog, render_mode=render_mode).run()
    except KeyboardInterrupt:
        return
    if request is None:
        logger.debug("Launcher closed without a selection")
        return

    launcher = SubprocessLauncher()
    try:
        launcher.launch(request)
    except QuickrunError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(127) from e

    if launcher.returncode:
        raise typer.Exit(launcher.returncode)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    commands: Optional[Path] = typer.Option(
        None, "--commands", "-c", help="Command table to load (YAML or JSON)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """
    quickrun - filterable command launcher

    Type to filter, use the arrow keys to move, Enter to run, Esc to close.

    [bold]Examples:[/bold]

    Open the launcher:
        [cyan]quickrun[/cyan]

    Use another command table:
        [cyan]quickrun -c ./project-commands.yaml[/cyan]

    Show the commands matching "git":
        [cyan]quickrun list --filter git[/cyan]
    """
    errors = validate_all_env_vars()
    if errors:
        for error in errors:
            err_console.print(f"[red]{error}[/red]")
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else get_env_var("QUICKRUN_LOG_LEVEL") or "INFO")

    ctx.obj = {"commands": commands}
    if ctx.invoked_subcommand is None:
        _run_launcher(commands, None)


@app.command()
def run(
    ctx: typer.Context,
    mode: Optional[RenderMode] = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help="Layout: windowed or centered"
    ),
):
    """Open the launcher overlay."""
    _run_launcher(ctx.obj["commands"], mode)


@app.command("list")
def list_commands(
    ctx: typer.Context,
    filter_text: str = typer.Option("", "--filter", "-f", help="Only show matching commands"),
):
    """Print the command table."""
    _, catalog = _load(ctx.obj["commands"])

    engine = FilterEngine(catalog)
    engine.set_filter(filter_text)
    matches = engine.filtered

    if not matches:
        console.print("[yellow]No matching commands[/yellow]")
        return

    table = Table(title=f"Commands ({len(matches)}/{len(catalog)})")
    table.add_column("Title", style="cyan")
    table.add_column("Command")
    for command in matches:
        table.add_row(command.title, command.command_text)
    console.print(table)


@app.command()
def init(ctx: typer.Context):
    """Write an example command table."""
    path = ctx.obj["commands"] or get_commands_path()
    try:
        created = write_example_config(path)
    except QuickrunError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    if created:
        console.print(f"[green]Created[/green] {path}")
    else:
        console.print(f"[yellow]Already exists:[/yellow] {path}")


@app.command()
def version():
    """Show quickrun version"""
    typer.echo(f"quickrun version {__version__}")


def run_cli() -> None:
    app()


if __name__ == "__main__":
    run_cli()

"""Thin CLI wrapper for prodbuild.

This module provides the command-line interface using Typer.
All business logic is delegated to core modules.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from prodbuild import __version__
from prodbuild.config import get_settings, print_settings_json

app = typer.Typer(
    name="prodbuild",
    help="prodbuild - build the client and server and assemble the dist directory",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"prodbuild version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Route stdlib logging through Rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """prodbuild - build the client and server and assemble the dist directory."""


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        typer.echo(print_settings_json(settings))
    else:
        console.print("[bold]Effective Configuration:[/bold]")
        console.print()
        console.print("[bold]Paths:[/bold]")
        console.print(f"  Project root:        {escape(str(settings.project_root))}")
        console.print(f"  Output directory:    {escape(str(settings.dist_dir))}")
        console.print(f"  Manifest:            {escape(settings.manifest_name)}")
        console.print(f"  Launcher:            {escape(settings.launcher_name)}")
        console.print()
        console.print("[bold]Sub-builds:[/bold]")
        console.print(f"  Client command:      {escape(settings.client_command)}")
        console.print(f"  Server command:      {escape(settings.server_command)}")
        console.print()
        console.print("[bold]Operational:[/bold]")
        console.print(f"  Log level:           {settings.log_level}")


@app.command()
def build() -> None:
    """Build client and server, then assemble the output directory."""
    from prodbuild.builds.bundle import BundleError
    from prodbuild.builds.runner import StepExecutionError
    from prodbuild.builds.service import build_production

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        build_production(settings, report=console.print)
    except StepExecutionError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(code=e.exit_code or 1) from None
    except BundleError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()

"""create-project CLI Main Entry Point

Scaffold a new project from a bundled template: copy the template files,
append a .gitignore, write a LICENSE and optionally run git init and the
package manager.

Usage:
    create-project                         # Prompt for template and git
    create-project <template>              # Scaffold into the current directory
    create-project <template> --git        # Also run git init
    create-project <template> --install    # Also install dependencies
    create-project --yes                   # Use defaults, no prompts
    create-project --list-templates        # Show available templates
    create-project --version               # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import create_command, templates_command
from .commands.utils import setup_logging
from .lib.config import load_settings
from .lib.errors import handle_error

typer_app = typer.Typer(add_completion=False)


@typer_app.command()
def cli(
    template: Optional[str] = typer.Argument(
        None, help="Template name (case-insensitive)."
    ),
    git: Optional[bool] = typer.Option(
        None, "--git/--no-git", "-g", help="Initialize a git repository."
    ),
    run_install: bool = typer.Option(
        False, "--install", "-i", help="Install dependencies after copying."
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip prompts and use defaults."
    ),
    target: Optional[Path] = typer.Option(
        None, "--target", "-t", help="Target directory (default: current directory)."
    ),
    name: Optional[str] = typer.Option(None, "--name", help="License holder name."),
    email: Optional[str] = typer.Option(None, "--email", help="License holder email."),
    license_id: Optional[str] = typer.Option(
        None, "--license", help="License id (MIT, ISC)."
    ),
    package_manager: Optional[str] = typer.Option(
        None, "--package-manager", help="Installer to use (npm, yarn, pnpm, pip)."
    ),
    list_templates: bool = typer.Option(
        False, "--list-templates", help="List available templates and exit."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Scaffold a new project from a template.

    Examples:
        create-project javascript              Copy the javascript template here
        create-project typescript --git -i     Also git init and install
        create-project -y -t ./my-app          Default template into ./my-app
    """
    if version:
        typer.echo(f"create-project {__version__}")
        raise typer.Exit()

    setup_logging(verbose)

    try:
        settings = load_settings()
    except Exception as e:
        handle_error(e)

    if list_templates:
        templates_command(settings.templates_dir)
        raise typer.Exit()

    create_command(
        template,
        settings,
        git=git,
        run_install=run_install,
        skip_prompts=yes,
        target=target,
        name=name,
        email=email,
        license_id=license_id,
        package_manager=package_manager,
    )


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    ``argv`` replaces ``sys.argv[1:]`` when given.
    """
    typer_app(args=argv)


if __name__ == "__main__":
    app()

"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from scaffoldcli.lib.pipeline import StepResult, StepStatus

console = Console()

DEBUG_ENV = "CREATE_PROJECT_DEBUG"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the create-project CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows skipped files, installer choice
    - Debug (CREATE_PROJECT_DEBUG=1): DEBUG level - shows every command run
    """
    if os.environ.get(DEBUG_ENV):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get(DEBUG_ENV)),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("scaffoldcli")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def print_step(result: StepResult) -> None:
    """Render a step status change."""
    title = escape(result.title)
    message = escape(result.message or "")
    if result.status == StepStatus.SUCCEEDED:
        console.print(f"[green]✔[/green] {title}")
    elif result.status == StepStatus.FAILED:
        console.print(f"[red]✖[/red] {title}")
        console.print(f"  [red]→ {message}[/red]")
    elif result.status == StepStatus.SKIPPED:
        console.print(f"[yellow]↓[/yellow] {title} [dim]\\[skipped][/dim]")
        console.print(f"  [dim]→ {message}[/dim]")

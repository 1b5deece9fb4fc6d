"""Shared error handling for create-project."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn, Sequence

import typer

if TYPE_CHECKING:  # pragma: no cover
    from .runner import CommandResult


class ScaffoldError(Exception):
    """Base exception for scaffolding operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template name does not resolve to a readable directory."""

    def __init__(self, name: str, path: object = None) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Invalid template name: {name}", exit_code=1)


class UnknownLicenseError(ScaffoldError):
    """Raised when no license text exists for the requested id."""

    def __init__(self, license_id: str, available: Sequence[str] = ()) -> None:
        self.license_id = license_id
        choices = ", ".join(available) or "(none)"
        super().__init__(
            f"Unknown license '{license_id}'. Available: {choices}", exit_code=1
        )


class UnknownPackageManagerError(ScaffoldError):
    """Raised when no install command is known for a package manager."""

    def __init__(self, package_manager: str, available: Sequence[str] = ()) -> None:
        self.package_manager = package_manager
        choices = ", ".join(available) or "(none)"
        super().__init__(
            f"Unsupported package manager '{package_manager}'. Available: {choices}",
            exit_code=1,
        )


class CommandFailedError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, message: str, result: CommandResult) -> None:
        self.result = result
        detail = (result.stderr or result.stdout or "").strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, exit_code=result.returncode or 1)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on scaffolding errors."""
    if isinstance(error, ScaffoldError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)

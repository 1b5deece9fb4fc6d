"""Dependency installation for scaffolded projects.

The package manager is picked from an explicit override or from the
lockfiles present in the target directory:

    yarn.lock          -> yarn install
    pnpm-lock.yaml     -> pnpm install
    requirements.txt   -> pip install -r requirements.txt (no package.json)
    otherwise          -> npm install
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ProjectOptions
from .errors import CommandFailedError, UnknownPackageManagerError
from .runner import CommandResult, CommandRunner

log = logging.getLogger(__name__)

INSTALL_HINT = "Pass --install to automatically install dependencies"

_INSTALL_COMMANDS: dict[str, list[str]] = {
    "npm": ["npm", "install"],
    "yarn": ["yarn", "install"],
    "pnpm": ["pnpm", "install"],
    "pip": ["pip", "install", "-r", "requirements.txt"],
}


def detect_package_manager(root: Path) -> str:
    """Guess the package manager from files in ``root``."""
    if (root / "yarn.lock").exists():
        return "yarn"
    if (root / "pnpm-lock.yaml").exists():
        return "pnpm"
    if (root / "requirements.txt").exists() and not (root / "package.json").exists():
        return "pip"
    return "npm"


def install_command(package_manager: str) -> list[str]:
    """Return the install argv for a package manager."""
    if package_manager not in _INSTALL_COMMANDS:
        raise UnknownPackageManagerError(package_manager, list(_INSTALL_COMMANDS))
    return list(_INSTALL_COMMANDS[package_manager])


def install_dependencies(
    options: ProjectOptions, runner: CommandRunner
) -> CommandResult:
    """Install dependencies in the target directory.

    Raises:
        CommandFailedError: If the installer exits with a non-zero status
    """
    manager = options.package_manager or detect_package_manager(
        options.target_directory
    )
    argv = install_command(manager)
    log.info(f"Installing dependencies with {manager}")

    result = runner.run(argv, cwd=options.target_directory)
    if not result.ok:
        raise CommandFailedError(f"Failed to install dependencies with {manager}", result)
    return result


def install_skip_reason(options: ProjectOptions) -> str | None:
    """Reason for skipping installation, or None when it should run."""
    if not options.run_install:
        return INSTALL_HINT
    return None

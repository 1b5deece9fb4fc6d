"""Version control initialization."""

from __future__ import annotations

import logging

from .config import ProjectOptions
from .errors import CommandFailedError
from .runner import CommandResult, CommandRunner

log = logging.getLogger(__name__)


def init_git(options: ProjectOptions, runner: CommandRunner) -> CommandResult:
    """Run ``git init`` in the target directory.

    Raises:
        CommandFailedError: If git exits with a non-zero status
    """
    result = runner.run(["git", "init"], cwd=options.target_directory)
    if not result.ok:
        raise CommandFailedError("Failed to initialize git", result)

    log.info(f"Initialized git repository in {options.target_directory}")
    return result

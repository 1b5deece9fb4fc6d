"""Command runner abstraction for create-project.

Runners are responsible for executing external tools (git, package
managers) inside a working directory. The pipeline only talks to the
narrow ``CommandRunner`` interface, so tests can swap in a fake.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

log = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Exit status and captured output of one command."""

    argv: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(ABC):
    """Base class for command runners."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Runner name for logging."""
        ...

    @abstractmethod
    def run(self, argv: Sequence[str], cwd: Path) -> CommandResult:
        """Run ``argv`` with ``cwd`` as working directory.

        Args:
            argv: Program and arguments
            cwd: Working directory

        Returns:
            CommandResult with exit status and captured output
        """
        ...


class SubprocessRunner(CommandRunner):
    """Run commands on the local machine via subprocess.

    No timeout is applied. A missing executable is reported as exit
    code 127, the same as a shell would; a missing working directory
    raises FileNotFoundError.
    """

    @property
    def name(self) -> str:
        return "subprocess"

    def run(self, argv: Sequence[str], cwd: Path) -> CommandResult:
        args = list(argv)
        if not Path(cwd).is_dir():
            raise FileNotFoundError(f"Working directory does not exist: {cwd}")

        log.debug(f"Running {' '.join(args)} in {cwd}")
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            log.debug(f"Executable not found: {args[0]}")
            return CommandResult(argv=args, returncode=127, stderr=str(e))

        log.debug(f"{args[0]} exited with {completed.returncode}")
        return CommandResult(
            argv=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def get_runner(runner_name: str = "subprocess") -> CommandRunner:
    """Get a command runner by name.

    Currently only 'subprocess' is supported.
    """
    runners: dict[str, CommandRunner] = {
        "subprocess": SubprocessRunner(),
    }

    if runner_name not in runners:
        available = ", ".join(runners.keys())
        raise ValueError(f"Runner '{runner_name}' not found. Available: {available}")

    return runners[runner_name]

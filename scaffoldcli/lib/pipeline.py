"""Sequential step pipeline.

Each step runs in declared order and ends in one of the terminal states
of ``StepStatus``. A failed step does not stop the steps after it; the
failure is recorded in the ``RunReport`` instead. Completed steps are
never rolled back.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

log = logging.getLogger(__name__)


class StepStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"

    @property
    def is_terminal(self) -> bool:
        return self in (StepStatus.SUCCEEDED, StepStatus.FAILED, StepStatus.SKIPPED)


@dataclass
class Step:
    """One independently failable unit of work.

    ``enabled`` returning False removes the step from the run entirely.
    ``skip`` returning a string marks the step skipped with that message.
    """

    title: str
    task: Callable[[], Any]
    enabled: Callable[[], bool] | None = None
    skip: Callable[[], str | None] | None = None


@dataclass
class StepResult:
    """Outcome of a single step."""

    title: str
    status: StepStatus = StepStatus.PENDING
    message: str | None = None
    error: BaseException | None = None
    duration: float = 0.0


@dataclass
class RunReport:
    """Ordered step results of one pipeline run."""

    results: list[StepResult] = field(default_factory=list)

    @property
    def failed(self) -> list[StepResult]:
        return [r for r in self.results if r.status == StepStatus.FAILED]

    @property
    def skipped(self) -> list[StepResult]:
        return [r for r in self.results if r.status == StepStatus.SKIPPED]

    @property
    def ok(self) -> bool:
        return not self.failed

    def get(self, title: str) -> StepResult | None:
        for result in self.results:
            if result.title == title:
                return result
        return None


Reporter = Callable[[StepResult], None]


class Pipeline:
    """Runs steps strictly one after another, continuing past failures."""

    def __init__(self, steps: list[Step] | None = None):
        self.steps: list[Step] = list(steps or [])

    def add(self, step: Step) -> None:
        self.steps.append(step)

    def run(self, reporter: Reporter | None = None) -> RunReport:
        """Execute all enabled steps and return the run report.

        Args:
            reporter: Called on every status change (running and terminal)
        """
        report = RunReport()

        for step in self.steps:
            if step.enabled is not None and not step.enabled():
                log.debug(f"Step '{step.title}' disabled")
                continue

            result = StepResult(title=step.title)
            report.results.append(result)

            reason = step.skip() if step.skip is not None else None
            if reason:
                result.status = StepStatus.SKIPPED
                result.message = reason
                log.debug(f"Step '{step.title}' skipped: {reason}")
                _notify(reporter, result)
                continue

            result.status = StepStatus.RUNNING
            _notify(reporter, result)

            start = time.monotonic()
            try:
                step.task()
            except Exception as e:
                result.status = StepStatus.FAILED
                result.error = e
                result.message = getattr(e, "message", None) or str(e)
                log.debug(f"Step '{step.title}' failed", exc_info=True)
            else:
                result.status = StepStatus.SUCCEEDED
            result.duration = time.monotonic() - start

            _notify(reporter, result)

        return report


def _notify(reporter: Reporter | None, result: StepResult) -> None:
    if reporter is not None:
        reporter(result)

"""Project-level services for create-project.

ProjectService resolves the template, prepares the target directory and
runs the scaffolding pipeline. It never exits the process: an unknown
template surfaces as ``TemplateNotFoundError`` and the CLI decides what
to do with it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from scaffoldcli.lib.config import ProjectOptions
from scaffoldcli.lib.copier import copy_template_files
from scaffoldcli.lib.gitignore import create_gitignore
from scaffoldcli.lib.install import (
    install_command,
    install_dependencies,
    install_skip_reason,
)
from scaffoldcli.lib.license import create_license, load_license_text
from scaffoldcli.lib.pipeline import Pipeline, Reporter, RunReport, Step
from scaffoldcli.lib.runner import CommandRunner, get_runner
from scaffoldcli.lib.template import resolve_template
from scaffoldcli.lib.vcs import init_git

log = logging.getLogger(__name__)

COPY_STEP = "Copy project files"
GITIGNORE_STEP = "Create gitignore"
LICENSE_STEP = "Create License"
GIT_STEP = "Initialize git"
INSTALL_STEP = "Install dependencies"


class ProjectService:
    """Service that orchestrates scaffolding of a new project.

    The copy step creates the target directory; the steps after it
    assume it exists and fail individually when it does not.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.runner = runner or get_runner()
        self.templates_dir = templates_dir

    def prepare(self, options: ProjectOptions) -> ProjectOptions:
        """Return options with resolved absolute paths.

        The license id and an explicit package manager are checked here too,
        so a bad choice is rejected before anything is written.

        Raises:
            TemplateNotFoundError: If the template cannot be read
            UnknownLicenseError: If no license text matches
            UnknownPackageManagerError: If the installer override is unknown
        """
        template_directory = resolve_template(options.template, self.templates_dir)
        load_license_text(options.license)
        if options.package_manager:
            install_command(options.package_manager)
        return options.model_copy(
            update={
                "template_directory": template_directory,
                "target_directory": Path(options.target_directory).resolve(),
            }
        )

    def build_pipeline(self, options: ProjectOptions) -> Pipeline:
        """Declare the scaffolding steps in execution order."""
        return Pipeline(
            [
                Step(COPY_STEP, lambda: copy_template_files(options)),
                Step(GITIGNORE_STEP, lambda: create_gitignore(options)),
                Step(LICENSE_STEP, lambda: create_license(options)),
                Step(
                    GIT_STEP,
                    lambda: init_git(options, self.runner),
                    enabled=lambda: options.git,
                ),
                Step(
                    INSTALL_STEP,
                    lambda: install_dependencies(options, self.runner),
                    skip=lambda: install_skip_reason(options),
                ),
            ]
        )

    def create(
        self, options: ProjectOptions, reporter: Reporter | None = None
    ) -> RunReport:
        """Scaffold a project and return the per-step report.

        Nothing is written when the template cannot be resolved.
        """
        options = self.prepare(options)
        log.info(
            f"Scaffolding '{options.template}' from {options.template_directory} "
            f"into {options.target_directory}"
        )

        report = self.build_pipeline(options).run(reporter)

        if not report.ok:
            log.warning(f"{len(report.failed)} step(s) failed")
        return report

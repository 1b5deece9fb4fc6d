"""Create command - scaffold a new project from a template"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from scaffoldcli.lib.config import AuthorConfig, ProjectOptions, Settings
from scaffoldcli.lib.errors import ScaffoldError, TemplateNotFoundError
from scaffoldcli.lib.runner import CommandRunner
from scaffoldcli.lib.template import list_templates, templates_root
from scaffoldcli.services.project import ProjectService

from .utils import console, print_step

log = logging.getLogger(__name__)


def prompt_for_missing_options(
    template: Optional[str],
    git: Optional[bool],
    settings: Settings,
    skip_prompts: bool,
) -> tuple[str, bool]:
    """Ask for the template and git choice unless prompts are skipped.

    Git is only asked about when the template was not given either; a
    template on the command line means an unset --git stays off.
    """
    if skip_prompts or template is not None:
        return template or settings.default_template, bool(git)

    choices = list_templates(templates_root(settings.templates_dir))
    if choices:
        console.print(f"[dim]Available templates:[/dim] {', '.join(choices)}")
    template = typer.prompt(
        "Please choose which project template to use",
        default=settings.default_template,
    )

    if git is None:
        git = typer.confirm("Initialize a git repository?", default=False)

    return template, git


def create_command(
    template: Optional[str],
    settings: Settings,
    git: Optional[bool] = None,
    run_install: bool = False,
    skip_prompts: bool = False,
    target: Optional[Path] = None,
    name: Optional[str] = None,
    email: Optional[str] = None,
    license_id: Optional[str] = None,
    package_manager: Optional[str] = None,
    runner: Optional[CommandRunner] = None,
) -> None:
    """Scaffold a project.

    Exits with 1 when the template, license or package manager is unknown;
    failures of individual steps are reported and keep exit code 0.
    """
    template, git = prompt_for_missing_options(template, git, settings, skip_prompts)

    author = AuthorConfig(
        name=name or settings.author.name,
        email=email or settings.author.email,
    )
    options = ProjectOptions(
        template=template,
        target_directory=target or Path.cwd(),
        author=author,
        git=git,
        run_install=run_install,
        license=license_id or settings.license,
        package_manager=package_manager,
    )

    service = ProjectService(runner=runner, templates_dir=settings.templates_dir)
    try:
        report = service.create(options, reporter=print_step)
    except TemplateNotFoundError as e:
        log.debug(f"Template lookup failed: {e.path}")
        console.print("[red bold]ERROR[/red bold] Invalid template name")
        raise typer.Exit(e.exit_code)
    except ScaffoldError as e:
        console.print(f"[red bold]ERROR[/red bold] {escape(e.message)}")
        raise typer.Exit(e.exit_code)

    if not report.ok:
        titles = ", ".join(r.title for r in report.failed)
        console.print(f"[yellow bold]WARN[/yellow bold] Some steps failed: {titles}")

    console.print("[green bold]DONE[/green bold] Project ready")

"""Configuration management for create-project.

Settings are read from a YAML file:
- author: name/email used for the LICENSE holder
- license: default license id
- templates_dir: alternative templates root
- default_template: template used with --yes

Environment variables override the file, CLI flags override both.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV = "CREATE_PROJECT_CONFIG"
AUTHOR_NAME_ENV = "CREATE_PROJECT_AUTHOR_NAME"
AUTHOR_EMAIL_ENV = "CREATE_PROJECT_AUTHOR_EMAIL"
TEMPLATES_DIR_ENV = "CREATE_PROJECT_TEMPLATES_DIR"

DEFAULT_TEMPLATE = "javascript"
DEFAULT_LICENSE = "MIT"


class AuthorConfig(BaseModel):
    """Copyright holder identity."""

    name: str = Field(default="Your Name", description="Author name")
    email: str = Field(default="you@example.com", description="Author email")

    @property
    def holder(self) -> str:
        return f"{self.name} ({self.email})"


class Settings(BaseModel):
    """User-level configuration file."""

    author: AuthorConfig = Field(default_factory=AuthorConfig)
    license: str = Field(default=DEFAULT_LICENSE, description="Default license id")
    templates_dir: Path | None = Field(
        default=None, description="Override for the bundled templates directory"
    )
    default_template: str = Field(
        default=DEFAULT_TEMPLATE, description="Template used when prompts are skipped"
    )


class ProjectOptions(BaseModel):
    """Options for one scaffolding run.

    Built once from CLI input, then enriched with the resolved template
    directory before the pipeline runs.
    """

    template: str = Field(description="Template name (case-insensitive)")
    target_directory: Path = Field(default_factory=Path.cwd)
    template_directory: Path | None = Field(
        default=None, description="Resolved template path"
    )
    author: AuthorConfig = Field(default_factory=AuthorConfig)
    git: bool = Field(default=False, description="Run git init")
    run_install: bool = Field(default=False, description="Install dependencies")
    license: str = Field(default=DEFAULT_LICENSE, description="License id")
    gitignore: str | None = Field(
        default=None, description="Ignore rule set; None uses the template's"
    )
    package_manager: str | None = Field(
        default=None, description="Installer override (npm, yarn, pnpm, pip)"
    )


def get_config_path() -> Path:
    """Return the settings file path, honouring CREATE_PROJECT_CONFIG."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "create-project" / "config.yaml"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from YAML and apply environment overrides.

    A missing file yields the defaults.
    """
    path = path or get_config_path()

    data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    settings = Settings(**data)
    return apply_env_overrides(settings)


def apply_env_overrides(settings: Settings) -> Settings:
    """Return a copy of settings with CREATE_PROJECT_* variables applied."""
    author = settings.author.model_copy()
    if os.environ.get(AUTHOR_NAME_ENV):
        author.name = os.environ[AUTHOR_NAME_ENV]
    if os.environ.get(AUTHOR_EMAIL_ENV):
        author.email = os.environ[AUTHOR_EMAIL_ENV]

    update: dict[str, Any] = {"author": author}
    if os.environ.get(TEMPLATES_DIR_ENV):
        update["templates_dir"] = Path(os.environ[TEMPLATES_DIR_ENV]).expanduser()

    return settings.model_copy(update=update)


"""Template lookup for create-project.

Templates are plain directory trees under a templates root. A template
may carry a ``template.yaml`` manifest describing it; the manifest is
never copied into the new project.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .errors import TemplateNotFoundError

log = logging.getLogger(__name__)

MANIFEST_NAME = "template.yaml"


class TemplateManifest(BaseModel):
    """Optional per-template metadata."""

    description: str | None = Field(default=None, description="One-line summary")
    gitignore: str = Field(default="Node", description="Ignore rule set")


def get_bundled_templates_dir() -> Path:
    """Get the path to bundled templates."""
    return Path(__file__).parent.parent / "templates"


def templates_root(override: Path | None = None) -> Path:
    """Return the templates root, preferring an explicit override."""
    if override is not None:
        return Path(override).expanduser().resolve()
    return get_bundled_templates_dir().resolve()


def resolve_template(name: str, root: Path | None = None) -> Path:
    """Resolve a template name to an absolute, readable directory.

    Args:
        name: Template name, matched case-insensitively
        root: Templates root (bundled templates when omitted)

    Returns:
        Absolute path of the template directory

    Raises:
        TemplateNotFoundError: If the template is missing or unreadable
    """
    base = templates_root(root)
    normalized = (name or "").strip().lower()
    if not normalized or normalized in (".", "..") or "/" in normalized:
        raise TemplateNotFoundError(name)

    path = (base / normalized).resolve()
    log.debug(f"Resolved template '{name}' to {path}")

    if not path.is_dir() or not os.access(path, os.R_OK | os.X_OK):
        raise TemplateNotFoundError(name, path)
    return path


def list_templates(root: Path | None = None) -> list[str]:
    """List template names available under the templates root."""
    base = templates_root(root)
    if not base.is_dir():
        return []
    return sorted(
        p.name for p in base.iterdir() if p.is_dir() and not p.name.startswith(".")
    )


def load_manifest(template_dir: Path) -> TemplateManifest:
    """Load ``template.yaml`` from a template directory, or defaults."""
    path = template_dir / MANIFEST_NAME
    if not path.exists():
        return TemplateManifest()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return TemplateManifest(**data)

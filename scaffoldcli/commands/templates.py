"""Templates command - list available project templates"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.table import Table

from scaffoldcli.lib.template import list_templates, load_manifest, templates_root

from .utils import console


def templates_command(templates_dir: Optional[Path] = None) -> None:
    """List available templates."""
    root = templates_root(templates_dir)
    names = list_templates(root)

    if not names:
        console.print(f"[yellow]No templates found in {root}[/yellow]")
        return

    table = Table()
    table.add_column("Template", style="cyan")
    table.add_column("Gitignore")
    table.add_column("Description")

    for name in names:
        manifest = load_manifest(root / name)
        table.add_row(name, manifest.gitignore, manifest.description or "")

    console.print(table)

"""Copy template files into the target directory."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .config import ProjectOptions
from .template import MANIFEST_NAME

log = logging.getLogger(__name__)


def copy_tree(source: Path, target: Path) -> list[Path]:
    """Recursively copy ``source`` into ``target`` without overwriting.

    Files already present in the target are left untouched. The
    template manifest at the top level is not copied.

    Returns:
        Relative paths of the files that were written
    """
    copied: list[Path] = []
    target.mkdir(parents=True, exist_ok=True)

    for dirpath, dirnames, filenames in os.walk(source, followlinks=True):
        dirnames.sort()
        rel_dir = Path(dirpath).relative_to(source)
        dest_dir = target / rel_dir
        dest_dir.mkdir(parents=True, exist_ok=True)

        for filename in sorted(filenames):
            rel = rel_dir / filename
            if rel == Path(MANIFEST_NAME):
                continue

            dest = dest_dir / filename
            if dest.exists() or dest.is_symlink():
                log.info(f"Keeping existing file {rel}")
                continue

            shutil.copy2(Path(dirpath) / filename, dest)
            copied.append(rel)

    log.debug(f"Copied {len(copied)} files into {target}")
    return copied


def copy_template_files(options: ProjectOptions) -> list[Path]:
    """Copy the resolved template into the project's target directory."""
    if options.template_directory is None:
        raise ValueError("Template directory has not been resolved")
    return copy_tree(options.template_directory, options.target_directory)

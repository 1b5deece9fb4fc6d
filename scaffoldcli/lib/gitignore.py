"""Append ecosystem ignore rules to the project's .gitignore."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ProjectOptions
from .template import load_manifest

log = logging.getLogger(__name__)

DEFAULT_RULE_SET = "Node"


def get_rules_dir() -> Path:
    """Get the path to bundled ignore rule sets."""
    return Path(__file__).parent.parent / "data" / "gitignore"


def list_rule_sets() -> list[str]:
    """List bundled rule set names (e.g. 'Node', 'Python')."""
    return sorted(p.stem for p in get_rules_dir().glob("*.gitignore"))


def load_rules(rule_set: str) -> str:
    """Load a rule set by name, matched case-insensitively."""
    for name in list_rule_sets():
        if name.lower() == rule_set.strip().lower():
            return (get_rules_dir() / f"{name}.gitignore").read_text(encoding="utf-8")

    available = ", ".join(list_rule_sets()) or "(none)"
    raise ValueError(f"Unknown gitignore type '{rule_set}'. Available: {available}")


def append_gitignore(root: Path, rules: str) -> Path:
    """Append ``rules`` to ``<root>/.gitignore`` and return its path.

    Existing content is kept; a newline is inserted first when the file
    does not end with one.
    """
    gitignore_path = root / ".gitignore"
    prefix = ""
    if gitignore_path.exists():
        content = gitignore_path.read_text(encoding="utf-8")
        if content and not content.endswith("\n"):
            prefix = "\n"

    with open(gitignore_path, "a", encoding="utf-8") as f:
        f.write(prefix + rules)
    return gitignore_path


def resolve_rule_set(options: ProjectOptions) -> str:
    """Pick the rule set: explicit option, then template manifest, then Node."""
    if options.gitignore:
        return options.gitignore
    if options.template_directory is not None:
        return load_manifest(options.template_directory).gitignore
    return DEFAULT_RULE_SET


def create_gitignore(options: ProjectOptions) -> Path:
    """Write the ignore rules for the project's ecosystem."""
    rule_set = resolve_rule_set(options)
    log.debug(f"Using {rule_set} gitignore rules")
    return append_gitignore(options.target_directory, load_rules(rule_set))

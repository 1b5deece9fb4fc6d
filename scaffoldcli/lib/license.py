"""LICENSE file generation."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from .config import ProjectOptions
from .errors import UnknownLicenseError

YEAR_PLACEHOLDER = "<year>"
HOLDER_PLACEHOLDER = "<copyright holders>"


def get_licenses_dir() -> Path:
    """Get the path to bundled license texts."""
    return Path(__file__).parent.parent / "data" / "licenses"


def list_licenses() -> list[str]:
    return sorted(p.stem for p in get_licenses_dir().glob("*.txt"))


def load_license_text(license_id: str) -> str:
    """Load the license template for an SPDX-style id (e.g. 'MIT')."""
    for name in list_licenses():
        if name.lower() == license_id.strip().lower():
            return (get_licenses_dir() / f"{name}.txt").read_text(encoding="utf-8")
    raise UnknownLicenseError(license_id, list_licenses())


def render_license(text: str, year: int, holder: str) -> str:
    """Substitute the year and copyright holder placeholders."""
    return text.replace(YEAR_PLACEHOLDER, str(year)).replace(
        HOLDER_PLACEHOLDER, holder
    )


def create_license(options: ProjectOptions, today: date | None = None) -> Path:
    """Render the license and write it to ``<target>/LICENSE``."""
    today = today or date.today()
    content = render_license(
        load_license_text(options.license), today.year, options.author.holder
    )
    target_path = options.target_directory / "LICENSE"
    target_path.write_text(content, encoding="utf-8")
    return target_path

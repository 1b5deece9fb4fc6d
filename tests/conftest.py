from pathlib import Path

import pytest

from scaffoldcli.lib.config import AuthorConfig, ProjectOptions
from scaffoldcli.lib.runner import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """Records invocations instead of spawning processes."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def name(self) -> str:
        return "fake"

    def run(self, argv, cwd):
        self.calls.append((list(argv), Path(cwd)))
        return CommandResult(
            argv=list(argv), returncode=self.returncode, stderr=self.stderr
        )


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Build a FakeRunner with a chosen exit status."""
    return FakeRunner


@pytest.fixture
def templates_dir(tmp_path):
    """A templates root with a single 'demo' template."""
    root = tmp_path / "templates"
    demo = root / "demo"
    (demo / "src" / "lib").mkdir(parents=True)
    (demo / "template.yaml").write_text("description: Demo\ngitignore: Python\n")
    (demo / "README.md").write_text("# demo\n")
    (demo / "package.json").write_text('{"name": "demo"}\n')
    (demo / "src" / "index.js").write_text("console.log('hi');\n")
    (demo / "src" / "lib" / "util.js").write_text("export const x = 1;\n")
    return root


@pytest.fixture
def options(tmp_path):
    return ProjectOptions(
        template="demo",
        target_directory=tmp_path / "project",
        author=AuthorConfig(name="Ada Lovelace", email="ada@example.com"),
    )


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Never read the developer's real settings file."""
    monkeypatch.setenv("CREATE_PROJECT_CONFIG", str(tmp_path / "no-config.yaml"))
    for var in (
        "CREATE_PROJECT_AUTHOR_NAME",
        "CREATE_PROJECT_AUTHOR_EMAIL",
        "CREATE_PROJECT_TEMPLATES_DIR",
        "CREATE_PROJECT_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)

"""End-to-end tests for ProjectService with a fake command runner."""

from datetime import date

import pytest

from scaffoldcli.lib.errors import (
    TemplateNotFoundError,
    UnknownLicenseError,
    UnknownPackageManagerError,
)
from scaffoldcli.lib.install import INSTALL_HINT
from scaffoldcli.lib.pipeline import StepStatus
from scaffoldcli.services import project as project_module
from scaffoldcli.services.project import (
    COPY_STEP,
    GIT_STEP,
    GITIGNORE_STEP,
    INSTALL_STEP,
    LICENSE_STEP,
    ProjectService,
)


@pytest.fixture
def service(fake_runner, templates_dir):
    return ProjectService(runner=fake_runner, templates_dir=templates_dir)


def test_create_scaffolds_project(service, options):
    report = service.create(options)

    target = options.target_directory
    for rel in ["README.md", "package.json", "src/index.js", "src/lib/util.js"]:
        assert (target / rel).exists()
    assert "__pycache__/" in (target / ".gitignore").read_text()
    license_text = (target / "LICENSE").read_text()
    assert f"{date.today().year} Ada Lovelace (ada@example.com)" in license_text

    assert [r.title for r in report.results] == [
        COPY_STEP,
        GITIGNORE_STEP,
        LICENSE_STEP,
        INSTALL_STEP,
    ]
    assert report.ok


def test_existing_files_are_left_untouched(service, options):
    options.target_directory.mkdir()
    (options.target_directory / "README.md").write_text("keep me\n")

    service.create(options)

    assert (options.target_directory / "README.md").read_text() == "keep me\n"


def test_invalid_template_creates_nothing(service, options):
    options.template = "nope"
    with pytest.raises(TemplateNotFoundError):
        service.create(options)
    assert not options.target_directory.exists()


def test_git_not_invoked_without_flag(service, options, fake_runner):
    report = service.create(options)
    assert fake_runner.calls == []
    assert report.get(GIT_STEP) is None


def test_git_invoked_once_in_target(service, options, fake_runner):
    options.git = True
    report = service.create(options)

    assert fake_runner.calls == [(["git", "init"], options.target_directory.resolve())]
    assert report.get(GIT_STEP).status == StepStatus.SUCCEEDED


def test_git_failure_is_reported_not_raised(templates_dir, options, make_runner):
    service = ProjectService(
        runner=make_runner(returncode=1, stderr="boom"), templates_dir=templates_dir
    )
    options.git = True

    report = service.create(options)

    git = report.get(GIT_STEP)
    assert git.status == StepStatus.FAILED
    assert "Failed to initialize git" in git.message
    assert report.get(INSTALL_STEP).status == StepStatus.SKIPPED


def test_install_skipped_without_flag(service, options):
    report = service.create(options)
    install = report.get(INSTALL_STEP)
    assert install.status == StepStatus.SKIPPED
    assert install.message == INSTALL_HINT
    assert "--install" in install.message


def test_install_invoked_once_with_flag(service, options, fake_runner):
    options.run_install = True
    report = service.create(options)

    assert fake_runner.calls == [(["npm", "install"], options.target_directory.resolve())]
    assert report.get(INSTALL_STEP).status == StepStatus.SUCCEEDED


def test_copy_failure_does_not_stop_later_steps(service, options, monkeypatch):
    def deny(_options):
        raise PermissionError("permission denied")

    monkeypatch.setattr(project_module, "copy_template_files", deny)
    options.target_directory.mkdir()

    report = service.create(options)

    assert report.get(COPY_STEP).status == StepStatus.FAILED
    assert report.get(GITIGNORE_STEP).status == StepStatus.SUCCEEDED
    assert report.get(LICENSE_STEP).status == StepStatus.SUCCEEDED
    assert (options.target_directory / "LICENSE").exists()
    assert not (options.target_directory / "package.json").exists()
    assert not report.ok


def test_prepare_resolves_paths(service, options, templates_dir):
    prepared = service.prepare(options)
    assert prepared.template_directory == (templates_dir / "demo").resolve()
    assert prepared.target_directory.is_absolute()
    assert options.template_directory is None


def test_unknown_license_rejected_before_copy(service, options):
    options.license = "WTFPL"
    with pytest.raises(UnknownLicenseError):
        service.create(options)
    assert not options.target_directory.exists()


def test_unknown_package_manager_rejected_before_copy(service, options, fake_runner):
    options.package_manager = "cargo"
    options.run_install = True
    with pytest.raises(UnknownPackageManagerError):
        service.create(options)
    assert not options.target_directory.exists()
    assert fake_runner.calls == []

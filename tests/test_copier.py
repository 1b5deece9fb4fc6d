"""Tests for copying template files."""

import os
from pathlib import Path

import pytest

from scaffoldcli.lib.copier import copy_template_files, copy_tree


def test_copy_tree_copies_every_file(templates_dir, tmp_path):
    target = tmp_path / "out"
    copied = copy_tree(templates_dir / "demo", target)

    assert set(copied) == {
        Path("README.md"),
        Path("package.json"),
        Path("src/index.js"),
        Path("src/lib/util.js"),
    }
    assert (target / "src" / "lib" / "util.js").read_text() == "export const x = 1;\n"


def test_copy_tree_skips_manifest(templates_dir, tmp_path):
    target = tmp_path / "out"
    copy_tree(templates_dir / "demo", target)
    assert not (target / "template.yaml").exists()


def test_copy_tree_never_overwrites(templates_dir, tmp_path):
    target = tmp_path / "out"
    (target / "src").mkdir(parents=True)
    (target / "README.md").write_text("mine\n")
    (target / "src" / "index.js").write_text("// mine\n")

    copied = copy_tree(templates_dir / "demo", target)

    assert (target / "README.md").read_text() == "mine\n"
    assert (target / "src" / "index.js").read_text() == "// mine\n"
    assert Path("README.md") not in copied
    assert (target / "package.json").exists()


def test_copy_tree_rerun_is_idempotent(templates_dir, tmp_path):
    target = tmp_path / "out"
    copy_tree(templates_dir / "demo", target)
    (target / "package.json").write_text('{"name": "edited"}\n')

    assert copy_tree(templates_dir / "demo", target) == []
    assert (target / "package.json").read_text() == '{"name": "edited"}\n'


def test_copy_template_files_uses_options(templates_dir, options):
    options.template_directory = templates_dir / "demo"
    copy_template_files(options)
    assert (options.target_directory / "package.json").exists()


def test_copy_template_files_requires_resolved_template(options):
    with pytest.raises(ValueError, match="not been resolved"):
        copy_template_files(options)


def test_copy_tree_follows_symlinked_directories(tmp_path):
    source = tmp_path / "tpl"
    (source / "real").mkdir(parents=True)
    (source / "real" / "a.txt").write_text("a\n")
    os.symlink(source / "real", source / "linked", target_is_directory=True)
    target = tmp_path / "out"

    copied = copy_tree(source, target)

    assert Path("linked/a.txt") in copied
    assert (target / "linked" / "a.txt").read_text() == "a\n"
    assert not (target / "linked").is_symlink()

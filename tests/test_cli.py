"""
Tests for the ram-utils command line.
"""

import os
from pathlib import Path
import sys

from click.testing import CliRunner
import pytest

from ram_utils import __version__
from ram_utils.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def docs(tmp_path):
    root = tmp_path / "Docs"
    (root / "SubDir").mkdir(parents=True)
    (root / "SubDir" / "Notes.TXT").write_text("notes")
    (root / "Readme.md").write_text("readme")
    return root


def test_lower_recursive(runner, docs):
    result = runner.invoke(main, ["lower", "-r", str(docs)])

    assert result.exit_code == 0, result.output
    base = docs.parent
    assert (base / "docs" / "subdir" / "notes.txt").exists()
    assert (base / "docs" / "readme.md").exists()
    assert "✓ Converted 4 item(s)" in result.output


def test_upper_ignore_dirs(runner, docs):
    result = runner.invoke(main, ["upper", "--ignore-dirs", "-r", str(docs)])

    assert result.exit_code == 0, result.output
    assert (docs / "SubDir" / "NOTES.TXT").exists()
    assert (docs / "README.MD").exists()


def test_upper_single_file(runner, docs):
    target = docs / "Readme.md"

    result = runner.invoke(main, ["upper", str(target)])

    assert result.exit_code == 0, result.output
    assert (docs / "README.MD").exists()
    assert (docs / "SubDir" / "Notes.TXT").exists()


def test_missing_path(runner, tmp_path):
    result = runner.invoke(main, ["upper", str(tmp_path / "no" / "such" / "path")])

    assert result.exit_code != 0
    assert "does not exist" in result.output
    assert list(tmp_path.iterdir()) == []


def test_collision_reports_error(runner, tmp_path):
    (tmp_path / "A.txt").write_text("upper")
    (tmp_path / "a.txt").write_text("lower")

    result = runner.invoke(main, ["lower", "--ignore-dirs", str(tmp_path)])

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert {p.name for p in tmp_path.iterdir()} == {"A.txt", "a.txt"}


def test_missing_subcommand(runner):
    result = runner.invoke(main, [])

    assert result.exit_code == 2
    assert "upper" in result.output
    assert "lower" in result.output


def test_missing_path_argument(runner):
    result = runner.invoke(main, ["upper"])

    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_unknown_flag(runner, tmp_path):
    result = runner.invoke(main, ["lower", "--bogus", str(tmp_path)])

    assert result.exit_code == 2
    assert "No such option" in result.output


def test_both_ignores_accepted(runner, docs):
    result = runner.invoke(
        main, ["upper", "--ignore-dirs", "--ignore-files", "-r", str(docs)]
    )

    assert result.exit_code == 0, result.output
    assert (docs / "SubDir" / "Notes.TXT").exists()


@pytest.mark.parametrize("args", [["-V"], ["--version"], ["upper", "-V"]])
def test_version(runner, args):
    result = runner.invoke(main, args)

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_subcommand(runner):
    result = runner.invoke(main, ["help"])
    assert result.exit_code == 0
    assert "unique_ext" in result.output

    result = runner.invoke(main, ["help", "upper"])
    assert result.exit_code == 0
    assert "--ignore-dirs" in result.output

    result = runner.invoke(main, ["help", "nope"])
    assert result.exit_code == 2


def test_short_help_option(runner):
    result = runner.invoke(main, ["lower", "-h"])

    assert result.exit_code == 0
    assert "--ignore-files" in result.output


def test_unique_ext(runner, docs):
    (docs / "other.txt").write_text("x")

    result = runner.invoke(main, ["unique_ext", str(docs)])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines == ["TXT (1 files)", "md (1 files)", "txt (1 files)"]


def test_unique_ext_not_a_directory(runner, docs):
    result = runner.invoke(main, ["unique_ext", str(Path(docs) / "Readme.md")])

    assert result.exit_code == 1
    assert "Not a directory" in result.output


@pytest.mark.skipif(sys.platform != "linux", reason="needs byte filenames")
def test_non_utf8_name_is_printable(runner, tmp_path):
    target = tmp_path / "d"
    target.mkdir()
    (target / os.fsdecode(b"caf\xe9.txt")).write_text("x")
    (target / "zz.txt").write_text("z")

    result = runner.invoke(main, ["upper", str(target)])

    assert result.exit_code == 0, result.output
    assert sorted(os.listdir(os.fsencode(tmp_path / "D"))) == [
        b"CAF\xe9.TXT",
        b"ZZ.TXT",
    ]
    assert "CAF\\xe9.TXT" in result.output


def test_long_paths_stay_on_one_line(runner, tmp_path):
    target = tmp_path / ("x" * 60) / "Target"
    target.mkdir(parents=True)
    (target / ("Long_Name_" + "N" * 50 + ".TXT")).write_text("x")

    result = runner.invoke(main, ["lower", str(target)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Converting ") and lines[0].endswith("target")
    assert lines[1].endswith("long_name_" + "n" * 50 + ".txt")
    assert lines[2].startswith("✓ Converted 2 item(s)")

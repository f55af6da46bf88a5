import os
from pathlib import Path

import pytest

from neatify.errors import FormattingError, NeatifyIOError, SourceNotFoundError, UnsupportedFileError
from neatify.pipeline import WalkOptions, check_paths, format_directory, format_file, format_paths
from neatify.pipeline.entrypoints import iter_source_files

UNFORMATTED = "function f(){return 1;}"
FORMATTED = "function f() {\n  return 1;\n}\n"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_format_file_reports_then_settles(tmp_path: Path) -> None:
    source = _write(tmp_path / "a.js", UNFORMATTED)

    assert format_file(source) is True
    assert source.read_text(encoding="utf-8") == UNFORMATTED

    assert format_file(source, write=True) is True
    assert source.read_text(encoding="utf-8") == FORMATTED

    assert format_file(source) is False
    assert format_file(source, write=True) is False


def test_format_file_accepts_string_paths(tmp_path: Path) -> None:
    source = _write(tmp_path / "b.mjs", "let x = 1;")

    assert format_file(str(source)) is False


def test_format_file_missing_and_unsupported(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError) as missing:
        format_file(tmp_path / "missing.js")
    assert missing.value.path == tmp_path / "missing.js"
    assert str(missing.value).startswith("IO error: File does not exist")

    notes = _write(tmp_path / "notes.txt", "hello")
    with pytest.raises(UnsupportedFileError) as unsupported:
        format_file(notes)
    assert str(unsupported.value) == f"Unsupported file: {notes}"


def test_format_file_rejects_non_utf8_content(tmp_path: Path) -> None:
    source = tmp_path / "latin.js"
    source.write_bytes(b"var s = '\xe9';")

    with pytest.raises(NeatifyIOError):
        format_file(source)


def test_format_directory_collects_stats(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "a.js", UNFORMATTED)
    _write(tmp_path / "src" / "b.cjs", "let x = 1;")
    _write(tmp_path / "README.md", "# not js")

    dry_run = format_directory(tmp_path)

    assert dry_run.total_files == 2
    assert dry_run.files_needing_formatting == 1
    assert dry_run.formatted_files == 0
    assert dry_run.changed_paths == [tmp_path / "src" / "a.js"]

    written = format_directory(tmp_path, write=True)

    assert written.formatted_files == 1
    assert written.files_needing_formatting == 0
    assert (tmp_path / "src" / "a.js").read_text(encoding="utf-8") == FORMATTED
    assert format_directory(tmp_path).changed_paths == []


def test_format_directory_skips_default_ignored_and_hidden_paths(tmp_path: Path) -> None:
    _write(tmp_path / "app.js", "let x = 1;")
    _write(tmp_path / "node_modules" / "dep" / "index.js", UNFORMATTED)
    _write(tmp_path / "dist" / "bundle.js", UNFORMATTED)
    _write(tmp_path / "vendor.min.js", UNFORMATTED)
    _write(tmp_path / ".config" / "tool.js", UNFORMATTED)
    _write(tmp_path / ".eslintrc.js", UNFORMATTED)

    walked = [path for path, _ in iter_source_files(tmp_path, WalkOptions())]
    assert walked == [tmp_path / "app.js"]

    with_hidden = [path for path, _ in iter_source_files(tmp_path, WalkOptions(include_hidden=True))]
    assert with_hidden == [tmp_path / ".config" / "tool.js", tmp_path / ".eslintrc.js", tmp_path / "app.js"]


def test_format_directory_honours_ignore_file(tmp_path: Path) -> None:
    _write(tmp_path / ".neatignore", "# generated code\nlegacy/\n")
    _write(tmp_path / "legacy" / "old.js", UNFORMATTED)
    _write(tmp_path / "main.js", UNFORMATTED)

    honoured = format_directory(tmp_path)
    assert honoured.changed_paths == [tmp_path / "main.js"]

    bypassed = format_directory(tmp_path, options=WalkOptions(use_ignore_file=False))
    assert bypassed.changed_paths == [tmp_path / "legacy" / "old.js", tmp_path / "main.js"]


def test_format_directory_custom_ignore_path(tmp_path: Path) -> None:
    custom = _write(tmp_path / "elsewhere" / "ignore-list", "main.js\n")
    project = tmp_path / "project"
    _write(project / "main.js", UNFORMATTED)
    _write(project / "other.js", UNFORMATTED)

    stats = format_directory(project, options=WalkOptions(ignore_path=custom))

    assert stats.changed_paths == [project / "other.js"]


def test_format_directory_rejects_missing_and_file_paths(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        format_directory(tmp_path / "nope")

    source = _write(tmp_path / "a.js", "let x = 1;")
    with pytest.raises(NeatifyIOError) as excinfo:
        format_directory(source)
    assert "Path is not a directory" in str(excinfo.value)


def test_format_directory_wraps_per_file_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.js"
    bad.write_bytes(b"\xff\xfe")

    with pytest.raises(FormattingError) as excinfo:
        format_directory(tmp_path)

    assert excinfo.value.path == bad
    assert str(excinfo.value).startswith(f"Formatting error: Error formatting {bad}")


def test_format_paths_mixes_files_and_directories(tmp_path: Path) -> None:
    single = _write(tmp_path / "single.js", UNFORMATTED)
    _write(tmp_path / "pkg" / "inner.js", UNFORMATTED)
    _write(tmp_path / "pkg" / "clean.js", "let x = 1;")

    report = format_paths([single, tmp_path / "pkg"], write=True)

    assert report.errors == []
    assert report.stats.total_files == 3
    assert report.stats.formatted_files == 2
    assert report.changed_paths == [single, tmp_path / "pkg" / "inner.js"]
    assert check_paths([single, tmp_path / "pkg"]).ok


def test_check_paths_collects_errors_per_path(tmp_path: Path) -> None:
    good = _write(tmp_path / "good.js", UNFORMATTED)
    unsupported = _write(tmp_path / "notes.txt", "hi")
    missing = tmp_path / "missing.js"

    report = check_paths([missing, unsupported, good])

    assert [error.path for error in report.errors] == [missing, unsupported]
    assert "Unsupported file" in report.errors[1].message
    assert report.changed_paths == [good]
    assert report.stats.files_needing_formatting == 1
    assert not report.ok
    assert good.read_text(encoding="utf-8") == UNFORMATTED


def test_format_directory_does_not_follow_directory_symlinks(tmp_path: Path) -> None:
    source = _write(tmp_path / "src" / "a.js", UNFORMATTED)
    os.symlink(tmp_path / "src", tmp_path / "src" / "loop", target_is_directory=True)

    stats = format_directory(tmp_path)

    assert stats.total_files == 1
    assert stats.changed_paths == [source]


def test_format_directory_formats_symlinked_files(tmp_path: Path) -> None:
    target = _write(tmp_path / "shared" / "real.js", "let x = 1;")
    project = tmp_path / "project"
    project.mkdir()
    os.symlink(target, project / "linked.js")

    stats = format_directory(project)

    assert stats.total_files == 1
    assert stats.changed_paths == []


def test_ignore_file_negation_reincludes_files(tmp_path: Path) -> None:
    _write(tmp_path / ".neatignore", "src/*.js\n!src/keep.js\n")
    _write(tmp_path / "src" / "drop.js", UNFORMATTED)
    _write(tmp_path / "src" / "keep.js", UNFORMATTED)
    _write(tmp_path / "src" / "deep" / "nested.js", UNFORMATTED)

    walked = [path for path, _ in iter_source_files(tmp_path, WalkOptions())]

    assert walked == [tmp_path / "src" / "deep" / "nested.js", tmp_path / "src" / "keep.js"]

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from artifact import PathError
from resolver import (
    TIMESTAMP_FORMAT,
    artifact_path,
    default_identifier,
    ensure_directory,
    resolve_directory,
    resolve_identifier,
    resolve_target,
)

MOMENT = datetime(2024, 3, 9, 14, 5, 7, tzinfo=timezone.utc)


def test_identifier_passes_through_unchanged():
    assert resolve_identifier("Weird Name-1") == "Weird Name-1"
    assert resolve_identifier("") == ""


def test_default_identifier_uses_timestamp_format():
    assert default_identifier(MOMENT) == "out_2024_0309_140507"
    assert default_identifier(MOMENT) == MOMENT.strftime(TIMESTAMP_FORMAT)
    assert default_identifier(MOMENT).isidentifier()


def test_missing_identifier_uses_clock():
    assert resolve_identifier(None, clock=lambda: MOMENT) == "out_2024_0309_140507"


def test_default_identifier_without_clock_is_timestamped():
    name = resolve_identifier(None)
    assert name.startswith("out_")
    assert name.isidentifier()


def test_identifiers_one_second_apart_differ():
    first = resolve_identifier(None, clock=lambda: MOMENT)
    second = resolve_identifier(None, clock=lambda: MOMENT + timedelta(seconds=1))
    assert first != second


def test_default_directory_is_tests_under_cwd(tmp_path: Path):
    assert resolve_directory(None, cwd=tmp_path) == tmp_path / "tests"


def test_default_directory_follows_process_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_directory(None) == Path.cwd() / "tests"


def test_explicit_directory_accepts_str_and_path(tmp_path: Path):
    assert resolve_directory(str(tmp_path / "out")) == tmp_path / "out"
    assert resolve_directory(tmp_path / "out") == tmp_path / "out"


@pytest.mark.parametrize("location", ["", "bad\x00path"])
def test_unusable_directory_raises_path_error(location: str):
    with pytest.raises(PathError):
        resolve_directory(location)


def test_non_path_location_raises_path_error():
    with pytest.raises(PathError):
        resolve_directory(42)


def test_resolution_does_not_touch_filesystem(tmp_path: Path):
    target = resolve_target("bar", tmp_path / "missing" / "dir")
    assert not (tmp_path / "missing").exists()
    assert target.path == tmp_path / "missing" / "dir" / "bar.py"


def test_resolve_target_combines_name_and_directory(tmp_path: Path):
    target = resolve_target(None, None, clock=lambda: MOMENT, cwd=tmp_path)
    assert target.identifier == "out_2024_0309_140507"
    assert target.directory == tmp_path / "tests"
    assert target.path == artifact_path(tmp_path / "tests", "out_2024_0309_140507")
    assert target.file_name == "out_2024_0309_140507.py"


def test_ensure_directory_creates_parents(tmp_path: Path):
    directory = tmp_path / "a" / "b" / "c"
    ensure_directory(directory)
    assert directory.is_dir()
    ensure_directory(directory)


def test_ensure_directory_rejects_file_in_the_way(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(PathError) as excinfo:
        ensure_directory(blocker / "nested")
    assert excinfo.value.path == blocker / "nested"


def test_removed_cwd_raises_path_error(tmp_path: Path, monkeypatch):
    gone = tmp_path / "gone"
    gone.mkdir()
    monkeypatch.chdir(gone)
    gone.rmdir()
    with pytest.raises(PathError):
        resolve_directory(None)

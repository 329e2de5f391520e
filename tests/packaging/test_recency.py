#!filepath: tests/packaging/test_recency.py
import time

import pytest

from speedrun_packager.packaging.recency import RecencyLister
from speedrun_packager.utils.errors import DirectoryNotFoundError


def test_sorted_most_recent_first(tmp_path, touch):
    now = time.time()
    for i, name in enumerate(["c", "a", "d", "b"]):
        p = tmp_path / name
        p.mkdir()
        touch(p, now - 100 * i)

    result = RecencyLister.list(tmp_path)

    assert [p.name for p in result] == ["c", "a", "d", "b"]


def test_includes_files_and_directories(tmp_path, touch):
    now = time.time()
    (tmp_path / "world").mkdir()
    (tmp_path / "notes.txt").write_text("x")
    touch(tmp_path / "world", now - 50)
    touch(tmp_path / "notes.txt", now)

    result = RecencyLister.list(tmp_path)

    assert [p.name for p in result] == ["notes.txt", "world"]


def test_only_immediate_children(tmp_path):
    (tmp_path / "outer" / "inner").mkdir(parents=True)

    result = RecencyLister.list(tmp_path)

    assert result == [tmp_path / "outer"]


def test_empty_directory(tmp_path):
    assert RecencyLister.list(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(DirectoryNotFoundError):
        RecencyLister.list(tmp_path / "nope")


def test_file_is_not_a_directory(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x")

    with pytest.raises(FileNotFoundError):
        RecencyLister.list(f)


def test_listing_has_no_side_effects(tmp_path, touch):
    now = time.time()
    d = tmp_path / "w"
    d.mkdir()
    touch(d, now - 10)
    before = d.stat().st_mtime_ns

    RecencyLister.list(tmp_path)

    assert d.stat().st_mtime_ns == before

from pathlib import Path

import pytest

from docsplice.cache import FileCache
from docsplice.errors import IncludeNotFound, ParseError

from tests.infrastructure import write


def test_content_is_loaded_once(tmp_path: Path):
    f = write(tmp_path / "a.md", "first")
    cache = FileCache()

    assert cache.get(f) == "first"
    assert f in cache
    assert len(cache) == 1

    # entries are never invalidated while the cache lives
    write(f, "second")
    assert cache.get(f) == "first"

    cache.clear()
    assert f not in cache
    assert cache.get(f) == "second"


def test_relative_and_absolute_spellings_share_an_entry(tmp_path: Path, monkeypatch):
    write(tmp_path / "a.md", "x")
    monkeypatch.chdir(tmp_path)
    cache = FileCache()
    cache.get(Path("a.md"))
    cache.get(tmp_path / "a.md")
    assert len(cache) == 1


def test_missing_file_raises_include_not_found(tmp_path: Path):
    cache = FileCache()
    with pytest.raises(IncludeNotFound) as exc:
        cache.get(tmp_path / "missing.md", included_from=tmp_path / "index.md")
    assert exc.value.path == tmp_path / "missing.md"
    assert exc.value.included_from == tmp_path / "index.md"
    assert "missing.md" in str(exc.value)


def test_directory_is_not_a_file(tmp_path: Path):
    (tmp_path / "dir.md").mkdir()
    with pytest.raises(IncludeNotFound):
        FileCache().get(tmp_path / "dir.md")


def test_undecodable_file_raises_parse_error(tmp_path: Path):
    f = tmp_path / "bad.md"
    f.write_bytes(b"\xff\xfe bad")
    cache = FileCache()
    with pytest.raises(ParseError) as exc:
        cache.get(f)
    assert exc.value.path == f
    assert isinstance(exc.value.cause, UnicodeDecodeError)
    assert f not in cache

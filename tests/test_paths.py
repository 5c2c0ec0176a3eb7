from pathlib import Path

from docsplice.paths import get_ext_name, is_url, resolve_include_target, set_extension


def test_is_url():
    assert is_url("https://example.com/page.html")
    assert is_url("http://example.com")
    assert not is_url("docs/page.html")
    assert not is_url("/abs/page.md")
    assert not is_url("page.md#section")


def test_ext_name_is_lowercased_without_dot():
    assert get_ext_name("a/b/Readme.MD") == "md"
    assert get_ext_name(Path("x.html")) == "html"
    assert get_ext_name("Makefile") == ""


def test_set_extension_replaces_last_suffix():
    assert set_extension("part.md", "._include_.html") == "part._include_.html"
    assert set_extension("noext", ".html") == "noext.html"


def test_relative_target_resolves_against_including_file(tmp_path: Path):
    current = tmp_path / "docs" / "index.md"
    target = resolve_include_target("../shared/part.md#intro", current)
    assert not target.remote
    assert target.path == tmp_path / "shared" / "part.md"
    assert target.anchor == "intro"


def test_query_is_not_part_of_local_path(tmp_path: Path):
    target = resolve_include_target("part.html?v=2", tmp_path / "index.html")
    assert target.path == tmp_path / "part.html"
    assert target.anchor is None


def test_url_target_is_kept_verbatim(tmp_path: Path):
    src = "https://example.com/a.html#frag"
    target = resolve_include_target(src, tmp_path / "index.md")
    assert target.remote
    assert target.location == src
    assert target.anchor == "frag"

import asyncio
from pathlib import Path

import pytest

import docsplice
from docsplice import (
    IncludeCycle,
    IncludeNotFound,
    Processor,
    UnsupportedExtension,
    create_processor,
)

from tests.infrastructure import include, render, write, write_tree


def test_unsupported_root_extension_fails_before_reading(tmp_path: Path):
    # the file does not even exist: the extension check comes first
    with pytest.raises(UnsupportedExtension):
        include(tmp_path / "notes.txt")
    with pytest.raises(UnsupportedExtension):
        render(tmp_path / "notes.rst")


def test_missing_root_file(tmp_path: Path):
    with pytest.raises(IncludeNotFound):
        render(tmp_path / "absent.md")


def test_missing_include_target_aborts_whole_run(tmp_path: Path):
    write(tmp_path / "index.md", "ok\n\n<include src=\"nope.md\" />\n")
    with pytest.raises(IncludeNotFound) as exc:
        include(tmp_path / "index.md")
    assert exc.value.path == tmp_path / "nope.md"
    assert exc.value.included_from == tmp_path / "index.md"


def test_self_include_is_a_cycle(tmp_path: Path):
    write(tmp_path / "loop.md", "<include src=\"loop.md\" />")
    with pytest.raises(IncludeCycle):
        render(tmp_path / "loop.md")


def test_transitive_cycle(tmp_path: Path):
    write_tree(tmp_path, {
        "a.md": "<include src=\"sub/b.md\" />",
        "sub/b.md": "<include src=\"../a.md\" />",
    })
    with pytest.raises(IncludeCycle) as exc:
        include(tmp_path / "a.md")
    assert exc.value.chain == [tmp_path / "a.md", tmp_path / "sub" / "b.md", tmp_path / "a.md"]


def test_same_file_included_twice_is_not_a_cycle(tmp_path: Path):
    write_tree(tmp_path, {
        "index.md": "<include src=\"p.md\" inline /> and <include src=\"p.md\" inline />",
        "p.md": "P",
    })
    assert include(tmp_path / "index.md") == "<span>P</span> and <span>P</span>"


def test_callback_receives_output(tmp_path: Path):
    write(tmp_path / "index.md", "plain")
    calls = []
    out = asyncio.run(Processor().include_file(tmp_path / "index.md", lambda err, res: calls.append((err, res))))
    assert out == "plain"
    assert calls == [(None, "plain")]


def test_callback_receives_error(tmp_path: Path):
    calls = []
    with pytest.raises(UnsupportedExtension) as exc:
        asyncio.run(Processor().render_file(tmp_path / "x.txt", lambda err, res: calls.append((err, res))))
    assert calls == [(exc.value, None)]


def test_file_cache_is_shared_between_runs(tmp_path: Path):
    write_tree(tmp_path, {"index.md": "<include src=\"p.md\" inline />", "p.md": "v1"})
    processor = Processor()
    assert include(tmp_path / "index.md", processor) == "<span>v1</span>"

    write(tmp_path / "p.md", "v2")
    assert include(tmp_path / "index.md", processor) == "<span>v1</span>"

    processor.reset()
    assert include(tmp_path / "index.md", processor) == "<span>v2</span>"


def test_reset_clears_dynamic_log(tmp_path: Path):
    write(tmp_path / "index.html", "<include src=\"d.md\" dynamic></include>")
    processor = Processor()
    render(tmp_path / "index.html", processor)
    render(tmp_path / "index.html", processor)
    assert len(processor.get_dynamic_include_src()) == 2

    # returned list is a copy
    processor.get_dynamic_include_src().append("x")
    assert len(processor.get_dynamic_include_src()) == 2

    processor.reset()
    assert processor.get_dynamic_include_src() == []


def test_include_mode_does_not_record_dynamic_sources(tmp_path: Path):
    write(tmp_path / "index.html", "<include src=\"d.md\" dynamic></include>")
    processor = Processor()
    include(tmp_path / "index.html", processor)
    assert processor.get_dynamic_include_src() == []


def test_concurrent_runs_on_one_processor(docs: Path):
    processor = Processor()

    async def both():
        return await asyncio.gather(
            processor.render_file(docs / "index.md"),
            processor.render_file(docs / "index.md"),
        )

    first, second = asyncio.run(both())
    assert first == second
    assert "<em>nested note</em>" in first


def test_dynamic_sources_drive_follow_up_include(tmp_path: Path):
    write_tree(tmp_path, {
        "index.html": "<include src=\"panel.md\" dynamic></include>",
        "panel.md": "Panel with <include src=\"bit.md\" inline />",
        "bit.md": "bit",
    })
    processor = Processor()
    render(tmp_path / "index.html", processor)
    fragments = [include(Path(src), processor) for src in processor.get_dynamic_include_src()]
    assert fragments == ["Panel with <span>bit</span>"]


def test_create_processor_reads_yaml(tmp_path: Path):
    cfg = write(tmp_path / "docsplice.yaml", "markdown:\n  table_class: grid\n")
    processor = create_processor(cfg)
    assert processor.config.markdown.table_class == "grid"
    assert create_processor().config.markdown.table_class == "table"


def test_version_is_exposed():
    assert isinstance(docsplice.__version__, str)
    assert docsplice.__version__

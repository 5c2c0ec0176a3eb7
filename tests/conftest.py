from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write_tree


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """
    Small documentation tree:

        index.md          -> includes sub/chapter.md (block)
        sub/chapter.md    -> includes note.md inline (sub/note.md, not the root one)
        sub/note.md
        note.md           -> decoy with the same name at the root
        page.html         -> two anchored sections
    """
    return write_tree(tmp_path, {
        "index.md": "# Guide\n\n<include src=\"sub/chapter.md\" />\n\nEnd of guide.\n",
        "sub/chapter.md": "Chapter says <include src=\"note.md\" inline /> here.",
        "sub/note.md": "*nested note*",
        "note.md": "ROOT NOTE",
        "page.html": (
            "<div id=\"intro\"><p>Intro text</p></div>\n"
            "<div id=\"section\"><p>Only this part</p></div>\n"
        ),
    })

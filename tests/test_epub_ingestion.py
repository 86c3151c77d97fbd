from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from readscore.epub import EPUBParseError, read_epub_chapters
from readscore.extraction import extract_epub_content
from tests.utils import chapter_html, write_minimal_epub


def test_extract_epub_content_orders_chapters(tmp_path: Path):
    """EPUB paragraphs are concatenated in spine order."""
    epub_path = tmp_path / "book.epub"
    write_minimal_epub(
        epub_path,
        chapters=[
            chapter_html("Chapter one opens the story."),
            chapter_html("Chapter two continues it.", "With a second paragraph."),
        ],
    )
    content = extract_epub_content(epub_path)
    assert content.paragraphs == (
        "Chapter one opens the story.",
        "Chapter two continues it.",
        "With a second paragraph.",
    )
    assert [element.source for element in content.elements] == [
        "OEBPS/chapter1.xhtml",
        "OEBPS/chapter2.xhtml",
        "OEBPS/chapter2.xhtml",
    ]
    assert [element.position for element in content.elements] == [0, 0, 1]


def test_epub_without_spine_falls_back_to_html_members(tmp_path: Path):
    epub_path = tmp_path / "nospine.epub"
    write_minimal_epub(
        epub_path,
        chapters=[chapter_html("Only chapter in the book.")],
        include_spine=False,
    )
    chapters = read_epub_chapters(epub_path)
    assert [chapter.path for chapter in chapters] == ["OEBPS/chapter1.xhtml"]


def test_missing_epub_raises(tmp_path: Path):
    with pytest.raises(EPUBParseError):
        read_epub_chapters(tmp_path / "missing.epub")


def test_invalid_archive_raises(tmp_path: Path):
    bogus = tmp_path / "bogus.epub"
    bogus.write_text("not a zip file", encoding="utf-8")
    with pytest.raises(EPUBParseError):
        read_epub_chapters(bogus)


def test_archive_without_container_raises(tmp_path: Path):
    epub_path = tmp_path / "bare.epub"
    with zipfile.ZipFile(epub_path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip")
    with pytest.raises(EPUBParseError):
        read_epub_chapters(epub_path)

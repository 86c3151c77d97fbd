from __future__ import annotations

import zipfile
from pathlib import Path

CONTAINER_XML = """<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def chapter_html(*paragraphs: str) -> str:
    """Wrap paragraphs in a minimal XHTML chapter body."""
    body = "".join(f"<p>{text}</p>" for text in paragraphs)
    return f"<html xmlns='http://www.w3.org/1999/xhtml'><body>{body}</body></html>"


def write_minimal_epub(
    path: Path, chapters: list[str], include_spine: bool = True
) -> None:
    """Create a minimal EPUB file with the provided XHTML chapters."""
    manifest = "".join(
        f'<item id="chap{idx}" href="chapter{idx}.xhtml" media-type="application/xhtml+xml"/>'
        for idx in range(1, len(chapters) + 1)
    )
    spine = (
        "<spine>"
        + "".join(f'<itemref idref="chap{idx}"/>' for idx in range(1, len(chapters) + 1))
        + "</spine>"
        if include_spine
        else "<spine/>"
    )
    opf = f"""<?xml version="1.0" encoding="utf-8"?>
<package version="3.0" xmlns="http://www.idpf.org/2007/opf">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/"><dc:title>Test</dc:title></metadata>
  <manifest>{manifest}</manifest>
  {spine}
</package>
"""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        zf.writestr("META-INF/container.xml", CONTAINER_XML)
        zf.writestr("OEBPS/content.opf", opf)
        for idx, chapter in enumerate(chapters, start=1):
            zf.writestr(f"OEBPS/chapter{idx}.xhtml", chapter)


def sentence_of(word_count: int) -> str:
    """A capitalized sentence with exactly word_count tokens."""
    return "Tom " + "ran " * (word_count - 2) + "home."


def paragraph_of(sentences: int, words_per_sentence: int) -> str:
    return " ".join(sentence_of(words_per_sentence) for _ in range(sentences))

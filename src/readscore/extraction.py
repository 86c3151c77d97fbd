"""
Content extraction: turn raw sources into ``full_text`` + aligned paragraphs.

Every extractor returns an :class:`ExtractedContent` where ``elements[i]``
describes where ``paragraphs[i]`` came from. Issue indices produced by the
engine are only meaningful while that alignment holds.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import ReadScoreConfig
from .epub import read_epub_chapters
from .models import Document

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n|\n")

# Most specific first; the first match is treated as the content area.
CONTENT_SELECTORS: Tuple[str, ...] = (
    "article",
    "main",
    '[role="main"]',
    ".post-content",
    ".article-content",
    ".entry-content",
    ".content",
    ".post-body",
    ".story-body",
    ".article-body",
    ".markdown-body",
    ".prose",
    "#content",
    ".blog-post",
    ".single-content",
    '[itemprop="articleBody"]',
)
TEXT_TAGS = ("p", "h1", "h2", "h3", "h4", "h5", "h6", "li")
EXCLUDED_TAGS = frozenset(
    {
        "script", "style", "noscript", "iframe", "svg",
        "nav", "header", "footer", "aside",
        "code", "pre",
    }
)
EXCLUDED_CLASSES = frozenset(
    {"sidebar", "menu", "navigation", "comments", "code", "highlight"}
)

TEXT_SUFFIXES = {".txt", ".md"}
HTML_SUFFIXES = {".html", ".htm"}
EPUB_SUFFIXES = {".epub"}
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | HTML_SUFFIXES | EPUB_SUFFIXES


class ContentExtractionError(RuntimeError):
    """Raised when a source cannot be turned into paragraphs."""


@dataclass(frozen=True, slots=True)
class ContentElement:
    """Where a paragraph came from: its tag, source part and position."""

    tag: str
    position: int
    source: str = ""


@dataclass(frozen=True, slots=True)
class ExtractedContent:
    full_text: str
    paragraphs: Tuple[str, ...]
    elements: Tuple[ContentElement, ...]

    def __post_init__(self) -> None:
        if len(self.paragraphs) != len(self.elements):
            raise ValueError(
                f"{len(self.paragraphs)} paragraphs but {len(self.elements)} elements"
            )

    @classmethod
    def from_paragraphs(
        cls, full_text: str, paragraphs: Sequence[str], source: str = ""
    ) -> "ExtractedContent":
        return cls(
            full_text=full_text,
            paragraphs=tuple(paragraphs),
            elements=tuple(
                ContentElement(tag="text", position=idx, source=source)
                for idx in range(len(paragraphs))
            ),
        )


def split_paragraphs(text: str, min_paragraph_chars: int = 10) -> List[str]:
    """Split text on line breaks, dropping fragments that are too short."""
    parts = (part.strip() for part in PARAGRAPH_BREAK_RE.split(text))
    return [part for part in parts if len(part) > min_paragraph_chars]


def extract_text_content(text: str, min_paragraph_chars: int = 10) -> ExtractedContent:
    """Plain text: the text itself is the full text, lines are paragraphs."""
    return ExtractedContent.from_paragraphs(
        text, split_paragraphs(text, min_paragraph_chars)
    )


def extract_html_content(
    html: str, min_paragraph_chars: int = 10, source: str = ""
) -> ExtractedContent:
    """
    Pull readable paragraphs out of an HTML page.

    The content area is the first element matching ``CONTENT_SELECTORS``,
    falling back to ``<body>``. Paragraphs, headings and list items inside
    navigation, code blocks, sidebars and similar chrome are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    area = _content_area(soup)

    paragraphs: List[str] = []
    elements: List[ContentElement] = []
    for position, tag in enumerate(area.find_all(list(TEXT_TAGS))):
        if _is_excluded(tag):
            continue
        text = tag.get_text().strip()
        if len(text) > min_paragraph_chars:
            paragraphs.append(text)
            elements.append(ContentElement(tag=tag.name, position=position, source=source))

    return ExtractedContent(
        full_text=" ".join(paragraphs),
        paragraphs=tuple(paragraphs),
        elements=tuple(elements),
    )


def _content_area(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    for selector in CONTENT_SELECTORS:
        match = soup.select_one(selector)
        if match is not None:
            return match
    return soup.body or soup


def _is_excluded(tag: Tag) -> bool:
    for node in _self_and_parents(tag):
        if node.name in EXCLUDED_TAGS:
            return True
        classes = node.get("class") or []
        if EXCLUDED_CLASSES.intersection(classes):
            return True
    return False


def _self_and_parents(tag: Tag) -> Iterable[Tag]:
    yield tag
    for parent in tag.parents:
        if isinstance(parent, Tag):
            yield parent


def extract_epub_content(path: Path, min_paragraph_chars: int = 10) -> ExtractedContent:
    """Concatenate the paragraphs of every chapter in reading order."""
    paragraphs: List[str] = []
    elements: List[ContentElement] = []
    for chapter in read_epub_chapters(path):
        content = extract_html_content(chapter.html, min_paragraph_chars, chapter.path)
        paragraphs.extend(content.paragraphs)
        elements.extend(content.elements)
    logger.debug("Extracted %d paragraphs from %s", len(paragraphs), path)
    return ExtractedContent(
        full_text=" ".join(paragraphs),
        paragraphs=tuple(paragraphs),
        elements=tuple(elements),
    )


def read_source_text(path: Path) -> str:
    """Read a text or HTML source, dropping bytes that are not valid UTF-8."""
    return path.read_text(encoding="utf-8", errors="ignore")


def load_content(path: Path, config: ReadScoreConfig | None = None) -> ExtractedContent:
    """Extract content from a supported file, dispatching on its suffix."""
    cfg = config or ReadScoreConfig()
    suffix = path.suffix.lower()
    if suffix in EPUB_SUFFIXES:
        return extract_epub_content(path, cfg.min_paragraph_chars)
    if suffix in HTML_SUFFIXES:
        html = read_source_text(path)
        return extract_html_content(html, cfg.min_paragraph_chars, path.name)
    if suffix in TEXT_SUFFIXES:
        return extract_text_content(read_source_text(path), cfg.min_paragraph_chars)
    raise ContentExtractionError(f"Unsupported file type: {path}")


def load_document(
    path: Path, doc_id: str, config: ReadScoreConfig | None = None
) -> Document:
    """Read a supported file from disk and wrap it in a Document."""
    content = load_content(path, config)
    logger.info("Loaded doc=%s with %d paragraphs", doc_id, len(content.paragraphs))
    return Document(doc_id=doc_id, text=content.full_text, paragraphs=content.paragraphs)

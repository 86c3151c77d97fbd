from __future__ import annotations

import xml.etree.ElementTree as ET
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, List

CONTAINER_PATH = "META-INF/container.xml"
TEXT_MEDIA_PREFIXES = ("application/xhtml", "text/html")
TEXT_SUFFIXES = {".xhtml", ".html", ".htm"}


class EPUBParseError(RuntimeError):
    """Raised when an EPUB archive cannot be parsed."""


@dataclass(frozen=True, slots=True)
class EpubChapter:
    """Raw markup of one reading-order chapter."""

    path: str
    html: str


def read_epub_chapters(epub_path: Path) -> List[EpubChapter]:
    """Return the chapters of an EPUB in spine (reading) order.

    Archives without a usable spine fall back to every HTML member, in
    archive order.
    """
    if not epub_path.exists():
        raise EPUBParseError(f"EPUB file not found: {epub_path}")

    try:
        with zipfile.ZipFile(epub_path, "r") as zf:
            package_path = _package_document_path(zf)
            members = _reading_order(zf, package_path) or _html_members(zf)
            chapters: List[EpubChapter] = []
            for member in members:
                try:
                    raw = zf.read(member)
                except KeyError:
                    continue
                chapters.append(
                    EpubChapter(path=member, html=raw.decode("utf-8", errors="ignore"))
                )
            return chapters
    except zipfile.BadZipFile as exc:
        raise EPUBParseError(f"Invalid EPUB archive: {epub_path}") from exc


def _package_document_path(zf: zipfile.ZipFile) -> str:
    try:
        root = ET.fromstring(zf.read(CONTAINER_PATH))
    except KeyError as exc:
        raise EPUBParseError(f"EPUB missing {CONTAINER_PATH}") from exc
    except ET.ParseError as exc:
        raise EPUBParseError("Unable to parse container.xml") from exc
    rootfile = root.find(".//{*}rootfile")
    if rootfile is None or not rootfile.attrib.get("full-path"):
        raise EPUBParseError("container.xml does not name a package document")
    return rootfile.attrib["full-path"]


def _reading_order(zf: zipfile.ZipFile, package_path: str) -> List[str]:
    try:
        root = ET.fromstring(zf.read(package_path))
    except (KeyError, ET.ParseError):
        return []

    hrefs: Dict[str, str] = {}
    for item in root.iterfind(".//{*}manifest/{*}item"):
        media_type = item.attrib.get("media-type", "").lower()
        if item.attrib.get("id") and item.attrib.get("href") and media_type.startswith(
            TEXT_MEDIA_PREFIXES
        ):
            hrefs[item.attrib["id"]] = item.attrib["href"]

    base = PurePosixPath(package_path).parent
    ordered: List[str] = []
    for itemref in root.iterfind(".//{*}spine/{*}itemref"):
        href = hrefs.get(itemref.attrib.get("idref", ""))
        if href:
            ordered.append((base / href).as_posix() if str(base) != "." else href)
    return ordered


def _html_members(zf: zipfile.ZipFile) -> List[str]:
    return [
        name
        for name in zf.namelist()
        if PurePosixPath(name).suffix.lower() in TEXT_SUFFIXES
    ]

from __future__ import annotations

import re
from typing import Iterable, List

URL_RE = re.compile(r"https?://\S+")
EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
WHITESPACE_RE = re.compile(r"\s+")
LETTER_RE = re.compile(r"[a-zA-Z]")


class InvalidTextError(TypeError):
    """Raised when the caller passes something other than text to the engine."""


def ensure_text(value: object, name: str = "text") -> str:
    """Return value unchanged when it is a str, otherwise fail fast."""
    if not isinstance(value, str):
        raise InvalidTextError(
            f"{name} must be a str, got {type(value).__name__}"
        )
    return value


def ensure_paragraphs(value: object) -> List[str]:
    """Validate a paragraph sequence and return it as a list of strings."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidTextError(
            f"paragraphs must be a sequence of str, got {type(value).__name__}"
        )
    paragraphs = list(value)
    for idx, paragraph in enumerate(paragraphs):
        ensure_text(paragraph, name=f"paragraphs[{idx}]")
    return paragraphs


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs (NBSP included) into single spaces and strip."""
    return WHITESPACE_RE.sub(" ", text.replace("\u00a0", " ")).strip()

"""
Sentence segmentation with abbreviation, decimal and URL protection.

Splitting prose on every period badly over-segments text that contains
abbreviations, prices, initials or list markers. Segmentation therefore runs
in three passes:

1. protect: every period (or link) that must not end a sentence is swapped
   for a placeholder token;
2. split: one pass over terminal punctuation;
3. restore: placeholders go back to their original characters, links become
   ``[URL]`` / ``[EMAIL]`` labels.

All protection steps run before the split. Reordering them re-introduces
over-splitting because later patterns assume earlier ones already fired.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .textutils import EMAIL_RE, LETTER_RE, URL_RE, collapse_whitespace
from .thresholds import ABBREVIATIONS

# Private-use code point; never present in normalized prose.
_MARK = "\ue000"


@dataclass(frozen=True, slots=True)
class Placeholder:
    name: str
    restored: str

    @property
    def token(self) -> str:
        return f"{_MARK}{self.name}{_MARK}"


URL = Placeholder("URL", "[URL]")
EMAIL = Placeholder("EMAIL", "[EMAIL]")
DECIMAL = Placeholder("DEC", ".")
ELLIPSIS = Placeholder("ELLIP", "...")
ABBREVIATION = Placeholder("ABBR", ".")
INITIAL = Placeholder("INIT", ".")
LIST_MARKER = Placeholder("NUM", ".")
SPLIT = f"{_MARK}SPLIT{_MARK}"

PLACEHOLDERS: Tuple[Placeholder, ...] = (
    URL,
    EMAIL,
    ABBREVIATION,
    DECIMAL,
    ELLIPSIS,
    INITIAL,
    LIST_MARKER,
)

DECIMAL_RE = re.compile(r"(\d)\.(\d)")
CURRENCY_RE = re.compile(r"\$[\d,.]+")
ELLIPSIS_RE = re.compile(r"\.{2,}")
ABBREVIATION_RE = re.compile(
    r"\b("
    + "|".join(sorted(ABBREVIATIONS, key=lambda abbr: (-len(abbr), abbr)))
    + r")\.(?=\s|$)",
    re.IGNORECASE,
)
INITIALS_RE = re.compile(r"\b([A-Z])\.\s(?=[A-Z]\.?\s?)")
LIST_MARKER_START_RE = re.compile(r"^(\d+)\.\s", re.MULTILINE)
LIST_MARKER_INLINE_RE = re.compile(r"\s(\d+)\.\s")
BOUNDARY_RE = re.compile(r"([.!?])\s+(?=[A-Z\"'(\[{]|$)")
TERMINAL_RE = re.compile(r"([.!?])$")

MIN_SENTENCE_CHARS = 5
MIN_SENTENCE_WORDS = 3


def _protect_currency(match: re.Match[str]) -> str:
    return match.group(0).replace(".", DECIMAL.token)


# Ordered protect pipeline: (pattern, replacement).
PROTECTIONS: Tuple[Tuple[re.Pattern[str], str | Callable[[re.Match[str]], str]], ...] = (
    (URL_RE, URL.token),
    (EMAIL_RE, EMAIL.token),
    (DECIMAL_RE, r"\g<1>" + DECIMAL.token + r"\g<2>"),
    (CURRENCY_RE, _protect_currency),
    (ELLIPSIS_RE, ELLIPSIS.token),
    (ABBREVIATION_RE, r"\g<1>" + ABBREVIATION.token),
    (INITIALS_RE, r"\g<1>" + INITIAL.token + " "),
    (LIST_MARKER_START_RE, r"\g<1>" + LIST_MARKER.token + " "),
    (LIST_MARKER_INLINE_RE, r" \g<1>" + LIST_MARKER.token + " "),
)


def protect(text: str) -> str:
    """Replace every non-terminal period, URL and email with a placeholder."""
    for pattern, replacement in PROTECTIONS:
        text = pattern.sub(replacement, text)
    return text


def restore(fragment: str) -> str:
    """Undo protect() on a single fragment."""
    for placeholder in PLACEHOLDERS:
        fragment = fragment.replace(placeholder.token, placeholder.restored)
    return fragment.strip()


def split_protected(text: str) -> List[str]:
    """Split already-protected text at sentence-ending punctuation."""
    marked = BOUNDARY_RE.sub(r"\g<1>" + SPLIT, text)
    marked = TERMINAL_RE.sub(r"\g<1>" + SPLIT, marked)
    return marked.split(SPLIT)


def is_sentence(candidate: str) -> bool:
    """True when the fragment is long enough and holds at least three words."""
    if len(candidate) <= MIN_SENTENCE_CHARS:
        return False
    words = [word for word in candidate.split() if LETTER_RE.search(word)]
    return len(words) >= MIN_SENTENCE_WORDS


def extract_sentences(text: str) -> List[str]:
    """Split text into sentences, ignoring fragments that are too small."""
    if not text or not text.strip():
        return []

    normalized = collapse_whitespace(text)
    fragments = split_protected(protect(normalized))
    sentences: List[str] = []
    for fragment in fragments:
        sentence = restore(fragment)
        if is_sentence(sentence):
            sentences.append(sentence)
    return sentences

from __future__ import annotations

import re
from typing import List

from .textutils import EMAIL_RE, URL_RE, WHITESPACE_RE

CODE_CHARS_RE = re.compile(r"[<>{}\[\]]")
NUMBER_RE = re.compile(
    r"\b\d+(?:[.,]\d+)*\s*(?:%|px|em|rem|pt|cm|mm|in|kg|lb|oz|km|mi|mph|fps)?\b",
    re.IGNORECASE,
)
NON_WORD_RE = re.compile(r"[^\w\s'-]")
STARTS_WITH_LETTER_RE = re.compile(r"^[a-z]", re.IGNORECASE)
ASCII_LETTER_RE = re.compile(r"[a-z]", re.IGNORECASE)
PUNCTUATION_ONLY_RE = re.compile(r"^[-']+$")


def extract_words(text: str) -> List[str]:
    """
    Split text into normalized lowercase word tokens.

    URLs, emails, bracket characters and numbers (with or without a unit
    suffix) are dropped. Hyphenated compounds are counted as separate words
    unless they contain an apostrophe, so contractions stay whole.
    """
    if not text:
        return []

    cleaned = URL_RE.sub("", text)
    cleaned = EMAIL_RE.sub("", cleaned)
    cleaned = CODE_CHARS_RE.sub(" ", cleaned)
    cleaned = NUMBER_RE.sub("", cleaned)
    cleaned = NON_WORD_RE.sub(" ", cleaned)
    cleaned = WHITESPACE_RE.sub(" ", cleaned).strip()
    if not cleaned:
        return []

    words: List[str] = []
    for raw in cleaned.split(" "):
        word = raw.lower().strip()
        if "-" in word and "'" not in word:
            words.extend(part for part in word.split("-") if part and _is_word(part))
        elif _is_word(word):
            words.append(word)
    return words


def _is_word(token: str) -> bool:
    if len(token) < 2:
        return False
    if not STARTS_WITH_LETTER_RE.match(token):
        return False
    # At least half the characters must be letters.
    if len(ASCII_LETTER_RE.findall(token)) < len(token) * 0.5:
        return False
    return not PUNCTUATION_ONLY_RE.match(token)

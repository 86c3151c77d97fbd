"""
Structural issue detection: complex sentences and dense paragraphs.

Clause counting is a heuristic over punctuation and connective words, not a
grammatical parse. Both detectors record the paragraph index of every flagged
item so callers can find the source element again without text matching.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .metrics import round_half_up
from .models import ComplexSentenceIssue, DenseParagraphIssue
from .sentences import extract_sentences
from .thresholds import (
    COMPLEX_SENTENCE_MIN_CLAUSES,
    COMPLEX_SENTENCE_MIN_WORDS,
    CONNECTIVE_WORDS,
    DENSE_PARAGRAPH_MIN_SENTENCES,
    DENSE_PARAGRAPH_WORDS,
    LONG_SENTENCE_AVG_WORDS,
    LONG_SENTENCE_PARAGRAPH_WORDS,
    MAX_THAT_CLAUSES,
    VERY_LONG_PARAGRAPH_WORDS,
)
from .tokenization import extract_words

STRONG_PUNCTUATION_RE = re.compile(r"[;:]")
# A connective only counts at the start of the sentence or right after , or ;
CONNECTIVE_RES: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"(?:^|[,;]\s+)\b{word}\b") for word in CONNECTIVE_WORDS
)
THAT_RE = re.compile(r"\b(?<!so\s)(?<!such\s)that\b")


def count_clauses(sentence: str) -> int:
    """Estimate the number of clauses in a sentence (at least 1)."""
    clauses = 1
    clauses += len(STRONG_PUNCTUATION_RE.findall(sentence))

    lowered = sentence.lower()
    for pattern in CONNECTIVE_RES:
        clauses += len(pattern.findall(lowered))

    clauses += min(len(THAT_RE.findall(lowered)), MAX_THAT_CLAUSES)
    return clauses


def is_complex_sentence(clause_count: int, word_count: int) -> bool:
    return (
        clause_count >= COMPLEX_SENTENCE_MIN_CLAUSES
        and word_count >= COMPLEX_SENTENCE_MIN_WORDS
    )


def identify_complex_sentences(
    paragraphs: Sequence[str],
) -> List[ComplexSentenceIssue]:
    """Flag long multi-clause sentences, tagging each with its paragraph."""
    issues: List[ComplexSentenceIssue] = []
    sentence_index = 0
    for paragraph_index, paragraph in enumerate(paragraphs):
        for sentence in extract_sentences(paragraph):
            clause_count = count_clauses(sentence)
            word_count = len(extract_words(sentence))
            if is_complex_sentence(clause_count, word_count):
                issues.append(
                    ComplexSentenceIssue(
                        text=sentence,
                        clause_count=clause_count,
                        word_count=word_count,
                        sentence_index=sentence_index,
                        paragraph_index=paragraph_index,
                    )
                )
            sentence_index += 1
    return issues


def is_dense_paragraph(
    word_count: int, sentence_count: int, avg_sentence_length: float
) -> bool:
    """
    A paragraph is dense when any trigger fires:

    * a wall of text: 100+ words over 4+ sentences;
    * a very long block: 150+ words;
    * long convoluted sentences: 80+ words averaging 25+ words per sentence.
    """
    wall_of_text = (
        word_count >= DENSE_PARAGRAPH_WORDS
        and sentence_count >= DENSE_PARAGRAPH_MIN_SENTENCES
    )
    very_long = word_count >= VERY_LONG_PARAGRAPH_WORDS
    long_sentences = (
        word_count >= LONG_SENTENCE_PARAGRAPH_WORDS
        and avg_sentence_length >= LONG_SENTENCE_AVG_WORDS
    )
    return wall_of_text or very_long or long_sentences


def measure_paragraph(text: str, index: int) -> DenseParagraphIssue:
    """Compute paragraph statistics and the dense verdict."""
    word_count = len(extract_words(text))
    sentence_count = len(extract_sentences(text))
    avg = word_count / sentence_count if sentence_count else 0.0
    return DenseParagraphIssue(
        text=text,
        index=index,
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=round_half_up(avg, 1),
        is_dense=is_dense_paragraph(word_count, sentence_count, avg),
    )


def identify_dense_paragraphs(paragraphs: Sequence[str]) -> List[DenseParagraphIssue]:
    """Return the dense paragraphs, addressed by their position in the input."""
    measured = (measure_paragraph(text, idx) for idx, text in enumerate(paragraphs))
    return [paragraph for paragraph in measured if paragraph.is_dense]

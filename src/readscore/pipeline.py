from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List

from .classification import (
    classify_readability,
    classify_sentence_quality,
    classify_word_count,
)
from .config import ReadScoreConfig
from .extraction import ExtractedContent, extract_text_content
from .issues import identify_complex_sentences, identify_dense_paragraphs
from .metrics import (
    calculate_grade_level,
    calculate_reading_time,
    identify_complex_words,
    round_half_up,
    total_syllables,
)
from .models import (
    AnalysisIssues,
    AnalysisResult,
    Document,
    Level,
    ReadingTime,
)
from .sentences import extract_sentences
from .textutils import ensure_paragraphs, ensure_text
from .thresholds import LOW_CONFIDENCE_WORDS
from .tokenization import extract_words

logger = logging.getLogger(__name__)

NOT_ENOUGH_TEXT = "Not enough text content to analyze"
SELECTION_MIN_CHARS = 50


class SelectionTooShortError(ValueError):
    """Raised when a selection is too small for a meaningful analysis."""


def analyze(
    full_text: str,
    paragraphs: Iterable[str] | None = (),
    *,
    min_text_chars: int = 0,
) -> AnalysisResult:
    """
    Score a text and detect its structural issues.

    ``full_text`` drives the aggregate metrics; ``paragraphs`` drives issue
    detection, and issue indices refer to positions in that sequence. When the
    stripped text is shorter than ``min_text_chars`` a zeroed result carrying
    an error message is returned instead of raising.
    """
    full_text = ensure_text(full_text, name="full_text")
    paragraph_list = ensure_paragraphs(paragraphs)

    if len(full_text.strip()) < min_text_chars:
        return too_short_result()

    sentences = extract_sentences(full_text)
    words = extract_words(full_text)
    word_count = len(words)
    sentence_count = len(sentences)

    complex_words = identify_complex_words(words)
    avg_sentence_length = word_count / sentence_count if sentence_count else 0.0
    grade = calculate_grade_level(word_count, sentence_count, total_syllables(words))
    level = classify_readability(
        avg_sentence_length, complex_words.ratio, grade, word_count
    )

    return AnalysisResult(
        level=level,
        grade=grade,
        reading_time=calculate_reading_time(word_count, level),
        word_count=word_count,
        word_count_category=classify_word_count(word_count),
        sentence_count=sentence_count,
        avg_sentence_length=round_half_up(avg_sentence_length, 1),
        sentence_quality=classify_sentence_quality(avg_sentence_length),
        is_low_confidence=word_count < LOW_CONFIDENCE_WORDS,
        issues=AnalysisIssues(
            complex_sentences=tuple(identify_complex_sentences(paragraph_list)),
            dense_paragraphs=tuple(identify_dense_paragraphs(paragraph_list)),
        ),
        complex_word_ratio=complex_words.ratio,
    )


def too_short_result() -> AnalysisResult:
    """The degraded result returned for inputs too small to score."""
    return AnalysisResult(
        level=Level.NOT_AVAILABLE,
        grade=0.0,
        reading_time=ReadingTime(minutes=0, wpm=0, formatted="N/A"),
        word_count=0,
        word_count_category=classify_word_count(0),
        sentence_count=0,
        avg_sentence_length=0.0,
        sentence_quality=classify_sentence_quality(0.0),
        is_low_confidence=True,
        error=NOT_ENOUGH_TEXT,
    )


def analyze_content(
    content: ExtractedContent, config: ReadScoreConfig | None = None
) -> AnalysisResult:
    """Analyze the output of a content extractor."""
    cfg = config or ReadScoreConfig()
    return analyze(
        content.full_text, content.paragraphs, min_text_chars=cfg.min_text_chars
    )


def analyze_selection(
    selected_text: str, config: ReadScoreConfig | None = None
) -> AnalysisResult:
    """Analyze a free-form selection; paragraphs are split on line breaks."""
    cfg = config or ReadScoreConfig()
    selected_text = ensure_text(selected_text, name="selected_text").strip()
    if len(selected_text) < SELECTION_MIN_CHARS:
        raise SelectionTooShortError(
            "Selection too short. Please select more text for analysis."
        )
    content = extract_text_content(
        selected_text, min_paragraph_chars=cfg.min_paragraph_chars
    )
    result = analyze(content.full_text, content.paragraphs)
    return replace(result, is_selection_analysis=True)


def analyze_document(
    doc: Document, config: ReadScoreConfig | None = None
) -> AnalysisResult:
    """Analyze a Document, deriving paragraphs from its text when it has none."""
    cfg = config or ReadScoreConfig()
    if doc.paragraphs:
        content = ExtractedContent.from_paragraphs(doc.text, doc.paragraphs)
    else:
        content = extract_text_content(
            doc.text, min_paragraph_chars=cfg.min_paragraph_chars
        )
    return analyze_content(content, cfg)


def analyze_corpus(
    documents: List[Document], config: ReadScoreConfig | None = None
) -> Dict[str, AnalysisResult]:
    """Analyze all documents and return the per-document results."""
    cfg = config or ReadScoreConfig()
    results: Dict[str, AnalysisResult] = {}
    for document in documents:
        result = analyze_document(document, cfg)
        if result.error:
            logger.warning("Skipped scoring doc=%s: %s", document.doc_id, result.error)
        else:
            logger.info(
                "Analyzed doc=%s level=%s grade=%.1f words=%d issues=%d",
                document.doc_id,
                result.level.value,
                result.grade,
                result.word_count,
                result.issue_count,
            )
        results[document.doc_id] = result
    return results

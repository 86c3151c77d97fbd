from __future__ import annotations

from .models import Label, Level
from .thresholds import (
    COMPLEX_RATIO_EASY,
    COMPLEX_RATIO_HARD,
    GRADE_EASY_MAX,
    GRADE_MEDIUM_MAX,
    GRADE_SOFTEN_BELOW,
    LONG_READ_MAX,
    LOW_CONFIDENCE_WORDS,
    MEDIUM_READ_MAX,
    QUICK_READ_BELOW,
    SENTENCE_LENGTH_EASY,
    SENTENCE_LENGTH_MEDIUM,
    SENTENCE_LONG_MAX,
    SENTENCE_OPTIMAL_MAX,
    SENTENCE_QUALITY_LABELS,
    SENTENCE_SHORT_MAX,
    SENTENCE_TOO_SHORT_BELOW,
    SHORT_READ_MAX,
    SHORT_SAMPLE_WORDS,
    WORD_COUNT_LABELS,
)


def classify_readability(
    avg_sentence_length: float,
    complex_ratio: float,
    grade: float | None = None,
    word_count: int = 0,
) -> Level:
    """
    Map metrics to Easy / Medium / Hard.

    Texts under 100 words are always Medium because the grade formula is not
    reliable on small samples. Texts under 300 words are never Hard unless the
    grade is 15 or more. When no grade is supplied a composite of sentence
    length and complex-word ratio is used instead.
    """
    if word_count < LOW_CONFIDENCE_WORDS:
        return Level.MEDIUM

    if grade is not None:
        if grade <= GRADE_EASY_MAX:
            level = Level.EASY
        elif grade <= GRADE_MEDIUM_MAX:
            level = Level.MEDIUM
        else:
            level = Level.HARD
        if (
            word_count < SHORT_SAMPLE_WORDS
            and level is Level.HARD
            and grade < GRADE_SOFTEN_BELOW
        ):
            return Level.MEDIUM
        return level

    score = _composite_score(avg_sentence_length, complex_ratio)
    if score <= 1:
        level = Level.EASY
    elif score <= 2:
        level = Level.MEDIUM
    else:
        level = Level.HARD
    if word_count < SHORT_SAMPLE_WORDS and level is Level.HARD:
        return Level.MEDIUM
    return level


def _composite_score(avg_sentence_length: float, complex_ratio: float) -> int:
    score = 0
    if avg_sentence_length > SENTENCE_LENGTH_MEDIUM:
        score += 2
    elif avg_sentence_length > SENTENCE_LENGTH_EASY:
        score += 1
    if complex_ratio > COMPLEX_RATIO_HARD:
        score += 2
    elif complex_ratio > COMPLEX_RATIO_EASY:
        score += 1
    return score


def classify_sentence_quality(avg_length: float) -> Label:
    """Label the average sentence length from Too Short to Too Long."""
    if avg_length < SENTENCE_TOO_SHORT_BELOW:
        key = "short"
    elif avg_length <= SENTENCE_SHORT_MAX:
        key = "short-ok"
    elif avg_length <= SENTENCE_OPTIMAL_MAX:
        key = "optimal"
    elif avg_length <= SENTENCE_LONG_MAX:
        key = "long"
    else:
        key = "too-long"
    return _label(SENTENCE_QUALITY_LABELS[key], key)


def classify_word_count(word_count: int) -> Label:
    """Bucket the document length from Quick Read to In-Depth."""
    if word_count < QUICK_READ_BELOW:
        key = "quick"
    elif word_count <= SHORT_READ_MAX:
        key = "short"
    elif word_count <= MEDIUM_READ_MAX:
        key = "medium"
    elif word_count <= LONG_READ_MAX:
        key = "long"
    else:
        key = "deep"
    return _label(WORD_COUNT_LABELS[key], key)


def _label(entry: tuple[str, str], key: str) -> Label:
    label, color_class = entry
    return Label(label=label, color_class=color_class, key=key)

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class Level(str, Enum):
    """Difficulty tier reported to readers."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class Document:
    """A named piece of text plus the paragraphs it was built from."""

    doc_id: str
    text: str
    paragraphs: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Label:
    """A display label with its CSS-style color class and machine key."""

    label: str
    color_class: str
    key: str


@dataclass(frozen=True, slots=True)
class ReadingTime:
    """Estimated reading time at the words-per-minute rate of a level."""

    minutes: int
    wpm: int
    formatted: str


@dataclass(frozen=True, slots=True)
class ComplexWordStats:
    words: Tuple[str, ...]
    count: int
    ratio: float


@dataclass(frozen=True, slots=True)
class ComplexSentenceIssue:
    """A long sentence with several clauses.

    ``sentence_index`` counts sentences across all paragraphs;
    ``paragraph_index`` addresses the paragraph the sentence came from.
    """

    text: str
    clause_count: int
    word_count: int
    sentence_index: int
    paragraph_index: int


@dataclass(frozen=True, slots=True)
class DenseParagraphIssue:
    """A paragraph that is likely to fatigue a reader.

    ``index`` is the paragraph's position in the analyzed paragraph list.
    """

    text: str
    index: int
    word_count: int
    sentence_count: int
    avg_sentence_length: float
    is_dense: bool


@dataclass(frozen=True, slots=True)
class AnalysisIssues:
    complex_sentences: Tuple[ComplexSentenceIssue, ...] = ()
    dense_paragraphs: Tuple[DenseParagraphIssue, ...] = ()

    @property
    def total(self) -> int:
        return len(self.complex_sentences) + len(self.dense_paragraphs)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Immutable outcome of one analysis call."""

    level: Level
    grade: float
    reading_time: ReadingTime
    word_count: int
    word_count_category: Label
    sentence_count: int
    avg_sentence_length: float
    sentence_quality: Label
    is_low_confidence: bool
    issues: AnalysisIssues = field(default_factory=AnalysisIssues)
    complex_word_ratio: float = 0.0
    is_selection_analysis: bool = False
    error: str | None = None

    @property
    def issue_count(self) -> int:
        return self.issues.total

    def to_dict(self, include_issue_text: bool = True) -> Dict[str, Any]:
        """Return the JSON-ready camelCase payload consumed by presentation layers."""
        return {
            "level": self.level.value,
            "grade": self.grade,
            "readingTime": {
                "minutes": self.reading_time.minutes,
                "wpm": self.reading_time.wpm,
                "formatted": self.reading_time.formatted,
            },
            "wordCount": self.word_count,
            "wordCountCategory": {
                "label": self.word_count_category.label,
                "colorClass": self.word_count_category.color_class,
                "category": self.word_count_category.key,
            },
            "sentenceCount": self.sentence_count,
            "avgSentenceLength": self.avg_sentence_length,
            "sentenceQuality": {
                "label": self.sentence_quality.label,
                "colorClass": self.sentence_quality.color_class,
                "quality": self.sentence_quality.key,
            },
            "isLowConfidence": self.is_low_confidence,
            "issues": {
                "complexSentences": [
                    {
                        "text": issue.text if include_issue_text else None,
                        "clauseCount": issue.clause_count,
                        "wordCount": issue.word_count,
                        "sentenceIndex": issue.sentence_index,
                        "paragraphIndex": issue.paragraph_index,
                    }
                    for issue in self.issues.complex_sentences
                ],
                "denseParagraphs": [
                    {
                        "text": issue.text if include_issue_text else None,
                        "index": issue.index,
                        "wordCount": issue.word_count,
                        "sentenceCount": issue.sentence_count,
                        "avgSentenceLength": issue.avg_sentence_length,
                        "isDense": issue.is_dense,
                    }
                    for issue in self.issues.dense_paragraphs
                ],
            },
            "issueCount": self.issue_count,
            "complexWordRatio": self.complex_word_ratio,
            "isSelectionAnalysis": self.is_selection_analysis,
            "error": self.error,
        }

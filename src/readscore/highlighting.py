from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple, TypeVar, Union

from .models import AnalysisResult, ComplexSentenceIssue, DenseParagraphIssue

COMPLEX_SENTENCES = "complex_sentences"
DENSE_PARAGRAPHS = "dense_paragraphs"
ISSUE_TYPES: Tuple[str, ...] = (COMPLEX_SENTENCES, DENSE_PARAGRAPHS)
DEFAULT_BATCH_SIZE = 50

Issue = Union[ComplexSentenceIssue, DenseParagraphIssue]
ElementT = TypeVar("ElementT")


@dataclass(frozen=True, slots=True)
class HighlightBatch:
    """One page of issues of a single type."""

    issue_type: str
    issues: Tuple[Issue, ...]
    next_offset: int
    total: int

    @property
    def has_more(self) -> bool:
        return self.next_offset < self.total


@dataclass(slots=True)
class HighlightPager:
    """
    Serve the issues of one analysis result in fixed-size batches.

    The result itself is never modified; the pager only keeps one offset per
    issue type, mirroring a "load more" control.
    """

    result: AnalysisResult
    batch_size: int = DEFAULT_BATCH_SIZE
    offsets: Dict[str, int] = field(
        default_factory=lambda: {issue_type: 0 for issue_type in ISSUE_TYPES}
    )

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1.")

    def issues_of(self, issue_type: str) -> Tuple[Issue, ...]:
        if issue_type == COMPLEX_SENTENCES:
            return self.result.issues.complex_sentences
        if issue_type == DENSE_PARAGRAPHS:
            return self.result.issues.dense_paragraphs
        raise ValueError(f"Unknown issue type '{issue_type}'.")

    def next_batch(self, issue_type: str) -> HighlightBatch:
        """Return the next batch of one type and advance its offset."""
        issues = self.issues_of(issue_type)
        start = self.offsets[issue_type]
        end = min(start + self.batch_size, len(issues))
        self.offsets[issue_type] = end
        return HighlightBatch(
            issue_type=issue_type,
            issues=issues[start:end],
            next_offset=end,
            total=len(issues),
        )

    def start(self) -> Tuple[HighlightBatch, ...]:
        """Reset and return the first batch of every issue type."""
        self.reset()
        return tuple(self.next_batch(issue_type) for issue_type in ISSUE_TYPES)

    def reset(self) -> None:
        for issue_type in ISSUE_TYPES:
            self.offsets[issue_type] = 0

    @property
    def has_more(self) -> bool:
        return any(
            self.offsets[issue_type] < len(self.issues_of(issue_type))
            for issue_type in ISSUE_TYPES
        )


def paragraph_index_of(issue: Issue) -> int:
    """The paragraph an issue points at."""
    if isinstance(issue, ComplexSentenceIssue):
        return issue.paragraph_index
    return issue.index


def locate(issue: Issue, elements: Sequence[ElementT]) -> ElementT | None:
    """Return the element an issue refers to, or None when out of range."""
    index = paragraph_index_of(issue)
    if 0 <= index < len(elements):
        return elements[index]
    return None

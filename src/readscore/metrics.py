from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from .models import ComplexWordStats, Level, ReadingTime
from .syllables import count_syllables
from .thresholds import (
    COMMON_POLYSYLLABIC,
    COMPLEX_WORD_MIN_LENGTH,
    COMPLEX_WORD_MIN_SYLLABLES,
    DEFAULT_READING_SPEED,
    READING_SPEEDS,
)

LESS_THAN_A_MINUTE = "< 1 min"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties away from zero for non-negative values (0.25 -> 0.3)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def total_syllables(words: Iterable[str]) -> int:
    return sum(count_syllables(word) for word in words)


def is_complex_word(word: str) -> bool:
    """A long, non-exempt word with three or more estimated syllables."""
    if len(word) < COMPLEX_WORD_MIN_LENGTH:
        return False
    if word in COMMON_POLYSYLLABIC:
        return False
    return count_syllables(word) >= COMPLEX_WORD_MIN_SYLLABLES


def identify_complex_words(words: Sequence[str]) -> ComplexWordStats:
    """Collect complex words and their share of all words."""
    complex_words: List[str] = [word for word in words if is_complex_word(word)]
    unique = tuple(dict.fromkeys(complex_words))
    ratio = len(complex_words) / len(words) if words else 0.0
    return ComplexWordStats(words=unique, count=len(complex_words), ratio=ratio)


def calculate_grade_level(
    total_words: int, total_sentences: int, syllables: int
) -> float:
    """
    Flesch-Kincaid grade level, floored at 0 and rounded to one decimal.

    Returns 0 when there are no words or no sentences.
    """
    if total_sentences == 0 or total_words == 0:
        return 0.0
    words_per_sentence = total_words / total_sentences
    syllables_per_word = syllables / total_words
    grade = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
    return max(0.0, round_half_up(grade, 1))


def reading_speed_for(level: Level | str) -> int:
    """Words per minute for a difficulty level, falling back to Medium."""
    name = level.value if isinstance(level, Level) else str(level)
    return READING_SPEEDS.get(name.upper(), DEFAULT_READING_SPEED)


def calculate_reading_time(
    word_count: int, level: Level | str = Level.MEDIUM
) -> ReadingTime:
    """Estimate reading time; texts under half a minute read as '< 1 min'."""
    if word_count == 0:
        return ReadingTime(minutes=0, wpm=0, formatted=LESS_THAN_A_MINUTE)

    wpm = reading_speed_for(level)
    exact_minutes = word_count / wpm
    minutes = int(round_half_up(exact_minutes))

    if exact_minutes < 0.5:
        formatted = LESS_THAN_A_MINUTE
    elif minutes == 1:
        formatted = "1 min"
    else:
        formatted = f"{minutes} mins"
    return ReadingTime(minutes=minutes, wpm=wpm, formatted=formatted)

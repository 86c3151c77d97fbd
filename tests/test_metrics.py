import pytest

from readscore.metrics import (
    calculate_grade_level,
    calculate_reading_time,
    identify_complex_words,
    is_complex_word,
    round_half_up,
)
from readscore.models import Level, ReadingTime


def test_grade_level_matches_formula():
    expected = 0.39 * (150 / 10) + 11.8 * (220 / 150) - 15.59
    grade = calculate_grade_level(150, 10, 220)
    assert grade == pytest.approx(round(expected, 1))
    assert grade == pytest.approx(7.6)


def test_grade_level_is_floored_at_zero():
    assert calculate_grade_level(10, 10, 10) == 0.0


def test_grade_level_degenerate_inputs():
    assert calculate_grade_level(0, 5, 0) == 0.0
    assert calculate_grade_level(20, 0, 30) == 0.0


def test_round_half_up_rounds_ties_upward():
    assert round_half_up(0.25, 1) == pytest.approx(0.3)
    assert round_half_up(2.5) == 3.0
    assert round_half_up(7.5666, 1) == pytest.approx(7.6)


def test_complex_words_skip_short_and_common_words():
    words = ["education", "operation", "operation", "cat", "understanding"]
    stats = identify_complex_words(words)
    assert stats.words == ("operation", "understanding")
    assert stats.count == 3
    assert stats.ratio == pytest.approx(3 / 5)
    assert not is_complex_word("beautiful")
    assert not is_complex_word("window")


def test_complex_words_empty_input():
    stats = identify_complex_words([])
    assert stats.count == 0
    assert stats.ratio == 0.0


@pytest.mark.parametrize(
    ("word_count", "level", "expected"),
    [
        (0, Level.MEDIUM, ReadingTime(minutes=0, wpm=0, formatted="< 1 min")),
        (100, Level.MEDIUM, ReadingTime(minutes=0, wpm=250, formatted="< 1 min")),
        (125, Level.MEDIUM, ReadingTime(minutes=1, wpm=250, formatted="1 min")),
        (250, "Medium", ReadingTime(minutes=1, wpm=250, formatted="1 min")),
        (550, Level.EASY, ReadingTime(minutes=2, wpm=275, formatted="2 mins")),
        (1000, Level.HARD, ReadingTime(minutes=5, wpm=200, formatted="5 mins")),
        (500, "unknown", ReadingTime(minutes=2, wpm=250, formatted="2 mins")),
    ],
)
def test_reading_time_uses_level_speed(word_count, level, expected):
    assert calculate_reading_time(word_count, level) == expected

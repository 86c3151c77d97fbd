import pytest

from readscore.syllables import count_syllables


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("", 0),
        ("a", 1),
        ("to", 1),
        ("cat", 1),
        ("the", 1),
        ("table", 2),
        ("make", 1),
        ("free", 1),
        ("jumped", 1),
        ("wanted", 2),
        ("boxes", 2),
        ("cakes", 1),
        ("churches", 2),
        ("yellow", 2),
        ("happy", 2),
        ("rhythm", 1),
        ("readability", 5),
    ],
)
def test_count_syllables_follows_vowel_group_rules(word: str, expected: int):
    assert count_syllables(word) == expected


def test_overrides_take_precedence():
    assert count_syllables("business") == 2
    assert count_syllables("unfortunately") == 5
    assert count_syllables("Every") == 2


def test_hyphenated_words_sum_their_parts():
    assert count_syllables("well-known") == 2
    assert count_syllables("make-believe") == count_syllables("make") + count_syllables(
        "believe"
    )


def test_result_is_never_below_one_for_real_words():
    for word in ("bcd", "sh", "tsk", "ed", "es"):
        assert count_syllables(word) >= 1

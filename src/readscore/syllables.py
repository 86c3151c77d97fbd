from __future__ import annotations

from .thresholds import SYLLABLE_OVERRIDES

VOWELS = "aeiou"


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a word.

    This is an approximation built from vowel groups plus a few suffix rules,
    not a phonetic analysis. An empty string yields 0; any other word yields
    at least 1.
    """
    if not word:
        return 0

    word = word.lower().strip()
    if len(word) <= 2:
        return 1

    override = SYLLABLE_OVERRIDES.get(word)
    if override:
        return override

    if "-" in word:
        return sum(count_syllables(part) for part in word.split("-"))

    syllables = 0
    prev_vowel = False
    for idx, char in enumerate(word):
        # 'y' counts as a vowel anywhere but the first letter.
        is_vowel = char in VOWELS or (char == "y" and idx > 0)
        if is_vowel and not prev_vowel:
            syllables += 1
        prev_vowel = is_vowel

    if word.endswith("e") and not word.endswith(("le", "ee", "ie")):
        syllables = max(1, syllables - 1)

    if word.endswith("ed") and len(word) > 3 and word[-3] not in "td":
        syllables = max(1, syllables - 1)

    if (
        word.endswith("es")
        and len(word) > 3
        and word[-3] not in "sxzh"
        and not word.endswith(("ches", "shes"))
    ):
        syllables = max(1, syllables - 1)

    return max(1, syllables)

"""
Static lookup tables shared by the readability engine.

Everything here is read-only and process-wide. Bands are inclusive at the
upper bound, so a value sitting exactly on a threshold falls into the easier
bucket.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Words per minute by difficulty level.
READING_SPEEDS: Mapping[str, int] = MappingProxyType(
    {
        "EASY": 275,
        "MEDIUM": 250,
        "HARD": 200,
    }
)
DEFAULT_READING_SPEED = READING_SPEEDS["MEDIUM"]

# Composite-score bands (used only when no grade level is available).
SENTENCE_LENGTH_EASY = 14
SENTENCE_LENGTH_MEDIUM = 22
COMPLEX_RATIO_EASY = 0.08
COMPLEX_RATIO_HARD = 0.15

# Grade-level bands.
GRADE_EASY_MAX = 6.0
GRADE_MEDIUM_MAX = 12.0
GRADE_SOFTEN_BELOW = 15.0

# Small-sample gates.
LOW_CONFIDENCE_WORDS = 100
SHORT_SAMPLE_WORDS = 300

# Dense paragraph triggers.
DENSE_PARAGRAPH_WORDS = 100
DENSE_PARAGRAPH_MIN_SENTENCES = 4
VERY_LONG_PARAGRAPH_WORDS = 150
LONG_SENTENCE_PARAGRAPH_WORDS = 80
LONG_SENTENCE_AVG_WORDS = 25

# Complex sentence guards.
COMPLEX_SENTENCE_MIN_CLAUSES = 3
COMPLEX_SENTENCE_MIN_WORDS = 20
MAX_THAT_CLAUSES = 3

# Complex word guards.
COMPLEX_WORD_MIN_LENGTH = 6
COMPLEX_WORD_MIN_SYLLABLES = 3

# key -> (label, color class)
SENTENCE_QUALITY_LABELS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "short": ("Too Short", "quality-warning"),
        "short-ok": ("Short", "quality-good"),
        "optimal": ("Optimal", "quality-optimal"),
        "long": ("Long", "quality-warning"),
        "too-long": ("Too Long", "quality-bad"),
    }
)
SENTENCE_TOO_SHORT_BELOW = 8
SENTENCE_SHORT_MAX = 12
SENTENCE_OPTIMAL_MAX = 18
SENTENCE_LONG_MAX = 25

WORD_COUNT_LABELS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "quick": ("Quick Read", "length-quick"),
        "short": ("Short", "length-short"),
        "medium": ("Medium", "length-medium"),
        "long": ("Long Read", "length-long"),
        "deep": ("In-Depth", "length-deep"),
    }
)
QUICK_READ_BELOW = 300
SHORT_READ_MAX = 700
MEDIUM_READ_MAX = 1400
LONG_READ_MAX = 2500

# Words whose vowel-group count is usually wrong.
SYLLABLE_OVERRIDES: Mapping[str, int] = MappingProxyType(
    {
        "business": 2,
        "every": 2,
        "different": 2,
        "interest": 2,
        "evening": 2,
        "family": 2,
        "several": 2,
        "general": 2,
        "natural": 2,
        "actually": 3,
        "chocolate": 2,
        "favorite": 2,
        "vegetable": 3,
        "comfortable": 3,
        "reasonable": 3,
        "important": 3,
        "beautiful": 3,
        "possible": 3,
        "terrible": 3,
        "difficult": 3,
        "wonderful": 3,
        "carefully": 3,
        "probably": 3,
        "especially": 4,
        "interesting": 4,
        "unfortunately": 5,
    }
)

# Long words that readers do not find hard.
COMMON_POLYSYLLABIC = frozenset(
    {
        "everyone", "everything", "everywhere", "however", "another",
        "together", "already", "although", "without", "because",
        "before", "between", "during", "often", "sometimes",
        "usually", "always", "really", "actually", "probably",
        "certainly", "definitely", "absolutely", "completely", "exactly",
        "important", "different", "beautiful", "wonderful", "interesting",
        "government", "understand", "information", "technology", "education",
        "community", "experience", "opportunity", "relationship", "remember",
        "something", "anything", "nothing", "somebody",
    }
)

# Abbreviations whose trailing period never ends a sentence.
ABBREVIATIONS = frozenset(
    {
        # titles and business
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "vs", "etc", "inc", "ltd",
        "corp", "eg", "ie", "al", "vol", "no", "pp", "ed", "est", "approx",
        "dept", "govt",
        # months and days
        "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct",
        "nov", "dec", "mon", "tue", "wed", "thu", "fri", "sat", "sun",
        # ordinals, streets and units
        "st", "nd", "rd", "th", "ave", "blvd", "ct", "ln", "ft", "lb", "oz",
        # single letters
        "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m",
        "n", "o", "p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z",
        # degrees and roles
        "ph", "ba", "ma", "bs", "mba", "ceo", "cto", "cfo",
    }
)

# Clause starters: transitions, subordinators, relatives, conditionals.
CONNECTIVE_WORDS: Tuple[str, ...] = (
    "however", "therefore", "moreover", "furthermore", "nevertheless",
    "because", "since", "although", "though", "while", "whereas", "unless",
    "until",
    "which", "who", "whom", "whose", "where", "when", "whether",
    "if", "provided", "assuming",
)

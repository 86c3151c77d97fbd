"""
readscore package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadScoreConfig, config_from_dict, config_from_yaml, load_config
from .models import AnalysisResult, Level
from .pipeline import analyze, analyze_corpus, analyze_document, analyze_selection
from .sentences import extract_sentences
from .syllables import count_syllables
from .textutils import InvalidTextError
from .tokenization import extract_words

__all__ = [
    "AnalysisResult",
    "InvalidTextError",
    "Level",
    "ReadScoreConfig",
    "analyze",
    "analyze_corpus",
    "analyze_document",
    "analyze_selection",
    "config_from_dict",
    "config_from_yaml",
    "count_syllables",
    "extract_sentences",
    "extract_words",
    "load_config",
]

__version__ = "0.1.0"

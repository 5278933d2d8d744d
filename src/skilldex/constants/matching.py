"""Constants for task-to-skill matching."""

from __future__ import annotations

import re
from re import Pattern

TOKEN_SPLIT_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9]+")
MIN_TOKEN_LENGTH: int = 2
PLURAL_STRIP_MIN_LENGTH: int = 4
NAME_TERM_WEIGHT: int = 2
DESCRIPTION_TERM_WEIGHT: int = 1
SCORE_PRECISION: int = 4

STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "can", "do", "for", "from", "how",
        "i", "if", "in", "into", "is", "it", "its", "me", "my", "of", "on", "or", "our",
        "please", "should", "so", "that", "the", "their", "this", "to", "use", "used",
        "using", "want", "we", "what", "when", "where", "which", "while", "who", "why",
        "will", "with", "you", "your",
    }
)

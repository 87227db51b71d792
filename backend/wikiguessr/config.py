"""Centralised runtime configuration loaded from environment variables."""

import os
from pathlib import Path

_BACKEND_DIR = Path(__file__).parent.parent

ARTICLES_DIR: str = os.getenv(
    "WIKIGUESSR_ARTICLES_DIR", str(_BACKEND_DIR / "daily_articles")
)
FALLBACK_ARTICLE: str = os.getenv(
    "WIKIGUESSR_FALLBACK_ARTICLE", str(_BACKEND_DIR / "article.json")
)

MAX_GUESS_LENGTH: int = int(os.getenv("MAX_GUESS_LENGTH", "100"))

# ---------------------------------------------------------------------------
# Matching thresholds
#
# Shared by the guess matcher and the win verifier. Not read from the
# environment: changing any of them changes which words get revealed, so bump
# MATCHER_VERSION alongside.
# ---------------------------------------------------------------------------
MATCHER_VERSION: int = 2

EXACT_CONFIDENCE: float = 1.0
SEMANTIC_CONFIDENCE: float = 1.0
MORPHOLOGICAL_CONFIDENCE: float = 0.9

REVEAL_THRESHOLD: float = 0.8
MIN_FUZZY_LENGTH: int = 4
MAX_LENGTH_GAP: int = 3
FIRST_LETTER_BONUS: float = 0.05

# Weights of the combined similarity score (must sum to 1)
EDIT_WEIGHT: float = 0.40
WEIGHTED_EDIT_WEIGHT: float = 0.35
NGRAM_WEIGHT: float = 0.25

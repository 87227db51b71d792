"""Deciding whether a guess hits withheld words, and whether the title is found.

Strategies are tried in a fixed order and the first one that finds a bucket
wins: exact normalized form, lemma of the guess, then a sweep over every
indexed word scoring semantic, morphological and orthographic closeness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from . import config
from .index import ArticleIndex, Position
from .normalize import normalize
from .similarity import (
    are_morphological_variants,
    are_semantically_similar,
    combined_similarity,
    lemma_candidates,
)


@dataclass(frozen=True)
class GuessResult:
    found: bool
    normalized_word: str
    positions: tuple[Position, ...]
    confidence: float

    @property
    def occurrence_count(self) -> int:
        return len(self.positions)


def _not_found(normalized: str, confidence: float = 0.0) -> GuessResult:
    return GuessResult(found=False, normalized_word=normalized, positions=(), confidence=confidence)


def _within_fuzzy_range(a: str, b: str) -> bool:
    return (
        len(a) >= config.MIN_FUZZY_LENGTH
        and len(b) >= config.MIN_FUZZY_LENGTH
        and abs(len(a) - len(b)) <= config.MAX_LENGTH_GAP
    )


def _relation_score(guess: str, key: str) -> float | None:
    if are_semantically_similar(guess, key):
        return config.SEMANTIC_CONFIDENCE
    if are_morphological_variants(guess, key):
        return config.MORPHOLOGICAL_CONFIDENCE
    return None


def _orthographic_score(guess: str, key: str) -> float:
    score = combined_similarity(guess, key)
    if guess[0] == key[0]:
        score = min(1.0, score + config.FIRST_LETTER_BONUS)
    return score


def _sweep(guess: str, index: ArticleIndex) -> GuessResult:
    best_score = 0.0
    best_positions: tuple[Position, ...] | None = None

    for key, positions in index.reverse_index.items():
        if not _within_fuzzy_range(guess, key):
            continue

        related = _relation_score(guess, key)
        if related is not None and related > best_score:
            best_score = related
            best_positions = positions
            continue

        score = _orthographic_score(guess, key)
        if score > best_score:
            # a close miss still raises the reported confidence
            best_score = score
            if score >= config.REVEAL_THRESHOLD:
                best_positions = positions

    best_score = min(1.0, best_score)
    if best_positions is None:
        return _not_found(guess, best_score)
    return GuessResult(found=True, normalized_word=guess, positions=best_positions, confidence=best_score)


def match_guess(raw: str, index: ArticleIndex) -> GuessResult:
    guess = normalize(raw.strip())
    if not guess:
        return _not_found("")

    exact = index.reverse_index.get(guess)
    if exact:
        return GuessResult(
            found=True, normalized_word=guess, positions=exact, confidence=config.EXACT_CONFIDENCE
        )

    for lemma in sorted(lemma_candidates(guess)):
        if lemma == guess:
            continue
        bucket = index.reverse_index.get(lemma)
        if bucket:
            return GuessResult(
                found=True,
                normalized_word=guess,
                positions=bucket,
                confidence=config.MORPHOLOGICAL_CONFIDENCE,
            )

    if len(guess) < config.MIN_FUZZY_LENGTH:
        return _not_found(guess)
    return _sweep(guess, index)


def words_match(guess: str, target: str) -> bool:
    """True when *guess* would reveal *target* under any matching strategy.

    Both words must already be normalized.
    """
    if guess == target:
        return True
    if are_morphological_variants(guess, target) or are_semantically_similar(guess, target):
        return True
    return (
        _within_fuzzy_range(guess, target)
        and combined_similarity(guess, target) >= config.REVEAL_THRESHOLD
    )


def has_won(accepted_guesses: Iterable[str], index: ArticleIndex) -> bool:
    """True iff every title word is covered by at least one accepted guess."""
    if not index.title_words:
        return False
    guesses = {normalize(g.strip()) for g in accepted_guesses}
    guesses.discard("")
    return all(
        any(words_match(guess, title_word) for guess in guesses)
        for title_word in index.title_words
    )

"""Game operations over the index of the current UTC day."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Callable, Iterable

from . import articles, config
from .index import ArticleIndex, ArticleIndexCache, Position
from .matcher import GuessResult, has_won, match_guess
from .models import GameSnapshot, RawArticle, StoredGuess
from .reveal import apply_positions, is_title_revealed

logger = logging.getLogger(__name__)


def masked_view(index: ArticleIndex) -> dict:
    """Token streams with word text withheld, ready to serialise."""
    return {
        "title_tokens": [asdict(t) for t in index.title_tokens],
        "sections": [
            {
                "title_tokens": [asdict(t) for t in section.title_tokens],
                "content_tokens": [asdict(t) for t in section.content_tokens],
            }
            for section in index.sections
        ],
        "total_word_count": index.total_word_count,
        "date_key": index.date_key,
        "matcher_version": config.MATCHER_VERSION,
    }


class GameEngine:
    """Entry point for the web layer.

    Every call resolves the index for the current day once and works on that
    snapshot, so a rollover mid-request never mixes two articles.
    """
    def __init__(
        self,
        load_article: Callable[[str], RawArticle] = articles.load_article,
        clock: Callable[[], str] = articles.today_key,
    ) -> None:
        self._load_article = load_article
        self._clock = clock
        self._cache = ArticleIndexCache()

    def current_index(self) -> ArticleIndex:
        return self._cache.get(self._clock(), self._load_article)

    def get_masked_view(self) -> dict:
        return masked_view(self.current_index())

    def _match(self, raw: str, index: ArticleIndex) -> GuessResult:
        result = match_guess(raw, index)
        logger.debug(
            "[game] guess=%r found=%s occurrences=%d confidence=%.3f",
            result.normalized_word,
            result.found,
            result.occurrence_count,
            result.confidence,
        )
        return result

    def submit_guess(self, raw: str) -> GuessResult:
        return self._match(raw, self.current_index())

    def check_win(self, accepted_words: Iterable[str]) -> bool:
        return has_won(accepted_words, self.current_index())

    def reveal_all(self, accepted_words: Iterable[str]) -> list[Position]:
        """Every word position of today's article.

        *accepted_words* are the guesses that won; callers check them with
        check_win first, the positions returned are never filtered by them.
        """
        return self.current_index().all_positions()

    def record_guess(self, snapshot: GameSnapshot, raw: str) -> tuple[GameSnapshot, GuessResult]:
        """Match *raw* and fold the result into a copy of *snapshot*.

        A word already present in the guess list leaves the snapshot unchanged.
        ``saved`` turns true once every title word is revealed.
        """
        index = self.current_index()
        result = self._match(raw, index)
        if not result.normalized_word or any(
            g.word == result.normalized_word for g in snapshot.guesses
        ):
            return snapshot, result

        stored = StoredGuess(
            word=result.normalized_word,
            found=result.found,
            occurrences=result.occurrence_count,
            similarity=result.confidence,
        )
        revealed = apply_positions(snapshot.revealed, result.positions)
        updated = snapshot.model_copy(
            update={
                "guesses": [stored, *snapshot.guesses],
                "revealed": revealed,
                "saved": snapshot.saved or is_title_revealed(index, revealed),
            }
        )
        return updated, result

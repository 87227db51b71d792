"""Per-day searchable index of the masked article."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterator, Literal, Mapping

from .errors import IndexInvariantError
from .models import RawArticle
from .tokenizer import Token, tokenize

logger = logging.getLogger(__name__)

TITLE_SECTION = -1

Part = Literal["title", "content"]


@dataclass(frozen=True)
class Position:
    section: int  # TITLE_SECTION for the article title
    part: Part
    word_index: int
    display: str  # surface form as written in the article


@dataclass(frozen=True)
class MaskedSection:
    title_tokens: tuple[Token, ...]
    content_tokens: tuple[Token, ...]


@dataclass(frozen=True)
class ArticleIndex:
    date_key: str
    title: str
    title_tokens: tuple[Token, ...]
    sections: tuple[MaskedSection, ...]
    reverse_index: Mapping[str, tuple[Position, ...]]
    title_words: tuple[str, ...]
    total_word_count: int

    def all_positions(self) -> list[Position]:
        """Every word position of the article, grouped by normalized word."""
        return [pos for bucket in self.reverse_index.values() for pos in bucket]


def _fields(article: RawArticle) -> Iterator[tuple[int, Part, str, str]]:
    """Yield (section, part, id prefix, text) in document order."""
    yield TITLE_SECTION, "title", "at-", article.title
    for i, section in enumerate(article.sections):
        yield i, "title", f"s{i}t-", section.title
        yield i, "content", f"s{i}c-", section.content


def _check_positions(
    reverse_index: Mapping[str, tuple[Position, ...]],
    word_counts: dict[tuple[int, str], int],
    total_word_count: int,
) -> None:
    seen = 0
    for positions in reverse_index.values():
        for pos in positions:
            count = word_counts.get((pos.section, pos.part))
            if count is None or not 0 <= pos.word_index < count:
                raise IndexInvariantError(
                    "Position does not resolve to a word token",
                    detail=f"{pos.section}:{pos.part}:{pos.word_index}",
                )
            seen += 1
    if seen != total_word_count:
        raise IndexInvariantError(
            "Reverse index does not cover every word token",
            detail=f"{seen} positions for {total_word_count} words",
        )


def build_article_index(article: RawArticle, date_key: str) -> ArticleIndex:
    """Tokenize every field of *article* and index its words by normalized form."""
    buckets: dict[str, list[Position]] = {}
    word_counts: dict[tuple[int, str], int] = {}
    field_tokens: dict[tuple[int, str], tuple[Token, ...]] = {}
    title_words: tuple[str, ...] = ()

    for section, part, prefix, text in _fields(article):
        result = tokenize(text, prefix)
        field_tokens[(section, part)] = result.tokens
        word_counts[(section, part)] = len(result.words)
        if section == TITLE_SECTION:
            title_words = tuple(w.normalized for w in result.words)
        for word in result.words:
            buckets.setdefault(word.normalized, []).append(
                Position(section=section, part=part, word_index=word.index, display=word.display)
            )

    reverse_index = MappingProxyType({key: tuple(positions) for key, positions in buckets.items()})
    total_word_count = sum(word_counts.values())
    _check_positions(reverse_index, word_counts, total_word_count)

    index = ArticleIndex(
        date_key=date_key,
        title=article.title,
        title_tokens=field_tokens[(TITLE_SECTION, "title")],
        sections=tuple(
            MaskedSection(
                title_tokens=field_tokens[(i, "title")],
                content_tokens=field_tokens[(i, "content")],
            )
            for i in range(len(article.sections))
        ),
        reverse_index=reverse_index,
        title_words=title_words,
        total_word_count=total_word_count,
    )
    logger.info(
        "[index] Built index for %s: %d words, %d distinct, %d in title.",
        date_key,
        total_word_count,
        len(reverse_index),
        len(title_words),
    )
    return index


class ArticleIndexCache:
    """Holds the index of a single day and replaces it whole when the day changes.

    Readers take a reference to the current snapshot without locking; the
    lock only serialises rebuilds so concurrent requests for a new day build
    it once and share the result.
    """

    def __init__(self) -> None:
        self._current: ArticleIndex | None = None
        self._lock = threading.Lock()

    @property
    def current(self) -> ArticleIndex | None:
        return self._current

    def get(self, date_key: str, load_article: Callable[[str], RawArticle]) -> ArticleIndex:
        current = self._current
        if current is not None and current.date_key == date_key:
            return current
        with self._lock:
            current = self._current
            if current is not None and current.date_key == date_key:
                return current
            if current is not None:
                logger.info("[index] Day rolled over %s → %s, rebuilding.", current.date_key, date_key)
            index = build_article_index(load_article(date_key), date_key)
            self._current = index
            return index

"""Reveal map helpers: which word positions a player has uncovered."""

from __future__ import annotations

from typing import Iterable, Mapping

from .index import TITLE_SECTION, ArticleIndex, Position


def position_key(section: int, part: str, word_index: int) -> str:
    return f"{section}:{part}:{word_index}"


def apply_positions(revealed: Mapping[str, str], positions: Iterable[Position]) -> dict[str, str]:
    """Return a copy of *revealed* with *positions* uncovered.

    Keys already present are kept as they are; nothing is ever removed.
    """
    updated = dict(revealed)
    for pos in positions:
        updated.setdefault(position_key(pos.section, pos.part, pos.word_index), pos.display)
    return updated


def is_title_revealed(index: ArticleIndex, revealed: Mapping[str, str]) -> bool:
    if not index.title_words:
        return False
    return all(
        position_key(TITLE_SECTION, "title", i) in revealed
        for i in range(len(index.title_words))
    )


def revealed_percentage(index: ArticleIndex, revealed: Mapping[str, str]) -> int:
    if index.total_word_count == 0:
        return 0
    return round(len(revealed) / index.total_word_count * 100)

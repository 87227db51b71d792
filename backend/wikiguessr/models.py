from typing import Literal

from pydantic import BaseModel, Field

from . import config


class ArticleSection(BaseModel):
    title: str = ""
    content: str = ""


class RawArticle(BaseModel):
    """Article as supplied by the article source."""

    title: str
    sections: list[ArticleSection] = Field(default_factory=list)


class GuessRequest(BaseModel):
    word: str


class WordsRequest(BaseModel):
    words: list[str]


class PositionModel(BaseModel):
    section: int
    part: Literal["title", "content"]
    word_index: int
    display: str


class GuessResponse(BaseModel):
    found: bool
    word: str  # normalized guess
    positions: list[PositionModel]
    occurrences: int
    similarity: float


class WinResponse(BaseModel):
    won: bool


class RevealResponse(BaseModel):
    positions: list[PositionModel]


# ---------------------------------------------------------------------------
# Persisted per-player state
# ---------------------------------------------------------------------------

class StoredGuess(BaseModel):
    word: str
    found: bool
    occurrences: int
    similarity: float


class GameSnapshot(BaseModel):
    guesses: list[StoredGuess] = Field(default_factory=list)
    revealed: dict[str, str] = Field(default_factory=dict)  # "section:part:index" → display
    saved: bool = False  # every title word revealed
    matcher_version: int = config.MATCHER_VERSION

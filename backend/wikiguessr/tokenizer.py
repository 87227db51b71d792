"""Lossless segmentation of article text into word and punctuation tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from .normalize import normalize

_WORD = "word"
_NEWLINE = "newline"
_SPACE = "space"
_OTHER = "other"


@dataclass(frozen=True)
class WordToken:
    id: str
    index: int  # position among the word tokens of its field
    length: int
    type: Literal["word"] = field(default="word", init=False)


@dataclass(frozen=True)
class PunctuationToken:
    id: str
    text: str
    type: Literal["punct"] = field(default="punct", init=False)


Token = Union[WordToken, PunctuationToken]


@dataclass(frozen=True)
class Word:
    normalized: str
    display: str
    index: int


@dataclass(frozen=True)
class TokenizeResult:
    tokens: tuple[Token, ...]
    words: tuple[Word, ...]


def _is_word_char(c: str) -> bool:
    """ASCII letters and digits plus the accented Latin letters (U+00C0-U+024F)."""
    if c.isascii():
        return c.isalnum()
    code = ord(c)
    # multiplication and division signs sit inside the Latin-1 letter block
    if code in (0xD7, 0xF7):
        return False
    return 0xC0 <= code <= 0x24F


def _is_combining_mark(c: str) -> bool:
    return 0x0300 <= ord(c) <= 0x036F


def _char_class(c: str) -> str:
    if _is_word_char(c):
        return _WORD
    if c == "\n":
        return _NEWLINE
    if c.isspace():
        return _SPACE
    return _OTHER


def tokenize(text: str, prefix: str = "") -> TokenizeResult:
    """Split *text* into maximal runs of one character class.

    Words are runs of letters/digits (plus any combining accents written
    after them in decomposed text), every newline is a token of its own,
    other whitespace and other symbols form runs. Token ids are
    ``<prefix>w<n>`` / ``<prefix>p<n>`` with ``n`` counting every token.
    """
    tokens: list[Token] = []
    words: list[Word] = []
    pos = 0
    end_of_text = len(text)
    while pos < end_of_text:
        kind = _char_class(text[pos])
        end = pos + 1
        if kind != _NEWLINE:
            while end < end_of_text and (
                _char_class(text[end]) == kind
                or (kind == _WORD and _is_combining_mark(text[end]))
            ):
                end += 1
        chunk = text[pos:end]
        token_id = len(tokens)
        if kind == _WORD:
            index = len(words)
            tokens.append(WordToken(id=f"{prefix}w{token_id}", index=index, length=len(chunk)))
            words.append(Word(normalized=normalize(chunk), display=chunk, index=index))
        else:
            tokens.append(PunctuationToken(id=f"{prefix}p{token_id}", text=chunk))
        pos = end
    return TokenizeResult(tokens=tuple(tokens), words=tuple(words))

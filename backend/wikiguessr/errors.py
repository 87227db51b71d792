"""Custom exception classes."""

from __future__ import annotations


class WikiGuessrError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class ArticleUnavailableError(WikiGuessrError):
    """Raised when no article could be loaded for the requested day."""


class IndexInvariantError(WikiGuessrError):
    """Raised when a built index references a word that is not in the token stream.

    This is a bug in index construction, never a user error.
    """

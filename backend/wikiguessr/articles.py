"""File-backed article source: one raw article JSON per UTC day."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from . import config
from .errors import ArticleUnavailableError
from .models import RawArticle

logger = logging.getLogger(__name__)


def today_key() -> str:
    """Current calendar day in UTC as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def _read(path: Path) -> RawArticle:
    return RawArticle.model_validate_json(path.read_text(encoding="utf-8"))


def load_article(
    date_key: str,
    articles_dir: str | None = None,
    fallback_path: str | None = None,
) -> RawArticle:
    """Load the article for *date_key*: day file → bundled fallback.

    Raises ArticleUnavailableError when neither can be read.
    """
    day_path = Path(articles_dir or config.ARTICLES_DIR) / f"{date_key}.json"
    if day_path.exists():
        try:
            article = _read(day_path)
            logger.info("[articles] Loaded %s: %s", date_key, article.title)
            return article
        except (OSError, ValidationError) as exc:
            logger.warning("[articles] Could not read %s (%s). Using fallback.", day_path, exc)
    else:
        logger.warning("[articles] No article file for %s. Using fallback.", date_key)

    fallback = Path(fallback_path or config.FALLBACK_ARTICLE)
    try:
        article = _read(fallback)
    except (OSError, ValidationError) as exc:
        raise ArticleUnavailableError(f"No article available for {date_key}", detail=str(exc)) from exc
    logger.info("[articles] Loaded fallback article: %s", article.title)
    return article

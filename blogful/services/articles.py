"""Article data access.

Every function takes the session to run against as its first argument; the
caller owns the session's lifetime. A missing row is reported as ``None`` or
``0``, never as an exception.
"""

import logging
from typing import Any, Mapping

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from blogful.models import Article


logger = logging.getLogger(__name__)

ARTICLE_FIELDS = ("title", "style", "content", "date_published")


def get_all_articles(session: Session) -> list[Article]:
    """Return every article in storage order."""
    return list(session.scalars(select(Article)).all())


def get_by_id(session: Session, article_id: int) -> Article | None:
    """Return the article with the given id, or None if it does not exist."""
    return session.get(Article, article_id)


def insert_article(session: Session, new_article: Mapping[str, Any]) -> Article:
    """Insert an article and return the stored row.

    Args:
        session: Database session.
        new_article: Mapping with title, style, content and optionally
            date_published. Other keys are ignored.

    Returns:
        The created article, including its generated id and publish date.
    """
    article = Article(**{key: new_article[key] for key in ARTICLE_FIELDS if key in new_article})
    session.add(article)
    session.commit()
    session.refresh(article)

    logger.debug(f"Inserted article {article.id}")
    return article


def delete_article(session: Session, article_id: int) -> int:
    """Delete the article with the given id.

    Returns:
        Number of rows removed, 0 when no such article exists.
    """
    result = session.execute(delete(Article).where(Article.id == article_id))
    session.commit()
    return result.rowcount


def truncate_articles(session: Session) -> None:
    """Remove every article."""
    session.execute(delete(Article))
    session.commit()

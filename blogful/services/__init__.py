"""Data access services."""

from blogful.services.articles import (
    delete_article,
    get_all_articles,
    get_by_id,
    insert_article,
    truncate_articles,
)
from blogful.services.users import get_all_users


__all__ = [
    "get_all_articles",
    "get_by_id",
    "insert_article",
    "delete_article",
    "truncate_articles",
    "get_all_users",
]

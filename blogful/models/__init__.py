"""Database models."""

from blogful.models.article import Article
from blogful.models.user import User


__all__ = ["User", "Article"]

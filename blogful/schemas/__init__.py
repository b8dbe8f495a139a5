"""Marshmallow schemas for serialization and validation."""

from blogful.schemas.article import ArticleCreateSchema, ArticleSchema
from blogful.schemas.user import UserSchema


__all__ = [
    "ArticleSchema",
    "ArticleCreateSchema",
    "UserSchema",
]

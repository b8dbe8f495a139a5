"""Article-related Marshmallow schemas."""

from marshmallow import EXCLUDE, fields, validate

from blogful.extensions import ma
from blogful.schemas.fields import SanitizedString, UTCDateTime


def _required_text(name: str) -> fields.Str:
    missing = f"Missing '{name}' in request body"
    return fields.Str(
        required=True,
        validate=validate.Length(min=1, error=missing),
        error_messages={
            "required": missing,
            "null": missing,
            "invalid": f"Invalid '{name}' in request body",
        },
    )


class ArticleSchema(ma.Schema):
    """Schema for article serialization."""

    id = fields.Int(dump_only=True)
    title = SanitizedString(dump_only=True)
    style = fields.Str(dump_only=True)
    content = SanitizedString(dump_only=True)
    date_published = UTCDateTime(dump_only=True)


class ArticleCreateSchema(ma.Schema):
    """Schema for article creation validation."""

    # Errors are reported for the first failing field in this order
    FIELD_ORDER = ("title", "style", "content", "date_published")

    class Meta:
        unknown = EXCLUDE

    title = _required_text("title")
    style = _required_text("style")
    content = _required_text("content")
    date_published = UTCDateTime(
        error_messages={"invalid": "Invalid 'date_published' in request body"},
    )

    @classmethod
    def first_error(cls, messages: dict) -> str:
        """Pick the message to report from a ValidationError's messages."""
        for name in cls.FIELD_ORDER:
            if name in messages:
                return messages[name][0]
        return "Invalid request body"

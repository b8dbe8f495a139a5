"""User-related Marshmallow schemas."""

from marshmallow import fields

from blogful.extensions import ma
from blogful.schemas.fields import SanitizedString, UTCDateTime


class UserSchema(ma.Schema):
    """Schema for user serialization."""

    id = fields.Int(dump_only=True)
    fullname = SanitizedString(dump_only=True)
    username = SanitizedString(dump_only=True)
    nickname = SanitizedString(dump_only=True)
    date_created = UTCDateTime(dump_only=True)

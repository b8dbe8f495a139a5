"""Custom Marshmallow fields."""

from datetime import datetime, timezone

from marshmallow import fields

from blogful.sanitize import sanitize


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SanitizedString(fields.String):
    """String field that escapes disallowed markup on dump."""

    def _serialize(self, value, attr, obj, **kwargs):
        return super()._serialize(sanitize(value), attr, obj, **kwargs)


class UTCDateTime(fields.DateTime):
    """DateTime field kept in UTC.

    Loads convert any offset to UTC; dumps are ISO 8601 with milliseconds
    and a Z suffix. Naive values are taken to be UTC already.
    """

    def _deserialize(self, value, attr, data, **kwargs) -> datetime:
        return _as_utc(super()._deserialize(value, attr, data, **kwargs))

    def _serialize(self, value: datetime | None, attr, obj, **kwargs) -> str | None:
        if value is None:
            return None
        value = _as_utc(value)
        return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"

from datetime import datetime, timedelta, timezone as dt_tz

from django.conf import settings


def utc_now():
    return datetime.now(dt_tz.utc)


def as_utc(dt):
    """Normalize an aware datetime to UTC. Naive datetimes are rejected."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"naive datetime not allowed: {dt.isoformat()}")
    return dt.astimezone(dt_tz.utc)


def display_tz():
    return dt_tz(timedelta(hours=getattr(settings, "DISPLAY_TZ_OFFSET_HOURS", 9)))


def to_display_iso(dt_utc):
    return dt_utc.astimezone(display_tz()).isoformat()

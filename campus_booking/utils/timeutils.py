from datetime import datetime, timezone


def to_utc_naive(value: datetime) -> datetime:
    """Normalise a datetime to naive UTC; naive input is taken to be UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def minutes_since_midnight(value) -> int:
    """Hour:minute of a datetime or time as minutes after midnight. Seconds are ignored."""
    return value.hour * 60 + value.minute

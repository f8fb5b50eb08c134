from datetime import date, datetime, time, timezone
from typing import Union

# 24-hour HH:MM, single-digit hours allowed ("9:30")
HHMM_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_moment(value: Union[date, datetime]) -> datetime:
    """
    Turn a stored date or timestamp into an aware UTC instant.

    A plain calendar date means midnight UTC of that day.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def calendar_date(value: Union[date, datetime]) -> date:
    """The calendar day a date or timestamp was recorded for, in its own zone."""
    if isinstance(value, datetime):
        return value.date()
    return value


def visit_moment(booking) -> datetime:
    # visit_time is informational only; rules measure from visit_date
    return to_moment(booking.visit_date)


def normalize_hhmm(value: str) -> str:
    """'9:05' -> '09:05'."""
    hours, minutes = value.strip().split(":")
    return f"{int(hours):02d}:{int(minutes):02d}"


def isoformat_utc(value: datetime) -> str:
    return as_utc(value).isoformat().replace("+00:00", "Z")

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_local_naive(value: datetime) -> datetime:
    """All times inside the domain are naive local time, like ``now_local``.

    Offset-aware values are converted to local time and stripped of tzinfo.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_iso_datetime(value: str) -> datetime:
    return to_local_naive(datetime.fromisoformat(value))


def parse_hhmm(value: Optional[str]) -> time:
    """Parse HH:MM string into time."""
    v = (value or "").strip()
    try:
        return datetime.strptime(v, "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time {v!r} (HH:MM)")


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def now_local() -> datetime:
    """Current local time.

    Wrapped so callers can inject a fixed clock in tests.
    """
    return datetime.now()


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=int(days))

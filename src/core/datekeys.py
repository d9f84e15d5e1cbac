"""Day and month keys — the join values shared by Health, Finance, Events and Journal.

Keys are ISO strings in UTC, so string order equals chronological order and
a month key is always a prefix of every day key in that month.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

Instant = datetime | date


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_date(instant: Instant | None) -> date:
    if instant is None:
        instant = utc_now()
    if isinstance(instant, datetime):
        # Naive datetimes are taken to already be in UTC
        if instant.tzinfo is not None:
            instant = instant.astimezone(timezone.utc)
        return instant.date()
    return instant


def day_key(instant: Instant | None = None) -> str:
    """Return "YYYY-MM-DD" for the instant (now if omitted)."""
    return _as_date(instant).isoformat()


def month_key(instant: Instant | None = None) -> str:
    """Return "YYYY-MM" for the instant; always a prefix of ``day_key``."""
    return day_key(instant)[:7]


def shift_day_key(key: str, days: int) -> str:
    """Move a day key by ``days`` calendar days (negative goes back)."""
    return (date.fromisoformat(key) + timedelta(days=days)).isoformat()


def recent_day_keys(count: int, instant: Instant | None = None) -> list[str]:
    """Oldest-first keys for the ``count`` days ending on the instant's day."""
    end = _as_date(instant)
    return [(end - timedelta(days=offset)).isoformat() for offset in range(count - 1, -1, -1)]

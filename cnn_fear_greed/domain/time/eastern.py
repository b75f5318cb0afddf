# cnn_fear_greed/domain/time/eastern.py

from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

# "All times are ET", as stated in the money.cnn.com footer
EASTERN = ZoneInfo("America/New_York")


def require_tz_aware(dt: datetime, name: str = "datetime") -> None:
    """
    Enforce timezone-aware datetime.

    Use in entities/adapters where naive datetimes are forbidden.
    """
    if dt.tzinfo is None:
        raise ValueError(f"{name} must be timezone-aware")


def to_zone(dt: datetime, tz: tzinfo = EASTERN) -> datetime:
    """
    Convert a timezone-aware datetime to the given zone.

    Raises:
        ValueError if dt is naive.
    """
    require_tz_aware(dt, "dt")
    return dt.astimezone(tz)


def now_in(tz: tzinfo = EASTERN) -> datetime:
    return datetime.now(tz)

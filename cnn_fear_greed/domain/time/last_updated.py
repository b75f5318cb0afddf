# cnn_fear_greed/domain/time/last_updated.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

from cnn_fear_greed.domain.time.eastern import EASTERN, now_in, to_zone

# Last updated Mar 29 at 4:59pm
_LAST_UPDATED_RE = re.compile(
    r"^Last updated (?P<month>[A-Za-z]{3}) (?P<day>\d{1,2}) at "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?P<meridiem>[AaPp][Mm])$"
)

_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}


@dataclass(frozen=True)
class LastUpdated:
    """Wall-clock fields of a 'Last updated' marker. The page never prints a year."""

    month: int
    day: int
    hour: int
    minute: int


def parse_last_updated(text: str) -> LastUpdated:
    """
    Parse 'Last updated <Mon> <D> at <h>:<mm><am|pm>' (12-hour clock).

    Raises:
        ValueError if the text does not have that shape.
    """
    v = " ".join((text or "").split())
    m = _LAST_UPDATED_RE.match(v)
    if not m:
        raise ValueError(f"Unsupported last updated format: {text!r}")

    month = _MONTHS.get(m.group("month").lower())
    if month is None:
        raise ValueError(f"Unknown month in last updated text: {text!r}")

    hour = int(m.group("hour"))
    minute = int(m.group("minute"))
    if not 1 <= hour <= 12 or minute > 59:
        raise ValueError(f"Invalid time in last updated text: {text!r}")

    # 12am -> 00h, 12pm -> 12h
    hour = hour % 12
    if m.group("meridiem").lower() == "pm":
        hour += 12

    return LastUpdated(month=month, day=int(m.group("day")), hour=hour, minute=minute)


def _previous_year(dt: datetime) -> datetime:
    try:
        return dt.replace(year=dt.year - 1)
    except ValueError:
        # Feb 29 has no counterpart in the previous year; roll over to Mar 1
        return dt.replace(year=dt.year - 1, month=3, day=1)


def resolve_last_updated(
    text: str,
    now: Optional[datetime] = None,
    tz: tzinfo = EASTERN,
) -> datetime:
    """
    Resolve a year-less 'Last updated' marker into an absolute datetime in `tz`.

    The current year of `now` is assumed. When that puts the marker strictly
    after `now` (e.g. "Dec 31" read on January 1st), the previous year is used
    instead. A marker equal to `now` is kept as is.

    Raises:
        ValueError if the text cannot be parsed or `now` is naive.
    """
    parsed = parse_last_updated(text)
    today = to_zone(now, tz) if now is not None else now_in(tz)

    candidate = datetime(
        today.year,
        parsed.month,
        parsed.day,
        parsed.hour,
        parsed.minute,
        0,
        0,
        tzinfo=tz,
    )

    # compara instantes: na volta do horário de verão 1:30 EST vem depois de 1:45 EDT
    if today.astimezone(timezone.utc) < candidate.astimezone(timezone.utc):
        return _previous_year(candidate)
    return candidate

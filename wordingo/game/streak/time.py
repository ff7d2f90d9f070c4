from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def local_date(moment: datetime, tz_name: str | None = None) -> date:
    """Converts a datetime to the calendar date of the player's zone.

    Naive datetimes are treated as UTC; `tz_name=None` means the system zone.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if tz_name is None:
        return moment.astimezone().date()
    return moment.astimezone(ZoneInfo(tz_name)).date()

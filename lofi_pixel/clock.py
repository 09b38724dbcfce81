"""Wall clock text for the scene, pinned to one time zone."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from lofi_pixel.config import CLOCK_TIMEZONE

_ZONE = ZoneInfo(CLOCK_TIMEZONE)


def format_clock(now: datetime | None = None, zone: ZoneInfo = _ZONE) -> str:
    """Return e.g. '3:04:05 PM CDT'. Naive datetimes are taken as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(zone)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem} {local.tzname()}"

from datetime import date, datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo

from liftlog.settings import get_settings


def reference_tz() -> ZoneInfo:
    return ZoneInfo(get_settings().TIMEZONE)


def to_utc(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Naive datetimes are read as wall-clock time in the reference timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz or reference_tz())
    return dt.astimezone(timezone.utc)


def day_bounds(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Start and end of `day` in `tz`, both returned in UTC."""
    tz = tz or reference_tz()
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, time.max, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)

from datetime import datetime
from zoneinfo import ZoneInfo

from edolog.core.config import settings


def local_tz() -> ZoneInfo | None:
    # None means the process' own local time.
    return ZoneInfo(settings.timezone) if settings.timezone else None


def now_local() -> datetime:
    tz = local_tz()
    if tz is None:
        return datetime.now()
    return datetime.now(tz=tz).replace(tzinfo=None)


def to_local_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(local_tz()).replace(tzinfo=None)

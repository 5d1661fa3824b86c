from datetime import datetime

from edolog.core.errors import ValidationError
from edolog.utils.timezone import now_local

MONTH_FORMAT_ERROR = "month must be YYYY-MM"


def _parse_month(yyyymm: str) -> tuple[int, int]:
    parts = yyyymm.strip().split("-")
    if len(parts) != 2:
        raise ValidationError(MONTH_FORMAT_ERROR)
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValidationError(MONTH_FORMAT_ERROR) from None
    if not 1 <= month <= 12:
        raise ValidationError(MONTH_FORMAT_ERROR)
    return year, month


def month_range(yyyymm: str | None = None, now: datetime | None = None) -> tuple[datetime, datetime]:
    """Half-open local-time interval ``[start, end)`` for a calendar month.

    ``yyyymm`` is ``"YYYY-MM"``; when empty the month containing ``now``
    (defaulting to the local clock) is used.
    """
    if yyyymm:
        year, month = _parse_month(yyyymm)
    else:
        ref = now or now_local()
        year, month = ref.year, ref.month

    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    try:
        start = datetime(year, month, 1)
        end = datetime(next_year, next_month, 1)
    except ValueError:
        raise ValidationError(MONTH_FORMAT_ERROR) from None
    return start, end

from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse as parse_date

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """Format an instant the way browsers serialize dates: UTC, milliseconds, trailing Z."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_timestamp(value: object) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, falling back to free-form dates such as
    ``Tue, 02 Jul 2024 10:15:00 GMT`` or ``July 2, 2024``. Naive results are UTC."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    iso_text = text[:-1] + "+00:00" if text[-1] in "Zz" else text
    try:
        parsed = datetime.fromisoformat(iso_text)
    except ValueError:
        try:
            parsed = parse_date(text)
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

"""
UTC datetime utilities.

Graph returns ISO-8601 strings with a trailing "Z" and up to seven
fractional digits; parse_graph_datetime normalizes those into aware
datetimes so Planner scoring and Teams ordering can compare them.
"""

import re
from datetime import UTC, datetime

_FRACTION_RE = re.compile(r"\.(\d+)")


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def parse_graph_datetime(value: str | None) -> datetime | None:
    """
    Parse a Microsoft Graph timestamp into a UTC-aware datetime.

    - None or empty returns None
    - "Z" suffix is treated as UTC
    - fractional seconds are cut to microseconds (Graph may send 7 digits)
    - naive values are assumed to be UTC
    - unparsable values return None

    Args:
        value: Timestamp such as "2024-05-01T10:15:30.1234567Z"

    Returns:
        UTC-aware datetime or None
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)

"""
Value formatting for selector levels.

Implements the ``format`` kinds a selector can request (``time``,
``timeago``, ``toInt``, ``toString``) plus the text conversion used when
concatenating resolved values. Numeric timestamps are epoch milliseconds,
string timestamps are ISO-8601.
"""

from __future__ import annotations

import logging
import math
import re
from calendar import day_name
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any

logger = logging.getLogger(__name__)

FORMAT_TIME = "time"
FORMAT_TIMEAGO = "timeago"
FORMAT_TO_INT = "toInt"
FORMAT_TO_STRING = "toString"

FORMAT_KINDS = (FORMAT_TIME, FORMAT_TIMEAGO, FORMAT_TO_INT, FORMAT_TO_STRING)

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")

# Seconds -> minutes -> hours -> days -> weeks -> months -> years
_TIMEAGO_STEPS = (60, 60, 24, 7, 365 / 7 / 12, 12)
_TIMEAGO_UNITS = ("second", "minute", "hour", "day", "week", "month", "year")


def to_string(value: Any) -> str:
    """Convert a value to display text the way a browser would concatenate it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_string(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def to_int(value: Any) -> int | None:
    """Parse the leading integer of a value, or None if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    match = _INT_PREFIX_RE.match(to_string(value))
    if match is None:
        return None
    return int(match.group(1))


def to_datetime(value: Any) -> datetime | None:
    """Coerce a datetime, date, epoch-millisecond number or ISO string to a naive local datetime."""
    dt: datetime | None = None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float)):
        try:
            dt = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    if dt is not None and dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def convert_date(value: Any) -> str:
    """Format as ``YYYY-MM-DD``; empty string for non-dates."""
    if not isinstance(value, date):
        return ""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def pretty_time(value: datetime, use_24h_clock: bool = False) -> str:
    """Format the time of day as ``H:MM AM/PM`` or ``HH:MM``."""
    hh = value.hour
    mm = f"{value.minute:02d}"

    if use_24h_clock:
        return f"{hh:02d}:{mm}"

    if hh > 12:
        return f"{hh - 12}:{mm} PM"
    if hh == 12:
        return f"{hh}:{mm} PM"
    if hh == 0:
        return f"12:{mm} AM"
    return f"{hh}:{mm} AM"


def _local_now(now: datetime | None) -> datetime:
    """Return ``now`` (or the current time) as a naive local datetime."""
    now = now or datetime.now()
    if now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    return now


def get_time(value: Any, now: datetime | None = None, use_24h_clock: bool = False) -> Any:
    """
    Format a timestamp relative to the calendar.

    - today: clock time
    - yesterday: ``"yesterday\\n"`` followed by the clock time
    - within the last week: weekday name
    - otherwise: ``YYYY-MM-DD``

    Returns None for empty input and the input unchanged if it cannot be parsed.
    """
    if not value:
        return None

    dt = to_datetime(value)
    if dt is None:
        logger.debug("Could not parse %r as a timestamp", value)
        return value

    now = _local_now(now)
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    start_of_yesterday = start_of_day - timedelta(days=1)
    start_of_week = start_of_day - timedelta(days=7)

    if dt > start_of_day:
        return pretty_time(dt, use_24h_clock)
    if dt > start_of_yesterday:
        return "yesterday\n" + pretty_time(dt, use_24h_clock)
    if dt > start_of_week:
        return day_name[dt.weekday()]
    return convert_date(dt)


def time_ago(value: Any, now: datetime | None = None) -> Any:
    """
    Format a timestamp as relative time (``"3 hours ago"``, ``"in 2 days"``).

    Differences of up to nine seconds read ``"just now"`` (``"right now"``
    for the future). Unparseable input is returned unchanged.
    """
    dt = to_datetime(value)
    if dt is None:
        logger.debug("Could not parse %r as a timestamp", value)
        return value

    now = _local_now(now)
    diff = (now - dt).total_seconds()
    future = diff < 0
    diff = abs(diff)

    idx = 0
    while idx < len(_TIMEAGO_STEPS) and diff >= _TIMEAGO_STEPS[idx]:
        diff /= _TIMEAGO_STEPS[idx]
        idx += 1
    count = math.floor(diff)
    idx *= 2
    if count > (9 if idx == 0 else 1):
        idx += 1

    if idx == 0:
        return "right now" if future else "just now"

    unit = _TIMEAGO_UNITS[idx // 2]
    if count > 1:
        unit += "s"
    return f"in {count} {unit}" if future else f"{count} {unit} ago"


def format_value(
    value: str | int | float,
    kind: str | None,
    *,
    use_24h_clock: bool = False,
    now: datetime | None = None,
) -> Any:
    """Apply one of the selector format kinds; unknown kinds leave the value as-is."""
    if kind not in FORMAT_KINDS:
        if kind:
            logger.debug("Ignoring unknown format %r", kind)
        return value

    if kind == FORMAT_TIME:
        return get_time(value, now=now, use_24h_clock=use_24h_clock)
    if kind == FORMAT_TIMEAGO:
        return time_ago(value, now=now)
    if kind == FORMAT_TO_INT:
        return to_int(value)
    if kind == FORMAT_TO_STRING:
        return to_string(value)
    return value

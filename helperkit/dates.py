"""Date formatting helpers.

All helpers accept ``datetime`` and ``date`` objects, ISO-8601 strings
(a trailing ``Z`` is allowed), the display strings produced by this
module (``"Oct 5, 2023"``, ``"Oct 5, 2023 2:48 PM"``) and epoch
milliseconds.

Most helpers work on the *wall clock* of the value: the written date
and time are kept and the offset is replaced by UTC, so
``"2023-10-05T23:30:00+05:00"`` is treated as 23:30 on October 5th.
:func:`get_date_from_now` is the exception and converts to UTC
instead, since it measures elapsed time.

Example:

>>> get_utc_json_date("2022-01-01")
'2022-01-01T00:00:00.000Z'
>>> format_date("2023-10-05T14:48:00.000Z")
'Oct 5, 2023'
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from .config import get_settings
from .exceptions import HelperError, InvalidArgumentError
from .utils.json_parse import isoformat_utc

logger = logging.getLogger(__name__)

DateInput = Union[str, date, datetime, int, float]

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
SATURDAY = 6  # Sunday-based day of week, Sunday == 0

_DISPLAY_RE = re.compile(
    r"^(?P<month>[A-Za-z]{3})\s+(?P<day>\d{1,2}),\s*(?P<year>\d{4})"
    r"(?:\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>AM|PM|am|pm))?$"
)


def _parse_display(text: str) -> Optional[datetime]:
    match = _DISPLAY_RE.match(text)
    if not match:
        return None
    month = match.group("month").title()
    if month not in MONTHS:
        return None
    hour = minute = 0
    if match.group("hour") is not None:
        hour = int(match.group("hour")) % 12
        if match.group("meridiem").upper() == "PM":
            hour += 12
        minute = int(match.group("minute"))
    try:
        return datetime(int(match.group("year")), MONTHS.index(month) + 1, int(match.group("day")), hour, minute)
    except ValueError:
        return None


def parse_date(value: DateInput) -> datetime:
    """Parse *value* into a ``datetime`` (naive or aware, as written).

    Raises
    ------
    InvalidArgumentError
        If the value is of an unsupported type or cannot be parsed.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid epoch milliseconds {value!r}: {e}", argument="date")
    if isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            parsed = _parse_display(value.strip())
            if parsed is not None:
                return parsed
        raise InvalidArgumentError(f"Invalid date {value!r}", argument="date")
    raise InvalidArgumentError(f"Unsupported date type {type(value).__name__}", argument="date")


def _wall_clock(value: DateInput) -> datetime:
    return parse_date(value).replace(tzinfo=timezone.utc)


def _as_utc(value: DateInput) -> datetime:
    parsed = parse_date(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _format_day(value: datetime) -> str:
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def _format_day_and_time(value: datetime) -> str:
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{_format_day(value)} {hour}:{value.minute:02d} {meridiem}"


def _round_half_up(number: float) -> int:
    return int(math.floor(number + 0.5))


def format_date(value: Optional[DateInput]) -> Optional[str]:
    """Format a date as ``"Oct 5, 2023"``.

    Returns ``None`` for empty input and for anything that cannot be
    parsed; this helper never raises for bad data.
    """
    if not value:
        return None
    try:
        return _format_day(_start_of_day(_wall_clock(value)))
    except HelperError as e:
        logger.debug("format_date could not parse %r: %s", value, e)
        return None


def get_utc_json_date(value: DateInput) -> str:
    """Return the start of the day in UTC as ``YYYY-MM-DDT00:00:00.000Z``."""
    return isoformat_utc(_start_of_day(_wall_clock(value)))


def get_utc_only_date(value: DateInput) -> str:
    """Return the date part only, ``YYYY-MM-DD``."""
    return _start_of_day(_wall_clock(value)).strftime("%Y-%m-%d")


def get_utc_date_and_time(value: DateInput) -> str:
    """Format as ``"Jan 1, 2022 12:00 AM"`` using the wall clock time."""
    return _format_day_and_time(_wall_clock(value))


def get_date_and_time(value: DateInput) -> str:
    """Format as ``"Jan 1, 2022 12:00 AM"`` using the wall clock time."""
    return _format_day_and_time(_wall_clock(value))


def relative_time(value: DateInput, now: Optional[datetime] = None) -> str:
    """Describe *value* relative to *now*, e.g. ``"2 hours ago"`` or ``"in a day"``.

    Amounts are rounded half up and bucketed with the usual thresholds:
    up to 44 seconds is "a few seconds", under 45 minutes counts
    minutes, under 22 hours counts hours, under 26 days counts days,
    under 11 months counts months, and anything longer counts years.
    """
    instant = _as_utc(value)
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    delta = (now - instant).total_seconds()

    elapsed = abs(delta)
    seconds = _round_half_up(elapsed)
    minutes = _round_half_up(elapsed / 60)
    hours = _round_half_up(elapsed / 3600)
    days = _round_half_up(elapsed / 86400)
    exact_months = (elapsed / 86400) * 4800 / 146097
    months = _round_half_up(exact_months)
    years = _round_half_up(exact_months / 12)

    if seconds <= 44:
        phrase = "a few seconds"
    elif minutes <= 1:
        phrase = "a minute"
    elif minutes < 45:
        phrase = f"{minutes} minutes"
    elif hours <= 1:
        phrase = "an hour"
    elif hours < 22:
        phrase = f"{hours} hours"
    elif days <= 1:
        phrase = "a day"
    elif days < 26:
        phrase = f"{days} days"
    elif months <= 1:
        phrase = "a month"
    elif months < 11:
        phrase = f"{months} months"
    elif years <= 1:
        phrase = "a year"
    else:
        phrase = f"{years} years"

    return f"{phrase} ago" if delta >= 0 else f"in {phrase}"


def get_date_from_now(value: DateInput, now: Optional[datetime] = None) -> str:
    """Relative time for recent dates, absolute date and time otherwise.

    The value is read as UTC.  When it lies at most
    ``relative_window_hours`` (24 by default) in the past, or anywhere
    in the future, the relative phrase is returned; older values are
    formatted as ``"Jan 1, 2022 12:00 AM"``.
    """
    instant = _as_utc(value)
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    hours = int((now - instant).total_seconds() / 3600)
    if hours <= get_settings().relative_window_hours:
        return relative_time(instant, now)
    return _format_day_and_time(instant)


def get_next_saturday_by_week(start_date: Optional[DateInput], weeks: Union[int, float]) -> Optional[str]:
    """Return the Saturday reached after adding *weeks* to *start_date*.

    If the shifted day is a Saturday it is returned as is; otherwise
    the Saturday closing the previous Sunday-to-Saturday week is used.

    Example: ``get_next_saturday_by_week("2022-01-01", 1)`` returns
    ``"2022-01-08T00:00:00.000Z"``.
    """
    if not start_date:
        return None
    if isinstance(weeks, bool) or not isinstance(weeks, (int, float)):
        raise InvalidArgumentError(f"weeks must be a number, got {weeks!r}", argument="weeks")

    shifted = _start_of_day(_wall_clock(start_date)) + timedelta(weeks=weeks)
    if _day_of_week(shifted) != SATURDAY:
        shifted -= timedelta(weeks=1)
        shifted += timedelta(days=SATURDAY - _day_of_week(shifted))
    return get_utc_json_date(shifted)


def _day_of_week(value: datetime) -> int:
    return (value.weekday() + 1) % 7


__all__ = [
    "parse_date",
    "format_date",
    "get_utc_json_date",
    "get_utc_only_date",
    "get_utc_date_and_time",
    "get_date_and_time",
    "relative_time",
    "get_date_from_now",
    "get_next_saturday_by_week",
]

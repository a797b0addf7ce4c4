"""Date, weekday, time-of-day and stay length helpers.

Parsers raise the `InputError` subclasses from `core.errors` so the CLI can
report them verbatim.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from core.domain.choices import Weekday
from core.errors import (
    DateInPastError,
    DateSyntaxError,
    InvalidNumberError,
    InvalidWeekdayError,
    NonPositiveDurationError,
    TimeSyntaxError,
)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
NOW = "now"
PLUS_TWO_WEEKS = "+2 weeks"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def parse_duration(text: str) -> timedelta:
    """Parse a number of travel days into the gap between outbound and inbound.

    Friday to Sunday is "3" days, i.e. two days between the outbound and the
    inbound dates.
    """

    value = text.strip()
    if not _INTEGER_RE.match(value):
        raise InvalidNumberError(f"{text!r} is not a valid number of days!")
    days = int(value)
    if days < 1:
        raise NonPositiveDurationError(f"Number of days must be at least 1, got {days}!")
    try:
        return timedelta(days=days - 1)
    except OverflowError as exc:
        raise InvalidNumberError(f"{text!r} is too large a number of days!") from exc


def parse_date(text: str, *, today: date | None = None) -> date:
    """Parse `now`, `+2 weeks` or a strict `YYYY-MM-DD` literal."""

    today = today or today_utc()
    if text == NOW:
        return today
    if text == PLUS_TWO_WEEKS:
        return today + timedelta(weeks=2)

    if not _DATE_RE.match(text):
        raise DateSyntaxError(f"{text!r} does not match YYYY-MM-DD!")
    try:
        parsed = datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateSyntaxError(f"{text!r} is not a valid date: {exc}") from exc

    if parsed < today:
        raise DateInPastError(f"{parsed.isoformat()} is in the past!")
    return parsed


def parse_weekday(text: str) -> Weekday:
    try:
        return Weekday[text.strip().upper()]
    except KeyError:
        raise InvalidWeekdayError(f"{text} is an invalid weekday name!") from None


def parse_time(text: str) -> time:
    """Parse a strict `HH:MM` time-of-day."""

    if not _TIME_RE.match(text.strip()):
        raise TimeSyntaxError(f"{text!r} does not match HH:MM!")
    try:
        return datetime.strptime(text.strip(), TIME_FORMAT).time()
    except ValueError as exc:
        raise TimeSyntaxError(f"{text!r} is not a valid time: {exc}") from exc


def next_weekday(start: date, weekday: Weekday) -> date:
    """First date on or after `start` that falls on `weekday`."""

    return start + timedelta(days=(int(weekday) - start.weekday()) % 7)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_duration(value: timedelta) -> str:
    total_minutes = int(value.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h{minutes}m"

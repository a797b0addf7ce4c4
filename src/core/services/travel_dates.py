"""Candidate outbound/inbound date pairs for a stay inside a date range."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from core.dates import next_weekday
from core.domain.choices import Weekday
from core.domain.models import DatePair
from core.errors import NoFeasibleWindowError

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)
_ONE_WEEK = timedelta(weeks=1)


def _shift(day: date | None, delta: timedelta) -> date | None:
    # None once the calendar runs out (past date.max).
    if day is None:
        return None
    try:
        return day + delta
    except OverflowError:
        return None


def get_possible_travel_dates(
    since: date,
    until: date,
    stay: timedelta,
    weekday: Weekday | None = None,
) -> list[DatePair]:
    """Enumerate every (outbound, inbound) pair with `inbound = outbound + stay`.

    With a `weekday` the outbound dates step a week at a time starting from the
    first matching day on or after `since`; otherwise they step a day at a
    time. A pair whose inbound date equals `until` is still emitted.

    Raises `NoFeasibleWindowError` when not even the first candidate fits.
    An empty list is never an error here, callers report it as "no match".
    """

    if weekday is not None:
        try:
            outbound: date | None = next_weekday(since, weekday)
        except OverflowError:
            outbound = None
    else:
        outbound = since
    step = _ONE_WEEK if weekday is not None else _ONE_DAY
    inbound = _shift(outbound, stay)

    if inbound is None or inbound > until:
        raise NoFeasibleWindowError(
            f"No {stay.days + 1} day trip"
            + (f" starting on a {weekday.label()}" if weekday is not None else "")
            + f" fits between {since.isoformat()} and {until.isoformat()}!"
        )

    pairs: list[DatePair] = []
    while outbound is not None and inbound is not None and inbound <= until:
        pairs.append(DatePair(outbound=outbound, inbound=inbound))
        outbound = _shift(outbound, step)
        inbound = _shift(outbound, stay)

    logger.debug("Possible travel dates: %s", pairs)
    return pairs

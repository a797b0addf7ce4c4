from __future__ import annotations

from datetime import date, timedelta

import pytest

from core.dates import parse_duration
from core.domain.choices import Weekday
from core.domain.models import DatePair
from core.errors import NoFeasibleWindowError
from core.services.travel_dates import get_possible_travel_dates


def pairs(*values: tuple[date, date]) -> list[DatePair]:
    return [DatePair(outbound=outbound, inbound=inbound) for outbound, inbound in values]


def test_every_day_without_weekday() -> None:
    result = get_possible_travel_dates(date(2020, 1, 1), date(2020, 1, 6), parse_duration("4"))

    assert result == pairs(
        (date(2020, 1, 1), date(2020, 1, 4)),
        (date(2020, 1, 2), date(2020, 1, 5)),
        (date(2020, 1, 3), date(2020, 1, 6)),
    )


def test_fixed_weekday() -> None:
    result = get_possible_travel_dates(
        date(2020, 4, 1), date(2020, 4, 6), parse_duration("4"), Weekday.WEDNESDAY
    )

    assert result == pairs((date(2020, 4, 1), date(2020, 4, 4)))


def test_weekday_advances_from_since() -> None:
    # 2020-04-01 is a Wednesday, the first Friday is 2020-04-03.
    result = get_possible_travel_dates(
        date(2020, 4, 1), date(2020, 4, 30), parse_duration("3"), Weekday.FRIDAY
    )

    assert [pair.outbound for pair in result] == [
        date(2020, 4, 3),
        date(2020, 4, 10),
        date(2020, 4, 17),
        date(2020, 4, 24),
    ]
    assert all(pair.inbound == pair.outbound + timedelta(days=2) for pair in result)


@pytest.mark.parametrize("stay_days", [0, 1, 2, 5])
@pytest.mark.parametrize("span_days", [0, 3, 10])
def test_one_pair_per_day(stay_days: int, span_days: int) -> None:
    since = date(2020, 2, 25)
    until = since + timedelta(days=span_days)
    stay = timedelta(days=stay_days)

    if stay_days > span_days:
        with pytest.raises(NoFeasibleWindowError):
            get_possible_travel_dates(since, until, stay)
        return

    result = get_possible_travel_dates(since, until, stay)

    expected_outbounds = [since + timedelta(days=i) for i in range(span_days - stay_days + 1)]
    assert [pair.outbound for pair in result] == expected_outbounds
    assert all(pair.inbound == pair.outbound + stay for pair in result)
    assert result[-1].inbound == until


@pytest.mark.parametrize("weekday", list(Weekday))
def test_weekday_pairs_are_a_week_apart(weekday: Weekday) -> None:
    result = get_possible_travel_dates(date(2020, 3, 1), date(2020, 5, 31), timedelta(days=2), weekday)

    assert result
    assert all(pair.outbound.weekday() == weekday for pair in result)
    for previous, current in zip(result, result[1:]):
        assert current.outbound - previous.outbound == timedelta(weeks=1)
    assert all(pair.inbound <= date(2020, 5, 31) for pair in result)


def test_inbound_on_until_is_inclusive() -> None:
    result = get_possible_travel_dates(date(2020, 1, 1), date(2020, 1, 3), timedelta(days=2))

    assert result == pairs((date(2020, 1, 1), date(2020, 1, 3)))


def test_no_feasible_window() -> None:
    with pytest.raises(NoFeasibleWindowError):
        get_possible_travel_dates(date(2020, 1, 1), date(2020, 1, 3), timedelta(days=3))


def test_no_feasible_window_after_weekday_shift() -> None:
    # First Sunday after 2020-04-01 is 2020-04-05; a 3 day trip ends after until.
    with pytest.raises(NoFeasibleWindowError, match="Sunday"):
        get_possible_travel_dates(date(2020, 4, 1), date(2020, 4, 6), timedelta(days=2), Weekday.SUNDAY)


def test_stay_longer_than_the_calendar() -> None:
    with pytest.raises(NoFeasibleWindowError):
        get_possible_travel_dates(date(2030, 1, 1), date(2030, 1, 14), parse_duration("3000000"))


def test_enumeration_stops_at_the_end_of_the_calendar() -> None:
    result = get_possible_travel_dates(date(9999, 12, 20), date(9999, 12, 31), timedelta(days=2), Weekday.SUNDAY)

    assert result == pairs((date(9999, 12, 26), date(9999, 12, 28)))


def test_weekday_shift_past_the_end_of_the_calendar() -> None:
    with pytest.raises(NoFeasibleWindowError):
        get_possible_travel_dates(date(9999, 12, 31), date(9999, 12, 31), timedelta(days=0), Weekday.MONDAY)

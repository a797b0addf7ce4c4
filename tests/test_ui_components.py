from __future__ import annotations

import io
from datetime import datetime, timedelta

from rich.console import Console

from cli.ui_components import build_journeys_table, format_leg, format_price
from core.domain.choices import SortBy
from core.domain.models import TrainJourney


def make_journey(day: int, price: float) -> TrainJourney:
    return TrainJourney(
        outbound=datetime(2020, 4, day, 7, 1),
        inbound=datetime(2020, 4, day + 2, 18, 31),
        out_duration=timedelta(minutes=137),
        in_duration=timedelta(minutes=149),
        price=price,
    )


JOURNEYS = [make_journey(6, 120), make_journey(5, 80), make_journey(7, 80)]


def test_sort_by_price_is_stable() -> None:
    assert [j.outbound.day for j in SortBy.PRICE.sort(JOURNEYS)] == [5, 7, 6]


def test_sort_by_date() -> None:
    assert [j.outbound.day for j in SortBy.DATE.sort(JOURNEYS)] == [5, 6, 7]


def test_format_leg_uses_its_own_duration() -> None:
    journey = JOURNEYS[0]

    assert format_leg(journey.outbound, journey.out_duration) == "2020-04-06 07:01 (2h17m)"
    assert format_leg(journey.inbound, journey.in_duration) == "2020-04-08 18:31 (2h29m)"


def test_format_price() -> None:
    assert format_price(78.5) == "78.5"
    assert format_price(120.0) == "120"


def test_journeys_table() -> None:
    table = build_journeys_table(JOURNEYS, SortBy.DATE)
    console = Console(width=120, record=True, file=io.StringIO())
    console.print(table)
    text = console.export_text()

    assert [column.header for column in table.columns] == ["Outbound (duration)", "Inbound (duration)", "Price"]
    assert table.row_count == 3
    assert text.index("2020-04-05 07:01") < text.index("2020-04-06 07:01") < text.index("2020-04-07 07:01")

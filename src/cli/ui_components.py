"""Rich components for the CLI.

Kept apart from the commands so tables can be reused by `search` and tested
without a terminal.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table

from core.dates import format_duration
from core.domain.choices import SortBy
from core.domain.models import TrainJourney

RESULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def format_leg(departure, duration) -> str:
    return f"{departure.strftime(RESULT_DATETIME_FORMAT)} ({format_duration(duration)})"


def format_price(price: float) -> str:
    return f"{price:g}"


def build_journeys_table(journeys: Sequence[TrainJourney], sort_by: SortBy = SortBy.PRICE) -> Table:
    """Results table, one row per journey, ordered by `sort_by`."""

    table = Table(title=f"{len(journeys)} matching journeys")
    table.add_column("Outbound (duration)", style="cyan", no_wrap=True)
    table.add_column("Inbound (duration)", style="magenta", no_wrap=True)
    table.add_column("Price", style="green", justify="right")

    for journey in sort_by.sort(journeys):
        table.add_row(
            format_leg(journey.outbound, journey.out_duration),
            format_leg(journey.inbound, journey.in_duration),
            format_price(journey.price),
        )
    return table

"""Enumerations shared by the CLI and the core services."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable

from core.domain.models import TrainJourney


class Weekday(IntEnum):
    """Days of the week, numbered like `date.weekday()`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def label(self) -> str:
        return self.name.capitalize()


class SortBy(str, Enum):
    """How the results table is ordered."""

    PRICE = "price"
    DATE = "date"

    @classmethod
    def default(cls) -> "SortBy":
        return cls.PRICE

    def sort(self, journeys: Iterable[TrainJourney]) -> list[TrainJourney]:
        """Return a new list ordered by price or by outbound departure (stable)."""

        if self is SortBy.DATE:
            return sorted(journeys, key=lambda journey: journey.outbound)
        return sorted(journeys, key=lambda journey: journey.price)

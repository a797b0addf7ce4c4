"""Domain models and enumerations.

Plain data only: the domain knows nothing about HTTP, the CLI or rich.
"""

from core.domain.choices import SortBy, Weekday
from core.domain.models import DatePair, JourneyFilter, Train, TrainJourney

__all__ = [
    "DatePair",
    "JourneyFilter",
    "SortBy",
    "Train",
    "TrainJourney",
    "Weekday",
]

"""Domain models (Pydantic v2).

- Every record is frozen: trains and journeys are values, not entities.
- These models describe *what* a journey is, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DatePair(BaseModel):
    """One candidate (outbound date, inbound date) combination."""

    model_config = ConfigDict(frozen=True)

    outbound: date = Field(..., description="Day of the outbound leg.")
    inbound: date = Field(..., description="Day of the inbound leg.")

    @model_validator(mode="after")
    def _inbound_not_before_outbound(self) -> "DatePair":
        if self.inbound < self.outbound:
            raise ValueError("inbound date must not be before outbound date")
        return self


class Train(BaseModel):
    """One directional departure with its adult fare."""

    model_config = ConfigDict(frozen=True)

    departure: datetime = Field(..., description="Departure date and time-of-day.")
    duration: timedelta = Field(..., description="Travel time of the leg.")
    price: float = Field(..., ge=0, description="Adult price of the first fare class.")


class TrainJourney(BaseModel):
    """A priced round trip built from one outbound and one inbound train."""

    model_config = ConfigDict(frozen=True)

    outbound: datetime
    inbound: datetime
    out_duration: timedelta
    in_duration: timedelta
    price: float = Field(..., description="Sum of both legs' adult prices.")


class JourneyFilter(BaseModel):
    """User constraints applied to every outbound x inbound combination.

    Time bounds are exclusive; the price ceiling is inclusive.
    """

    model_config = ConfigDict(frozen=True)

    max_price: float | None = Field(default=None, ge=0)
    out_departure_after: time | None = None
    out_departure_before: time | None = None
    in_departure_after: time | None = None
    in_departure_before: time | None = None

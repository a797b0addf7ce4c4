"""Wire schemas of the Eurostar API responses.

Search (`train-search/uk-en/<from>/<to>`):
    {"outbound": {"journey": [leg, ...]}, "inbound": {"journey": [...]}}
    leg = {"departureTime": "HH:MM", "duration": <seconds | ISO 8601>,
           "class": [{"price": {"adult": <number>}}, ...]}

Stations (`hotels-search/regions/uk-en`):
    {"<key>": {"regionName": "London", "stationId": 7015400}, ...}

Both sections of a search response are optional; unknown fields are ignored.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from core.dates import TIME_FORMAT


class PriceSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    adult: float | None = Field(default=None, ge=0)


class FareClassSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    price: PriceSchema | None = None


class LegSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    departure_time: time = Field(..., alias="departureTime")
    duration: timedelta
    classes: list[FareClassSchema] = Field(default_factory=list, alias="class")

    @field_validator("departure_time", mode="before")
    @classmethod
    def _parse_departure_time(cls, value: object) -> object:
        if isinstance(value, str):
            return datetime.strptime(value, TIME_FORMAT).time()
        return value

    def adult_price(self) -> float | None:
        """Adult price of the first fare class, if the API published one."""

        if not self.classes:
            return None
        first = self.classes[0]
        if first.price is None:
            return None
        return first.price.adult


class DirectionSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    journey: list[LegSchema]


class SearchResponseSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    outbound: DirectionSchema | None = None
    inbound: DirectionSchema | None = None


class StationSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    region_name: str = Field(..., alias="regionName")
    station_id: int = Field(..., alias="stationId")


class StationsResponseSchema(RootModel[dict[str, StationSchema]]):
    pass

"""Station directory: region name -> numeric station id."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.eurostar.schemas import StationsResponseSchema
from adapters.http_client import get_checked
from core.errors import EmptyStationDirectoryError, MalformedResponseError, UnknownStationError

logger = logging.getLogger(__name__)

STATIONS_LOCATION = "hotels-search/regions/uk-en"


async def fetch_stations_map(client: httpx.AsyncClient, api_key: str) -> dict[str, int]:
    response = await get_checked(client, STATIONS_LOCATION, api_key=api_key)
    text = response.text

    try:
        payload = StationsResponseSchema.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Invalid JSON: %s", text)
        raise MalformedResponseError(str(exc)) from exc

    stations = {entry.region_name: entry.station_id for entry in payload.root.values()}
    if not stations:
        raise EmptyStationDirectoryError("Server returned an empty station name to station id map")

    logger.debug("Got stations map: %s", stations)
    return stations


def resolve_station(name: str, stations: dict[str, int]) -> int:
    try:
        return stations[name]
    except KeyError:
        choices = ", ".join(sorted(stations))
        raise UnknownStationError(f"Invalid city name {name!r}, choose from: {choices}.") from None

from __future__ import annotations

import httpx
import pytest

from adapters.eurostar.stations import fetch_stations_map, resolve_station
from conftest import API_KEY
from core.errors import (
    ClientError,
    EmptyStationDirectoryError,
    MalformedResponseError,
    UnknownStationError,
)


async def stations_for(make_client, response: httpx.Response) -> dict[str, int]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response

    async with make_client(handler) as client:
        stations = await fetch_stations_map(client, API_KEY)

    assert seen[0].url.path == "/bpa/hotels-search/regions/uk-en"
    assert seen[0].headers["x-apikey"] == API_KEY
    return stations


async def test_stations_map(make_client, stations_body) -> None:
    stations = await stations_for(make_client, httpx.Response(200, text=stations_body))

    assert stations == {"London": 7015400, "Paris": 8727100, "Ashford": 7054660}


async def test_stations_map_invalid_json(make_client) -> None:
    with pytest.raises(MalformedResponseError):
        await stations_for(make_client, httpx.Response(200, text="{foo"))


async def test_stations_map_wrong_shape(make_client) -> None:
    with pytest.raises(MalformedResponseError):
        await stations_for(make_client, httpx.Response(200, text='{"x": {"regionName": "London"}}'))


async def test_stations_map_empty(make_client) -> None:
    with pytest.raises(EmptyStationDirectoryError):
        await stations_for(make_client, httpx.Response(200, text="{}"))


async def test_stations_map_client_error(make_client) -> None:
    with pytest.raises(ClientError):
        await stations_for(make_client, httpx.Response(401, text="missing key"))


def test_resolve_station() -> None:
    stations = {"Paris": 8727100, "London": 7015400}

    assert resolve_station("London", stations) == 7015400

    with pytest.raises(UnknownStationError, match="choose from: London, Paris."):
        resolve_station("Brussels", stations)

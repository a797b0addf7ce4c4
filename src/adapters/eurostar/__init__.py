"""Eurostar booking API adapters (journey search and station directory)."""

from adapters.eurostar.journeys import EurostarJourneyClient, parse_search_response
from adapters.eurostar.stations import fetch_stations_map, resolve_station

__all__ = [
    "EurostarJourneyClient",
    "fetch_stations_map",
    "parse_search_response",
    "resolve_station",
]

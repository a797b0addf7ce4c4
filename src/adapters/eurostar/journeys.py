"""Eurostar journey search client.

One call to `fetch_trains` is one search for a single (outbound, inbound)
date pair. The API only returns a time-of-day per leg, so departures are
rebuilt from the requested calendar dates.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import date, datetime

import httpx
from pydantic import ValidationError

from adapters.eurostar.schemas import DirectionSchema, SearchResponseSchema
from adapters.http_client import get_checked
from core.config import AppSettings
from core.dates import format_date
from core.domain.models import Train
from core.errors import MalformedResponseError, ServerError, TransportError
from core.interfaces.train_source import TrainSource
from core.logging_config import TRACE

logger = logging.getLogger(__name__)

SEARCH_LOCATION = "train-search/uk-en"


def search_location(origin_id: int, destination_id: int) -> str:
    return f"{SEARCH_LOCATION}/{origin_id}/{destination_id}"


def parse_search_response(text: str, outbound_date: date, inbound_date: date) -> tuple[list[Train], list[Train]]:
    """Decode a search body into (outbound trains, inbound trains)."""

    try:
        payload = SearchResponseSchema.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Invalid JSON: %s", text)
        raise MalformedResponseError(str(exc)) from exc

    if payload.outbound is None or payload.inbound is None:
        logger.warning("No trains found for %s and %s date pair", outbound_date, inbound_date)

    return (
        _trains_from_direction(payload.outbound, outbound_date),
        _trains_from_direction(payload.inbound, inbound_date),
    )


def _trains_from_direction(direction: DirectionSchema | None, day: date) -> list[Train]:
    if direction is None:
        return []

    trains: list[Train] = []
    for leg in direction.journey:
        price = leg.adult_price()
        if price is None:
            logger.log(TRACE, "No value found for price in %r", leg)
            continue
        trains.append(
            Train(
                departure=datetime.combine(day, leg.departure_time),
                duration=leg.duration,
                price=price,
            )
        )
    return trains


class EurostarJourneyClient(TrainSource):
    """`TrainSource` backed by the Eurostar search endpoint.

    5xx responses and connection failures are retried with exponential
    backoff and jitter, up to `settings.max_retries` times.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_key: str,
        settings: AppSettings | None = None,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._settings = settings or AppSettings()

    async def fetch_trains(
        self,
        origin_id: int,
        destination_id: int,
        outbound_date: date,
        inbound_date: date,
        adults: int,
    ) -> tuple[list[Train], list[Train]]:
        location = search_location(origin_id, destination_id)
        params = {
            "outbound-date": format_date(outbound_date),
            "inbound-date": format_date(inbound_date),
            "adult": str(adults),
        }
        logger.debug("Prepared request: GET %s %s", location, params)

        max_retries = self._settings.max_retries
        for attempt in range(max_retries + 1):
            try:
                response = await get_checked(self._client, location, api_key=self._api_key, params=params)
                break
            except (ServerError, TransportError) as exc:
                if attempt >= max_retries:
                    raise
                delay = self._backoff_delay(attempt)
                logger.info(
                    "Retrying %s -> %s search in %.2fs (attempt %d/%d): %s",
                    outbound_date,
                    inbound_date,
                    delay,
                    attempt + 1,
                    max_retries,
                    exc,
                )
                await asyncio.sleep(delay)

        return parse_search_response(response.text, outbound_date, inbound_date)

    def _backoff_delay(self, attempt: int) -> float:
        base = self._settings.retry_backoff_seconds * (2**attempt)
        return base + random.uniform(0.0, self._settings.retry_jitter_seconds)

"""Journey search orchestration.

Fans one `TrainSource.fetch_trains` call out per date pair, waits for all of
them, then walks the results in date pair order:

- the first failed pair (in pair order) fails the whole search;
- every successful pair contributes the outbound x inbound combinations that
  pass the `JourneyFilter`, in cross-product order.

Side effects (printing, exit codes) stay in the CLI.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import time
from typing import Awaitable, Sequence, TypeVar

from core.domain.models import DatePair, JourneyFilter, Train, TrainJourney
from core.errors import TransportError
from core.interfaces.train_source import TrainSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _within(value: time, after: time | None, before: time | None) -> bool:
    if after is not None and value <= after:
        return False
    if before is not None and value >= before:
        return False
    return True


def filter_journeys(
    outbound_trains: Sequence[Train],
    inbound_trains: Sequence[Train],
    journey_filter: JourneyFilter,
) -> list[TrainJourney]:
    """Price every outbound x inbound combination and keep the matching ones."""

    journeys: list[TrainJourney] = []
    for out_train in outbound_trains:
        if not _within(
            out_train.departure.time(),
            journey_filter.out_departure_after,
            journey_filter.out_departure_before,
        ):
            continue
        for in_train in inbound_trains:
            if not _within(
                in_train.departure.time(),
                journey_filter.in_departure_after,
                journey_filter.in_departure_before,
            ):
                continue
            total_price = out_train.price + in_train.price
            if journey_filter.max_price is not None and total_price > journey_filter.max_price:
                continue
            journeys.append(
                TrainJourney(
                    outbound=out_train.departure,
                    inbound=in_train.departure,
                    out_duration=out_train.duration,
                    in_duration=in_train.duration,
                    price=total_price,
                )
            )
    return journeys


async def find_journeys(
    date_pairs: Sequence[DatePair],
    *,
    source: TrainSource,
    origin_id: int,
    destination_id: int,
    adults: int,
    journey_filter: JourneyFilter,
    max_concurrency: int | None = None,
    batch_timeout: float | None = None,
) -> list[TrainJourney]:
    """Query every date pair concurrently and assemble the priced journeys.

    All queries run to completion before any result is used; a failure does
    not cancel its siblings. Results are consumed in `date_pairs` order, so
    the output does not depend on network timing.
    """

    sem = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def bounded(call: Awaitable[T]) -> T:
        if sem is None:
            return await call
        async with sem:
            return await call

    tasks = [
        asyncio.ensure_future(
            bounded(
                source.fetch_trains(
                    origin_id,
                    destination_id,
                    pair.outbound,
                    pair.inbound,
                    adults,
                )
            )
        )
        for pair in date_pairs
    ]
    logger.debug("Dispatched %d date pair queries", len(tasks))

    batch = asyncio.gather(*tasks, return_exceptions=True)
    if batch_timeout is None:
        results = await batch
    else:
        try:
            results = await asyncio.wait_for(batch, timeout=batch_timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Journey search did not finish within {batch_timeout}s") from exc

    journeys: list[TrainJourney] = []
    for pair, result in zip(date_pairs, results):
        if isinstance(result, BaseException):
            logger.debug("Query for %s -> %s failed: %r", pair.outbound, pair.inbound, result)
            raise result
        outbound_trains, inbound_trains = result
        logger.debug(
            "%s -> %s: %d outbound, %d inbound trains",
            pair.outbound,
            pair.inbound,
            len(outbound_trains),
            len(inbound_trains),
        )
        journeys.extend(filter_journeys(outbound_trains, inbound_trains, journey_filter))
    return journeys


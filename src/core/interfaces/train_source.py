"""Contract for train sources.

The Eurostar adapter and the test fakes subclass `TrainSource` explicitly;
being a runtime-checkable protocol, any object with a matching
`fetch_trains` passes `isinstance` checks as well.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

from core.domain.models import Train


@runtime_checkable
class TrainSource(Protocol):
    """Minimal contract for something that lists trains for a date pair.

    - `fetch_trains` is async because it performs network I/O.
    - It returns `(outbound_trains, inbound_trains)` for one date pair or
      raises a `core.errors.QueryError`.
    """

    async def fetch_trains(
        self,
        origin_id: int,
        destination_id: int,
        outbound_date: date,
        inbound_date: date,
        adults: int,
    ) -> tuple[list[Train], list[Train]]:
        ...

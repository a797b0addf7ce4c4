"""Command line interface.

`eurostar-checker search` validates the options, enumerates the date pairs,
resolves station names through the station directory and prints the
matching round trips.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, time, timedelta
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console

from adapters.eurostar.journeys import EurostarJourneyClient
from adapters.eurostar.stations import fetch_stations_map, resolve_station
from adapters.http_client import build_async_client
from cli import doctor
from cli.ui_components import build_journeys_table
from core.config import AppSettings
from core.dates import NOW, PLUS_TWO_WEEKS, parse_date, parse_duration, parse_time, parse_weekday
from core.domain.choices import SortBy, Weekday
from core.domain.models import DatePair, JourneyFilter, TrainJourney
from core.errors import EurostarCheckerError, InputError, SameStationError
from core.logging_config import setup_logging
from core.services.journey_pipeline import find_journeys
from core.services.travel_dates import get_possible_travel_dates

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Find cheap Eurostar round trips.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

T = TypeVar("T")


def _parse_option(parser: Callable[[str], T], value: str, hint: str) -> T:
    try:
        return parser(value)
    except InputError as exc:
        raise typer.BadParameter(str(exc), param_hint=hint) from exc


def _parse_optional_time(value: Optional[str], hint: str) -> Optional[time]:
    if value is None:
        return None
    return _parse_option(parse_time, value, hint)


async def _search(
    *,
    settings: AppSettings,
    api_key: str,
    origin: str,
    destination: str,
    date_pairs: list[DatePair],
    adults: int,
    journey_filter: JourneyFilter,
) -> list[TrainJourney]:
    async with build_async_client(settings) as client:
        stations = await fetch_stations_map(client, api_key)
        origin_id = resolve_station(origin, stations)
        destination_id = resolve_station(destination, stations)
        if origin_id == destination_id:
            raise SameStationError("Start and finish stations need to be different!")

        source = EurostarJourneyClient(client, api_key=api_key, settings=settings)
        return await find_journeys(
            date_pairs,
            source=source,
            origin_id=origin_id,
            destination_id=destination_id,
            adults=adults,
            journey_filter=journey_filter,
            max_concurrency=settings.max_concurrency,
            batch_timeout=settings.batch_timeout_seconds,
        )


@app.command()
def search(
    origin: str = typer.Argument("London", help="Start station."),
    destination: str = typer.Argument("Paris", help="Finish station."),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Verbose mode (-v, -vv, -vvv, etc.)."),
    since: str = typer.Option(NOW, "--since", "-s", metavar="YYYY-MM-DD", help="Since what date we should look."),
    until: str = typer.Option(PLUS_TWO_WEEKS, "--until", "-u", metavar="YYYY-MM-DD", help="To what date we should look."),
    days: str = typer.Option(..., "--days", "-d", help="Number of days to stay (Friday - Sunday is 3 days)."),
    weekday: Optional[str] = typer.Option(
        None, "--weekday", "-w", help="Day of the week the journey should start on."
    ),
    out_departure_after: Optional[str] = typer.Option(
        None, metavar="HH:MM", help="Only consider outbound trains departing after this time."
    ),
    out_departure_before: Optional[str] = typer.Option(
        None, metavar="HH:MM", help="Only consider outbound trains departing before this time."
    ),
    in_departure_after: Optional[str] = typer.Option(
        None, metavar="HH:MM", help="Only consider inbound trains departing after this time."
    ),
    in_departure_before: Optional[str] = typer.Option(
        None, metavar="HH:MM", help="Only consider inbound trains departing before this time."
    ),
    max_price: Optional[float] = typer.Option(None, "--max-price", "-m", min=0, help="Max price per journey."),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-a", help="Eurostar API key."),
    sort_by: SortBy = typer.Option(SortBy.default(), "--sort-by", case_sensitive=False, help="How results should be sorted."),
    adults: Optional[int] = typer.Option(None, "--adults", min=1, help="How many adults."),
) -> None:
    """Search round trips between two stations."""

    setup_logging(verbose)
    settings = AppSettings()

    since_date: date = _parse_option(parse_date, since, "--since")
    until_date: date = _parse_option(parse_date, until, "--until")
    stay: timedelta = _parse_option(parse_duration, days, "--days")
    start_weekday: Optional[Weekday] = None
    if weekday is not None:
        start_weekday = _parse_option(parse_weekday, weekday, "--weekday")

    journey_filter = JourneyFilter(
        max_price=max_price,
        out_departure_after=_parse_optional_time(out_departure_after, "--out-departure-after"),
        out_departure_before=_parse_optional_time(out_departure_before, "--out-departure-before"),
        in_departure_after=_parse_optional_time(in_departure_after, "--in-departure-after"),
        in_departure_before=_parse_optional_time(in_departure_before, "--in-departure-before"),
    )
    logger.debug("Parsed filter: %r", journey_filter)

    key = api_key or settings.api_key
    if not key:
        raise typer.BadParameter(
            "an API key is required (or set EUROSTAR_CHECKER_API_KEY)", param_hint="--api-key"
        )

    if origin == destination:
        raise typer.BadParameter("Start and finish stations need to be different!", param_hint="DESTINATION")

    try:
        date_pairs = get_possible_travel_dates(since_date, until_date, stay, start_weekday)
    except EurostarCheckerError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not date_pairs:
        raise typer.BadParameter("There are no date pairs matching your criteria!")

    try:
        journeys = asyncio.run(
            _search(
                settings=settings,
                api_key=key,
                origin=origin,
                destination=destination,
                date_pairs=date_pairs,
                adults=adults or settings.default_adults,
                journey_filter=journey_filter,
            )
        )
    except InputError as exc:
        raise typer.BadParameter(str(exc), param_hint="ORIGIN / DESTINATION") from exc
    except EurostarCheckerError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if not journeys:
        _console.print("There was no journey matching supplied criteria :(")
        return

    logger.info("Found %d journeys matching criteria.", len(journeys))
    _console.print(build_journeys_table(journeys, sort_by))


def run() -> None:
    app()

"""Exception hierarchy for eurostar-checker.

Input errors are raised while validating what the user typed, query errors
while talking to the remote API. The CLI is the only layer that turns them
into exit codes.
"""

from __future__ import annotations


class EurostarCheckerError(Exception):
    """Base error for every failure raised by the package."""


class InputError(EurostarCheckerError):
    """Raised when user supplied values are invalid."""


class DateSyntaxError(InputError):
    """Raised when a date literal is not `YYYY-MM-DD`."""


class DateInPastError(InputError):
    """Raised when a date resolves to a day before today."""


class InvalidWeekdayError(InputError):
    """Raised when a weekday name is not recognised."""


class InvalidNumberError(InputError):
    """Raised when a number of days cannot be parsed as an integer."""


class NonPositiveDurationError(InputError):
    """Raised when a number of days is lower than one."""


class TimeSyntaxError(InputError):
    """Raised when a time-of-day literal is not `HH:MM`."""


class UnknownStationError(InputError):
    """Raised when a station name is missing from the station directory."""


class SameStationError(InputError):
    """Raised when origin and destination resolve to the same station."""


class NoFeasibleWindowError(EurostarCheckerError):
    """Raised when no date pair fits inside the requested range."""


class QueryError(EurostarCheckerError):
    """Base error for remote API failures."""


class ClientError(QueryError):
    """4xx response; permanent, never retried."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Got {status_code} response: {body}")


class ServerError(QueryError):
    """5xx response; transient."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Got {status_code} response: {body}")


class MalformedResponseError(QueryError):
    """Response body did not match the expected schema."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Error while parsing JSON: {detail}")


class TransportError(QueryError):
    """Connection level failure (DNS, refused connection, timeout)."""


class EmptyStationDirectoryError(QueryError):
    """Station directory answered with no stations."""

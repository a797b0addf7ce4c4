"""httpx client builder and response classification.

- One place sets timeouts, headers and the base URL so the journey search
  and the station directory behave the same.
- `transport` lets tests plug in an `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import ClientError, ServerError, TransportError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-apikey"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` pointed at the Eurostar API."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url.rstrip("/") + "/",
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def get_checked(
    client: httpx.AsyncClient,
    location: str,
    *,
    api_key: str,
    params: dict[str, str] | None = None,
) -> httpx.Response:
    """GET `location` and classify the status.

    4xx raises `ClientError`, 5xx raises `ServerError`, connection failures
    raise `TransportError`. Anything else is returned for decoding.
    """

    try:
        response = await client.get(location, params=params, headers={API_KEY_HEADER: api_key})
    except httpx.TransportError as exc:
        raise TransportError(f"Request to {location} failed: {exc!r}") from exc

    if response.is_client_error:
        raise ClientError(response.status_code, response.text)
    if response.is_server_error:
        raise ServerError(response.status_code, response.text)

    logger.debug("Got %s response for %s", response.status_code, response.url)
    return response

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings

FIXTURES = Path(__file__).parent / "fixtures"

API_KEY = "api-key"
BASE_URL = "https://api.test/bpa"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture
def search_body() -> str:
    return load_fixture("search_response.json")


@pytest.fixture
def stations_body() -> str:
    return load_fixture("stations.json")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        base_url=BASE_URL,
        api_key=API_KEY,
        max_retries=0,
        retry_backoff_seconds=0,
        retry_jitter_seconds=0,
    )


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[..., httpx.AsyncClient]:
    def factory(handler, *, settings_override: AppSettings | None = None) -> httpx.AsyncClient:
        return build_async_client(settings_override or settings, transport=httpx.MockTransport(handler))

    return factory

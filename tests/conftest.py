"""Shared fixtures: fake Places upstream, controllable clock, app factory."""

import httpx
import pytest

from config import Settings
from services.cache import RatingCache
from services.places import PlacesClient
from services.rating import RatingService

PLACE_ID = "ChIJ-test-place"
API_KEY = "test-api-key"
BASE_URL = "https://places.test/v1"

PLACE_JSON = {
    "rating": 4.8,
    "userRatingCount": 1274,
    "googleMapsUri": "https://maps.google.com/x",
}


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePlacesAPI:
    """Scripted upstream: each call pops the next response (or exception)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list = []

    def queue(self, *responses) -> None:
        self.responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0) if self.responses else httpx.Response(200, json=PLACE_JSON)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakePlacesAPI()


@pytest.fixture
def places_client(upstream):
    return PlacesClient(
        place_id=PLACE_ID,
        api_key=API_KEY,
        base_url=BASE_URL,
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def rating_service(places_client, clock):
    return RatingService(places_client, RatingCache(ttl_seconds=30 * 60, clock=clock))


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from a controlled environment."""

    def _make(**env) -> Settings:
        for name in (
            "GOOGLE_PLACE_ID",
            "GOOGLE_MAPS_API_KEY",
            "FRONT_ORIGIN",
            "CACHE_TTL_MINUTES",
            "PORT",
            "PLACES_API_BASE_URL",
            "PLACES_TIMEOUT_SECONDS",
            "ENVIRONMENT",
            "GIT_SHA",
        ):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return Settings()

    return _make

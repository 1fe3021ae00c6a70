from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from lookup_broker.core.config import Settings
from lookup_broker.main import create_app
from lookup_broker.services.lookup_service import LookupBroker

NOMINATIM = "nominatim.openstreetmap.org"
CENSUS = "api.census.gov"
GEOCODIO = "api.geocod.io"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstreams:
    """
    Routes outbound requests by host. A host with no handler behaves like an
    unreachable server.
    """
    def __init__(self):
        self.handlers: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def on(self, host: str, handler: Handler) -> None:
        self.handlers[host] = handler

    def json(self, host: str, payload, status_code: int = 200) -> None:
        self.on(host, lambda request: httpx.Response(status_code, json=payload))

    def calls(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("connection refused", request=request)
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def make_settings(**overrides) -> Settings:
    values = {
        "CENSUS_API_KEY": "census-secret",
        "GEOCODIO_API_KEY": "geocodio-secret",
        "NOMINATIM_BASE_URL": "https://nominatim.openstreetmap.org",
        "CENSUS_BASE_URL": "https://api.census.gov",
        "GEOCODIO_BASE_URL": "https://api.geocod.io/v1.7",
        "ALLOW_ORIGIN": "https://hailspectrum.com",
        "POPULATION_SCALE": 0.3,
        "DEFAULT_POPULATION": 7383,
        "PROMETHEUS_ENABLED": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()


@pytest.fixture
def broker_factory(upstreams):
    def build(**overrides) -> LookupBroker:
        return LookupBroker(make_settings(**overrides), transport=upstreams.transport)
    return build


@pytest.fixture
def client_factory(upstreams):
    def build(**overrides) -> TestClient:
        settings = make_settings(**overrides)
        broker = LookupBroker(settings, transport=upstreams.transport)
        return TestClient(create_app(settings, broker=broker))
    return build


@pytest.fixture
def client(client_factory) -> TestClient:
    return client_factory()


def nominatim_address(postcode: str | None) -> dict:
    address = {"road": "Main Street", "city": "Fort Worth", "state": "Texas", "country_code": "us"}
    if postcode is not None:
        address["postcode"] = postcode
    return {"place_id": 1, "display_name": "Main Street, Fort Worth", "address": address}


def census_table(count) -> list:
    return [
        ["P1_001N", "NAME", "zip code tabulation area"],
        [count, "ZCTA5 76102", "76102"],
    ]

from __future__ import annotations

import copy
from typing import Any

import pytest
import requests
from http_fakes import FakeResponse, FakeTransport

from geocoding_harness.fetching.geocoding import GoogleMapsGeocoder
from geocoding_harness.settings import GeocodingSettings

GOOGLEPLEX_PAYLOAD: dict[str, Any] = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
            "place_id": "ChIJj61dQgK6j4AR4GeTYWZsKWw",
            "types": ["establishment", "point_of_interest"],
            "plus_code": {
                "compound_code": "CWC8+W5 Mountain View, California, United States",
                "global_code": "849VCWC8+W5",
            },
            "geometry": {
                "location": {"lat": 37.4220, "lng": -122.0841},
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 37.4233, "lng": -122.0828},
                    "southwest": {"lat": 37.4206, "lng": -122.0855},
                },
            },
            "address_components": [
                {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
                {"long_name": "Amphitheatre Parkway", "short_name": "Amphitheatre Pkwy", "types": ["route"]},
                {"long_name": "Mountain View", "short_name": "Mountain View", "types": ["locality", "political"]},
                {"long_name": "Santa Clara County", "short_name": "Santa Clara County", "types": ["administrative_area_level_2", "political"]},
                {"long_name": "California", "short_name": "CA", "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "94043", "short_name": "94043", "types": ["postal_code"]},
            ],
        },
        {
            "formatted_address": "Mountain View, CA, USA",
            "place_id": "ChIJiQHsW0m3j4ARm69rRkrUF3w",
            "types": ["locality", "political"],
            "partial_match": True,
            "geometry": {
                "location": {"lat": 37.3861, "lng": -122.0839},
                "location_type": "APPROXIMATE",
            },
            "address_components": [
                {"long_name": "Mountain View", "short_name": "Mountain View", "types": ["locality", "political"]},
            ],
        },
    ],
}

REVERSE_PAYLOAD: dict[str, Any] = {
    "status": "OK",
    "plus_code": {
        "compound_code": "CWF7+RC Mountain View, CA, USA",
        "global_code": "849VCWF7+RC",
    },
    "results": [
        {
            "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
            "place_id": "ChIJF4Yf2Ry7j4AR__1AkytDyAE",
            "types": ["street_address"],
            "partial_match": True,
            "geometry": {
                "location": {"lat": 37.4220, "lng": -122.0841},
                "location_type": "RANGE_INTERPOLATED",
            },
            "address_components": [
                {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
            ],
        },
    ],
}

ZERO_RESULTS_PAYLOAD: dict[str, Any] = {"status": "ZERO_RESULTS", "results": []}


@pytest.fixture(autouse=True)
def _block_network(monkeypatch: pytest.MonkeyPatch) -> None:
    def _blocked(self: requests.Session, method: str, url: str, *args: Any, **kwargs: Any) -> Any:
        msg = f"Blocked external request: {method} {url}"
        raise RuntimeError(msg)

    monkeypatch.setattr(requests.Session, "request", _blocked, raising=True)
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_GEOCODING_ENABLE_CACHE", raising=False)
    monkeypatch.delenv("GOOGLE_GEOCODING_CACHE_DURATION", raising=False)
    monkeypatch.delenv("GOOGLE_GEOCODING_TIMEOUT", raising=False)


@pytest.fixture
def googleplex_payload() -> dict[str, Any]:
    return copy.deepcopy(GOOGLEPLEX_PAYLOAD)


@pytest.fixture
def reverse_payload() -> dict[str, Any]:
    return copy.deepcopy(REVERSE_PAYLOAD)


@pytest.fixture
def zero_results_payload() -> dict[str, Any]:
    return copy.deepcopy(ZERO_RESULTS_PAYLOAD)


@pytest.fixture
def settings() -> GeocodingSettings:
    return GeocodingSettings(api_key="test-key")


@pytest.fixture
def make_client(monkeypatch: pytest.MonkeyPatch, settings: GeocodingSettings):
    def _make(
        responses: list[FakeResponse | Exception],
        client_settings: GeocodingSettings | None = None,
    ) -> tuple[GoogleMapsGeocoder, FakeTransport]:
        client = GoogleMapsGeocoder(client_settings or settings)
        transport = FakeTransport(responses)
        monkeypatch.setattr(client, "get", transport.get)
        return client, transport

    return _make

"""Shared fixtures for the catalog-pipeline test suite."""

import pytest
import requests

from src.catalog_pipeline.ingestion import PokeApiIngester
from src.catalog_pipeline.transformation import CatalogTransformer

API_STAT_NAMES = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")


def make_payload(entity_id, name=None, types=("normal",), stats=None, sprite=None):
    """Build a payload shaped like the public API's /pokemon/{id} response."""
    stats = stats if stats is not None else {n: 50 for n in API_STAT_NAMES}
    return {
        "id": entity_id,
        "name": name if name is not None else f"mon-{entity_id}",
        "sprites": {"front_default": sprite if sprite is not None else f"https://img/{entity_id}.png"},
        "types": [
            {"slot": slot, "type": {"name": t}}
            for slot, t in enumerate(types, start=1)
        ],
        "stats": [
            {"base_stat": value, "stat": {"name": stat_name}}
            for stat_name, value in stats.items()
        ],
    }


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession:
    """Stands in for ``requests.Session``; serves payloads keyed by the id in the URL."""

    def __init__(self, failing_ids=(), error=None):
        self.failing_ids = set(failing_ids)
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        entity_id = int(url.rstrip("/").rsplit("/", 1)[-1])
        self.requested.append(entity_id)
        if self.error is not None:
            raise self.error
        if entity_id in self.failing_ids:
            return FakeResponse({}, status_code=404)
        return FakeResponse(make_payload(entity_id))


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no network
# ------------------------------------------------------------------

@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def ingester(fake_session):
    return PokeApiIngester(session=fake_session)


@pytest.fixture(scope="module")
def transformer():
    return CatalogTransformer()


@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
def session_factory():
    return FakeSession

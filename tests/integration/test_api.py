"""HTTP API tests against an app with a fresh in-memory store."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from hotel_search.adapters.persistence.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.config import Settings
from hotel_search.main import create_app

API = "/api/v1"


@pytest.fixture
def client():
    app = create_app(settings=Settings(), hotel_repo=InMemoryHotelRepository())
    return TestClient(app)


def _payload(**overrides) -> dict:
    body = {"name": "Grand Hotel", "price_per_night": 150.0, "latitude": 45.815, "longitude": 15.982}
    body.update(overrides)
    return body


def _create(client, **overrides) -> dict:
    response = client.post(f"{API}/hotels", json=_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


# ─── Hotels CRUD ────────────────────────────────────────────────────


def test_create_hotel_returns_201_with_location(client):
    response = client.post(f"{API}/hotels", json=_payload(name="  Grand Hotel "))

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Grand Hotel"
    assert body["price_per_night"] == 150.0
    assert body["updated_at"] is None
    assert response.headers["location"].endswith(f"{API}/hotels/{body['id']}")


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "x" * 201},
        {"price_per_night": 0},
        {"price_per_night": -10},
        {"latitude": 90.5},
        {"longitude": -180.5},
    ],
)
def test_create_invalid_hotel_returns_400(client, overrides):
    response = client.post(f"{API}/hotels", json=_payload(**overrides))
    assert response.status_code == 400
    assert response.json()["detail"]


def test_get_hotel(client):
    created = _create(client)
    response = client.get(f"{API}/hotels/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_hotel_returns_404(client):
    response = client.get(f"{API}/hotels/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_list_hotels(client):
    _create(client, name="first")
    _create(client, name="second")
    response = client.get(f"{API}/hotels")
    assert response.status_code == 200
    assert [h["name"] for h in response.json()] == ["first", "second"]


def test_update_hotel(client):
    created = _create(client)
    response = client.put(
        f"{API}/hotels/{created['id']}",
        json=_payload(name="Renamed", price_per_night=99.5, latitude=48.208, longitude=16.373),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["price_per_night"] == 99.5
    assert body["created_at"] == created["created_at"]
    assert body["updated_at"] is not None


def test_update_unknown_hotel_returns_404(client):
    response = client.put(f"{API}/hotels/00000000-0000-0000-0000-000000000000", json=_payload())
    assert response.status_code == 404


def test_update_invalid_returns_400_and_keeps_hotel(client):
    created = _create(client)
    response = client.put(f"{API}/hotels/{created['id']}", json=_payload(price_per_night=0))
    assert response.status_code == 400
    assert client.get(f"{API}/hotels/{created['id']}").json() == created


def test_delete_hotel(client):
    created = _create(client)

    response = client.delete(f"{API}/hotels/{created['id']}")
    assert response.status_code == 204
    assert client.get(f"{API}/hotels/{created['id']}").status_code == 404
    assert client.delete(f"{API}/hotels/{created['id']}").status_code == 404


# ─── Search ─────────────────────────────────────────────────────────


def test_search_empty_store(client):
    response = client.get(f"{API}/search", params={"latitude": 45.0, "longitude": 15.0})
    assert response.status_code == 200
    assert response.json() == {
        "items": [],
        "page": 1,
        "page_size": 10,
        "total_count": 0,
        "total_pages": 0,
    }


def test_search_ranks_and_pages(client):
    _create(client, name="expensive-far", price_per_night=400, latitude=48.2, longitude=16.37)
    _create(client, name="cheap-close", price_per_night=50, latitude=45.816, longitude=15.983)
    _create(client, name="medium", price_per_night=150, latitude=46.3, longitude=16.3)

    first = client.get(
        f"{API}/search", params={"latitude": 45.815, "longitude": 15.982, "page_size": 2}
    ).json()
    second = client.get(
        f"{API}/search",
        params={"latitude": 45.815, "longitude": 15.982, "page": 2, "page_size": 2},
    ).json()

    assert [i["name"] for i in first["items"]] == ["cheap-close", "medium"]
    assert [i["name"] for i in second["items"]] == ["expensive-far"]
    assert first["total_count"] == 3
    assert first["total_pages"] == 2
    assert first["items"][0]["distance_km"] == pytest.approx(0.14, abs=0.02)


@pytest.mark.parametrize(
    "params",
    [
        {"latitude": 91, "longitude": 0},
        {"latitude": 0, "longitude": 181},
        {"latitude": 0, "longitude": 0, "page": 0},
        {"latitude": 0, "longitude": 0, "page_size": 0},
        {"latitude": 0, "longitude": 0, "page_size": 101},
    ],
)
def test_search_invalid_params_return_400(client, params):
    response = client.get(f"{API}/search", params=params)
    assert response.status_code == 400


def test_search_uses_configured_default_page_size():
    app = create_app(settings=Settings(DEFAULT_PAGE_SIZE=1), hotel_repo=InMemoryHotelRepository())
    client = TestClient(app)
    _create(client, name="a")
    _create(client, name="b")

    body = client.get(f"{API}/search", params={"latitude": 0, "longitude": 0}).json()
    assert body["page_size"] == 1
    assert body["total_pages"] == 2


# ─── Health / startup seeding ───────────────────────────────────────


def test_health_reports_store_size(client):
    _create(client)
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "hotels": 1, "service": "Hotel Search API"}


def test_startup_seeds_store_from_csv(tmp_path: Path):
    csv_path = tmp_path / "hotels.csv"
    csv_path.write_text(
        "name;price;lat;lon\n"
        "Grand;150;45.815;15.982\n"
        "Budget;40,5;48.208;16.373\n"
        "Broken;0;45.0;15.0\n",
        encoding="utf-8",
    )
    app = create_app(
        settings=Settings(HOTELS_CSV_PATH=str(csv_path)),
        hotel_repo=InMemoryHotelRepository(),
    )

    with TestClient(app) as client:
        assert client.get(f"{API}/health").json()["hotels"] == 2


def test_startup_with_missing_csv_starts_empty(tmp_path: Path):
    app = create_app(
        settings=Settings(HOTELS_CSV_PATH=str(tmp_path / "missing.csv")),
        hotel_repo=InMemoryHotelRepository(),
    )

    with TestClient(app) as client:
        assert client.get(f"{API}/health").json()["hotels"] == 0

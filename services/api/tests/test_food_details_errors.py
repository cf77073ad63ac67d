from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.order_v1 import OrderPayloadV1
from services.api.app.services.food_api_base import (
    FoodApiError,
    FoodApiResponseError,
    FoodApiUnavailableError,
    FoodNotFoundError,
)
from services.api.app.services.food_api_mock import MockFoodApi


class _RaisingFoodApi:
    vendor = "HTTP"

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    async def fetch_food(self, food_id: int) -> object:
        del food_id
        raise self._exc

    async def create_favorite(self, record: object) -> None:
        del record
        raise self._exc

    async def create_order(self, payload: object) -> None:
        del payload
        raise self._exc


class _FlakyBackend(MockFoodApi):
    """Catalog works; favorites and orders fail."""

    async def create_favorite(self, record: FavoriteRecordV1) -> None:
        del record
        raise FoodApiUnavailableError("http://backend.test", "connection refused")

    async def create_order(self, payload: OrderPayloadV1) -> None:
        del payload
        raise FoodApiResponseError("/orders", 500, "boom")


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    db_path = tmp_path / "plateful_errors.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("PLATEFUL_DB_AUTO_CREATE", "true")
    monkeypatch.delenv("PLATEFUL_MAX_FOOD_QUANTITY", raising=False)

    from services.api.app.main import app

    with TestClient(app) as c:
        yield c


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (FoodNotFoundError(1), 404),
        (FoodApiUnavailableError("http://backend.test", "timed out"), 503),
        (FoodApiResponseError("/foods/1", 500, "boom"), 502),
        (FoodApiError("boom"), 502),
    ],
)
def test_open_maps_adapter_errors(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    exc: Exception,
    status: int,
) -> None:
    import services.api.app.routers.food_details as food_details_router

    monkeypatch.setattr(food_details_router, "get_food_api", lambda: _RaisingFoodApi(exc))

    response = client.post("/v1/food-details", json={"food_id": 1})
    assert response.status_code == status
    assert "detail" in response.json()


def test_open_unknown_error_is_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    import services.api.app.routers.food_details as food_details_router

    monkeypatch.setattr(
        food_details_router, "get_food_api", lambda: _RaisingFoodApi(RuntimeError("x"))
    )

    response = client.post("/v1/food-details", json={"food_id": 1})
    assert response.status_code == 500
    assert response.json()["detail"] == "Internal Server Error"


def test_open_with_unknown_adapter_is_500(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PLATEFUL_FOOD_API_ADAPTER", "nope")

    response = client.post("/v1/food-details", json={"food_id": 1})
    assert response.status_code == 500
    assert "PLATEFUL_FOOD_API_ADAPTER" in response.json()["detail"]


def test_open_validates_food_id(client: TestClient) -> None:
    response = client.post("/v1/food-details", json={"food_id": 0})
    assert response.status_code == 422


def test_favorite_failure_is_surfaced_not_raised(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    import services.api.app.routers.food_details as food_details_router

    monkeypatch.setattr(food_details_router, "get_food_api", lambda: _FlakyBackend())
    session_id = client.post("/v1/food-details", json={"food_id": 1}).json()["session_id"]

    response = client.post(f"/v1/food-details/{session_id}/favorite/toggle")
    assert response.status_code == 200

    view = response.json()
    assert view["is_favorite"] is True
    assert view["favorite"]["status"] == "FAILED"
    assert "connection refused" in view["favorite"]["error"]

    events = client.get(f"/v1/food-details/{session_id}/events").json()
    assert "FAVORITE_FAILED" in {e["event_type"] for e in events}


def test_order_failure_keeps_session_open(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    import services.api.app.routers.food_details as food_details_router

    monkeypatch.setattr(food_details_router, "get_food_api", lambda: _FlakyBackend())
    session_id = client.post("/v1/food-details", json={"food_id": 1}).json()["session_id"]

    response = client.post(f"/v1/food-details/{session_id}/order")
    assert response.status_code == 502

    view = client.get(f"/v1/food-details/{session_id}").json()
    assert view["navigation"] is None
    assert view["order_id"] is None

    events = client.get(f"/v1/food-details/{session_id}/events").json()
    assert "ORDER_FAILED" in {e["event_type"] for e in events}

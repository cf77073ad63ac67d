from __future__ import annotations

from typing import Protocol

from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.food_v1 import FoodWithExtrasV1
from packages.shared.schemas.order_v1 import OrderPayloadV1


class FoodApiError(Exception):
    """Base class for remote food API errors."""


class FoodNotFoundError(FoodApiError):
    def __init__(self, food_id: int) -> None:
        super().__init__(f"Food {food_id} not found in catalog")
        self.food_id = food_id


class FoodApiUnavailableError(FoodApiError):
    def __init__(self, base_url: str, reason: str) -> None:
        super().__init__(f"Food API at {base_url} is unavailable: {reason}")
        self.base_url = base_url
        self.reason = reason


class FoodApiResponseError(FoodApiError):
    def __init__(self, path: str, status_code: int | None, detail: str) -> None:
        super().__init__(f"Food API {path} failed (status={status_code}): {detail}")
        self.path = path
        self.status_code = status_code
        self.detail = detail


class FoodApi(Protocol):
    vendor: str

    async def fetch_food(self, food_id: int) -> FoodWithExtrasV1: ...

    async def create_favorite(self, record: FavoriteRecordV1) -> None: ...

    async def create_order(self, payload: OrderPayloadV1) -> None: ...

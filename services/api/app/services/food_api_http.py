from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ValidationError

from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.food_v1 import FoodWithExtrasV1
from packages.shared.schemas.order_v1 import OrderPayloadV1
from services.api.app import config
from services.api.app.services.food_api_base import (
    FoodApiResponseError,
    FoodApiUnavailableError,
    FoodNotFoundError,
)

logger = logging.getLogger(__name__)


class HttpFoodApi:
    """Food API client for a json-server style backend (`/foods`, `/favorites`, `/orders`)."""

    vendor = "HTTP"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    @classmethod
    def from_env(cls) -> HttpFoodApi:
        return cls(
            base_url=config.food_api_base_url(),
            timeout_seconds=config.food_api_timeout_seconds(),
        )

    async def fetch_food(self, food_id: int) -> FoodWithExtrasV1:
        path = f"/foods/{food_id}"
        response = await self._request("GET", path)
        if response.status_code == 404:
            raise FoodNotFoundError(food_id)
        _raise_for_status(path, response)

        try:
            return FoodWithExtrasV1.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FoodApiResponseError(path, response.status_code, f"invalid body: {e}") from e

    async def create_favorite(self, record: FavoriteRecordV1) -> None:
        await self._post("/favorites", record)

    async def create_order(self, payload: OrderPayloadV1) -> None:
        await self._post("/orders", payload)

    async def _post(self, path: str, body: BaseModel) -> None:
        response = await self._request("POST", path, json=body.model_dump(mode="json"))
        _raise_for_status(path, response)

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                return await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise FoodApiUnavailableError(self._base_url, f"timed out after {self._timeout}s") from e
        except httpx.TransportError as e:
            raise FoodApiUnavailableError(self._base_url, str(e) or type(e).__name__) from e


def _raise_for_status(path: str, response: httpx.Response) -> None:
    if response.is_success:
        return
    raise FoodApiResponseError(path, response.status_code, response.text[:200])

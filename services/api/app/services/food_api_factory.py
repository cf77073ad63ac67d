from __future__ import annotations

from services.api.app import config
from services.api.app.services.food_api_base import FoodApi
from services.api.app.services.food_api_mock import MockFoodApi


def get_food_api() -> FoodApi:
    """Select the food API adapter from PLATEFUL_FOOD_API_ADAPTER.

    Defaults to the mock adapter so tests and local dev are deterministic unless explicitly
    configured otherwise.
    """

    mode = config.food_api_adapter()

    if mode == "mock":
        return MockFoodApi()

    if mode == "http":
        from services.api.app.services.food_api_http import HttpFoodApi

        return HttpFoodApi.from_env()

    raise ValueError(f"Unknown PLATEFUL_FOOD_API_ADAPTER={mode!r}. Expected mock or http.")

from __future__ import annotations

from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.food_v1 import CatalogExtraV1, FoodWithExtrasV1
from packages.shared.schemas.order_v1 import OrderPayloadV1
from services.api.app.services.food_api_base import FoodNotFoundError


def _default_catalog() -> dict[int, FoodWithExtrasV1]:
    foods = [
        FoodWithExtrasV1(
            id=1,
            name="Ao molho",
            description="Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
            category=1,
            price=19.9,
            thumbnail_url="https://images.example.com/ao_molho.png",
            image_url="https://images.example.com/ao_molho_full.png",
            extras=[
                CatalogExtraV1(id=1, name="Bacon", value=1.5),
                CatalogExtraV1(id=2, name="Frango", value=2),
                CatalogExtraV1(id=3, name="Parmesão", value=1),
            ],
        ),
        FoodWithExtrasV1(
            id=2,
            name="Veggie",
            description="Macarrão com pimentão, ervilha e ervas finas colhidas no himalaia.",
            category=1,
            price=21.9,
            thumbnail_url="https://images.example.com/veggie.png",
            image_url="https://images.example.com/veggie_full.png",
            extras=[CatalogExtraV1(id=4, name="Cogumelos", value=3.5)],
        ),
        FoodWithExtrasV1(
            id=3,
            name="Água mineral",
            description="Garrafa de 500ml.",
            category=3,
            price=3,
            extras=[],
        ),
    ]
    return {food.id: food for food in foods}


class MockFoodApi:
    """Deterministic in-memory stand-in for the remote catalog, favorites and orders."""

    vendor = "MOCK"

    def __init__(self, catalog: dict[int, FoodWithExtrasV1] | None = None) -> None:
        self._catalog = catalog if catalog is not None else _default_catalog()
        self.favorites: list[FavoriteRecordV1] = []
        self.orders: list[OrderPayloadV1] = []

    async def fetch_food(self, food_id: int) -> FoodWithExtrasV1:
        food = self._catalog.get(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food.model_copy(deep=True)

    async def create_favorite(self, record: FavoriteRecordV1) -> None:
        self.favorites.append(record)

    async def create_order(self, payload: OrderPayloadV1) -> None:
        self.orders.append(payload)

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from packages.shared.schemas.food_v1 import FormattedFoodV1
from packages.shared.schemas.order_v1 import OrderPayloadV1
from services.api.app.engine.extras import ExtraRegistry
from services.api.app.engine.ids import new_record_id
from services.api.app.engine.navigation import Navigator
from services.api.app.engine.pricing import compute_total
from services.api.app.services.food_api_base import FoodApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrderDraft:
    """The food, its base quantity and its extra lines at one point in time. Never stored."""

    food: FormattedFoodV1
    food_quantity: int
    extras: ExtraRegistry

    @property
    def total(self) -> float:
        return compute_total(self.food.price, self.extras, self.food_quantity)


def build_order_payload(draft: OrderDraft, order_id: str) -> OrderPayloadV1:
    food = draft.food
    return OrderPayloadV1(
        id=order_id,
        food_id=food.id,
        name=food.name,
        description=food.description,
        category=food.category,
        thumbnail_url=food.thumbnail_url,
        image_url=food.image_url,
        price=food.price,
        formatted_price=food.formatted_price,
        # No filtering: zero-quantity extras are part of the order.
        extras=draft.extras.to_schema(),
        food_quantity=draft.food_quantity,
        total=draft.total,
    )


class OrderSubmitter:
    def __init__(
        self,
        api: FoodApi,
        navigator: Navigator,
        *,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self._api = api
        self._navigator = navigator
        self._id_factory = id_factory

    def prepare(self, draft: OrderDraft) -> OrderPayloadV1:
        return build_order_payload(draft, self._id_factory())

    async def send(self, payload: OrderPayloadV1) -> OrderPayloadV1:
        # Failures propagate; the host decides how to surface them.
        await self._api.create_order(payload)
        logger.info("Order %s placed for food %s", payload.id, payload.food_id)

        self._navigator.go_back()
        return payload

    async def submit(self, draft: OrderDraft) -> OrderPayloadV1:
        return await self.send(self.prepare(draft))

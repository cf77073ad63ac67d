"""Food details screen state.

One `FoodDetailsScreen` backs one visit to the screen. It loads the food, seeds the extra
lines, and keeps the base quantity and the favorite flag. The total is derived from that
state on every read.

Remote calls (load, favorite, order) run inside the screen's cancellation scope: `close()`
cancels whatever is still in flight and callers waiting on it get `ScreenClosedError`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from packages.shared.schemas.food_v1 import FormattedFoodV1
from packages.shared.schemas.order_v1 import OrderPayloadV1
from services.api.app.engine import quantity
from services.api.app.engine.extras import ExtraRegistry
from services.api.app.engine.favorite import FavoriteRequest, FavoriteToggle
from services.api.app.engine.formatting import format_value
from services.api.app.engine.ids import new_record_id
from services.api.app.engine.navigation import Navigator, favorite_header_action
from services.api.app.engine.pricing import compute_total
from services.api.app.engine.submission import OrderDraft, OrderSubmitter
from services.api.app.services.food_api_base import FoodApi, FoodApiResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScreenError(Exception):
    """Base class for screen lifecycle errors."""


class ScreenNotLoadedError(ScreenError):
    def __init__(self) -> None:
        super().__init__("Food details have not finished loading")


class ScreenClosedError(ScreenError):
    def __init__(self) -> None:
        super().__init__("Food details screen is closed")


class FoodDetailsScreen:
    def __init__(
        self,
        api: FoodApi,
        *,
        navigator: Navigator,
        formatter: Callable[[float], str] = format_value,
        id_factory: Callable[[], str] = new_record_id,
        max_food_quantity: int | None = None,
    ) -> None:
        self._api = api
        self._navigator = navigator
        self._formatter = formatter
        self._max_food_quantity = max_food_quantity

        self._food: FormattedFoodV1 | None = None
        self._extras = ExtraRegistry()
        self._food_quantity = quantity.FOOD_QUANTITY_FLOOR

        self._favorite = FavoriteToggle(api, id_factory=id_factory)
        self._submitter = OrderSubmitter(api, navigator, id_factory=id_factory)

        self._inflight: set[asyncio.Task[Any]] = set()
        self._closed = False

    # -- lifecycle -------------------------------------------------------

    async def load(self, food_id: int) -> FormattedFoodV1:
        self._ensure_open()

        data = await self._track(self._api.fetch_food(food_id))
        try:
            extras = ExtraRegistry.seed(data.extras)
        except ValueError as e:
            raise FoodApiResponseError(f"/foods/{food_id}", None, str(e)) from e

        self._food = FormattedFoodV1(
            **data.model_dump(exclude={"extras"}),
            formatted_price=self._formatter(data.price),
        )
        self._extras = extras
        self._food_quantity = quantity.FOOD_QUANTITY_FLOOR
        self._navigator.set_header_action(favorite_header_action(self.is_favorite))

        logger.info("Loaded food %s with %d extras", food_id, len(extras))
        return self._food

    def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        for task in list(self._inflight):
            task.cancel()
        logger.info("Food details screen closed (%d calls cancelled)", len(self._inflight))

    @property
    def loaded(self) -> bool:
        return self._food is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # -- state -----------------------------------------------------------

    @property
    def food(self) -> FormattedFoodV1:
        if self._food is None:
            raise ScreenNotLoadedError()
        return self._food

    @property
    def extras(self) -> ExtraRegistry:
        return self._extras

    @property
    def food_quantity(self) -> int:
        return self._food_quantity

    @property
    def is_favorite(self) -> bool:
        return self._favorite.is_favorite

    @property
    def favorite_request(self) -> FavoriteRequest:
        return self._favorite.request

    @property
    def cart_total(self) -> float:
        return compute_total(self.food.price, self._extras, self._food_quantity)

    @property
    def cart_total_formatted(self) -> str:
        return self._formatter(self.cart_total)

    def draft(self) -> OrderDraft:
        return OrderDraft(food=self.food, food_quantity=self._food_quantity, extras=self._extras)

    # -- quantity edits --------------------------------------------------

    def increment_extra(self, extra_id: int) -> ExtraRegistry:
        self._ensure_ready()
        self._extras = self._extras.increment(extra_id)
        logger.debug("Extra %s incremented", extra_id)
        return self._extras

    def decrement_extra(self, extra_id: int) -> ExtraRegistry:
        self._ensure_ready()
        self._extras = self._extras.decrement(extra_id)
        logger.debug("Extra %s decremented", extra_id)
        return self._extras

    def increment_food(self) -> int:
        self._ensure_ready()
        self._food_quantity = quantity.increment(
            self._food_quantity, ceiling=self._max_food_quantity
        )
        return self._food_quantity

    def decrement_food(self) -> int:
        self._ensure_ready()
        self._food_quantity = quantity.decrement(
            self._food_quantity, floor=quantity.FOOD_QUANTITY_FLOOR
        )
        return self._food_quantity

    # -- remote side effects ---------------------------------------------

    async def toggle_favorite(self) -> tuple[bool, FavoriteRequest]:
        """Flip the favorite flag and send the record.

        Returns the flag as set by this toggle together with the request outcome; the live
        flag may already have moved on if another toggle ran while this one was in flight.
        """

        self._ensure_ready()

        # The flip happens before the first suspension point.
        generation, record = self._favorite.begin(self.food)
        is_favorite = self.is_favorite
        self._navigator.set_header_action(favorite_header_action(is_favorite))

        outcome = await self._track(self._favorite.send(generation, record))
        return is_favorite, outcome

    async def submit_order(self) -> OrderPayloadV1:
        self._ensure_ready()

        payload = self._submitter.prepare(self.draft())
        return await self._track(self._submitter.send(payload))

    # -- internals -------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise ScreenClosedError()

    def _ensure_ready(self) -> None:
        self._ensure_open()
        if self._food is None:
            raise ScreenNotLoadedError()

    async def _track(self, coro: Coroutine[Any, Any, T]) -> T:
        task = asyncio.create_task(coro)
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            caller_cancelled = current is not None and current.cancelling() > 0
            if self._closed and task.cancelled() and not caller_cancelled:
                raise ScreenClosedError() from None
            raise

"""Favorite flag with optimistic updates.

The flag flips as soon as the user asks for it. The remote favorite record is sent afterwards
and its outcome is tracked as a request status; a failed request is reported, never rolled
back, so two toggles always restore the previous flag.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.food_details_v1 import FavoriteRequestV1, FavoriteStatusV1
from packages.shared.schemas.food_v1 import FoodV1
from services.api.app.engine.ids import new_record_id
from services.api.app.services.food_api_base import FoodApi, FoodApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FavoriteRequest:
    status: FavoriteStatusV1
    record_id: str | None = None
    error: str | None = None

    def to_schema(self) -> FavoriteRequestV1:
        return FavoriteRequestV1(status=self.status, record_id=self.record_id, error=self.error)


def build_favorite_record(food: FoodV1, record_id: str) -> FavoriteRecordV1:
    return FavoriteRecordV1(
        id=record_id,
        name=food.name,
        description=food.description,
        price=food.price,
        category=food.category,
        image_url=food.image_url,
        thumbnail_url=food.thumbnail_url,
    )


class FavoriteToggle:
    def __init__(
        self,
        api: FoodApi,
        *,
        id_factory: Callable[[], str] = new_record_id,
        is_favorite: bool = False,
    ) -> None:
        self._api = api
        self._id_factory = id_factory
        self.is_favorite = is_favorite
        self.request = FavoriteRequest(status=FavoriteStatusV1.IDLE)
        self._generation = 0

    def begin(self, food: FoodV1) -> tuple[int, FavoriteRecordV1]:
        """Flip the flag and mark a new request as pending. Does not suspend."""

        self.is_favorite = not self.is_favorite
        self._generation += 1

        record = build_favorite_record(food, self._id_factory())
        self.request = FavoriteRequest(status=FavoriteStatusV1.PENDING, record_id=record.id)
        return self._generation, record

    async def send(self, generation: int, record: FavoriteRecordV1) -> FavoriteRequest:
        try:
            await self._api.create_favorite(record)
        except FoodApiError as e:
            logger.warning("Favorite record %s was not saved: %s", record.id, e)
            outcome = FavoriteRequest(FavoriteStatusV1.FAILED, record_id=record.id, error=str(e))
        else:
            outcome = FavoriteRequest(FavoriteStatusV1.CONFIRMED, record_id=record.id)

        # A newer toggle owns the status now.
        if generation == self._generation:
            self.request = outcome
        return outcome

    async def toggle(self, food: FoodV1) -> FavoriteRequest:
        generation, record = self.begin(food)
        return await self.send(generation, record)

from __future__ import annotations

import asyncio

from packages.shared.schemas.favorite_v1 import FavoriteRecordV1
from packages.shared.schemas.food_details_v1 import FavoriteStatusV1
from packages.shared.schemas.food_v1 import FoodV1
from services.api.app.engine.favorite import FavoriteToggle
from services.api.app.services.food_api_base import FoodApiUnavailableError
from services.api.app.services.food_api_mock import MockFoodApi

FOOD = FoodV1(
    id=7,
    name="Ao molho",
    description="Macarrão ao molho branco",
    category=1,
    thumbnail_url="thumb.png",
    image_url="full.png",
    price=19.9,
)


class _FailingFavorites(MockFoodApi):
    async def create_favorite(self, record: FavoriteRecordV1) -> None:
        del record
        raise FoodApiUnavailableError("http://backend", "connection refused")


class _GatedFavorites(MockFoodApi):
    def __init__(self) -> None:
        super().__init__()
        self.gate = asyncio.Event()

    async def create_favorite(self, record: FavoriteRecordV1) -> None:
        await self.gate.wait()
        await super().create_favorite(record)


def _ids():
    counter = iter(range(1, 100))
    return lambda: f"fav-{next(counter)}"


def test_toggle_sends_food_snapshot_with_fresh_id() -> None:
    api = MockFoodApi()
    toggle = FavoriteToggle(api, id_factory=_ids())

    outcome = asyncio.run(toggle.toggle(FOOD))

    assert toggle.is_favorite is True
    assert outcome.status == FavoriteStatusV1.CONFIRMED
    assert api.favorites == [
        FavoriteRecordV1(
            id="fav-1",
            name="Ao molho",
            description="Macarrão ao molho branco",
            price=19.9,
            category=1,
            image_url="full.png",
            thumbnail_url="thumb.png",
        )
    ]


def test_toggle_generates_a_new_id_each_time() -> None:
    api = MockFoodApi()
    toggle = FavoriteToggle(api)

    async def scenario() -> None:
        await toggle.toggle(FOOD)
        await toggle.toggle(FOOD)

    asyncio.run(scenario())

    assert len({record.id for record in api.favorites}) == 2


def test_flag_flips_before_the_remote_call_completes() -> None:
    api = _GatedFavorites()
    toggle = FavoriteToggle(api)

    async def scenario() -> None:
        task = asyncio.create_task(toggle.toggle(FOOD))
        await asyncio.sleep(0)

        assert toggle.is_favorite is True
        assert toggle.request.status == FavoriteStatusV1.PENDING
        assert api.favorites == []

        api.gate.set()
        await task

    asyncio.run(scenario())
    assert toggle.request.status == FavoriteStatusV1.CONFIRMED


def test_failure_is_reported_and_flag_is_kept() -> None:
    toggle = FavoriteToggle(_FailingFavorites())

    outcome = asyncio.run(toggle.toggle(FOOD))

    assert toggle.is_favorite is True
    assert outcome.status == FavoriteStatusV1.FAILED
    assert "connection refused" in (outcome.error or "")
    assert toggle.request == outcome


def test_toggling_twice_restores_flag_regardless_of_outcome() -> None:
    for api in (MockFoodApi(), _FailingFavorites()):
        toggle = FavoriteToggle(api)

        async def scenario() -> None:
            await toggle.toggle(FOOD)
            await toggle.toggle(FOOD)

        asyncio.run(scenario())
        assert toggle.is_favorite is False


def test_stale_completion_does_not_overwrite_newer_request() -> None:
    api = _GatedFavorites()
    toggle = FavoriteToggle(api, id_factory=_ids())

    async def scenario() -> None:
        first = toggle.begin(FOOD)
        second = toggle.begin(FOOD)

        api.gate.set()
        await toggle.send(*second)
        assert toggle.request.record_id == "fav-2"

        stale = await toggle.send(*first)
        assert stale.record_id == "fav-1"

    asyncio.run(scenario())

    assert toggle.request.record_id == "fav-2"
    assert toggle.request.status == FavoriteStatusV1.CONFIRMED

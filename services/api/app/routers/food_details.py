from __future__ import annotations

from typing import NoReturn
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Response
from packages.shared.schemas.events import EntityTypeV1, EventTypeV1
from packages.shared.schemas.food_details_v1 import FoodDetailsViewV1, NavigationV1
from services.api.app import config
from services.api.app.db.deps import get_db
from services.api.app.db.event_log import log_event
from services.api.app.engine.navigation import RecordingNavigator
from services.api.app.engine.screen import (
    FoodDetailsScreen,
    ScreenClosedError,
    ScreenError,
    ScreenNotLoadedError,
)
from services.api.app.models.food_details import OpenFoodDetailsRequest
from services.api.app.services.food_api_base import (
    FoodApiError,
    FoodApiUnavailableError,
    FoodNotFoundError,
)
from services.api.app.services.food_api_factory import get_food_api
from services.api.app.services.store import ScreenSession, store
from sqlalchemy.orm import Session

router = APIRouter(prefix="/v1/food-details")


def _raise_screen_http_error(e: Exception) -> NoReturn:
    if isinstance(e, FoodNotFoundError):
        raise HTTPException(status_code=404, detail=str(e)) from e

    if isinstance(e, FoodApiUnavailableError):
        raise HTTPException(status_code=503, detail=str(e)) from e

    if isinstance(e, FoodApiError):
        raise HTTPException(status_code=502, detail=str(e)) from e

    if isinstance(e, (ScreenClosedError, ScreenNotLoadedError)):
        raise HTTPException(status_code=409, detail=str(e)) from e

    raise HTTPException(status_code=500, detail="Internal Server Error") from e


@router.post("", response_model=FoodDetailsViewV1)
async def open_food_details(
    payload: OpenFoodDetailsRequest, db: Session = Depends(get_db)
) -> FoodDetailsViewV1:
    try:
        api = get_food_api()
        max_food_quantity = config.max_food_quantity()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    navigator = RecordingNavigator()
    screen = FoodDetailsScreen(api, navigator=navigator, max_food_quantity=max_food_quantity)
    try:
        food = await screen.load(payload.food_id)
    except Exception as e:
        screen.close()
        _raise_screen_http_error(e)

    session = ScreenSession(
        session_id=uuid4().hex,
        vendor=api.vendor,
        screen=screen,
        navigator=navigator,
    )
    store.save_session(session)

    log_event(
        db,
        session_id=session.session_id,
        entity_type=EntityTypeV1.SCREEN_SESSION,
        entity_id=session.session_id,
        event_type=EventTypeV1.SCREEN_LOADED,
        payload={"food_id": food.id, "extras": len(screen.extras), "vendor": api.vendor},
    )
    db.commit()

    return _session_to_view(session)


@router.get("/{session_id}", response_model=FoodDetailsViewV1)
async def get_food_details(session_id: str) -> FoodDetailsViewV1:
    return _session_to_view(_get_session(session_id))


@router.post("/{session_id}/extras/{extra_id}/increment", response_model=FoodDetailsViewV1)
async def increment_extra(session_id: str, extra_id: int) -> FoodDetailsViewV1:
    session = _get_session(session_id)
    try:
        session.screen.increment_extra(extra_id)
    except ScreenError as e:
        _raise_screen_http_error(e)
    return _session_to_view(session)


@router.post("/{session_id}/extras/{extra_id}/decrement", response_model=FoodDetailsViewV1)
async def decrement_extra(session_id: str, extra_id: int) -> FoodDetailsViewV1:
    session = _get_session(session_id)
    try:
        session.screen.decrement_extra(extra_id)
    except ScreenError as e:
        _raise_screen_http_error(e)
    return _session_to_view(session)


@router.post("/{session_id}/quantity/increment", response_model=FoodDetailsViewV1)
async def increment_food(session_id: str) -> FoodDetailsViewV1:
    session = _get_session(session_id)
    try:
        session.screen.increment_food()
    except ScreenError as e:
        _raise_screen_http_error(e)
    return _session_to_view(session)


@router.post("/{session_id}/quantity/decrement", response_model=FoodDetailsViewV1)
async def decrement_food(session_id: str) -> FoodDetailsViewV1:
    session = _get_session(session_id)
    try:
        session.screen.decrement_food()
    except ScreenError as e:
        _raise_screen_http_error(e)
    return _session_to_view(session)


@router.post("/{session_id}/favorite/toggle", response_model=FoodDetailsViewV1)
async def toggle_favorite(session_id: str, db: Session = Depends(get_db)) -> FoodDetailsViewV1:
    session = _get_session(session_id)
    screen = session.screen

    try:
        is_favorite, outcome = await screen.toggle_favorite()
    except Exception as e:
        _raise_screen_http_error(e)

    record_id = outcome.record_id or ""
    log_event(
        db,
        session_id=session_id,
        entity_type=EntityTypeV1.FAVORITE,
        entity_id=record_id,
        event_type=EventTypeV1.FAVORITE_TOGGLED,
        payload={"food_id": screen.food.id, "is_favorite": is_favorite},
    )
    log_event(
        db,
        session_id=session_id,
        entity_type=EntityTypeV1.FAVORITE,
        entity_id=record_id,
        event_type=(
            EventTypeV1.FAVORITE_FAILED if outcome.error else EventTypeV1.FAVORITE_CONFIRMED
        ),
        payload={"error": outcome.error} if outcome.error else {},
    )
    db.commit()

    return _session_to_view(session)


@router.post("/{session_id}/order", response_model=FoodDetailsViewV1)
async def submit_order(session_id: str, db: Session = Depends(get_db)) -> FoodDetailsViewV1:
    session = _get_session(session_id)

    try:
        order = await session.screen.submit_order()
    except Exception as e:
        log_event(
            db,
            session_id=session_id,
            entity_type=EntityTypeV1.ORDER,
            entity_id=session_id,
            event_type=EventTypeV1.ORDER_FAILED,
            payload={"error": str(e)},
        )
        db.commit()
        _raise_screen_http_error(e)

    session.order_id = order.id
    view = _session_to_view(session)

    # The client leaves the screen, so the session ends here.
    store.pop_session(session_id)
    session.screen.close()

    log_event(
        db,
        session_id=session_id,
        entity_type=EntityTypeV1.ORDER,
        entity_id=order.id,
        event_type=EventTypeV1.ORDER_SUBMITTED,
        payload={
            "food_id": order.food_id,
            "food_quantity": order.food_quantity,
            "extras": [e.model_dump() for e in order.extras],
            "total": order.total,
        },
    )
    log_event(
        db,
        session_id=session_id,
        entity_type=EntityTypeV1.SCREEN_SESSION,
        entity_id=session_id,
        event_type=EventTypeV1.SCREEN_CLOSED,
        payload={"reason": "ORDER_SUBMITTED"},
    )
    db.commit()

    return view


@router.delete("/{session_id}", status_code=204)
async def close_food_details(session_id: str, db: Session = Depends(get_db)) -> Response:
    session = store.pop_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")

    session.screen.close()

    log_event(
        db,
        session_id=session_id,
        entity_type=EntityTypeV1.SCREEN_SESSION,
        entity_id=session_id,
        event_type=EventTypeV1.SCREEN_CLOSED,
        payload={"reason": "DISMISSED"},
    )
    db.commit()

    return Response(status_code=204)


def _get_session(session_id: str) -> ScreenSession:
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _session_to_view(session: ScreenSession) -> FoodDetailsViewV1:
    screen = session.screen
    return FoodDetailsViewV1(
        session_id=session.session_id,
        vendor=session.vendor,
        food=screen.food,
        extras=screen.extras.to_schema(),
        food_quantity=screen.food_quantity,
        cart_total=screen.cart_total,
        cart_total_formatted=screen.cart_total_formatted,
        is_favorite=screen.is_favorite,
        favorite=screen.favorite_request.to_schema(),
        header_action=session.navigator.header_action,
        navigation=NavigationV1.GO_BACK if session.navigator.went_back else None,
        order_id=session.order_id,
    )

"""Shared event schema (v1).

The service stores an append-only event log of screen sessions. Clients can consume these
events to render an audit trail of favorites and orders.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EntityTypeV1(str, Enum):
    SCREEN_SESSION = "ScreenSession"
    FAVORITE = "Favorite"
    ORDER = "Order"


class EventTypeV1(str, Enum):
    SCREEN_LOADED = "SCREEN_LOADED"
    FAVORITE_TOGGLED = "FAVORITE_TOGGLED"
    FAVORITE_CONFIRMED = "FAVORITE_CONFIRMED"
    FAVORITE_FAILED = "FAVORITE_FAILED"
    ORDER_SUBMITTED = "ORDER_SUBMITTED"
    ORDER_FAILED = "ORDER_FAILED"
    SCREEN_CLOSED = "SCREEN_CLOSED"


class EventV1(BaseModel):
    id: str
    session_id: str

    entity_type: EntityTypeV1
    entity_id: str

    event_type: EventTypeV1
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: str

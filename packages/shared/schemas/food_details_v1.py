"""Shared food details view payload schema (v1).

Clients render the food details screen from this payload. Every user action returns a fresh
copy, so clients never have to derive totals or icons themselves.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from packages.shared.schemas.food_v1 import ExtraV1, FormattedFoodV1


class FavoriteStatusV1(str, Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"


class HeaderActionTypeV1(str, Enum):
    TOGGLE_FAVORITE = "TOGGLE_FAVORITE"


class NavigationV1(str, Enum):
    GO_BACK = "GO_BACK"


class HeaderActionV1(BaseModel):
    type: HeaderActionTypeV1
    icon: str
    label: str


class FavoriteRequestV1(BaseModel):
    status: FavoriteStatusV1 = FavoriteStatusV1.IDLE
    record_id: str | None = None
    error: str | None = None


class FoodDetailsViewV1(BaseModel):
    version: str = "1"

    session_id: str
    vendor: str

    food: FormattedFoodV1
    extras: list[ExtraV1] = Field(default_factory=list)

    food_quantity: int = Field(..., ge=1)
    cart_total: float
    cart_total_formatted: str

    is_favorite: bool = False
    favorite: FavoriteRequestV1 = Field(default_factory=FavoriteRequestV1)

    # Installed by the screen on the host's header bar.
    header_action: HeaderActionV1 | None = None

    # Set once the order is acknowledged; the client should leave the screen.
    navigation: NavigationV1 | None = None
    order_id: str | None = None

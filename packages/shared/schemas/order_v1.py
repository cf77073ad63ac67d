"""Shared order payload schema (v1), the body of `POST /orders`.

The payload is the food's own fields, a fresh record id, and every extra line as it stands
when the order is confirmed. Zero-quantity extras are kept.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from packages.shared.schemas.food_v1 import ExtraV1


class OrderPayloadV1(BaseModel):
    id: str

    # Food fields. `food_id` keeps the catalog id that `id` replaces.
    food_id: int
    name: str
    description: str
    category: int
    thumbnail_url: str
    image_url: str
    price: float
    formatted_price: str

    extras: list[ExtraV1] = Field(default_factory=list)

    food_quantity: int = Field(..., ge=1)
    total: float

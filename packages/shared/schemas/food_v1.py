"""Shared catalog schema (v1).

These mirror the remote catalog's `GET /foods/{id}` response. Unknown fields sent by the
backend are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CatalogExtraV1(BaseModel):
    # No quantity: the catalog's value, if any, is dropped and lines are seeded at zero.
    id: int
    name: str
    value: float


class ExtraV1(CatalogExtraV1):
    quantity: int = Field(default=0, ge=0)


class FoodV1(BaseModel):
    id: int
    name: str
    description: str = ""
    category: int
    thumbnail_url: str = ""
    image_url: str = ""
    price: float


class FoodWithExtrasV1(FoodV1):
    extras: list[CatalogExtraV1] = Field(default_factory=list)


class FormattedFoodV1(FoodV1):
    # Computed once at load by the currency formatter.
    formatted_price: str

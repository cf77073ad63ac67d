"""Shared favorite record schema (v1), the body of `POST /favorites`."""

from __future__ import annotations

from pydantic import BaseModel


class FavoriteRecordV1(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: int
    image_url: str
    thumbnail_url: str

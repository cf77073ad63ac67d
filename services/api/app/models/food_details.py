from __future__ import annotations

from pydantic import BaseModel, Field


class OpenFoodDetailsRequest(BaseModel):
    food_id: int = Field(..., ge=1)

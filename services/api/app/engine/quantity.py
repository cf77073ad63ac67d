"""Increment/decrement primitives shared by extra lines and the base food quantity."""

from __future__ import annotations

EXTRA_QUANTITY_FLOOR = 0
FOOD_QUANTITY_FLOOR = 1


def increment(value: int, *, ceiling: int | None = None) -> int:
    if ceiling is not None and value >= ceiling:
        return ceiling
    return value + 1


def decrement(value: int, *, floor: int) -> int:
    # Clamped, never an error.
    return value - 1 if value > floor else floor

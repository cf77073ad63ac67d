from __future__ import annotations

from collections.abc import Iterable

from services.api.app.engine.extras import ExtraLine


def extras_subtotal(extras: Iterable[ExtraLine]) -> float:
    return sum((extra.value * extra.quantity for extra in extras), 0)


def compute_total(price: float, extras: Iterable[ExtraLine], food_quantity: int) -> float:
    """Total for `food_quantity` servings of the food with its extras.

    Extras are chosen per serving, so the base quantity scales the food price and the extras
    subtotal together: `(extras_subtotal + price) * food_quantity`.
    """

    return (extras_subtotal(extras) + price) * food_quantity

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_value(value: float) -> str:
    """Format a numeric amount as Brazilian reais, e.g. `R$ 1.234,50`."""

    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}"
    # en-US grouping to pt-BR: swap "," and ".".
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"

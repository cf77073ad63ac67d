from __future__ import annotations

import argparse
import asyncio

from services.api.app import config
from services.api.app.engine.navigation import RecordingNavigator
from services.api.app.engine.screen import FoodDetailsScreen
from services.api.app.logging_config import setup_logging
from services.api.app.services.food_api_factory import get_food_api


def _parse_extra(raw: str) -> tuple[int, int]:
    extra_id, sep, qty = raw.partition("=")
    try:
        if not sep:
            raise ValueError(raw)
        parsed = int(extra_id), int(qty)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected EXTRA_ID=QUANTITY, got {raw!r}") from None

    if parsed[1] < 0:
        raise argparse.ArgumentTypeError(f"extra quantity must be >= 0, got {raw!r}")
    return parsed


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {raw!r}") from None

    if value < 1:
        raise argparse.ArgumentTypeError(f"quantity must be >= 1, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose and optionally place a food order")
    parser.add_argument("food_id", type=int)
    parser.add_argument(
        "--extra",
        dest="extras",
        action="append",
        type=_parse_extra,
        default=[],
        metavar="EXTRA_ID=QUANTITY",
        help="Quantity of an extra; repeatable.",
    )
    parser.add_argument("--quantity", type=_positive_int, default=1, help="Number of servings.")
    parser.add_argument("--favorite", action="store_true", help="Mark the food as favorite.")
    parser.add_argument("--submit", action="store_true", help="Place the order.")
    return parser


async def run(args: argparse.Namespace) -> int:
    navigator = RecordingNavigator()
    screen = FoodDetailsScreen(
        get_food_api(),
        navigator=navigator,
        max_food_quantity=config.max_food_quantity(),
    )

    try:
        food = await screen.load(args.food_id)
        print(f"{food.name} {food.formatted_price}")

        for extra_id, qty in args.extras:
            for _ in range(qty):
                screen.increment_extra(extra_id)
        for _ in range(args.quantity - 1):
            screen.increment_food()

        for line in screen.extras:
            print(f"  + {line.name} x{line.quantity}")
        print(f"Servings: {screen.food_quantity}")
        print(f"Total: {screen.cart_total_formatted}")

        if args.favorite:
            _, outcome = await screen.toggle_favorite()
            print(f"Favorite: {outcome.status.value}")

        if args.submit:
            order = await screen.submit_order()
            print(f"Order placed: {order.id}")
    finally:
        screen.close()

    return 0


def main() -> int:
    setup_logging()
    args = build_parser().parse_args()
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import asyncio

import pytest
from scripts.order_food import build_parser, run


def test_parser_reads_repeated_extras() -> None:
    args = build_parser().parse_args(["1", "--extra", "1=2", "--extra", "3=1", "--quantity", "2"])

    assert args.food_id == 1
    assert args.extras == [(1, 2), (3, 1)]
    assert args.quantity == 2


@pytest.mark.parametrize("raw", ["1", "a=2", "1=-1"])
def test_parser_rejects_bad_extras(raw: str) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["1", "--extra", raw])


@pytest.mark.parametrize("raw", ["0", "-2", "two"])
def test_parser_rejects_quantity_below_one(raw: str) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["1", "--quantity", raw])


def test_run_prints_total_and_places_order(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PLATEFUL_FOOD_API_ADAPTER", "mock")
    monkeypatch.delenv("PLATEFUL_MAX_FOOD_QUANTITY", raising=False)

    args = argparse.Namespace(
        food_id=1, extras=[(1, 2)], quantity=2, favorite=True, submit=True
    )
    assert asyncio.run(run(args)) == 0

    out = capsys.readouterr().out
    assert "Ao molho R$ 19,90" in out
    assert "+ Bacon x2" in out
    # (19.90 + 2 x 1.50) x 2
    assert "Total: R$ 45,80" in out
    assert "Favorite: CONFIRMED" in out
    assert "Order placed:" in out

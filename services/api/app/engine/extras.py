from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace

from packages.shared.schemas.food_v1 import CatalogExtraV1, ExtraV1
from services.api.app.engine.quantity import EXTRA_QUANTITY_FLOOR, decrement, increment


@dataclass(frozen=True, slots=True)
class ExtraLine:
    id: int
    name: str
    value: float
    quantity: int = 0

    def to_schema(self) -> ExtraV1:
        return ExtraV1(id=self.id, name=self.name, value=self.value, quantity=self.quantity)


@dataclass(frozen=True, slots=True)
class ExtraRegistry:
    """Ordered extra lines keyed by id.

    Updates are copy-on-write: `increment` and `decrement` return a new registry and leave the
    receiver untouched. Lines that did not change are shared between the two.
    """

    lines: tuple[ExtraLine, ...] = ()

    def __post_init__(self) -> None:
        ids = [line.id for line in self.lines]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate extra ids: {ids}")

    @classmethod
    def seed(cls, extras: Iterable[CatalogExtraV1]) -> ExtraRegistry:
        # Every line starts at zero whatever quantity the catalog sent.
        return cls(
            tuple(ExtraLine(id=e.id, name=e.name, value=e.value, quantity=0) for e in extras)
        )

    def __iter__(self) -> Iterator[ExtraLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(line.id for line in self.lines)

    def get(self, extra_id: int) -> ExtraLine | None:
        for line in self.lines:
            if line.id == extra_id:
                return line
        return None

    def increment(self, extra_id: int) -> ExtraRegistry:
        return self._update(extra_id, increment)

    def decrement(self, extra_id: int) -> ExtraRegistry:
        return self._update(extra_id, lambda q: decrement(q, floor=EXTRA_QUANTITY_FLOOR))

    def _update(self, extra_id: int, step: Callable[[int], int]) -> ExtraRegistry:
        if self.get(extra_id) is None:
            return self

        return ExtraRegistry(
            tuple(
                replace(line, quantity=step(line.quantity)) if line.id == extra_id else line
                for line in self.lines
            )
        )

    def to_schema(self) -> list[ExtraV1]:
        return [line.to_schema() for line in self.lines]

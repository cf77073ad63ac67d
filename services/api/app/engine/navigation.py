from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from packages.shared.schemas.food_details_v1 import HeaderActionTypeV1, HeaderActionV1

FAVORITE_ICON = "favorite"
NOT_FAVORITE_ICON = "favorite-border"


def favorite_header_action(is_favorite: bool) -> HeaderActionV1:
    return HeaderActionV1(
        type=HeaderActionTypeV1.TOGGLE_FAVORITE,
        icon=FAVORITE_ICON if is_favorite else NOT_FAVORITE_ICON,
        label="Remove favorite" if is_favorite else "Add favorite",
    )


class Navigator(Protocol):
    def go_back(self) -> None: ...

    def set_header_action(self, action: HeaderActionV1) -> None: ...


@dataclass
class RecordingNavigator:
    """Navigator for hosts that report navigation back to a client instead of driving it."""

    went_back: bool = False
    header_action: HeaderActionV1 | None = None

    def go_back(self) -> None:
        self.went_back = True

    def set_header_action(self, action: HeaderActionV1) -> None:
        self.header_action = action

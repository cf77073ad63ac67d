from __future__ import annotations

from dataclasses import dataclass

from services.api.app.engine.navigation import RecordingNavigator
from services.api.app.engine.screen import FoodDetailsScreen


@dataclass
class ScreenSession:
    session_id: str
    vendor: str
    screen: FoodDetailsScreen
    navigator: RecordingNavigator
    order_id: str | None = None


class InMemoryStore:
    def __init__(self) -> None:
        self._sessions: dict[str, ScreenSession] = {}

    def save_session(self, session: ScreenSession) -> None:
        self._sessions[session.session_id] = session

    def get_session(self, session_id: str) -> ScreenSession | None:
        return self._sessions.get(session_id)

    def pop_session(self, session_id: str) -> ScreenSession | None:
        return self._sessions.pop(session_id, None)


store = InMemoryStore()

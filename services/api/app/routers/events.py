from __future__ import annotations

from fastapi import APIRouter, Depends
from packages.shared.schemas.events import EventV1
from services.api.app.db.deps import get_db
from services.api.app.db.event_log import list_events
from sqlalchemy.orm import Session

router = APIRouter()


@router.get("/v1/food-details/{session_id}/events", response_model=list[EventV1])
def list_session_events(session_id: str, db: Session = Depends(get_db)) -> list[EventV1]:
    # Events outlive the session, so closed sessions still have an audit trail.
    return list_events(db, session_id)

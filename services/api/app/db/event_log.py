from __future__ import annotations

from typing import Any
from uuid import uuid4

from packages.shared.schemas.events import EntityTypeV1, EventTypeV1, EventV1
from services.api.app.db.models import EventLog
from sqlalchemy.orm import Session


def log_event(
    db: Session,
    *,
    session_id: str,
    entity_type: EntityTypeV1,
    entity_id: str,
    event_type: EventTypeV1,
    payload: dict[str, Any] | None = None,
) -> None:
    db.add(
        EventLog(
            id=uuid4().hex,
            session_id=session_id,
            entity_type=entity_type.value,
            entity_id=entity_id,
            event_type=event_type.value,
            event_payload_json=payload or {},
        )
    )


def list_events(db: Session, session_id: str, *, limit: int = 200) -> list[EventV1]:
    rows = (
        db.query(EventLog)
        .filter(EventLog.session_id == session_id)
        .order_by(EventLog.created_at.asc())
        .limit(limit)
        .all()
    )

    return [
        EventV1(
            id=row.id,
            session_id=row.session_id,
            entity_type=EntityTypeV1(row.entity_type),
            entity_id=row.entity_id,
            event_type=EventTypeV1(row.event_type),
            payload=row.event_payload_json,
            created_at=row.created_at.isoformat(),
        )
        for row in rows
    ]

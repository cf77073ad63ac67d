from __future__ import annotations

import logging
from pathlib import Path

from services.api.app import config
from services.api.app.db.database import DEFAULT_DB_DIR, database_url, default_db_url, get_engine
from services.api.app.db.models import Base

logger = logging.getLogger(__name__)


def init_db() -> None:
    if not config.db_auto_create():
        return

    if database_url() == default_db_url():
        Path(DEFAULT_DB_DIR).mkdir(exist_ok=True)

    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Audit tables ready at %s", engine.url.render_as_string(hide_password=True))

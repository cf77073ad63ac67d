from pathlib import Path

from sqlalchemy import inspect


def test_init_db_creates_event_log(tmp_path: Path, monkeypatch) -> None:
    db_path = tmp_path / "plateful_test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("PLATEFUL_DB_AUTO_CREATE", "true")

    from services.api.app.db.database import get_engine
    from services.api.app.db.init_db import init_db

    init_db()

    inspector = inspect(get_engine())
    assert "event_log" in set(inspector.get_table_names())


def test_init_db_can_be_disabled(tmp_path: Path, monkeypatch) -> None:
    db_path = tmp_path / "plateful_disabled.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("PLATEFUL_DB_AUTO_CREATE", "false")

    from services.api.app.db.init_db import init_db

    init_db()

    assert not db_path.exists()

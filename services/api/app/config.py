"""Runtime configuration.

Values are read from the environment on every call so tests can override them with
`monkeypatch.setenv` before first use.

Environment variables:
    PLATEFUL_FOOD_API_ADAPTER: `mock` (default) or `http`
    PLATEFUL_FOOD_API_BASE_URL: backend root for the http adapter (default: http://localhost:3333)
    PLATEFUL_FOOD_API_TIMEOUT_SECONDS: per-request timeout for the http adapter (default: 10)
    PLATEFUL_MAX_FOOD_QUANTITY: optional ceiling for the base food quantity (default: unbounded)
    PLATEFUL_DB_AUTO_CREATE: create audit tables on startup (default: true)
    DATABASE_URL: SQLAlchemy URL of the audit database (default: local sqlite file)
"""

from __future__ import annotations

import os

DEFAULT_FOOD_API_BASE_URL = "http://localhost:3333"
DEFAULT_FOOD_API_TIMEOUT_SECONDS = 10.0

_TRUTHY = {"1", "true", "yes", "y"}


def food_api_adapter() -> str:
    return os.getenv("PLATEFUL_FOOD_API_ADAPTER", "mock").strip().lower()


def food_api_base_url() -> str:
    return os.getenv("PLATEFUL_FOOD_API_BASE_URL", DEFAULT_FOOD_API_BASE_URL).strip()


def food_api_timeout_seconds() -> float:
    raw = os.getenv("PLATEFUL_FOOD_API_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEFAULT_FOOD_API_TIMEOUT_SECONDS

    timeout = float(raw)
    if timeout <= 0:
        raise ValueError(f"PLATEFUL_FOOD_API_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def max_food_quantity() -> int | None:
    raw = os.getenv("PLATEFUL_MAX_FOOD_QUANTITY", "").strip()
    if not raw:
        return None

    ceiling = int(raw)
    if ceiling < 1:
        raise ValueError(f"PLATEFUL_MAX_FOOD_QUANTITY must be >= 1, got {raw!r}")
    return ceiling


def db_auto_create() -> bool:
    return os.getenv("PLATEFUL_DB_AUTO_CREATE", "true").strip().lower() in _TRUTHY

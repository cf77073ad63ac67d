"""Plateful API service entrypoint."""

from fastapi import FastAPI

from services.api.app.db.init_db import init_db
from services.api.app.logging_config import setup_logging
from services.api.app.routers.events import router as events_router
from services.api.app.routers.food_details import router as food_details_router

setup_logging()

app = FastAPI(title="Plateful API")

app.include_router(food_details_router)
app.include_router(events_router)


@app.on_event("startup")
def _startup() -> None:
    init_db()


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}

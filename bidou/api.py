# -*- coding: utf-8 -*-
"""
Bidou symptom journal API.

Log meals with a pain score and see which ingredients and food families hurt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .meals.api import router as meals_router
from .meals.draft import MealDraft
from .meals.storage import MealStore
from .stats.api import router as stats_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Aïe aïe aïe bidou",
    description="Meal and pain journal with per-ingredient and per-family statistics",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def init_session(target: FastAPI, history_file: Optional[Path] = None) -> None:
    store = MealStore(history_file or settings.history_file)
    store.load()
    target.state.store = store
    target.state.draft = MealDraft()
    logger.info("Loaded %d meal(s) from %s", len(store), store.path)


@app.on_event("startup")
def _startup_load_history() -> None:
    init_session(app)


# Make the session available even when lifespan events are not triggered (e.g. some test clients).
init_session(app)


app.include_router(meals_router)
app.include_router(stats_router)


@app.get("/api/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("bidou.api:app", host=settings.host, port=settings.port, log_level=settings.log_level, reload=False)

# -*- coding: utf-8 -*-
"""FastAPI dependencies handing the session objects to the routers."""

from __future__ import annotations

from fastapi import Request

from .meals.draft import MealDraft
from .meals.storage import MealStore


def get_store(request: Request) -> MealStore:
    return request.app.state.store


def get_draft(request: Request) -> MealDraft:
    return request.app.state.draft

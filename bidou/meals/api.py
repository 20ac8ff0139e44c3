# -*- coding: utf-8 -*-
"""Meals — API endpoints (history and the meal being typed)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_draft, get_store
from .draft import MealDraft, MealValidationError, save_meal
from .models import (
    AddIngredientRequest,
    DraftResponse,
    DraftUpdateRequest,
    MealEntriesResponse,
    MealEntry,
)
from .storage import MealStore

router = APIRouter(prefix="/api/meals", tags=["Meals"])


@router.get("/entries", response_model=MealEntriesResponse, summary="Meal history")
def list_entries(store: MealStore = Depends(get_store)):
    entries = list(store.entries)
    return MealEntriesResponse(count=len(entries), entries=entries)


@router.post("/entries", response_model=MealEntry, summary="Save a complete meal")
def create_entry(entry: MealEntry, store: MealStore = Depends(get_store)):
    try:
        store.insert(entry)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to save meal: {exc}") from exc
    return entry


@router.delete("/entries/{index}", response_model=MealEntry, summary="Delete a meal by position")
def delete_entry(index: int, store: MealStore = Depends(get_store)):
    try:
        return store.delete(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/draft", response_model=DraftResponse, summary="Meal being typed")
def get_meal_draft(draft: MealDraft = Depends(get_draft)):
    return draft.snapshot()


@router.patch("/draft", response_model=DraftResponse, summary="Update the meal being typed")
def update_meal_draft(request: DraftUpdateRequest, draft: MealDraft = Depends(get_draft)):
    for name in request.model_fields_set:
        value = getattr(request, name)
        if name in ("date", "time") and value is None:
            continue
        setattr(draft, name, value)
    return draft.snapshot()


@router.post("/draft/ingredients", response_model=DraftResponse, summary="Add an ingredient")
def add_draft_ingredient(request: AddIngredientRequest, draft: MealDraft = Depends(get_draft)):
    draft.add_ingredient(request.label)
    return draft.snapshot()


@router.delete("/draft/ingredients/{key}", response_model=DraftResponse, summary="Remove an ingredient")
def remove_draft_ingredient(key: str, draft: MealDraft = Depends(get_draft)):
    draft.remove_ingredient(key)
    return draft.snapshot()


@router.post("/draft/save", response_model=MealEntry, summary="Save the meal being typed")
def save_meal_draft(draft: MealDraft = Depends(get_draft), store: MealStore = Depends(get_store)):
    try:
        return save_meal(draft, store)
    except MealValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to save meal: {exc}") from exc

# -*- coding: utf-8 -*-
"""Stats — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_store
from ..meals.storage import MealStore
from .aggregate import compute_stats, entries_for_family, filter_by_horizon
from .families import FAMILIES, FAMILIES_BY_ID, FoodFamily
from .models import FamilyEntriesResponse, FamilyInfo, GroupBy, Horizon, StatsResponse

router = APIRouter(prefix="/api/stats", tags=["Stats"])


def _family_info(family: FoodFamily) -> FamilyInfo:
    return FamilyInfo(id=family.id, label=family.label, keywords=list(family.keywords))


@router.get("", response_model=StatsResponse, summary="Average pain per family or per ingredient")
def stats(
    view: GroupBy = Query(default=GroupBy.family, description="families | ingredients"),
    period: Horizon = Query(default=Horizon.all, description="all | 7 | 30 (days)"),
    store: MealStore = Depends(get_store),
):
    entries = filter_by_horizon(store.entries, period)
    return StatsResponse(view=view, period=period, count=len(entries), rows=compute_stats(entries, view))


@router.get("/families", response_model=List[FamilyInfo], summary="Food family catalog")
def list_families():
    return [_family_info(f) for f in FAMILIES]


@router.get(
    "/families/{family_id}/entries",
    response_model=FamilyEntriesResponse,
    summary="Meals containing an ingredient of a family",
)
def family_entries(
    family_id: str,
    period: Horizon = Query(default=Horizon.all, description="all | 7 | 30 (days)"),
    store: MealStore = Depends(get_store),
):
    family = FAMILIES_BY_ID.get(family_id)
    if family is None:
        raise HTTPException(status_code=404, detail=f"Unknown family: {family_id}")
    entries = entries_for_family(filter_by_horizon(store.entries, period), family_id)
    return FamilyEntriesResponse(family=_family_info(family), period=period, count=len(entries), entries=entries)

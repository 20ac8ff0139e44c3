# -*- coding: utf-8 -*-
"""Stats — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..meals.models import MealEntry


class GroupBy(str, Enum):
    ingredient = "ingredients"
    family = "families"


class Horizon(str, Enum):
    all = "all"
    week = "7"
    month = "30"

    @property
    def days(self) -> Optional[int]:
        if self is Horizon.all:
            return None
        return int(self.value)


class Severity(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class StatRow(BaseModel):
    key: str = Field(..., description="Ingredient key or family id")
    name: str
    avg: float = Field(..., ge=1, le=5)
    count: int = Field(..., ge=1)
    severity: Severity


class StatsResponse(BaseModel):
    view: GroupBy
    period: Horizon
    count: int = Field(0, ge=0, description="Number of meals taken into account")
    rows: List[StatRow]


class FamilyInfo(BaseModel):
    id: str
    label: str
    keywords: List[str] = Field(default_factory=list)


class FamilyEntriesResponse(BaseModel):
    family: FamilyInfo
    period: Horizon
    count: int
    entries: List[MealEntry]

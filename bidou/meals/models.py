# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from datetime import date as Date
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .normalize import normalize


class MealTime(str, Enum):
    morning = "Matin"
    noon = "Midi"
    evening = "Soir"


class MealType(str, Enum):
    home_cooked = "Cuisine maison"
    processed = "Aliments transformés"
    restaurant = "Restaurant"


class MealFeeling(str, Enum):
    overate = "Avoir trop mangé"
    too_fatty = "Avoir mangé trop gras"


def _blank_to_none(value: Any) -> Any:
    # The browser app stored unset options as "".
    if isinstance(value, str) and not value.strip():
        return None
    return value


class IngredientTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Ingredient as typed by the user")
    key: str = Field(..., min_length=1, description="Normalized grouping key")

    @model_validator(mode="before")
    @classmethod
    def _derive_key(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if isinstance(data.get("label"), str):
                data["label"] = data["label"].strip()
            if not data.get("key"):
                data["key"] = normalize(data.get("label"))
        return data

    @classmethod
    def from_label(cls, label: str) -> "IngredientTag":
        return cls(label=label, key=normalize(label))


class MealEntry(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    date: Date
    time: MealTime = MealTime.noon
    pain: int = Field(..., ge=1, le=5, description="Subjective pain score")
    ingredients: List[IngredientTag] = Field(..., min_length=1)
    # Labels outside the known options (older or hand-edited histories) are kept as text.
    meal_type: Optional[Union[MealType, str]] = Field(None, union_mode="left_to_right")
    meal_feeling: Optional[Union[MealFeeling, str]] = Field(None, union_mode="left_to_right")
    personal_note: Optional[str] = None

    @field_validator("meal_type", "meal_feeling", "personal_note", mode="before")
    @classmethod
    def _coerce_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("ingredients")
    @classmethod
    def _unique_keys(cls, value: List[IngredientTag]) -> List[IngredientTag]:
        seen = set()
        out: List[IngredientTag] = []
        for tag in value:
            if tag.key in seen:
                continue
            seen.add(tag.key)
            out.append(tag)
        return out

    def to_record(self) -> dict:
        """Persisted (camelCase) representation."""
        return self.model_dump(mode="json", by_alias=True)


class MealEntriesResponse(BaseModel):
    count: int
    entries: List[MealEntry]


class DraftUpdateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: Optional[Date] = None
    time: Optional[MealTime] = None
    pain: Optional[int] = Field(None, ge=1, le=5)
    meal_type: Optional[MealType] = None
    meal_feeling: Optional[MealFeeling] = None
    personal_note: Optional[str] = Field(None, max_length=2000)

    @field_validator("meal_type", "meal_feeling", "personal_note", mode="before")
    @classmethod
    def _coerce_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class AddIngredientRequest(BaseModel):
    label: str = Field(..., description="Ingredient as typed by the user")


class DraftResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: Date
    time: MealTime
    pain: Optional[int] = None
    ingredients: List[IngredientTag] = Field(default_factory=list)
    meal_type: Optional[MealType] = None
    meal_feeling: Optional[MealFeeling] = None
    personal_note: Optional[str] = None

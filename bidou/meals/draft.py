# -*- coding: utf-8 -*-
"""Meals — the meal being typed, before it is saved to the history."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from .models import DraftResponse, IngredientTag, MealEntry, MealFeeling, MealTime, MealType
from .normalize import normalize
from .storage import MealStore

MISSING_INGREDIENT = "Ajoute au moins un ingrédient."
MISSING_PAIN = "Choisis une intensité de douleur."


class MealValidationError(ValueError):
    """The draft cannot be turned into a meal entry yet."""


class MealDraft:
    def __init__(self, *, today: Optional[date] = None) -> None:
        self.date: date = today or date.today()
        self.time: MealTime = MealTime.noon
        self.ingredients: List[IngredientTag] = []
        self.pain: Optional[int] = None
        self.meal_type: Optional[MealType] = None
        self.meal_feeling: Optional[MealFeeling] = None
        self.personal_note: Optional[str] = None

    def add_ingredient(self, label: object) -> Optional[IngredientTag]:
        """Add a tag for ``label``; blank labels and duplicate keys are ignored."""
        if not isinstance(label, str) or not label.strip():
            return None
        label = label.strip()
        key = normalize(label)
        if not key or any(tag.key == key for tag in self.ingredients):
            return None
        tag = IngredientTag(label=label, key=key)
        self.ingredients.append(tag)
        return tag

    def remove_ingredient(self, key: str) -> bool:
        before = len(self.ingredients)
        self.ingredients = [tag for tag in self.ingredients if tag.key != key]
        return len(self.ingredients) != before

    def to_entry(self) -> MealEntry:
        if not self.ingredients:
            raise MealValidationError(MISSING_INGREDIENT)
        if not self.pain:
            raise MealValidationError(MISSING_PAIN)
        try:
            return MealEntry(
                date=self.date,
                time=self.time,
                pain=self.pain,
                ingredients=list(self.ingredients),
                meal_type=self.meal_type,
                meal_feeling=self.meal_feeling,
                personal_note=self.personal_note,
            )
        except ValidationError as exc:
            raise MealValidationError(str(exc)) from exc

    def reset(self) -> None:
        """Clear the form after a save; date and time of day are kept."""
        self.ingredients = []
        self.pain = None
        self.meal_type = None
        self.meal_feeling = None
        self.personal_note = None

    def snapshot(self) -> DraftResponse:
        return DraftResponse(
            date=self.date,
            time=self.time,
            pain=self.pain,
            ingredients=list(self.ingredients),
            meal_type=self.meal_type,
            meal_feeling=self.meal_feeling,
            personal_note=self.personal_note,
        )


def save_meal(draft: MealDraft, store: MealStore) -> MealEntry:
    """Validate ``draft``, append it to ``store`` and clear the form.

    On a validation error neither the store nor the draft is touched.
    """
    entry = draft.to_entry()
    store.insert(entry)
    draft.reset()
    return entry

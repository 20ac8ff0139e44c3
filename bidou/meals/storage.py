# -*- coding: utf-8 -*-
"""Meals — JSON file storage.

The whole history lives in one JSON array and every mutation rewrites it in full,
so a read always sees the last write of the session.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import ValidationError

from .models import MealEntry

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class MealStore:
    """Ordered meal history persisted to ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._entries: List[MealEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[MealEntry, ...]:
        return tuple(self._entries)

    def load(self) -> List[MealEntry]:
        """Read the history from disk; anything unreadable counts as empty."""
        self._entries = self._read()
        return list(self._entries)

    def _read(self) -> List[MealEntry]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.warning("Ignoring unreadable meal history %s: %s", self.path, exc)
            return []
        if not isinstance(raw, list):
            logger.warning("Ignoring meal history %s: expected a JSON array", self.path)
            return []

        entries: List[MealEntry] = []
        for idx, item in enumerate(raw):
            try:
                entries.append(MealEntry.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed meal #%d in %s: %s", idx, self.path, exc)
        return entries

    def save_all(self, entries: Iterable[MealEntry]) -> None:
        """Overwrite the persisted history with ``entries``."""
        snapshot = list(entries)
        _ensure_dir(self.path.parent)
        payload = [entry.to_record() for entry in snapshot]
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        self._entries = snapshot

    def insert(self, entry: MealEntry) -> int:
        """Append ``entry`` and persist; returns its position."""
        self.save_all([*self._entries, entry])
        logger.info("Saved meal of %s (%d ingredient(s), pain %d)", entry.date, len(entry.ingredients), entry.pain)
        return len(self._entries) - 1

    def delete(self, index: int) -> MealEntry:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"No meal at position {index}")
        remaining = list(self._entries)
        removed = remaining.pop(index)
        self.save_all(remaining)
        logger.info("Deleted meal #%d of %s", index, removed.date)
        return removed

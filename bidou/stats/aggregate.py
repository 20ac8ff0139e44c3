# -*- coding: utf-8 -*-
"""Stats — average pain per ingredient and per food family.

A meal's pain score is attributed in full to every ingredient it contains; it is
not split between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..meals.models import MealEntry
from .families import classify_family, family_label
from .models import GroupBy, Horizon, Severity, StatRow

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.high: "red",
    Severity.medium: "orange",
    Severity.low: "green",
}


@dataclass
class _Bucket:
    name: str
    total: int = 0
    count: int = 0

    @property
    def avg(self) -> float:
        return self.total / self.count


def severity(avg: float) -> Severity:
    if avg >= 4:
        return Severity.high
    if avg >= 2:
        return Severity.medium
    return Severity.low


def filter_by_horizon(
    entries: Iterable[MealEntry],
    horizon: Horizon,
    *,
    today: Optional[date] = None,
) -> List[MealEntry]:
    """Keep the meals at most ``horizon`` whole days old (meals in the future are kept)."""
    days = horizon.days
    if days is None:
        return list(entries)
    today = today or date.today()
    return [e for e in entries if (today - e.date).days <= days]


def compute_stats(entries: Iterable[MealEntry], group_by: GroupBy) -> List[StatRow]:
    buckets: Dict[str, _Bucket] = {}
    for entry in entries:
        for tag in entry.ingredients:
            if group_by is GroupBy.family:
                key = classify_family(tag.key)
                name = family_label(key)
            else:
                key = tag.key
                name = tag.label
            bucket = buckets.get(key)
            if bucket is None:
                # First label seen names the ingredient.
                bucket = buckets[key] = _Bucket(name=name)
            bucket.total += entry.pain
            bucket.count += 1

    # sorted() is stable: equal averages keep first-seen order.
    ordered = sorted(buckets.items(), key=lambda kv: kv[1].avg, reverse=True)
    return [
        StatRow(key=key, name=b.name, avg=b.avg, count=b.count, severity=severity(b.avg))
        for key, b in ordered
    ]


def entries_for_family(entries: Iterable[MealEntry], family_id: str) -> List[MealEntry]:
    """Meals with at least one ingredient of ``family_id``, in history order."""
    return [
        e for e in entries if any(classify_family(tag.key) == family_id for tag in e.ingredients)
    ]

# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import date
from pathlib import Path

from bidou.meals.draft import MISSING_INGREDIENT, MISSING_PAIN, MealDraft, MealValidationError, save_meal
from bidou.meals.models import MealTime
from bidou.meals.storage import MealStore
from bidou.stats.aggregate import compute_stats
from bidou.stats.models import GroupBy


class TestMealDraft(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="bidou-test-"))
        self.store = MealStore(self._tmp / "history.json")
        self.draft = MealDraft(today=date(2026, 4, 2))

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_defaults(self) -> None:
        self.assertEqual(self.draft.date, date(2026, 4, 2))
        self.assertEqual(self.draft.time, MealTime.noon)
        self.assertIsNone(self.draft.pain)

    def test_duplicate_ingredient_is_ignored(self) -> None:
        self.assertIsNotNone(self.draft.add_ingredient("Tomates"))
        self.assertIsNone(self.draft.add_ingredient(" tomate "))
        self.assertIsNone(self.draft.add_ingredient("   "))
        self.assertEqual([t.label for t in self.draft.ingredients], ["Tomates"])

    def test_remove_ingredient(self) -> None:
        self.draft.add_ingredient("Riz")
        self.draft.add_ingredient("Poulet")
        self.assertTrue(self.draft.remove_ingredient("riz"))
        self.assertFalse(self.draft.remove_ingredient("riz"))
        self.assertEqual([t.key for t in self.draft.ingredients], ["poulet"])

    def test_save_without_ingredient_fails_and_keeps_state(self) -> None:
        self.draft.pain = 3
        with self.assertRaises(MealValidationError) as ctx:
            save_meal(self.draft, self.store)
        self.assertEqual(str(ctx.exception), MISSING_INGREDIENT)
        self.assertEqual(len(self.store), 0)
        self.assertEqual(self.draft.pain, 3)
        self.assertFalse((self._tmp / "history.json").exists())

    def test_save_without_pain_fails(self) -> None:
        self.draft.add_ingredient("Riz")
        with self.assertRaises(MealValidationError) as ctx:
            save_meal(self.draft, self.store)
        self.assertEqual(str(ctx.exception), MISSING_PAIN)
        self.assertEqual(len(self.draft.ingredients), 1)

    def test_save_appends_and_resets(self) -> None:
        self.draft.time = MealTime.evening
        self.draft.add_ingredient("Lentilles")
        self.draft.pain = 5
        entry = save_meal(self.draft, self.store)

        self.assertEqual(len(self.store), 1)
        self.assertEqual(entry.pain, 5)
        self.assertEqual(self.draft.ingredients, [])
        self.assertIsNone(self.draft.pain)
        self.assertEqual(self.draft.time, MealTime.evening)

        rows = compute_stats(self.store.entries, GroupBy.ingredient)
        self.assertEqual(rows[0].key, "lentille")
        self.assertEqual(rows[0].avg, 5.0)


if __name__ == "__main__":
    unittest.main()

# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from bidou.meals.normalize import normalize
from bidou.stats.families import FAMILIES, OTHER, classify_family, family_label


class TestClassifyFamily(unittest.TestCase):
    def test_known_keywords(self) -> None:
        self.assertEqual(classify_family(normalize("Tomates cerises")), "legumes")
        self.assertEqual(classify_family(normalize("Lentilles")), "legumes_secs")
        self.assertEqual(classify_family(normalize("Steak haché")), "viande_rouge")
        self.assertEqual(classify_family(normalize("Bœuf bourguignon")), "viande_rouge")
        self.assertEqual(classify_family(normalize("Yaourt nature")), "produits_laitiers")

    def test_declared_order_breaks_overlaps(self) -> None:
        # "pomme de terre" (starch) is declared before "pomme" (fruit).
        self.assertEqual(classify_family(normalize("Pomme de terre")), "feculents")
        self.assertEqual(classify_family(normalize("Pomme")), "fruits")

    def test_unknown_and_empty_fall_back_to_other(self) -> None:
        self.assertEqual(classify_family(normalize("chocolat")), OTHER)
        self.assertEqual(classify_family(""), OTHER)
        self.assertEqual(classify_family(None), OTHER)

    def test_deterministic(self) -> None:
        key = normalize("Courgette farcie")
        results = {classify_family(key) for _ in range(5)}
        self.assertEqual(results, {"legumes"})

    def test_catalog(self) -> None:
        self.assertEqual(FAMILIES[-1].id, OTHER)
        self.assertEqual(FAMILIES[-1].keywords, ())
        self.assertEqual(family_label("volaille"), "Volaille")
        self.assertEqual(family_label("nope"), "Autres")
        for family in FAMILIES:
            for word in family.keywords:
                self.assertEqual(word, normalize(word))


if __name__ == "__main__":
    unittest.main()

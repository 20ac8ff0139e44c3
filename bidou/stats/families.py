# -*- coding: utf-8 -*-
"""Stats — food family catalog and keyword classifier.

Matching is a substring test against normalized keywords, so the declared order
decides which family wins when keywords overlap ("pomme de terre" is a starch
before "pomme" is a fruit).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from ..meals.normalize import normalize

OTHER = "autres"


@dataclass(frozen=True)
class FoodFamily:
    id: str
    label: str
    keywords: Tuple[str, ...]


def _family(family_id: str, label: str, keywords: Iterable[str]) -> FoodFamily:
    return FoodFamily(id=family_id, label=label, keywords=tuple(normalize(w) for w in keywords))


FAMILIES: Tuple[FoodFamily, ...] = (
    _family("feculents", "Féculents", ["riz", "pate", "pain", "pomme de terre"]),
    _family("legumes", "Légumes", ["tomate", "courgette", "carotte", "brocoli"]),
    # TODO: "pois" normalizes to "poi", which also catches "poisson" and "poire"; match whole words instead.
    _family("legumes_secs", "Légumineuses", ["lentille", "pois", "haricot"]),
    _family("viande_rouge", "Viande rouge", ["boeuf", "bœuf", "steak", "agneau", "porc"]),
    _family("volaille", "Volaille", ["poulet", "dinde"]),
    _family("poisson", "Poisson", ["poisson", "saumon", "thon"]),
    _family("produits_laitiers", "Produits laitiers", ["fromage", "lait", "yaourt"]),
    _family("fruits", "Fruits", ["pomme", "banane", "poire"]),
    _family(OTHER, "Autres", []),
)

FAMILIES_BY_ID: Dict[str, FoodFamily] = {f.id: f for f in FAMILIES}


def classify_family(key: object) -> str:
    """Return the id of the first family with a keyword contained in ``key``."""
    if not isinstance(key, str) or not key:
        return OTHER
    for family in FAMILIES:
        if family.id == OTHER:
            continue
        if any(word in key for word in family.keywords):
            return family.id
    return OTHER


def family_label(family_id: str) -> str:
    family = FAMILIES_BY_ID.get(family_id) or FAMILIES_BY_ID[OTHER]
    return family.label

# -*- coding: utf-8 -*-
"""Meals — ingredient label normalization.

The normalized key is only a grouping key: lower-cased, accent-free, trimmed and
folded to the singular for simple plurals. The label typed by the user is kept
next to it on the tag for display.
"""

from __future__ import annotations

import unicodedata

# Ligatures are not decomposed by NFD, expand them so "bœuf" meets "boeuf".
_LIGATURES = str.maketrans({"œ": "oe", "æ": "ae"})


def _strip_marks(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")


def normalize(value: object) -> str:
    if not isinstance(value, str) or not value:
        return ""
    s = _strip_marks(value.lower().translate(_LIGATURES)).strip()
    # French plurals: "tomates" -> "tomate", short words such as "riz" are left alone.
    if s.endswith("s") and len(s) > 3:
        s = s[:-1]
    return s

"""Accent and case folding for fuzzy comparison of Hungarian text."""

from __future__ import annotations

import unicodedata

# Long double-acute vowels are folded explicitly before decomposition.
_DOUBLE_ACUTE = str.maketrans({"ő": "o", "ű": "u", "Ő": "O", "Ű": "U"})


def normalize(text: str) -> str:
    """
    Fold case and strip diacritics.

    Args:
        text: Raw user text

    Returns:
        Lower-cased text with all combining marks removed
    """
    if not text:
        return ""
    folded = text.translate(_DOUBLE_ACUTE).lower()
    decomposed = unicodedata.normalize("NFD", folded)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))

"""Splitting of multi-item food descriptions into single-item phrases."""

from __future__ import annotations

from biteparse.core.normalize import normalize
from biteparse.core.stemmer import has_instrumental_suffix

# Multi-word connectors are listed longest first so "as well as" wins over "as well".
CONNECTOR_PHRASES: tuple[tuple[str, ...], ...] = (
    ("as", "well", "as"),
    ("as", "well"),
)

CONNECTOR_WORDS = frozenset(
    {
        "es",
        "meg",
        "plusz",
        "valamint",
        "tovabba",
        "and",
        "plus",
        "with",
        "also",
        "+",
        "&",
    }
)

# Dropped when walking a single phrase; they never describe a food on their own.
FILLER_WORDS = frozenset({"egy", "is", "melle", "hozza", "a", "an", "some", "the"})


def is_filler(word: str) -> bool:
    folded = normalize(word)
    return folded in CONNECTOR_WORDS or folded in FILLER_WORDS


def _connector_length(folded: list[str], index: int) -> int:
    """Number of words starting at `index` that form a connector (0 if none)."""
    for phrase in CONNECTOR_PHRASES:
        if tuple(folded[index : index + len(phrase)]) == phrase:
            return len(phrase)
    if folded[index] in CONNECTOR_WORDS:
        return 1
    return 0


def _split_on_connectors(words: list[str]) -> list[str]:
    folded = [normalize(w) for w in words]
    phrases: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(words):
        skip = _connector_length(folded, index)
        if skip:
            if current:
                phrases.append(" ".join(current))
            current = []
            index += skip
            continue
        current.append(words[index])
        index += 1
    if current:
        phrases.append(" ".join(current))
    return phrases


def _split_on_instrumental(words: list[str]) -> list[str]:
    phrases: list[str] = []
    current: list[str] = []
    for word in words:
        if is_filler(word):
            if current:
                phrases.append(" ".join(current))
            current = []
        elif current and has_instrumental_suffix(normalize(word)):
            phrases.append(" ".join(current))
            current = [word]
        else:
            current.append(word)
    if current:
        phrases.append(" ".join(current))
    return phrases


def split_phrases(text: str) -> list[str]:
    """
    Break a description into candidate single-food phrases.

    Connector words ("és", "and", "with", ...) split first. A description that
    stays in one piece is then walked word by word so that agglutinated
    instrumentals start a new phrase: "kávé kecsketejjel" -> ["kávé", "kecsketejjel"].

    Args:
        text: Free-text description

    Returns:
        Trimmed, non-empty phrases in input order; [] for blank input
    """
    words = (text or "").split()
    if not words:
        return []

    phrases = _split_on_connectors(words)
    if len(phrases) == 1:
        secondary = _split_on_instrumental(phrases[0].split())
        if len(secondary) > 1:
            return secondary
    return phrases

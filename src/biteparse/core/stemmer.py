"""Suffix stripping for Hungarian case and plural endings."""

from __future__ import annotations

import re

# Order matters: longer instrumental forms are tried before bare -el/-al.
# fmt: off
HUNGARIAN_SUFFIXES: tuple[str, ...] = (
    # Instrumental (-val/-vel), e.g. "kecsketejjel", "vajjal", "cukorral"
    "jjel", "jjal", "vel", "val", "zel", "zal", "sel", "sal", "rel", "ral",
    "el", "al",
    # Superessive
    "on", "en", "ön",
    # Inessive
    "ban", "ben",
    # Sublative
    "ra", "re",
    # Translative
    "vá", "vé", "va", "ve",
    # Dative
    "nak", "nek",
    # Plural
    "ok", "ek", "ök", "ak",
    # Accusative
    "at", "et", "ot", "öt", "t",
)
# fmt: on

_INSTRUMENTAL = re.compile(
    r"^.+(?:jjel|jjal|vel|val|zel|zal|sel|sal|rel|ral|([bcdfghjklmnpqrstvwxz])\1[ae]l)$"
)


def stem_variants(word: str) -> list[str]:
    """
    Candidate root forms of a word in suffix-table order, the word itself first.

    A suffix is stripped only when at least three characters remain. When the
    remaining root ends in a doubled letter, the root with that letter removed
    once more is added too ("tejjel" -> "tejj" -> "tej").
    """
    results = [word]
    for suffix in HUNGARIAN_SUFFIXES:
        if not word.endswith(suffix) or len(word) <= len(suffix) + 2:
            continue
        root = word[: -len(suffix)]
        candidates = [root]
        if len(root) >= 2 and root[-1] == root[-2]:
            candidates.append(root[:-1])
        for candidate in candidates:
            if candidate not in results:
                results.append(candidate)
    return results


def stem(word: str) -> frozenset[str]:
    """Deduplicated set of candidate roots; always contains `word`."""
    return frozenset(stem_variants(word))


def stem_all(words: list[str]) -> list[str]:
    """Stem variants of every word, word order kept, duplicates dropped."""
    ordered: list[str] = []
    for word in words:
        for candidate in stem_variants(word):
            if candidate not in ordered:
                ordered.append(candidate)
    return ordered


def has_instrumental_suffix(word: str) -> bool:
    """True when the word ends in an instrumental case suffix ("tejjel", "cukorral")."""
    return bool(_INSTRUMENTAL.match(word.lower()))

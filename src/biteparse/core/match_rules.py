"""Scoring rules for matching phrases against food and dish dictionaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional, Sequence

from biteparse.core.models import (
    CompoundFood,
    DishSearchHit,
    FoodItem,
    MatchResult,
    Region,
)
from biteparse.core.normalize import normalize
from biteparse.core.stemmer import stem_variants

logger = logging.getLogger(__name__)

MIN_SCORE = 0.3
"""Confidence floor below which a food match is discarded."""

MIN_PREFIX_LENGTH = 3
WORD_OVERLAP_WEIGHT = 0.8


@dataclass(frozen=True)
class ScoringRule:
    """A named scoring function; returns None when the rule does not apply."""

    name: str
    score: Callable[[str, str], Optional[float]]


def exact_match(query: str, name: str) -> Optional[float]:
    return 1.0 if query == name else None


def query_contains_name(query: str, name: str) -> Optional[float]:
    if name and name in query:
        return max(0.9, len(name) / len(query))
    return None


def name_contains_query(query: str, name: str) -> Optional[float]:
    if len(query) >= MIN_PREFIX_LENGTH and query in name:
        return max(0.7, len(query) / len(name))
    return None


@lru_cache(maxsize=4096)
def _word_stems(word: str) -> tuple[str, ...]:
    return tuple(normalize(v) for v in stem_variants(word))


def _stems_match(query_stems: Sequence[str], name_stems: Sequence[str]) -> bool:
    for qv in query_stems:
        for nv in name_stems:
            if qv == nv:
                return True
            if len(qv) >= MIN_PREFIX_LENGTH and nv.startswith(qv):
                return True
            if len(nv) >= MIN_PREFIX_LENGTH and qv.startswith(nv):
                return True
    return False


def word_overlap(query: str, name: str) -> Optional[float]:
    """
    Stem-aware word overlap.

    A query word counts once when any of its stems equals, or is a prefix of,
    any stem of any name word (either direction, prefix length >= 3).
    """
    query_words = query.split()
    name_words = name.split()
    if not query_words or not name_words:
        return None
    # One hit per query word, not per matching word pair; keeps the score <= WORD_OVERLAP_WEIGHT.
    matches = 0
    for q_word in query_words:
        q_stems = _word_stems(q_word)
        if any(_stems_match(q_stems, _word_stems(n_word)) for n_word in name_words):
            matches += 1
    if matches == 0:
        return None
    return matches / max(len(query_words), len(name_words)) * WORD_OVERLAP_WEIGHT


# Highest priority first; the first rule that applies scores a (query, name) pair.
FOOD_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("exact", exact_match),
    ScoringRule("query_contains_name", query_contains_name),
    ScoringRule("name_contains_query", name_contains_query),
    ScoringRule("word_overlap", word_overlap),
)


class DictionaryMatcher:
    """
    Best-match lookup of a phrase in the food dictionary.

    Every accepted name of every item is scored with the first applicable rule
    from `rules`; an exact match ends the search immediately.
    """

    def __init__(
        self,
        foods: Sequence[FoodItem],
        min_score: float = MIN_SCORE,
        rules: Sequence[ScoringRule] = FOOD_RULES,
    ) -> None:
        self.foods = tuple(foods)
        self.min_score = min_score
        self.rules = tuple(rules)
        self._index = [(food, name, normalize(name)) for food in self.foods for name in food.names]

    def match(self, phrase: str) -> MatchResult | None:
        query = normalize((phrase or "").strip())
        if not query:
            return None

        best: MatchResult | None = None
        for food, name, normalized_name in self._index:
            for rule in self.rules:
                score = rule.score(query, normalized_name)
                if score is None:
                    continue
                if rule.name == "exact":
                    return MatchResult(item=food, score=1.0, name=name, rule=rule.name)
                if best is None or score > best.score:
                    best = MatchResult(item=food, score=score, name=name, rule=rule.name)
                break

        if best and best.score >= self.min_score:
            return best
        logger.debug("No match above %.2f for %r", self.min_score, phrase)
        return None

    def search(self, query: str, limit: int = 15) -> list[FoodItem]:
        """
        Prefix-friendly ranking for search-as-you-type.

        Args:
            query: Partial user input
            limit: Maximum number of items returned

        Returns:
            Items with a positive score, best first; [] for queries under 2 characters
        """
        if not query or len(query.strip()) < 2:
            return []
        normalized_query = normalize(query.strip())
        query_variants = stem_variants(normalized_query)

        scored: list[tuple[FoodItem, float]] = []
        for food in self.foods:
            best_score = 0.0
            for name in food.names:
                best_score = max(
                    best_score, incremental_score(normalized_query, query_variants, normalize(name))
                )
            if best_score > 0:
                scored.append((food, best_score))

        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [food for food, _ in scored[:limit]]


def incremental_score(query: str, query_variants: Sequence[str], name: str) -> float:
    score = 0.0
    for variant in query_variants:
        if name.startswith(variant):
            score = max(score, 0.95)
        if len(variant) >= MIN_PREFIX_LENGTH and variant in name:
            score = max(score, 0.8)
    if query in name:
        score = max(score, 0.9)
    if len(name) >= MIN_PREFIX_LENGTH and name in query:
        score = max(score, 0.85)
    return score


HOME_REGION_BONUS = 5


class CompoundDishMatcher:
    """
    Ranked search over traditional dishes and their recipe variants.

    Unlike DictionaryMatcher this returns every dish with a positive score so
    callers can list alternatives.
    """

    def __init__(
        self,
        dishes: Sequence[CompoundFood],
        home_region: Region | None = Region.ERDELYI,
    ) -> None:
        self.dishes = tuple(dishes)
        self.home_region = home_region
        self._by_id = {dish.id: dish for dish in self.dishes}

    def get(self, dish_id: str) -> CompoundFood | None:
        return self._by_id.get(dish_id)

    def search(self, query: str) -> list[DishSearchHit]:
        if not query or len(query.strip()) < 2:
            return []
        normalized_query = normalize(query.strip())
        query_variants = stem_variants(normalized_query)

        hits: list[DishSearchHit] = []
        for dish in self.dishes:
            score = self.score(dish, normalized_query, query_variants)
            if score > 0:
                hits.append(DishSearchHit(dish=dish, score=score))
        hits.sort(key=lambda hit: hit.score, reverse=True)
        return hits

    def score(self, dish: CompoundFood, query: str, query_variants: Sequence[str]) -> float:
        best = _base_name_score(query, normalize(dish.base_name))

        for name in dish.names:
            normalized_name = normalize(name)
            if normalized_name == query:
                best = max(best, 100)
                break
            best = max(best, _alias_score(query, query_variants, normalized_name))

        if best == 0:
            best = _word_overlap_score(query, [normalize(n) for n in dish.names])

        for variant in dish.variants:
            if len(query) >= 4 and query in normalize(variant.variant_name):
                best = max(best, 85)
            if any(normalize(tag) == query for tag in variant.tags):
                best = max(best, 60)

        if best > 0 and self.home_region is not None and dish.region == self.home_region:
            best += HOME_REGION_BONUS
        return best


def _base_name_score(query: str, base_name: str) -> float:
    if base_name == query:
        return 100
    if base_name.startswith(query):
        return 95
    if query in base_name:
        return 85
    return 0


def _alias_score(query: str, query_variants: Sequence[str], name: str) -> float:
    if name.startswith(query):
        score = 92.0
    elif query in name:
        score = 82.0
    elif len(name) >= MIN_PREFIX_LENGTH and name in query:
        score = 78.0
    else:
        score = 0.0
    for variant in query_variants:
        if len(variant) < MIN_PREFIX_LENGTH:
            continue
        if name.startswith(variant):
            score = max(score, 88)
        elif variant in name:
            score = max(score, 75)
    return score


def _word_overlap_score(query: str, names: Sequence[str]) -> float:
    query_words = [w for w in query.split() if len(w) >= 2]
    if not query_words:
        return 0
    best = 0.0
    for name in names:
        name_words = name.split()
        matched = 0
        for q_word in query_words:
            q_stems = _word_stems(q_word)
            n_stems = [nw for n_word in name_words for nw in _word_stems(n_word)]
            if any(qs in nw or nw in qs for qs in q_stems for nw in n_stems):
                matched += 1
        if matched:
            best = max(best, 50 + (matched / len(query_words)) * 30)
    return best

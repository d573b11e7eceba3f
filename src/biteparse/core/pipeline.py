"""Recognition orchestration: wires splitting, matching, quantities and nutrition together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from biteparse.core.confidence import recognition_confidence
from biteparse.core.dictionary import load_compound_foods, load_foods
from biteparse.core.interfaces import (
    DishMatcher,
    FoodMatcher,
    PhraseSplitter,
    QuantityExtractor,
)
from biteparse.core.match_rules import MIN_SCORE, CompoundDishMatcher, DictionaryMatcher
from biteparse.core.models import (
    CompoundFood,
    DishSearchHit,
    FoodItem,
    MatchResult,
    RecognitionResult,
    RecognizedComponent,
    Region,
)
from biteparse.core.nutrition import scale, sum_nutrition
from biteparse.core.quantity import extract_quantity
from biteparse.core.splitter import is_filler, split_phrases
from biteparse.core.stemmer import stem_all, stem_variants

logger = logging.getLogger(__name__)

MIN_INPUT_LENGTH = 2
MIN_WORD_LENGTH = 3
MAX_SEARCH_RESULTS = 15


class RecognitionEngine:
    """
    Recognizes foods in free text: split -> match -> quantity -> nutrition -> aggregate.

    Dictionaries are injected and never modified, so one engine can serve
    concurrent callers. Stages can be swapped for testing.
    """

    def __init__(
        self,
        foods: Sequence[FoodItem],
        dishes: Sequence[CompoundFood] = (),
        min_score: float = MIN_SCORE,
        max_results: int = MAX_SEARCH_RESULTS,
        home_region: Region | None = Region.ERDELYI,
        matcher: Optional[FoodMatcher] = None,
        dish_matcher: Optional[DishMatcher] = None,
        splitter: Optional[PhraseSplitter] = None,
        quantity_extractor: Optional[QuantityExtractor] = None,
    ) -> None:
        self.foods = tuple(foods)
        self.dishes = tuple(dishes)
        self.max_results = max_results
        self.matcher = matcher or DictionaryMatcher(self.foods, min_score=min_score)
        self.dish_matcher = dish_matcher or CompoundDishMatcher(
            self.dishes, home_region=home_region
        )
        self.splitter = splitter or split_phrases
        self.quantity_extractor = quantity_extractor or extract_quantity

    @classmethod
    def from_templates(
        cls,
        templates_path: str | Path | None = None,
        min_score: float = MIN_SCORE,
        max_results: int = MAX_SEARCH_RESULTS,
        home_region: Region | None = Region.ERDELYI,
    ) -> RecognitionEngine:
        """Build an engine from the bundled dictionaries or a custom templates directory."""
        return cls(
            foods=load_foods(templates_path),
            dishes=load_compound_foods(templates_path),
            min_score=min_score,
            max_results=max_results,
            home_region=home_region,
        )

    def recognize_compound(self, text: str) -> RecognitionResult | None:
        """
        Recognize every food mentioned in a free-text description.

        Args:
            text: User-typed or transcribed description (e.g., "kávé kecsketejjel")

        Returns:
            Aggregated result, or None when the text is too short or nothing matched
        """
        if not text or len(text.strip()) < MIN_INPUT_LENGTH:
            return None

        phrases = self.splitter(text.strip())
        logger.debug("Split %r into %s", text, phrases)

        components: list[RecognizedComponent] = []
        seen_ids: set[str] = set()
        for phrase in phrases:
            match = self._match_phrase(phrase)
            if match is None:
                logger.debug("No food recognized in phrase %r", phrase)
                continue
            if match.item.id in seen_ids:
                continue
            seen_ids.add(match.item.id)
            components.append(self._build_component(phrase, match))

        if not components:
            return None

        return RecognitionResult(
            components=tuple(components),
            total_nutrition=sum_nutrition(c.nutrition for c in components),
            combined_name=" + ".join(c.food.canonical_name for c in components),
            combined_image=components[0].food.image,
            confidence=recognition_confidence(len(components), len(phrases)),
            phrases=tuple(phrases),
        )

    def search_incremental(self, query: str) -> list[FoodItem]:
        """Autocomplete ranking; [] for queries under two characters."""
        return self.matcher.search(query, limit=self.max_results)

    def search_dishes(self, query: str) -> list[DishSearchHit]:
        return self.dish_matcher.search(query)

    def get_dish(self, dish_id: str) -> CompoundFood | None:
        return self.dish_matcher.get(dish_id)

    def _match_phrase(self, phrase: str) -> MatchResult | None:
        match = self.matcher.match(phrase)
        if match:
            return match

        words = phrase.lower().split()
        for candidate in stem_all(words):
            match = self.matcher.match(candidate)
            if match:
                return match

        for word in words:
            if len(word) < MIN_WORD_LENGTH or is_filler(word):
                continue
            for variant in stem_variants(word):
                match = self.matcher.match(variant)
                if match:
                    return match
        return None

    def _build_component(self, phrase: str, match: MatchResult) -> RecognizedComponent:
        quantity = self.quantity_extractor(phrase, match.item)
        return RecognizedComponent(
            food=match.item,
            portion=quantity.portion,
            portion_label=quantity.label,
            matched_text=phrase,
            nutrition=scale(match.item.per_100, quantity.portion),
        )

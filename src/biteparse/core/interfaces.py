"""Protocol definitions for the pluggable recognition stages."""

from typing import Protocol, runtime_checkable

from biteparse.core.models import (
    CompoundFood,
    DishSearchHit,
    FoodItem,
    MatchResult,
    Quantity,
)


@runtime_checkable
class FoodMatcher(Protocol):
    """FoodMatcher protocol: find the dictionary item a phrase refers to."""

    def match(self, phrase: str) -> MatchResult | None:
        """
        Return the best-scoring item for a phrase.

        Args:
            phrase: One single-food phrase (e.g., "2 tojás")

        Returns:
            MatchResult above the confidence floor, or None
        """
        ...

    def search(self, query: str, limit: int = 15) -> list[FoodItem]:
        """
        Rank items for search-as-you-type.

        Args:
            query: Partial user input
            limit: Maximum number of results

        Returns:
            Items ordered by descending score
        """
        ...


@runtime_checkable
class DishMatcher(Protocol):
    """DishMatcher protocol: ranked lookup of compound dishes."""

    def search(self, query: str) -> list[DishSearchHit]: ...

    def get(self, dish_id: str) -> CompoundFood | None: ...


class PhraseSplitter(Protocol):
    """PhraseSplitter protocol: break a description into single-food phrases."""

    def __call__(self, text: str) -> list[str]: ...


class QuantityExtractor(Protocol):
    """QuantityExtractor protocol: infer the portion of a matched item from its phrase."""

    def __call__(self, text: str, item: FoodItem) -> Quantity: ...

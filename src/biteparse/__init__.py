"""biteparse: free-text food description recognition with nutrition totals."""

__version__ = "0.1.0"

# Core exports
from biteparse.core.models import (
    FoodItem,
    FoodCategory,
    Unit,
    Nutrition,
    CompoundFood,
    CompoundFoodVariant,
    DishCategory,
    Region,
    MatchResult,
    Quantity,
    RecognizedComponent,
    RecognitionResult,
    DishSearchHit,
)
from biteparse.core.interfaces import (
    FoodMatcher,
    DishMatcher,
    PhraseSplitter,
    QuantityExtractor,
)
from biteparse.core.dictionary import DictionaryError, load_foods, load_compound_foods
from biteparse.core.normalize import normalize
from biteparse.core.stemmer import stem
from biteparse.core.quantity import extract_quantity
from biteparse.core.splitter import split_phrases
from biteparse.core.match_rules import DictionaryMatcher, CompoundDishMatcher
from biteparse.core.nutrition import scale, sum_nutrition, variant_nutrition
from biteparse.core.pipeline import RecognitionEngine

__all__ = [
    "FoodItem",
    "FoodCategory",
    "Unit",
    "Nutrition",
    "CompoundFood",
    "CompoundFoodVariant",
    "DishCategory",
    "Region",
    "MatchResult",
    "Quantity",
    "RecognizedComponent",
    "RecognitionResult",
    "DishSearchHit",
    "FoodMatcher",
    "DishMatcher",
    "PhraseSplitter",
    "QuantityExtractor",
    "DictionaryError",
    "load_foods",
    "load_compound_foods",
    "normalize",
    "stem",
    "extract_quantity",
    "split_phrases",
    "DictionaryMatcher",
    "CompoundDishMatcher",
    "scale",
    "sum_nutrition",
    "variant_nutrition",
    "RecognitionEngine",
]

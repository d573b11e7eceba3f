"""Core immutable data models for dictionaries and recognition results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Unit(str, Enum):
    """Measurement unit of a food item's portion."""

    GRAM = "g"
    MILLILITER = "ml"
    PIECE = "db"


class FoodCategory(str, Enum):
    """Closed set of atomic food categories."""

    COFFEE_TEA = "Kávé & Tea"
    DAIRY = "Tej & Tejtermék"
    FRUIT = "Gyümölcs"
    VEGETABLE = "Zöldség"
    MEAT_FISH = "Hús & Hal"
    BAKERY_GRAIN = "Pékáru & Gabona"
    SWEETS_SNACKS = "Édesség & Snack"
    DRINK = "Ital"
    OIL_FAT = "Olaj & Zsír"
    SPICE_SAUCE = "Fűszer & Szósz"
    EGG = "Tojás"
    LEGUME_SEED = "Hüvelyes & Mag"
    OTHER = "Egyéb"


class DishCategory(str, Enum):
    """Closed set of compound dish categories."""

    PICKLE_PRESERVE = "Savanyúság & Konzerv"
    SALAD_SPREAD = "Saláta & Krém"
    SOUP = "Leves"
    MAIN = "Főétel"
    STARTER_SAUCE = "Előétel & Mártás"
    PASTRY = "Pékáru & Tészta"
    DESSERT = "Desszert"


class Region(str, Enum):
    """Regional origin tag of a compound dish."""

    ERDELYI = "erdélyi"
    MAGYAR = "magyar"
    ROMAN = "román"
    NEMZETKOZI = "nemzetközi"
    BALKANI = "balkáni"


@dataclass(frozen=True)
class Nutrition:
    """Macronutrient totals, either per 100 units or for an actual portion."""

    calories: float = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True)
class FoodItem:
    """
    One atomic food or drink from the reference dictionary.

    Loaded once from static data and never changed afterwards.
    """

    id: str
    """Stable key (e.g., 'tojas')."""

    names: tuple[str, ...]
    """Accepted surface forms; the first one is canonical."""

    category: FoodCategory
    unit: Unit

    default_portion: float
    """Default serving in `unit`; for count items, the piece weight in grams."""

    portion_label: str
    """Human-readable default serving (e.g., '1 db közepes (60g)')."""

    per_100: Nutrition
    """Nutrition per 100 g or 100 ml."""

    image: str = ""
    """Glyph shown next to the item."""

    @property
    def canonical_name(self) -> str:
        return self.names[0]


@dataclass(frozen=True)
class CompoundFoodVariant:
    """One recipe variant of a traditional dish."""

    id: str
    variant_name: str
    description: str
    key_ingredients: tuple[str, ...]
    per_100: Nutrition
    default_portion_g: float
    portion_label: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompoundFood:
    """A traditional dish with several recipe variants."""

    id: str
    base_name: str
    names: tuple[str, ...]
    category: DishCategory
    region: Region
    description: str
    variants: tuple[CompoundFoodVariant, ...]
    default_variant_id: str
    image: str = ""

    @property
    def default_variant(self) -> CompoundFoodVariant:
        variant = self.get_variant(self.default_variant_id)
        if variant is None:
            raise ValueError(f"Dish '{self.id}' has no variant '{self.default_variant_id}'")
        return variant

    def get_variant(self, variant_id: str) -> Optional[CompoundFoodVariant]:
        return next((v for v in self.variants if v.id == variant_id), None)


@dataclass(frozen=True)
class MatchResult:
    """Best dictionary match for a phrase."""

    item: FoodItem
    score: float
    name: str = ""
    """Surface name that produced the score."""

    rule: str = ""
    """Name of the scoring rule that fired."""


@dataclass(frozen=True)
class Quantity:
    """Portion inferred from a phrase."""

    portion: float
    label: str
    remaining_text: str


@dataclass(frozen=True)
class RecognizedComponent:
    """One matched food inside a recognized description."""

    food: FoodItem
    portion: float
    """Actual portion in grams or milliliters."""

    portion_label: str
    matched_text: str
    """The phrase that produced this component."""

    nutrition: Nutrition


@dataclass(frozen=True)
class RecognitionResult:
    """Aggregated outcome of recognizing a free-text food description."""

    components: tuple[RecognizedComponent, ...]
    total_nutrition: Nutrition
    combined_name: str
    combined_image: str
    confidence: float
    """Share of phrases that produced a component (0-1]."""

    phrases: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DishSearchHit:
    """A compound dish returned by a dish search, with its score."""

    dish: CompoundFood
    score: float

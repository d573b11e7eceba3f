"""Portion scaling and summing of macronutrients."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from biteparse.core.models import CompoundFoodVariant, Nutrition

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fat")


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round like a pocket calculator (2.5 -> 3), not like `round()` (2.5 -> 2).

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value; an int-valued float when digits is 0
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def scale(per_100: Nutrition, portion: float) -> Nutrition:
    """Nutrition for `portion` grams/milliliters of a food with the given per-100 values."""
    multiplier = portion / 100
    return Nutrition(
        calories=int(round_half_up(per_100.calories * multiplier)),
        protein=round_half_up(per_100.protein * multiplier, 1),
        carbs=round_half_up(per_100.carbs * multiplier, 1),
        fat=round_half_up(per_100.fat * multiplier, 1),
    )


def sum_nutrition(items: Iterable[Nutrition]) -> Nutrition:
    """Element-wise sum; gram values are re-rounded to one decimal after each addition."""
    total = Nutrition(calories=0, protein=0.0, carbs=0.0, fat=0.0)
    for item in items:
        total = Nutrition(
            calories=total.calories + item.calories,
            protein=round_half_up(total.protein + item.protein, 1),
            carbs=round_half_up(total.carbs + item.carbs, 1),
            fat=round_half_up(total.fat + item.fat, 1),
        )
    return total


def variant_nutrition(variant: CompoundFoodVariant, portion_g: float | None = None) -> Nutrition:
    """Nutrition of a dish variant for `portion_g` grams (its default portion when omitted)."""
    grams = variant.default_portion_g if portion_g is None else portion_g
    return scale(variant.per_100, grams)

"""Tests for nutrition scaling and confidence scoring."""

import pytest

from biteparse.core.confidence import clamp, recognition_confidence
from biteparse.core.models import CompoundFoodVariant, Nutrition
from biteparse.core.nutrition import round_half_up, scale, sum_nutrition, variant_nutrition


def test_scale_rounds_half_up() -> None:
    chicken = Nutrition(calories=165, protein=31.0, carbs=0.0, fat=3.6)
    result = scale(chicken, 150)

    assert result.calories == 248
    assert result.protein == pytest.approx(46.5)
    assert result.carbs == 0
    assert result.fat == pytest.approx(5.4)


def test_round_half_up_differs_from_builtin_round() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.25, 1) == pytest.approx(0.3)
    assert round_half_up(-0.04, 1) == pytest.approx(0.0)


def test_sum_rerounds_each_addition() -> None:
    total = sum_nutrition(
        [
            Nutrition(calories=10, protein=0.1, carbs=0.2, fat=0.0),
            Nutrition(calories=5, protein=0.2, carbs=0.1, fat=0.0),
        ]
    )

    assert total.calories == 15
    assert total.protein == 0.3
    assert total.carbs == 0.3


def test_sum_of_nothing_is_zero() -> None:
    assert sum_nutrition([]) == Nutrition(calories=0, protein=0.0, carbs=0.0, fat=0.0)


def test_variant_nutrition_uses_default_portion() -> None:
    variant = CompoundFoodVariant(
        id="lecso-klasszikus",
        variant_name="Lecsó",
        description="",
        key_ingredients=("paprika", "paradicsom"),
        per_100=Nutrition(calories=60, protein=1.5, carbs=6.0, fat=3.5),
        default_portion_g=300,
        portion_label="1 tányér (~300g)",
    )

    assert variant_nutrition(variant).calories == 180
    assert variant_nutrition(variant, 150).calories == 90


def test_recognition_confidence() -> None:
    assert recognition_confidence(1, 2) == 0.5
    assert recognition_confidence(2, 2) == 1.0
    assert recognition_confidence(0, 0) == 0.0
    assert clamp(1.4) == 1.0
    assert clamp(-0.2) == 0.0

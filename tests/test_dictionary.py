"""Tests for dictionary loading and validation."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from biteparse.core.dictionary import DictionaryError, load_compound_foods, load_foods
from biteparse.core.models import FoodCategory, Region, Unit


def _food_entry(**overrides: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": "tej",
        "names": ["tej", "milk"],
        "category": "Tej & Tejtermék",
        "image": "🥛",
        "unit": "ml",
        "default_portion": 200,
        "portion_label": "1 pohár (200ml)",
        "per_100": {"calories": 50, "protein": 3.3, "carbs": 4.7, "fat": 1.8},
    }
    entry.update(overrides)
    return entry


def _dish_entry(**overrides: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": "lecso",
        "base_name": "Lecsó",
        "names": ["lecsó", "lecso"],
        "category": "Főétel",
        "region": "magyar",
        "description": "Paprikás-paradicsomos ragu.",
        "default_variant_id": "lecso-klasszikus",
        "variants": [
            {
                "id": "lecso-klasszikus",
                "variant_name": "Klasszikus lecsó",
                "key_ingredients": ["paprika", "paradicsom"],
                "per_100": {"calories": 60, "protein": 1.5, "carbs": 6, "fat": 3.5},
                "default_portion_g": 300,
                "portion_label": "1 tányér (~300g)",
                "tags": ["vegán"],
            }
        ],
    }
    entry.update(overrides)
    return entry


def _write_foods(path: Path, *entries: dict[str, Any]) -> None:
    (path / "foods.yaml").write_text(
        yaml.safe_dump({"foods": list(entries)}, allow_unicode=True), encoding="utf-8"
    )


def _write_dishes(path: Path, *entries: dict[str, Any]) -> None:
    (path / "compound_foods.yaml").write_text(
        yaml.safe_dump({"compound_foods": list(entries)}, allow_unicode=True), encoding="utf-8"
    )


def test_bundled_foods_load() -> None:
    foods = load_foods()
    ids = [f.id for f in foods]

    assert len(ids) == len(set(ids))
    assert "tojas" in ids
    assert all(f.names for f in foods)
    assert all(f.default_portion > 0 for f in foods)


def test_bundled_dishes_have_valid_default_variant() -> None:
    dishes = load_compound_foods()

    assert dishes
    for dish in dishes:
        assert dish.default_variant in dish.variants
    assert any(d.region == Region.ERDELYI for d in dishes)


def test_custom_directory(tmp_path: Path) -> None:
    _write_foods(tmp_path, _food_entry())
    foods = load_foods(tmp_path)

    assert len(foods) == 1
    milk = foods[0]
    assert milk.unit == Unit.MILLILITER
    assert milk.category == FoodCategory.DAIRY
    assert milk.per_100.calories == 50
    assert milk.names == ("tej", "milk")


def test_json_dictionaries(tmp_path: Path) -> None:
    (tmp_path / "foods.json").write_text(json.dumps([_food_entry()]), encoding="utf-8")
    (tmp_path / "compound_foods.json").write_text(
        json.dumps({"compound_foods": [_dish_entry()]}), encoding="utf-8"
    )

    assert load_foods(tmp_path)[0].id == "tej"
    dish = load_compound_foods(tmp_path)[0]
    assert dish.default_variant.variant_name == "Klasszikus lecsó"
    assert dish.default_variant.tags == ("vegán",)


def test_missing_dictionary(tmp_path: Path) -> None:
    with pytest.raises(DictionaryError):
        load_foods(tmp_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"names": []},
        {"unit": "cup"},
        {"category": "Snacks"},
        {"default_portion": 0},
        {"per_100": {"calories": -5, "protein": 0, "carbs": 0, "fat": 0}},
        {"per_100": {"calories": "sok", "protein": 0, "carbs": 0, "fat": 0}},
        {"id": None},
    ],
)
def test_invalid_food_is_rejected(tmp_path: Path, overrides: dict[str, Any]) -> None:
    _write_foods(tmp_path, _food_entry(**overrides))

    with pytest.raises(DictionaryError):
        load_foods(tmp_path)


def test_duplicate_food_ids_are_rejected(tmp_path: Path) -> None:
    _write_foods(tmp_path, _food_entry(), _food_entry(names=["milk"]))

    with pytest.raises(DictionaryError):
        load_foods(tmp_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"variants": []},
        {"default_variant_id": "lecso-kolbaszos"},
        {"base_name": ""},
        {"region": "skandináv"},
    ],
)
def test_invalid_dish_is_rejected(tmp_path: Path, overrides: dict[str, Any]) -> None:
    _write_dishes(tmp_path, _dish_entry(**overrides))

    with pytest.raises(DictionaryError):
        load_compound_foods(tmp_path)


def test_dictionary_error_is_value_error() -> None:
    assert issubclass(DictionaryError, ValueError)

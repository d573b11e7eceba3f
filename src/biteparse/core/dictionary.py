"""Loading and validation of the food and compound dish dictionaries."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from biteparse.core.models import (
    CompoundFood,
    CompoundFoodVariant,
    DishCategory,
    FoodCategory,
    FoodItem,
    Nutrition,
    Region,
    Unit,
)

logger = logging.getLogger(__name__)

FOODS_RESOURCE = "foods"
COMPOUND_FOODS_RESOURCE = "compound_foods"
_SUFFIXES = (".yaml", ".yml", ".json")


class DictionaryError(ValueError):
    """Reference data violates a dictionary invariant."""


def _parse(handle: Any, suffix: str) -> Any:
    if suffix == ".json":
        return json.load(handle)
    return yaml.safe_load(handle)


def _load_payload(directory: Path | None, resource_name: str) -> Any:
    if directory:
        for suffix in _SUFFIXES:
            file_path = directory / f"{resource_name}{suffix}"
            if file_path.exists():
                with file_path.open("r", encoding="utf-8") as handle:
                    return _parse(handle, suffix) or {}
        raise DictionaryError(f"No {resource_name} dictionary found in {directory}")

    for suffix in _SUFFIXES:
        resource = resources.files("biteparse.templates").joinpath(f"{resource_name}{suffix}")
        if resource.is_file():
            with resource.open("r", encoding="utf-8") as handle:
                return _parse(handle, suffix) or {}
    raise DictionaryError(f"Bundled {resource_name} dictionary is missing")


def _parse_nutrition(data: Any, owner: str) -> Nutrition:
    if not isinstance(data, dict):
        raise DictionaryError(f"{owner}: per_100 must be a mapping")
    values: dict[str, float] = {}
    for key in ("calories", "protein", "carbs", "fat"):
        try:
            value = float(data.get(key, 0) or 0)
        except (TypeError, ValueError) as exc:
            raise DictionaryError(f"{owner}: {key} is not a number") from exc
        if value < 0:
            raise DictionaryError(f"{owner}: {key} must be non-negative, got {value}")
        values[key] = value
    return Nutrition(**values)


def _parse_enum(enum_cls: Any, value: Any, owner: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise DictionaryError(f"{owner}: unknown {enum_cls.__name__} {value!r}") from exc


def _parse_names(data: Any, owner: str) -> tuple[str, ...]:
    names = tuple(str(n).strip() for n in (data or []) if n and str(n).strip())
    if not names:
        raise DictionaryError(f"{owner}: names must not be empty")
    return names


def _parse_portion(value: Any, owner: str) -> float:
    try:
        portion = float(value)
    except (TypeError, ValueError) as exc:
        raise DictionaryError(f"{owner}: default portion is not a number") from exc
    if portion <= 0:
        raise DictionaryError(f"{owner}: default portion must be positive")
    return portion


def parse_food(entry: dict[str, Any]) -> FoodItem:
    food_id = entry.get("id")
    if not food_id:
        raise DictionaryError(f"Food entry without id: {entry!r}")
    owner = f"food '{food_id}'"
    return FoodItem(
        id=str(food_id),
        names=_parse_names(entry.get("names"), owner),
        category=_parse_enum(FoodCategory, entry.get("category"), owner),
        unit=_parse_enum(Unit, entry.get("unit"), owner),
        default_portion=_parse_portion(entry.get("default_portion"), owner),
        portion_label=str(entry.get("portion_label") or ""),
        per_100=_parse_nutrition(entry.get("per_100"), owner),
        image=str(entry.get("image") or ""),
    )


def parse_variant(entry: dict[str, Any], dish_id: str) -> CompoundFoodVariant:
    variant_id = entry.get("id")
    if not variant_id:
        raise DictionaryError(f"dish '{dish_id}': variant without id")
    owner = f"variant '{variant_id}'"
    return CompoundFoodVariant(
        id=str(variant_id),
        variant_name=str(entry.get("variant_name") or variant_id),
        description=str(entry.get("description") or ""),
        key_ingredients=tuple(str(i) for i in entry.get("key_ingredients") or []),
        per_100=_parse_nutrition(entry.get("per_100"), owner),
        default_portion_g=_parse_portion(entry.get("default_portion_g"), owner),
        portion_label=str(entry.get("portion_label") or ""),
        tags=tuple(str(t) for t in entry.get("tags") or []),
    )


def parse_compound_food(entry: dict[str, Any]) -> CompoundFood:
    dish_id = entry.get("id")
    if not dish_id:
        raise DictionaryError(f"Dish entry without id: {entry!r}")
    owner = f"dish '{dish_id}'"
    variants = tuple(parse_variant(v, str(dish_id)) for v in entry.get("variants") or [])
    if not variants:
        raise DictionaryError(f"{owner}: variants must not be empty")
    _check_unique([v.id for v in variants], owner + " variant")

    default_variant_id = str(entry.get("default_variant_id") or "")
    if default_variant_id not in {v.id for v in variants}:
        raise DictionaryError(
            f"{owner}: default_variant_id {default_variant_id!r} is not one of its variants"
        )

    base_name = str(entry.get("base_name") or "")
    if not base_name:
        raise DictionaryError(f"{owner}: base_name is required")

    return CompoundFood(
        id=str(dish_id),
        base_name=base_name,
        names=_parse_names(entry.get("names") or [base_name], owner),
        category=_parse_enum(DishCategory, entry.get("category"), owner),
        region=_parse_enum(Region, entry.get("region"), owner),
        description=str(entry.get("description") or ""),
        variants=variants,
        default_variant_id=default_variant_id,
        image=str(entry.get("image") or ""),
    )


def _check_unique(ids: list[str], owner: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise DictionaryError(f"Duplicate {owner} id {item_id!r}")
        seen.add(item_id)


def load_foods(templates_path: str | Path | None = None) -> tuple[FoodItem, ...]:
    """
    Load and validate the food dictionary.

    Args:
        templates_path: Directory holding foods.yaml (or .json); bundled data when None

    Returns:
        Immutable tuple of FoodItem in file order

    Raises:
        DictionaryError: If the data is missing or violates an invariant
    """
    base_path = Path(templates_path) if templates_path else None
    payload = _load_payload(base_path, FOODS_RESOURCE)
    entries = payload.get("foods", []) if isinstance(payload, dict) else payload
    foods = tuple(parse_food(e) for e in entries or [] if isinstance(e, dict))
    _check_unique([f.id for f in foods], "food")
    logger.info("Loaded %d foods", len(foods))
    return foods


def load_compound_foods(templates_path: str | Path | None = None) -> tuple[CompoundFood, ...]:
    """
    Load and validate the compound dish dictionary.

    Raises:
        DictionaryError: If the data is missing or violates an invariant
    """
    base_path = Path(templates_path) if templates_path else None
    payload = _load_payload(base_path, COMPOUND_FOODS_RESOURCE)
    entries = payload.get("compound_foods", []) if isinstance(payload, dict) else payload
    dishes = tuple(parse_compound_food(e) for e in entries or [] if isinstance(e, dict))
    _check_unique([d.id for d in dishes], "dish")
    logger.info("Loaded %d compound dishes", len(dishes))
    return dishes

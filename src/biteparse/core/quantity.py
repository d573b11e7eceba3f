"""Portion extraction from explicit amounts and size words."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from biteparse.core.models import FoodItem, Quantity, Unit
from biteparse.core.nutrition import round_half_up

logger = logging.getLogger(__name__)

_NUMBER = r"(?<![\d.,])(\d+(?:[.,]\d+)?)"
_SERVING_WORDS = r"(?:adag|adagot|servings?|portions?)"


@dataclass(frozen=True)
class QuantityPattern:
    pattern: re.Pattern[str]
    kind: str
    """One of 'unit', 'count', 'serving', 'multiplier'."""

    multiplier: float = 1.0
    unit: str = ""


# First match wins: numeric units before counts, counts before bare multiplier words.
QUANTITY_PATTERNS: tuple[QuantityPattern, ...] = (
    QuantityPattern(
        re.compile(_NUMBER + r"\s*(?:ml|milliliters?)\b", re.I), "unit", 1, Unit.MILLILITER.value
    ),
    QuantityPattern(
        re.compile(_NUMBER + r"\s*(?:g|gr|grams?|gramm)\b", re.I), "unit", 1, Unit.GRAM.value
    ),
    QuantityPattern(
        re.compile(_NUMBER + r"\s*(?:dl|deciliters?)\b", re.I), "unit", 100, Unit.MILLILITER.value
    ),
    QuantityPattern(
        re.compile(_NUMBER + r"\s*(?:l|liters?|liter)\b", re.I), "unit", 1000, Unit.MILLILITER.value
    ),
    QuantityPattern(
        re.compile(_NUMBER + r"\s*(?:kg|kilograms?|kilo)\b", re.I), "unit", 1000, Unit.GRAM.value
    ),
    QuantityPattern(
        re.compile(
            r"(?<![\d.,])(\d+)(?:\s*(?:db|darab|pcs|pc|pieces?|x)\b|(?!\s*" + _SERVING_WORDS
            + r"\b)(?![\d.,]|\s*[\d.,]))",
            re.I,
        ),
        "count",
    ),
    QuantityPattern(re.compile(_NUMBER + r"\s*" + _SERVING_WORDS + r"\b", re.I), "serving"),
    QuantityPattern(re.compile(r"\b(?:dupla|double)\b", re.I), "multiplier", 2),
    QuantityPattern(re.compile(r"\b(?:tripla|triple)\b", re.I), "multiplier", 3),
)

SMALL_WORDS = re.compile(r"\b(?:kis|kicsi|small)\b", re.I)
LARGE_WORDS = re.compile(r"\b(?:nagy|large|big)\b", re.I)
SMALL_FACTOR = 0.7
LARGE_FACTOR = 1.5

MAX_PORTION = 100_000.0
"""Largest accepted amount in g or ml; anything above falls back to the default portion."""


def _parse_number(raw: str) -> float:
    return float(raw.replace(",", "."))


def format_amount(value: float) -> str:
    """Render 200.0 as '200' and 1.5 as '1.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _mass_unit(item: FoodItem) -> str:
    return Unit.GRAM.value if item.unit == Unit.PIECE else item.unit.value


def extract_quantity(text: str, item: FoodItem) -> Quantity:
    """
    Infer the consumed portion of `item` from a phrase.

    Explicit amounts win over size words; with neither present the item's
    default portion is returned and the text is left untouched.

    Args:
        text: Phrase that produced the match (e.g., "2dl kecsketej")
        item: The matched food

    Returns:
        Quantity with portion, human label and the text with the amount removed
    """
    for rule in QUANTITY_PATTERNS:
        match = rule.pattern.search(text)
        if not match:
            continue

        if rule.kind == "unit":
            amount = _parse_number(match.group(1))
            portion = amount * rule.multiplier
        elif rule.kind in ("count", "serving"):
            amount = _parse_number(match.group(1))
            portion = item.default_portion * amount
        else:
            amount = rule.multiplier
            portion = item.default_portion * amount

        if not math.isfinite(portion) or portion > MAX_PORTION:
            logger.debug("Ignoring implausible amount %.20s... for %s", match.group(0), item.id)
            return _default_quantity(text, item)

        if rule.kind == "unit":
            label = f"{format_amount(portion)}{rule.unit}"
        elif rule.kind == "serving":
            label = f"{format_amount(amount)} adag"
        else:
            label = f"{format_amount(amount)}x {item.portion_label}"

        remaining = (text[: match.start()] + text[match.end() :]).strip()
        return Quantity(portion=portion, label=label, remaining_text=" ".join(remaining.split()))

    if SMALL_WORDS.search(text):
        portion = round_half_up(item.default_portion * SMALL_FACTOR)
        return Quantity(
            portion=portion,
            label=f"small portion (~{format_amount(portion)}{_mass_unit(item)})",
            remaining_text=text,
        )
    if LARGE_WORDS.search(text):
        portion = round_half_up(item.default_portion * LARGE_FACTOR)
        return Quantity(
            portion=portion,
            label=f"large portion (~{format_amount(portion)}{_mass_unit(item)})",
            remaining_text=text,
        )

    return _default_quantity(text, item)


def _default_quantity(text: str, item: FoodItem) -> Quantity:
    return Quantity(portion=item.default_portion, label=item.portion_label, remaining_text=text)

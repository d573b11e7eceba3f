"""CLI helpers for biteparse."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser

from biteparse.app_logging import configure_logging
from biteparse.core.dictionary import DictionaryError
from biteparse.core.match_rules import MIN_SCORE
from biteparse.core.models import DishSearchHit, Region
from biteparse.core.nutrition import variant_nutrition
from biteparse.core.pipeline import MAX_SEARCH_RESULTS, RecognitionEngine

logger = logging.getLogger("biteparse.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="biteparse")
    parser.add_argument("--templates", default=None, help="Directory with foods/compound_foods")
    parser.add_argument("--min-score", type=float, default=MIN_SCORE)
    parser.add_argument(
        "--home-region",
        choices=[region.value for region in Region] + ["none"],
        default=Region.ERDELYI.value,
        help="Region whose dishes get a ranking bonus",
    )
    parser.add_argument("--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    recognize_cmd = subparsers.add_parser("recognize", help="Recognize foods in a description")
    recognize_cmd.add_argument("text", nargs="+")

    search_cmd = subparsers.add_parser("search", help="Autocomplete food search")
    search_cmd.add_argument("query", nargs="+")
    search_cmd.add_argument("--limit", type=int, default=MAX_SEARCH_RESULTS)

    dishes_cmd = subparsers.add_parser("dishes", help="Search traditional dishes")
    dishes_cmd.add_argument("query", nargs="+")

    batch_cmd = subparsers.add_parser("batch", help="Recognize a JSONL file of descriptions")
    batch_cmd.add_argument("file")
    batch_cmd.add_argument("--out", required=True)

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else args.log_level)

    try:
        engine = RecognitionEngine.from_templates(
            args.templates,
            min_score=args.min_score,
            max_results=getattr(args, "limit", MAX_SEARCH_RESULTS),
            home_region=None if args.home_region == "none" else Region(args.home_region),
        )
    except DictionaryError as exc:
        logger.error("Invalid dictionary: %s", exc)
        return 2

    if args.command == "recognize":
        result = engine.recognize_compound(" ".join(args.text))
        if result is None:
            logger.info("No food recognized")
            return 1
        _print_json(dataclass_to_dict(result))
        return 0

    if args.command == "search":
        foods = engine.search_incremental(" ".join(args.query))
        _print_json([{"id": f.id, "name": f.canonical_name, "unit": f.unit.value} for f in foods])
        return 0

    if args.command == "dishes":
        hits = engine.search_dishes(" ".join(args.query))
        _print_json([_dish_summary(hit) for hit in hits])
        return 0

    if args.command == "batch":
        try:
            records = _read_jsonl(args.file)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Cannot read %s: %s", args.file, exc)
            return 2
        output = []
        for record in records:
            text = str(record.get("text", ""))
            eaten_at = _parse_datetime(record.get("eaten_at"))
            result = engine.recognize_compound(text)
            output.append(
                {
                    "text": text,
                    "eaten_at": eaten_at.isoformat() if eaten_at else None,
                    "result": dataclass_to_dict(result),
                }
            )
        _write_jsonl(args.out, output)
        logger.info("Recognized %d descriptions", len(output))
        return 0

    return 1


def _dish_summary(hit: DishSearchHit) -> dict[str, Any]:
    variant = hit.dish.default_variant
    return {
        "id": hit.dish.id,
        "name": hit.dish.base_name,
        "score": hit.score,
        "default_variant": variant.id,
        "portion_label": variant.portion_label,
        "nutrition": dataclass_to_dict(variant_nutrition(variant)),
    }


def _print_json(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")


def _read_jsonl(path: str) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def _write_jsonl(path: str | Path, records: list[dict[str, Any]]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, ensure_ascii=False) + "\n")


def dataclass_to_dict(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)
        return {key: dataclass_to_dict(value) for key, value in data.items()}
    if isinstance(obj, (list, tuple)):
        return [dataclass_to_dict(value) for value in obj]
    if isinstance(obj, dict):
        return {key: dataclass_to_dict(value) for key, value in obj.items()}
    return obj


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return date_parser.parse(str(value))
    except (ValueError, OverflowError, TypeError):
        return None


if __name__ == "__main__":
    raise SystemExit(main())

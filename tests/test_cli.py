"""CLI tests."""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from biteparse.cli import _parse_datetime, dataclass_to_dict, main
from biteparse.core.models import Nutrition, Unit


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("biteparse")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


def test_recognize_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["recognize", "kávé", "kecsketejjel"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [c["food"]["id"] for c in payload["components"]] == ["espresso", "kecsketej"]
    assert payload["components"][1]["food"]["unit"] == "ml"
    assert payload["confidence"] == 1.0


def test_recognize_nothing_found() -> None:
    assert main(["recognize", "xyz123"]) == 1


def test_search_and_dishes(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["search", "tojas"]) == 0
    foods = json.loads(capsys.readouterr().out)
    assert foods[0]["id"] == "tojas"

    assert main(["dishes", "puliszka"]) == 0
    dishes = json.loads(capsys.readouterr().out)
    assert dishes[0]["id"] == "puliszka"
    assert dishes[0]["default_variant"] == "puliszka-sima"
    assert dishes[0]["nutrition"]["calories"] == 144


def test_invalid_templates_directory(tmp_path: Path) -> None:
    assert main(["--templates", str(tmp_path), "recognize", "kávé"]) == 2


def test_batch(tmp_path: Path) -> None:
    source = tmp_path / "meals.jsonl"
    source.write_text(
        "\n".join(
            [
                json.dumps({"text": "2 eggs with 80g ham", "eaten_at": "2024-03-01 08:30"}),
                "",
                json.dumps({"text": "xyz123", "eaten_at": "not a date"}),
            ]
        ),
        encoding="utf-8",
    )
    out = tmp_path / "out.jsonl"

    assert main(["batch", str(source), "--out", str(out)]) == 0

    records = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert len(records) == 2
    assert records[0]["eaten_at"] == "2024-03-01T08:30:00"
    assert [c["food"]["id"] for c in records[0]["result"]["components"]] == ["tojas", "sonka"]
    assert records[1]["eaten_at"] is None
    assert records[1]["result"] is None


def test_batch_missing_file(tmp_path: Path) -> None:
    assert main(["batch", str(tmp_path / "missing.jsonl"), "--out", str(tmp_path / "o")]) == 2


def test_dataclass_to_dict_converts_enums() -> None:
    assert dataclass_to_dict(Unit.PIECE) == "db"
    assert dataclass_to_dict(Nutrition(calories=1)) == {
        "calories": 1,
        "protein": 0.0,
        "carbs": 0.0,
        "fat": 0.0,
    }


def test_parse_datetime() -> None:
    assert _parse_datetime(None) is None
    assert _parse_datetime("garbage") is None
    parsed = _parse_datetime("2024-03-01T08:30:00Z")
    assert parsed is not None
    assert parsed.year == 2024


def test_home_region_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--home-region", "none", "dishes", "puliszka"]) == 0
    dishes = json.loads(capsys.readouterr().out)
    assert dishes[0]["score"] == 100


def test_log_level_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "warning", "search", "tojas"]) == 0

    assert logging.getLogger("biteparse").level == logging.WARNING
    assert "Loaded" not in capsys.readouterr().err

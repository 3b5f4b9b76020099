"""Tests for the CSV ingestion utilities in `data/ingest_foods.py`."""

from pathlib import Path

from data.ingest_foods import parse_foods_csv, seed_foods_from_csv
from data.foods_dataset import FOODS_DATA
from database import models, seed_foods

FIXTURE = str(Path(__file__).resolve().parent.parent / "data" / "fixtures" / "common_foods.csv")


def test_parse_foods_csv_skips_blank_and_duplicate_rows():
    rows = parse_foods_csv(FIXTURE)
    assert [row["fdc_id"] for row in rows] == [171688, 173705, 171705, 171411, 170567, 171284]


def test_parse_foods_csv_normalizes_values():
    rows = {row["fdc_id"]: row for row in parse_foods_csv(FIXTURE)}
    yogurt = rows[171284]
    assert yogurt["protein"] == 0.0
    assert yogurt["carbs"] == 3.6
    assert rows[171705]["translations"] == {"es": "Plátano", "fr": "Banane", "pt": "Banana"}


def test_builtin_catalog_seeding_is_idempotent(db):
    assert db.query(models.Food).count() == len(FOODS_DATA)
    assert seed_foods(db) == 0
    assert db.query(models.Food).count() == len(FOODS_DATA)


def test_seed_foods_from_csv_is_idempotent(db):
    added = seed_foods_from_csv(FIXTURE, session=db)
    assert added == 4
    assert db.query(models.Food).count() == len(FOODS_DATA) + 4

    assert seed_foods_from_csv(FIXTURE, session=db) == 0
    assert db.query(models.Food).count() == len(FOODS_DATA) + 4

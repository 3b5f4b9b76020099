"""Utilities to ingest food catalog CSV files into the application's database.

This module provides:
- parse_foods_csv(csv_path): returns a list of normalized food dicts
- seed_foods_from_csv(csv_path, session): idempotently seeds the foods table

The CSV is expected to carry `fdc_id`, `name`, `category` and per-100 g
nutrition columns `calories`, `protein`, `carbs`, `fat`. Optional
`name_es`, `name_fr`, `name_pt` columns become the translations map. Rows
without an fdc id or a name are skipped, and repeated fdc ids keep the
first occurrence.
"""
from __future__ import annotations

from typing import List, Dict, Optional
import json
import math
import pandas as pd

from database.database import WriteSessionLocal
from database import models
from core.logger import get_logger

logger = get_logger("data.ingest_foods")

NUTRIENT_COLUMNS = ("calories", "protein", "carbs", "fat")
TRANSLATION_COLUMNS = {"es": "name_es", "fr": "name_fr", "pt": "name_pt"}


def _number(val) -> float:
    """Coerce a CSV cell to float; blanks and junk become 0.0."""
    if val is None:
        return 0.0
    try:
        num = float(val)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(num) else num


def _text(val) -> Optional[str]:
    if val is None or (isinstance(val, float) and math.isnan(val)):
        return None
    text = str(val).strip()
    return text or None


def parse_foods_csv(csv_path: str) -> List[Dict]:
    """Parse the CSV and return a list of normalized food dictionaries.

    Args:
        csv_path: Path to the foods CSV file.

    Returns:
        List of food dictionaries with keys: fdc_id, name, category,
        calories, protein, carbs, fat, translations.
    """
    logger.info("Parsing foods CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8")
    df = df.rename(columns=lambda s: s.strip().lower())

    foods = []
    seen = set()
    for _, row in df.iterrows():
        name = _text(row.get("name"))
        fdc_raw = row.get("fdc_id")
        if not name or fdc_raw is None or (isinstance(fdc_raw, float) and math.isnan(fdc_raw)):
            logger.debug("Skipping row without fdc_id/name: %s", dict(row))
            continue
        fdc_id = int(fdc_raw)
        if fdc_id in seen:
            continue
        seen.add(fdc_id)

        translations = {}
        for lang, column in TRANSLATION_COLUMNS.items():
            value = _text(row.get(column)) if column in row.index else None
            if value:
                translations[lang] = value

        food = {
            "fdc_id": fdc_id,
            "name": name,
            "category": _text(row.get("category")) or "Other",
            "translations": translations,
        }
        for column in NUTRIENT_COLUMNS:
            food[column] = round(_number(row.get(column)), 1)
        foods.append(food)

    logger.info("Parsed %s foods from CSV", len(foods))
    return foods


def seed_foods_from_csv(csv_path: str, session=None) -> int:
    """Idempotently seed the foods table from the CSV file.

    If `session` is not supplied, a `WriteSessionLocal` session is used.
    Existing foods are matched by fdc id and skipped.

    Args:
        csv_path: Path to the foods CSV file.
        session: Optional SQLAlchemy session. If None, creates a new one.

    Returns:
        Number of foods added.
    """
    close_session = False
    if session is None:
        session = WriteSessionLocal()
        close_session = True
    try:
        added = 0
        for item in parse_foods_csv(csv_path):
            existing = session.query(models.Food).filter(models.Food.fdc_id == item["fdc_id"]).first()
            if existing:
                continue
            session.add(models.Food(
                fdc_id=item["fdc_id"],
                name=item["name"],
                category=item["category"],
                calories=item["calories"],
                protein=item["protein"],
                carbs=item["carbs"],
                fat=item["fat"],
                translations=json.dumps(item["translations"], ensure_ascii=False),
            ))
            added += 1
        if added:
            session.commit()
        logger.info("Seeded %s new foods into DB", added)
        return added
    finally:
        if close_session:
            session.close()


if __name__ == "__main__":
    import argparse

    p = argparse.ArgumentParser("Seed the food catalog from CSV into the DB")
    p.add_argument("csv_path", nargs="?", default="data/fixtures/common_foods.csv")
    args = p.parse_args()
    count = seed_foods_from_csv(args.csv_path)
    print(f"Done ({count} added)")

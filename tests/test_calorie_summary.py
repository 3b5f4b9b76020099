"""Tests for the daily calorie summary."""

from datetime import date, datetime, time

from core.repository import save
from database import models
from services.calorie_tracker import CalorieTracker, compute_remaining, day_bounds

DAY = datetime(2024, 5, 10)


def _food(db, client, calories, at, included=True, description="Food"):
    return save(db, models.FoodEntry(
        client_id=client.id,
        description=description,
        meal_type="lunch",
        calories=calories,
        original_calories=calories,
        is_included_in_calories=included,
        date=at,
    ))


def _custom(db, client, calories, at, description="Custom"):
    return save(db, models.CustomCalorieEntry(
        client_id=client.id,
        description=description,
        calories=calories,
        meal_type="snack",
        date=at,
    ))


def test_day_bounds_cover_whole_day():
    start, end = day_bounds(date(2024, 5, 10))
    assert start == datetime(2024, 5, 10, 0, 0, 0)
    assert end == datetime(2024, 5, 10, 23, 59, 59, 999999)
    assert day_bounds(datetime(2024, 5, 10, 15, 30)) == (start, end)


def test_day_bounds_are_fresh_per_call():
    first = day_bounds(date(2024, 5, 10))
    second = day_bounds(date(2024, 5, 11))
    assert first[0].day == 10 and second[0].day == 11


def test_compute_remaining_never_negative():
    assert compute_remaining(2000, 500) == 1500
    assert compute_remaining(2000, 2500) == 0
    assert compute_remaining(2000, 2000) == 0


def test_summary_aggregates_included_food_and_custom(db, client_record):
    _food(db, client_record, 300, DAY.replace(hour=8))
    _food(db, client_record, 500, DAY.replace(hour=12), included=False)
    _custom(db, client_record, 200, DAY.replace(hour=15))

    summary = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())

    assert summary["goal"] == 2000
    assert summary["total"] == 500
    assert summary["breakdown"] == {"food_entries": 300, "custom_entries": 200}
    assert summary["remaining"] == 1500
    assert [item["calories"] for item in summary["items"]] == [200, 300]
    assert all(item["calories"] != 500 for item in summary["items"])


def test_summary_items_newest_first_and_tagged(db, client_record):
    breakfast = _food(db, client_record, 400, DAY.replace(hour=8), description="Oats")
    snack = _custom(db, client_record, 150, DAY.replace(hour=10), description="Bar")
    dinner = _food(db, client_record, 700, DAY.replace(hour=19), description="Pasta")

    items = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())["items"]

    assert [(item["type"], item["id"]) for item in items] == [
        ("food", dinner.id), ("custom", snack.id), ("food", breakfast.id),
    ]
    assert items[0]["is_included_in_calories"] is True
    assert "is_included_in_calories" not in items[1]


def test_summary_ties_keep_food_before_custom(db, client_record):
    noon = DAY.replace(hour=12)
    custom = _custom(db, client_record, 100, noon)
    food = _food(db, client_record, 200, noon)

    items = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())["items"]

    assert [(item["type"], item["id"]) for item in items] == [("food", food.id), ("custom", custom.id)]


def test_summary_window_includes_day_edges_only(db, client_record):
    _food(db, client_record, 100, datetime.combine(DAY.date(), time.min))
    _food(db, client_record, 200, datetime.combine(DAY.date(), time.max))
    _food(db, client_record, 400, datetime(2024, 5, 9, 23, 59, 59))
    _custom(db, client_record, 800, datetime(2024, 5, 11, 0, 0, 0))

    summary = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())

    assert summary["total"] == 300


def test_summary_ignores_other_clients(db, trainer, client_record):
    other = save(db, models.Client(trainer_id=trainer.id, name="Other", email="other@example.com"))
    _food(db, other, 900, DAY.replace(hour=9))
    _custom(db, client_record, 250, DAY.replace(hour=9))

    summary = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())

    assert summary["total"] == 250


def test_summary_remaining_clamps_at_zero(db, client_record):
    _food(db, client_record, 1500, DAY.replace(hour=12))
    _custom(db, client_record, 1000, DAY.replace(hour=18))

    summary = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())

    assert summary["total"] == 2500
    assert summary["remaining"] == 0


def test_summary_is_idempotent(db, client_record):
    _food(db, client_record, 300, DAY.replace(hour=8))
    _custom(db, client_record, 200, DAY.replace(hour=9))
    tracker = CalorieTracker(db)

    assert tracker.get_calorie_summary_by_date(client_record.id, DAY) == tracker.get_calorie_summary_by_date(
        client_record.id, DAY
    )


def test_empty_day(db, client_record):
    summary = CalorieTracker(db).get_calorie_summary_by_date(client_record.id, DAY.date())
    assert summary == {
        "goal": 2000,
        "total": 0,
        "remaining": 2000,
        "breakdown": {"food_entries": 0, "custom_entries": 0},
        "items": [],
    }


def test_summary_uses_override_goal(db, client_record):
    tracker = CalorieTracker(db)
    tracker.set_calorie_goal(client_record.id, 1600)
    _custom(db, client_record, 600, DAY.replace(hour=9))

    summary = tracker.get_calorie_summary_by_date(client_record.id, DAY.date())

    assert summary["goal"] == 1600
    assert summary["remaining"] == 1000

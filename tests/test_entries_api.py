"""API tests for food entries, custom calorie entries and the daily summary."""

import pytest

from core.repository import save
from database import models


@pytest.fixture
def headers(client_record):
    return {"X-Client-Id": str(client_record.id)}


def _log_food(api, headers, **fields):
    body = {"description": "Rice bowl", "meal_type": "lunch", "calories": 300, "date": "2024-05-10T12:00:00"}
    body.update(fields)
    response = api.post("/api/food-entries", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_food_entry_defaults_to_included(api, headers):
    entry = _log_food(api, headers)
    assert entry["is_included_in_calories"] is True
    assert entry["original_calories"] == 300


def test_food_entry_from_catalog_scales_by_quantity(api, headers, db):
    chicken = db.query(models.Food).filter(models.Food.fdc_id == 171688).one()
    entry = _log_food(api, headers, calories=None, description=None, food_id=chicken.id, quantity_g=200)

    assert entry["description"] == "Chicken breast"
    assert entry["calories"] == 330
    assert entry["protein"] == 62.0


def test_food_entry_needs_calories_or_food(api, headers):
    response = api.post("/api/food-entries", json={"description": "Mystery", "meal_type": "lunch"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "calories"}


def test_summary_reflects_entries(api, headers):
    _log_food(api, headers, calories=300)
    _log_food(api, headers, calories=500, is_included_in_calories=False)
    response = api.post(
        "/api/custom-calories",
        json={"description": "Protein bar", "calories": 200, "meal_type": "snack", "date": "2024-05-10T16:00:00"},
        headers=headers,
    )
    assert response.status_code == 201

    summary = api.get("/api/calories/summary/2024-05-10", headers=headers).json()

    assert summary["date"] == "2024-05-10"
    assert summary["total"] == 500
    assert summary["remaining"] == 1500
    assert summary["breakdown"] == {"food_entries": 300, "custom_entries": 200}
    assert [item["type"] for item in summary["items"]] == ["custom", "food"]


def test_trainer_view_matches_client_view(api, headers, client_record):
    _log_food(api, headers)
    own = api.get("/api/calories/summary/2024-05-10", headers=headers).json()
    trainer_view = api.get("/api/clients/%s/calories/summary/2024-05-10" % client_record.id).json()
    assert own == trainer_view


def test_excluding_an_entry_drops_it_from_total(api, headers):
    entry = _log_food(api, headers, calories=450)
    response = api.patch("/api/food-entries/%s" % entry["id"], json={"is_included_in_calories": False}, headers=headers)
    assert response.status_code == 200
    assert response.json()["is_included_in_calories"] is False

    summary = api.get("/api/calories/summary/2024-05-10", headers=headers).json()
    assert summary["total"] == 0

    listed = api.get("/api/client/food-entries", params={"date": "2024-05-10"}, headers=headers).json()
    assert [item["id"] for item in listed] == [entry["id"]]


def test_null_include_flag_is_ignored(api, headers):
    entry = _log_food(api, headers)
    response = api.patch("/api/food-entries/%s" % entry["id"], json={"is_included_in_calories": None}, headers=headers)
    assert response.json()["is_included_in_calories"] is True


def test_calorie_override_keeps_original(api, headers):
    entry = _log_food(api, headers, calories=300)
    response = api.patch("/api/food-entries/%s/calories" % entry["id"], json={"calories": 450}, headers=headers)

    assert response.status_code == 200
    assert response.json()["calories"] == 450
    assert response.json()["original_calories"] == 300


def test_calorie_override_is_bounded(api, headers):
    entry = _log_food(api, headers)
    response = api.patch("/api/food-entries/%s/calories" % entry["id"], json={"calories": 6000}, headers=headers)
    assert response.status_code == 422


def test_entries_of_another_client_are_not_found(api, headers, db, trainer):
    other = save(db, models.Client(trainer_id=trainer.id, name="Other", email="other@example.com"))
    entry = _log_food(api, {"X-Client-Id": str(other.id)})

    response = api.delete("/api/food-entries/%s" % entry["id"], headers=headers)

    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource"] == "FoodEntry"


def test_delete_food_entry(api, headers):
    entry = _log_food(api, headers)
    assert api.delete("/api/food-entries/%s" % entry["id"], headers=headers).status_code == 204
    assert api.get("/api/client/food-entries", headers=headers).json() == []


def test_custom_entry_lifecycle(api, headers):
    created = api.post(
        "/api/custom-calories",
        json={"description": "Smoothie", "calories": 250, "meal_type": "breakfast", "date": "2024-05-10T07:30:00"},
        headers=headers,
    ).json()

    updated = api.put("/api/custom-calories/%s" % created["id"], json={"calories": 300}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["calories"] == 300
    assert updated.json()["description"] == "Smoothie"

    listed = api.get("/api/custom-calories/2024-05-10", headers=headers).json()
    assert [item["calories"] for item in listed] == [300]
    assert api.get("/api/custom-calories/2024-05-11", headers=headers).json() == []

    assert api.delete("/api/custom-calories/%s" % created["id"], headers=headers).status_code == 204
    assert api.get("/api/custom-calories/2024-05-10", headers=headers).json() == []


@pytest.mark.parametrize("body", [
    {"description": "Zero", "calories": 0},
    {"description": "Huge", "calories": 5001},
    {"description": "Brunch", "calories": 300, "meal_type": "brunch"},
])
def test_custom_entry_validation(api, headers, body):
    response = api.post("/api/custom-calories", json=body, headers=headers)
    assert response.status_code == 422
    assert "validation_errors" in response.json()["error"]["details"]


def test_goal_endpoints(api, headers):
    assert api.get("/api/calories/goal", headers=headers).json() == {"goal": 2000, "override": None}

    response = api.put("/api/calories/goal", json={"goal": 2200}, headers=headers)

    assert response.status_code == 200
    assert response.json() == {"goal": 2200, "override": 2200}


def test_goal_out_of_range(api, headers):
    assert api.put("/api/calories/goal", json={"goal": 0}, headers=headers).status_code == 422
    assert api.put("/api/calories/goal", json={"goal": 10001}, headers=headers).status_code == 422


def test_goal_for_unknown_client(api):
    response = api.get("/api/calories/goal", headers={"X-Client-Id": "9999"})
    assert response.status_code == 404
    assert response.json()["error"]["details"] == {"resource": "Client", "id": 9999}


def test_missing_client_header(api):
    response = api.get("/api/calories/summary/2024-05-10")
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "X-Client-Id"}


def test_free_text_entry_needs_description(api, headers):
    response = api.post("/api/food-entries", json={"meal_type": "dinner", "calories": 400}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "description"}

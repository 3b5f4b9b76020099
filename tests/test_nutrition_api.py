"""API tests for the nutrition calculator endpoints."""

import pytest


def test_calculate_tdee(api):
    response = api.post("/api/calculate-tdee", json={
        "weight": 70, "height": 175, "age": 30, "gender": "male", "activity_level": "light",
    })
    assert response.status_code == 200
    assert response.json() == {"bmr": 814, "tdee": 1119, "activity_level": "light", "multiplier": 1.375}


def test_calculate_tdee_defaults_to_moderate(api):
    body = api.post("/api/calculate-tdee", json={"weight": 70, "height": 175, "age": 30, "gender": "female"}).json()
    assert body["activity_level"] == "moderate"
    assert body["tdee"] == 1004


def test_bmr_endpoint(api):
    response = api.post("/api/nutrition/bmr", json={"weight": 70, "height": 175, "age": 30, "gender": "female"})
    assert response.json() == {"bmr": 648}


def test_bmr_endpoint_rejects_zero_weight(api):
    response = api.post("/api/nutrition/bmr", json={"weight": 0, "height": 175, "age": 30, "gender": "male"})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["missing_fields"] == ["weight"]


def test_macros_with_explicit_distribution(api):
    response = api.post("/api/nutrition/macros", json={
        "calories": 2000, "distribution": {"protein": 0.3, "carbs": 0.4, "fat": 0.3},
    })
    assert response.status_code == 200
    body = response.json()
    assert (body["protein_g"], body["carbs_g"], body["fat_g"]) == (150, 200, 67)


def test_macros_with_goal(api):
    body = api.post("/api/nutrition/macros", json={"calories": 2000, "goal": "weight_loss"}).json()
    assert body["distribution"] == {"protein": 0.35, "carbs": 0.3, "fat": 0.35}
    assert body["protein_g"] == 175


def test_macros_rejects_bad_split(api):
    response = api.post("/api/nutrition/macros", json={
        "calories": 2000, "distribution": {"protein": 0.3, "carbs": 0.4, "fat": 0.2},
    })
    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == "distribution"


def test_macros_rejects_zero_calories(api):
    response = api.post("/api/nutrition/macros", json={"calories": 0})
    assert response.status_code == 400


@pytest.mark.parametrize("goal,protein", [("endurance", 0.25), ("strength", 0.35), ("unknown", 0.3)])
def test_macro_distribution_endpoint(api, goal, protein):
    body = api.get("/api/nutrition/macro-distribution/%s" % goal).json()
    assert body["goal"] == goal
    assert body["distribution"]["protein"] == protein


def test_caloric_adjustment_endpoint(api):
    body = api.post("/api/nutrition/caloric-adjustment", json={"tdee": 2400, "weight_goal": "loss", "rate": "fast"}).json()
    assert body["calories"] == 1650


def test_validate_endpoint(api):
    body = api.post("/api/nutrition/validate", json={"weight": 70, "gender": "male"}).json()
    assert body == {"valid": False, "missing_fields": ["height", "age"]}


def test_bmr_endpoint_rejects_nan_weight(api):
    response = api.post(
        "/api/nutrition/bmr",
        content='{"weight": NaN, "height": 175, "age": 30, "gender": "male"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["status_code"] == 400


def test_macros_endpoint_rejects_infinite_calories(api):
    response = api.post(
        "/api/nutrition/macros",
        content='{"calories": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "calories"}

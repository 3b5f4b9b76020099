"""API tests for trainers, client registration, plans and assignments."""

import pytest


@pytest.fixture
def trainer_json(api):
    response = api.post("/api/trainers", json={"name": "Alex Coach", "email": "coach@example.com"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def registered(api, trainer_json):
    response = api.post("/api/clients/register", json={
        "referral_code": trainer_json["referral_code"],
        "name": "Sam",
        "email": "sam.api@example.com",
        "weight": 70,
        "height": 175,
        "age": 30,
        "gender": "male",
        "activity_level": "light",
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_trainer_referral_code(trainer_json, api):
    assert trainer_json["referral_code"].startswith("TRAINER")
    other = api.post("/api/trainers", json={"name": "Bo", "email": "bo@example.com"}).json()
    assert other["referral_code"] != trainer_json["referral_code"]


def test_register_with_unknown_code(api):
    response = api.post("/api/clients/register", json={"referral_code": "NOPE", "name": "X", "email": "x@example.com"})
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "referral_code"}


def test_registered_client_belongs_to_trainer(api, trainer_json, registered):
    assert registered["trainer_id"] == trainer_json["id"]
    assert registered["status"] == "active"

    listing = api.get("/api/trainers/%s/clients" % trainer_json["id"]).json()
    assert listing["total_clients"] == 1
    assert listing["clients"][0]["email"] == "sam.api@example.com"


def test_client_tdee(api, registered):
    body = api.get("/api/clients/%s/tdee" % registered["id"]).json()
    assert body == {"client_id": registered["id"], "bmr": 814, "tdee": 1119, "activity_level": "light"}


def test_update_and_suspend_client(api, registered):
    updated = api.patch("/api/clients/%s" % registered["id"], json={"weight": 72, "activity_level": "active"}).json()
    assert updated["weight"] == 72
    assert updated["activity_level"] == "active"

    assert api.post("/api/clients/%s/suspend" % registered["id"]).json()["status"] == "inactive"
    assert api.post("/api/clients/%s/reactivate" % registered["id"]).json()["status"] == "active"
    assert api.post("/api/clients/9999/suspend").status_code == 404


def test_training_plan_drives_calorie_goal(api, trainer_json, registered):
    headers = {"X-Client-Id": str(registered["id"])}
    api.put("/api/calories/goal", json={"goal": 2200}, headers=headers)

    first = api.post("/api/training-plans", json={
        "trainer_id": trainer_json["id"], "name": "Cut", "daily_calories": 1800,
    }).json()
    second = api.post("/api/training-plans", json={
        "trainer_id": trainer_json["id"], "name": "Bulk", "daily_calories": 2800,
    }).json()

    path = "/api/clients/%s/training-plan" % registered["id"]
    assert api.post(path, json={"plan_id": first["id"]}).status_code == 201
    assert api.get("/api/calories/goal", headers=headers).json() == {"goal": 1800, "override": 2200}

    api.post(path, json={"plan_id": second["id"], "notes": "Off-season"})
    assert len(api.get(path).json()) == 1
    active = api.get(path + "/active").json()
    assert active["plan"]["name"] == "Bulk"
    assert active["assignment"]["notes"] == "Off-season"
    assert api.get("/api/calories/goal", headers=headers).json()["goal"] == 2800

    assert api.delete(path).status_code == 204
    assert api.get(path + "/active").json() == {"assignment": None, "plan": None}
    assert api.get("/api/calories/goal", headers=headers).json()["goal"] == 2200


def test_update_training_plan(api, trainer_json):
    plan = api.post("/api/training-plans", json={"trainer_id": trainer_json["id"], "name": "A", "daily_calories": 1800}).json()
    updated = api.patch("/api/training-plans/%s" % plan["id"], json={"daily_calories": None}).json()
    assert updated["daily_calories"] is None
    assert updated["name"] == "A"

    listed = api.get("/api/training-plans", params={"trainer_id": trainer_json["id"]}).json()
    assert [item["id"] for item in listed] == [plan["id"]]


def test_meal_plan_from_tdee_and_percentage(api, trainer_json):
    response = api.post("/api/meal-plans", json={
        "trainer_id": trainer_json["id"],
        "name": "Cut meals",
        "goal": "weight_loss",
        "base_calories": 2000,
        "adjustment_percentage": -20,
    })
    assert response.status_code == 201
    plan = response.json()
    assert plan["daily_calories"] == 1600
    assert (plan["protein_g"], plan["carbs_g"], plan["fat_g"]) == (140, 120, 62)


def test_meal_plan_keeps_explicit_macros(api, trainer_json):
    plan = api.post("/api/meal-plans", json={
        "trainer_id": trainer_json["id"], "name": "Custom", "daily_calories": 2000, "protein_g": 180,
    }).json()
    assert (plan["protein_g"], plan["carbs_g"], plan["fat_g"]) == (180, 200, 67)


def test_meal_and_supplement_assignment(api, trainer_json, registered):
    meal = api.post("/api/meal-plans", json={"trainer_id": trainer_json["id"], "name": "M", "daily_calories": 2000}).json()
    supplement = api.post("/api/supplement-plans", json={"trainer_id": trainer_json["id"], "name": "S"}).json()
    base = "/api/clients/%s" % registered["id"]

    assert api.post(base + "/meal-plan", json={"plan_id": meal["id"]}).status_code == 201
    assert api.post(base + "/supplement-plan", json={"plan_id": supplement["id"]}).status_code == 201

    assert api.get(base + "/meal-plan/active").json()["plan"]["daily_calories"] == 2000
    assert api.get(base + "/supplement-plan/active").json()["plan"]["name"] == "S"
    assert api.get("/api/calories/goal", headers={"X-Client-Id": str(registered["id"])}).json()["goal"] == 2000


def test_assign_unknown_plan(api, registered):
    response = api.post("/api/clients/%s/meal-plan" % registered["id"], json={"plan_id": 999})
    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource"] == "MealPlan"


def test_food_catalog(api):
    foods = api.get("/api/foods", params={"q": "pollo", "lang": "es"}).json()
    assert [food["fdc_id"] for food in foods] == [171688]
    assert foods[0]["display_name"] == "Pechuga de pollo"

    assert api.get("/api/foods/171688").json()["calories"] == 165
    assert api.get("/api/foods/1").status_code == 404
    assert api.get("/api/foods", params={"lang": "de"}).status_code == 422

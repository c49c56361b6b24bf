"""
Integration tests for the meal endpoints.

Each test runs against a fresh application with its own in-memory store:
- POST   /meals            create
- GET    /meals            list, ascending by meal time
- GET    /meals/{meal_id}  read
- PUT    /meals/{meal_id}  full replace
- DELETE /meals/{meal_id}  hard delete
- GET    /meals/summary    diet adherence statistics
- GET    /health-check
"""

from datetime import datetime, timedelta, timezone

from test_fixtures import (
    BASE_DAY,
    auth_headers,
    meal_payload,
    meal_times,
    parse_time,
    register_and_login,
)


def _create(client, headers, **kwargs) -> str:
    """Create a meal and return its id, found through the list endpoint."""
    payload = meal_payload(**kwargs)
    r = client.post("/meals", json=payload, headers=headers)
    assert r.status_code == 201
    meals = client.get("/meals", headers=headers).json()["meals"]
    matches = [
        m
        for m in meals
        if m["name"] == payload["name"]
        and parse_time(m["meal_time"]) == parse_time(payload["mealTime"])
    ]
    return matches[-1]["id"]


# =============================================================================
# MEAL CRUD
# =============================================================================


def test_create_meal_returns_201_empty(client):
    headers = auth_headers(register_and_login(client))

    r = client.post("/meals", json=meal_payload(), headers=headers)

    assert r.status_code == 201
    assert r.content == b""


def test_create_then_get_round_trip(client):
    """
    Verifies:
    - GET returns {meal} with every field the client sent
    - is_diet is a JSON boolean
    - timestamps are present
    """
    headers = auth_headers(register_and_login(client))
    meal_id = _create(client, headers, name="Salmon and rice", is_diet=True)

    r = client.get(f"/meals/{meal_id}", headers=headers)

    assert r.status_code == 200
    meal = r.json()["meal"]
    assert meal["id"] == meal_id
    assert meal["name"] == "Salmon and rice"
    assert meal["description"] == meal_payload()["description"]
    assert parse_time(meal["meal_time"]) == BASE_DAY.replace(tzinfo=timezone.utc)
    assert meal["is_diet"] is True
    assert meal["created_at"]
    assert meal["updated_at"]


def test_meal_time_with_offset_keeps_its_moment(client):
    """
    A meal time sent with a UTC offset reads back as the same instant.

    Verifies:
    - GET returns the time with an explicit offset
    - 10:00 at +02:00 comes back as 08:00 UTC
    """
    headers = auth_headers(register_and_login(client))
    sent = "2024-03-04T10:00:00+02:00"
    body = meal_payload(name="Late breakfast")
    body["mealTime"] = sent
    client.post("/meals", json=body, headers=headers)
    meal_id = client.get("/meals", headers=headers).json()["meals"][0]["id"]

    meal = client.get(f"/meals/{meal_id}", headers=headers).json()["meal"]

    returned = datetime.fromisoformat(meal["meal_time"].replace("Z", "+00:00"))
    assert returned.utcoffset() is not None
    assert returned == datetime.fromisoformat(sent)
    assert returned == datetime(2024, 3, 4, 8, 0, tzinfo=timezone.utc)


def test_list_meals_sorted_by_meal_time(client):
    headers = auth_headers(register_and_login(client))
    times = meal_times(4)
    for index in (2, 0, 3, 1):
        client.post(
            "/meals",
            json=meal_payload(name=f"meal {index}", meal_time=times[index]),
            headers=headers,
        )

    meals = client.get("/meals", headers=headers).json()["meals"]

    assert [m["name"] for m in meals] == ["meal 0", "meal 1", "meal 2", "meal 3"]
    stamps = [parse_time(m["meal_time"]) for m in meals]
    assert stamps == sorted(stamps)


def test_update_meal(client):
    """
    PUT replaces the meal and GET reflects it.

    Expected: 200 with empty body, new values on read
    """
    headers = auth_headers(register_and_login(client))
    meal_id = _create(client, headers)
    new_time = BASE_DAY + timedelta(hours=2)

    r = client.put(
        f"/meals/{meal_id}",
        json=meal_payload(name="Chocolate cake", description="Dessert", meal_time=new_time, is_diet=False),
        headers=headers,
    )

    assert r.status_code == 200
    meal = client.get(f"/meals/{meal_id}", headers=headers).json()["meal"]
    assert meal["name"] == "Chocolate cake"
    assert meal["description"] == "Dessert"
    assert parse_time(meal["meal_time"]) == new_time.replace(tzinfo=timezone.utc)
    assert meal["is_diet"] is False
    assert parse_time(meal["updated_at"]) >= parse_time(meal["created_at"])


def test_delete_meal_then_get_is_404(client):
    headers = auth_headers(register_and_login(client))
    meal_id = _create(client, headers)

    r = client.delete(f"/meals/{meal_id}", headers=headers)

    assert r.status_code == 200
    assert client.get(f"/meals/{meal_id}", headers=headers).status_code == 404
    assert client.get("/meals", headers=headers).json()["meals"] == []


# =============================================================================
# PER-USER ISOLATION
# =============================================================================


def test_meals_are_isolated_between_users(client):
    """
    User B can neither see nor change user A's meal.

    Verifies:
    - B's list is empty
    - GET by B is 404, PUT and DELETE by B are 400
    - A's meal is intact afterwards
    """
    owner = auth_headers(register_and_login(client, "default"))
    intruder = auth_headers(register_and_login(client, "athlete"))
    meal_id = _create(client, owner, name="Owner's breakfast")

    assert client.get("/meals", headers=intruder).json()["meals"] == []
    assert client.get(f"/meals/{meal_id}", headers=intruder).status_code == 404
    assert client.put(f"/meals/{meal_id}", json=meal_payload(name="Mine now"), headers=intruder).status_code == 400
    assert client.delete(f"/meals/{meal_id}", headers=intruder).status_code == 400

    meal = client.get(f"/meals/{meal_id}", headers=owner).json()["meal"]
    assert meal["name"] == "Owner's breakfast"


# =============================================================================
# SUMMARY
# =============================================================================


def test_summary_reports_counts_and_best_sequence(client):
    """
    Summary for [T,T,F,T,T,T,F,T] logged out of order.

    Expected:
        mealsQuantity=8, mealsOnDietQuantity=6,
        mealsOffDietQuantity=2, bestOnDietSequence=3
    """
    headers = auth_headers(register_and_login(client))
    flags = [True, True, False, True, True, True, False, True]
    times = meal_times(len(flags))
    for when, is_diet in reversed(list(zip(times, flags))):
        client.post("/meals", json=meal_payload(meal_time=when, is_diet=is_diet), headers=headers)

    r = client.get("/meals/summary", headers=headers)

    assert r.status_code == 200
    assert r.json() == {
        "mealsQuantity": 8,
        "mealsOnDietQuantity": 6,
        "mealsOffDietQuantity": 2,
        "bestOnDietSequence": 3,
    }


def test_summary_for_new_user_is_all_zero(client):
    headers = auth_headers(register_and_login(client))

    r = client.get("/meals/summary", headers=headers)

    assert r.status_code == 200
    assert r.json() == {
        "mealsQuantity": 0,
        "mealsOnDietQuantity": 0,
        "mealsOffDietQuantity": 0,
        "bestOnDietSequence": 0,
    }


def test_summary_all_on_diet(client):
    headers = auth_headers(register_and_login(client))
    for when in meal_times(3):
        client.post("/meals", json=meal_payload(meal_time=when, is_diet=True), headers=headers)

    body = client.get("/meals/summary", headers=headers).json()

    assert body["bestOnDietSequence"] == 3
    assert body["mealsOnDietQuantity"] + body["mealsOffDietQuantity"] == body["mealsQuantity"]


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    r = client.get("/health-check")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "DailyDiet", "database": "ok"}
    assert "x-request-id" in r.headers

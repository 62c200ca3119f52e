"""Tests for the backend endpoint facade."""

import asyncio

import httpx

from caloriv_admin.adapters.backend_client import HttpxBackendClient
from caloriv_admin.domain.content import AppConfig, DashboardStats
from caloriv_admin.services.admin_api import AdminApi


def test_list_foods_parses_rows(admin_api, fake_backend, food_row) -> None:
    fake_backend.respond(
        "GET", "/foods", {"success": True, "data": [food_row(), food_row(id="2")]}
    )

    foods = asyncio.run(admin_api.list_foods("Protein"))

    assert [food.id for food in foods] == ["food-1", "2"]
    assert foods[0].name_hindi == "पनीर टिक्का"
    assert foods[0].calories == 265
    assert fake_backend.requests[0].params == {"category": "Protein"}
    assert "x-admin-key" not in fake_backend.requests[0].headers


def test_list_foods_empty(admin_api, fake_backend) -> None:
    fake_backend.respond("GET", "/foods", {"success": True, "data": []})

    assert asyncio.run(admin_api.list_foods()) == []


def test_list_foods_tolerates_missing_data(admin_api, fake_backend) -> None:
    fake_backend.respond("GET", "/foods", {"success": True})

    assert asyncio.run(admin_api.list_foods()) == []


def test_list_exercises_forwards_filters(admin_api, fake_backend, exercise_row) -> None:
    fake_backend.respond("GET", "/exercises", {"data": [exercise_row()]})

    exercises = asyncio.run(admin_api.list_exercises("chest", "intermediate", "bench"))

    assert exercises[0].target_muscles == ["pectorals", "triceps"]
    assert fake_backend.requests[0].params == {
        "category": "chest",
        "difficulty": "intermediate",
        "search": "bench",
    }


def test_mutations_use_documented_paths(admin_api, fake_backend) -> None:
    asyncio.run(admin_api.create_food({"name": "Dal"}))
    asyncio.run(admin_api.update_food("f1", {"name": "Dal"}))
    asyncio.run(admin_api.delete_food("f1"))
    asyncio.run(admin_api.bulk_upload_foods([{"name": "Dal"}]))
    asyncio.run(admin_api.create_exercise({"name": "Squat"}))
    asyncio.run(admin_api.update_exercise("e1", {"name": "Squat"}))
    asyncio.run(admin_api.delete_exercise("e1"))
    asyncio.run(admin_api.delete_user("u1"))
    asyncio.run(admin_api.reset_user_password("u1", "temp-pass"))
    asyncio.run(admin_api.approve_food_submission("s1"))
    asyncio.run(admin_api.reject_food_submission("s2"))
    asyncio.run(admin_api.approve_exercise_submission("s3"))
    asyncio.run(admin_api.reject_exercise_submission("s4"))
    asyncio.run(admin_api.create_promotion({"imageUrl": "x"}))
    asyncio.run(admin_api.update_promotion("p1", {"imageUrl": "x"}))
    asyncio.run(admin_api.delete_promotion("p1"))
    asyncio.run(admin_api.create_announcement({"title": "Hi"}))
    asyncio.run(admin_api.delete_announcement("a1"))

    assert fake_backend.calls() == [
        ("POST", "/admin/foods"),
        ("PUT", "/admin/foods/f1"),
        ("DELETE", "/admin/foods/f1"),
        ("POST", "/admin/foods/bulk"),
        ("POST", "/admin/exercises"),
        ("PUT", "/admin/exercises/e1"),
        ("DELETE", "/admin/exercises/e1"),
        ("DELETE", "/admin/users/u1"),
        ("PUT", "/admin/users/u1/password"),
        ("POST", "/admin/food-submissions/s1/approve"),
        ("DELETE", "/admin/food-submissions/s2"),
        ("POST", "/admin/exercise-submissions/s3/approve"),
        ("DELETE", "/admin/exercise-submissions/s4"),
        ("POST", "/admin/promotions"),
        ("PUT", "/admin/promotions/p1"),
        ("DELETE", "/admin/promotions/p1"),
        ("POST", "/admin/announcements"),
        ("DELETE", "/admin/announcements/a1"),
    ]
    assert all(item.headers["x-admin-key"] for item in fake_backend.requests)
    assert fake_backend.last("PUT", "/admin/users/u1/password").body == {
        "password": "temp-pass"
    }
    assert fake_backend.last("POST", "/admin/foods/bulk").body == [{"name": "Dal"}]


def test_create_returns_echoed_record(admin_api, fake_backend, food_row) -> None:
    fake_backend.respond("POST", "/admin/foods", {"success": True, "data": food_row()})

    food = asyncio.run(admin_api.create_food({"name": "Paneer Tikka"}))

    assert food is not None
    assert food.name == "Paneer Tikka"


def test_list_users_reads_legacy_weight(admin_api, fake_backend) -> None:
    fake_backend.respond(
        "GET",
        "/admin/users",
        {
            "data": [
                {
                    "_id": "u1",
                    "email": "asha@example.com",
                    "name": "Asha",
                    "password": "$2b$10$abcdefghijkl",
                    "weight": 64,
                    "goal": "lose",
                }
            ]
        },
    )

    (user,) = asyncio.run(admin_api.list_users())

    assert user.id == "u1"
    assert user.current_weight == 64
    assert user.password_preview == "$2b$10$abc..."


def test_app_config_round_trip(admin_api, fake_backend) -> None:
    fake_backend.respond(
        "GET",
        "/admin/config",
        {"data": {"requiredVersion": "2.1.0", "forceUpdate": True}},
    )

    config = asyncio.run(admin_api.get_app_config())

    assert config == AppConfig(required_version="2.1.0", force_update=True)

    asyncio.run(admin_api.update_app_config(config))
    assert fake_backend.last("PUT", "/admin/config").body == {
        "requiredVersion": "2.1.0",
        "forceUpdate": True,
        "updateMessage": AppConfig().update_message,
        "updateUrl": AppConfig().update_url,
    }


def test_app_config_absent(admin_api, fake_backend) -> None:
    fake_backend.respond("GET", "/admin/config", {"success": True, "data": None})

    assert asyncio.run(admin_api.get_app_config()) is None


def test_get_stats(admin_api, fake_backend) -> None:
    fake_backend.respond(
        "GET",
        "/admin/stats",
        {"data": {"users": 12, "foods": 340, "exercises": 55, "pending": 3}},
    )

    stats = asyncio.run(admin_api.get_stats())

    assert stats == DashboardStats(users=12, foods=340, exercises=55, pending=3)


def test_non_numeric_values_are_ignored(admin_api, fake_backend, food_row) -> None:
    fake_backend.respond("GET", "/foods", {"data": [food_row(calories="lots")]})

    (food,) = asyncio.run(admin_api.list_foods())

    assert food.calories is None


def test_non_finite_numbers_are_ignored() -> None:
    body = (
        b'{"data": [{"_id": "u1", "email": "a@example.com", "name": "A",'
        b' "age": 1e400, "height": NaN, "currentWeight": -Infinity}]}'
    )

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, content=body, headers={"content-type": "application/json"}
        )

    client = HttpxBackendClient(
        base_url="http://backend.test/api",
        admin_key="admin-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    (user,) = asyncio.run(AdminApi(client).list_users())

    assert user.age is None
    assert user.height is None
    assert user.current_weight is None


def test_ids_are_sent_as_one_path_segment(admin_api, fake_backend) -> None:
    asyncio.run(admin_api.delete_food("abc?x=1"))

    (delete,) = fake_backend.requests
    assert (delete.method, delete.path) == ("DELETE", "/admin/foods/abc?x=1")
    assert delete.params == {}

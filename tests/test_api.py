"""Tests for the calculator HTTP API."""

from fastapi.testclient import TestClient

from pe_calculator.api.app import create_app
from pe_calculator.domain.recipe import Ingredient
from pe_calculator.services.codec import encode


def _client(container) -> TestClient:  # type: ignore[no-untyped-def]
    return TestClient(create_app(container))


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_recipe_totals(container) -> None:
    response = _client(container).post(
        "/recipes/totals",
        json={
            "name": "Chili",
            "ingredients": [
                {"name": "Beef", "protein": "20", "fat": "5", "netCarbs": "2"},
                {"name": "Beans", "protein": 10, "fat": "oops", "servings": "2"},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Chili"
    assert [row["id"] for row in data["ingredients"]] == [0, 1]
    assert data["ingredients"][1]["totals"]["protein"] == "20.00"
    assert data["ingredients"][1]["totals"]["ratio"] == "—"
    assert data["totals"] == {
        "protein": "40.00",
        "fat": "5.00",
        "net_carbs": "2.00",
        "ratio": "5.71",
    }
    assert data["fragment"] == f"#recipe={data['token']}"


def test_recipe_totals_rejects_duplicate_ids(container) -> None:
    response = _client(container).post(
        "/recipes/totals",
        json={"ingredients": [{"id": 1}, {"id": 1}]},
    )

    assert response.status_code == 422


def test_recipe_totals_keeps_explicit_ids(container) -> None:
    response = _client(container).post(
        "/recipes/totals",
        json={"ingredients": [{"id": 7, "protein": "1"}, {"protein": "2"}, {"id": 3}]},
    )

    assert response.status_code == 200
    assert [row["id"] for row in response.json()["ingredients"]] == [7, 8, 3]


def test_empty_recipe_still_has_a_row(container) -> None:
    response = _client(container).post("/recipes/totals", json={})

    data = response.json()
    assert len(data["ingredients"]) == 1
    assert data["ingredients"][0]["servings"] == "1"
    assert data["totals"]["ratio"] == "—"


def test_share_recipe(container) -> None:
    response = _client(container).post(
        "/recipes/share",
        json={"ingredients": [{"id": 5, "protein": "20", "fat": "5"}]},
    )

    data = response.json()
    assert data["url"] == f"https://pe.example/calc#recipe={data['token']}"
    assert data["fragment"] == f"#recipe={data['token']}"


def test_open_shared_recipe(container, chicken: Ingredient) -> None:
    token = encode([chicken], "Chili")

    response = _client(container).get(f"/recipes/{token}")

    data = response.json()
    assert data["restored"] is True
    assert data["name"] == "Chili"
    assert data["ingredients"][0]["protein"] == "20.00"
    assert data["totals"]["ratio"] == "2.86"
    assert data["token"] == token


def test_open_invalid_recipe_falls_back(container) -> None:
    response = _client(container).get("/recipes/bm90LWpzb24")

    assert response.status_code == 200
    data = response.json()
    assert data["restored"] is False
    assert data["name"] == ""
    assert len(data["ingredients"]) == 1


def test_print_recipe(container, chicken: Ingredient) -> None:
    token = encode([chicken], "")

    response = _client(container).get(f"/recipes/{token}/print")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Recipe breakdown" in response.text
    assert "Chicken" in response.text

"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from soylent_planner.api.app import create_app

PROFILE = {
    "weight": 80,
    "height_cm": 180,
    "body_fat_fraction": 0.15,
    "activity_level": 1.5,
    "age": 30,
    "gender": "male",
    "regime": "maintain",
}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_macros_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/macros", json=PROFILE)

    assert response.status_code == 200
    data = response.json()
    assert data["feasible"] is True
    assert data["infeasible"] == []
    assert data["macros"]["protein_g"] == pytest.approx(224.87, abs=0.01)
    assert data["macros"]["calories"] == pytest.approx(2739.8)


def test_macros_endpoint_accepts_pounds(container) -> None:
    client = TestClient(create_app(container))

    kg = client.post("/macros", json=PROFILE).json()
    lb = client.post(
        "/macros",
        json={**PROFILE, "weight": 80 * 2.20462262, "weight_unit": "lb"},
    ).json()

    assert lb["macros"]["fat_g"] == pytest.approx(kg["macros"]["fat_g"])


def test_invalid_gender_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/macros", json={**PROFILE, "gender": "other"})

    assert response.status_code == 422
    assert response.json()["field"] == "gender"


def test_invalid_body_fat_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/plan", json={**PROFILE, "body_fat_fraction": 1.2})

    assert response.status_code == 422
    assert response.json()["field"] == "body_fat_fraction"


def test_plan_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/plan", json=PROFILE)

    assert response.status_code == 200
    data = response.json()
    assert data["feasible"] is True
    assert data["recipe"]["salt"] == 4.0
    assert set(data["recipe"]) == {
        "oats",
        "whey",
        "maltodextrin",
        "oil",
        "psyllium",
        "salt",
        "multivitamin",
        "choline",
        "potassium",
    }


def test_plan_endpoint_reports_infeasible_profile(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/plan",
        json={
            **PROFILE,
            "weight": 150,
            "height_cm": 150,
            "body_fat_fraction": 0,
            "activity_level": 1,
            "age": 80,
            "gender": "female",
            "regime": "cut",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["feasible"] is False
    assert data["recipe"] is None
    assert data["infeasible"][0]["field"] == "carbs_g"
    assert data["macros"]["carbs_g"] < 0


def test_recipe_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recipe",
        json={"calories": 1600, "protein_g": 150, "fat_g": 60, "carbs_g": 180},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["recipe"]["oats"] == 200
    assert data["feasible"] is True


def test_recipe_endpoint_reports_overflow(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recipe",
        json={"calories": 1e308, "protein_g": 150, "fat_g": 60, "carbs_g": 180},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["feasible"] is False
    assert "oats" in [item["field"] for item in data["infeasible"]]


def test_capitalised_gender_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/macros", json={**PROFILE, "gender": "Male"})

    assert response.status_code == 422
    assert response.json()["field"] == "gender"

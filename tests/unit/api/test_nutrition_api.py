"""
API tests for the nutrition endpoints.
"""

import datetime

import pytest

from app.core.config import settings
from app.fittrack.ai_client import CloudflareAIClient
from app.services.food_parse_service import FoodParseService


def _log_breakfast(client):
    response = client.post("/api/nutrition/meals", json={
        "meal_type": "breakfast",
        "food_items": [
            {"food_name": "eggs", "quantity": 2, "unit": "piece", "calories": 78, "protein_g": 6},
            {"food_name": "toast", "quantity": 1, "unit": "slice", "calories": 80, "protein_g": 3},
        ],
    })
    assert response.status_code == 201
    return response.json()["meal_id"]


class TestParseEndpoint:
    """Test POST /api/nutrition/parse."""

    @pytest.mark.parametrize("body,field", [
        ({}, "text"),
        ({"text": ""}, "text"),
        ({"text": "   "}, "text"),
        ({"text": 42}, "text"),
        ({"text": None}, "text"),
    ])
    def test_invalid_text_is_400(self, client, body, field):
        response = client.post("/api/nutrition/parse", json=body)
        assert response.status_code == 400
        assert response.json()["detail"].startswith(f"{field}:")

    def test_no_history_no_ai(self, client):
        response = client.post("/api/nutrition/parse", json={"text": "2 eggs"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["foods"] == []
        assert data["source"] == "fallback"
        assert data["ai_available"] is False
        assert data["parsed_text"] == "2 eggs"
        assert data["message"]

    def test_fallback_uses_logged_meals(self, client):
        _log_breakfast(client)
        response = client.post("/api/nutrition/parse", json={"text": "3 eggs and toast"})
        data = response.json()
        assert data["success"] is True
        assert [f["name"] for f in data["foods"]] == ["Eggs", "Toast"]
        assert data["foods"][0]["quantity"] == 3
        assert data["foods"][0]["confidence"] == 0.6
        assert data["totals"]["calories"] == 314.0

    @pytest.mark.parametrize("calories", ["1e400", "Infinity"])
    def test_overflowing_ai_values_do_not_fail(self, client, monkeypatch, calories):
        answer = '{"foods": [{"name": "Egg", "quantity": 1, "unit": "piece", ' \
                 f'"calories": {calories}, "protein": 6, "carbs": 0.6, "fats": 5}}]}}'
        monkeypatch.setattr(settings, "CLOUDFLARE_ACCOUNT_ID", "account")
        monkeypatch.setattr(settings, "CLOUDFLARE_API_TOKEN", "token")
        monkeypatch.setattr(CloudflareAIClient, "complete", lambda self, system, user: answer)

        response = client.post("/api/nutrition/parse", json={"text": "an egg"})
        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "cloudflare-ai"
        assert data["foods"][0]["calories"] == 0.0
        assert data["totals"]["calories"] == 0.0
        assert data["totals"]["protein"] == 6.0

    def test_internal_error_is_500(self, client, monkeypatch):
        def broken(self, user_id, text):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(FoodParseService, "parse", broken)
        response = client.post("/api/nutrition/parse", json={"text": "2 eggs"})
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestMealsEndpoints:
    """Test meals, daily summary and frequent foods."""

    def test_daily_summary(self, client):
        _log_breakfast(client)
        data = client.get("/api/nutrition/daily").json()
        assert data["date"] == datetime.date.today().isoformat()
        assert data["totals"]["calories"] == 236.0
        assert data["goals"]["daily_calories"] == 1900
        assert data["percentages"]["calories"] == 12
        assert data["meals"][0]["totals"]["protein"] == 15.0

    def test_delete_meal(self, client):
        meal_id = _log_breakfast(client)
        assert client.delete(f"/api/nutrition/meals/{meal_id}").status_code == 204
        assert client.delete(f"/api/nutrition/meals/{meal_id}").status_code == 404
        assert client.get("/api/nutrition/daily").json()["meals"] == []

    def test_invalid_meal_type(self, client):
        response = client.post("/api/nutrition/meals", json={"meal_type": "brunch", "food_items": []})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("meal_type:")

    def test_frequent_foods(self, client):
        _log_breakfast(client)
        _log_breakfast(client)
        data = client.get("/api/nutrition/foods/frequent", params={"limit": 1}).json()
        assert len(data["foods"]) == 1
        assert data["foods"][0]["use_count"] == 2

        other = client.get("/api/nutrition/foods/frequent", params={"meal_type": "dinner"}).json()
        assert other["foods"] == []


class TestGoalsAndWater:
    """Test goals and water endpoints."""

    def test_goals_round_trip(self, client):
        assert client.get("/api/nutrition/goals").json()["goals"]["water_ml"] == 3000
        goals = {"daily_calories": 2400, "protein_g": 160, "carbs_g": 250, "fats_g": 80, "water_ml": 3500}
        assert client.put("/api/nutrition/goals", json=goals).json()["goals"] == goals
        assert client.get("/api/nutrition/goals").json()["goals"] == goals

    def test_goals_require_all_fields(self, client):
        response = client.put("/api/nutrition/goals", json={"daily_calories": 2400})
        assert response.status_code == 400

    def test_water(self, client):
        client.post("/api/nutrition/water", json={"amount_ml": 250})
        response = client.post("/api/nutrition/water", json={"amount_ml": 500})
        assert response.status_code == 201
        assert response.json()["total"] == 750

        day = client.get("/api/nutrition/water").json()
        assert day["total"] == 750
        assert day["entries"] == 2

    def test_water_must_be_positive(self, client):
        response = client.post("/api/nutrition/water", json={"amount_ml": 0})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("amount_ml:")

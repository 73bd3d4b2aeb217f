import json

import pytest

from models.MarketResearchDBModel import (
    CompetitorAnalysisDB,
    MarketOpportunityDB,
    MarketResearchDB,
    MarketTrendDB,
)
from models.MarketResearchModel import ResearchResult
from repository import PersistenceError, Repository
from services import opportunity_records, trend_records
from tests.conftest import fenced, research_payload

PROJECT = {
    "user_id": "user-1",
    "project_title": "FitTrack",
    "industry_sector": "Fitness",
    "target_market": "Gen Z",
}


def test_trends_competitors_and_opportunities_are_stored(client, fake_llm, rows):
    fake_llm.reply = fenced(research_payload())

    response = client.post("/api/market-research", json=PROJECT)

    assert response.status_code == 200
    body = response.json()
    research_id = body["research_id"]

    [project] = rows(MarketResearchDB)
    assert project.id == research_id
    assert project.status == "completed"
    assert project.is_fallback is False
    assert project.research_result == body["result"]

    trends = rows(MarketTrendDB, research_id=research_id)
    assert sorted((t.trend_name, t.impact_score) for t in trends) == [
        ("Gym apps", 40), ("Home workouts", 60), ("Wearables", 80),
    ]
    assert all(t.user_id == "user-1" for t in trends)

    [competitor] = rows(CompetitorAnalysisDB, research_id=research_id)
    assert competitor.competitor_name == "Strava"
    assert competitor.threat_level == "High"

    [opportunity] = rows(MarketOpportunityDB, research_id=research_id)
    assert opportunity.potential_score == 65


def test_unparseable_reply_stores_fallback_children(client, fake_llm, rows):
    fake_llm.reply = "The fitness market is large and growing."

    response = client.post("/api/market-research", json=PROJECT)

    assert response.status_code == 200
    ResearchResult.model_validate(response.json()["result"])
    assert rows(MarketResearchDB)[0].is_fallback is True
    assert sorted(t.impact_score for t in rows(MarketTrendDB)) == [60, 80]
    assert rows(CompetitorAnalysisDB) == []
    [opportunity] = rows(MarketOpportunityDB)
    assert opportunity.opportunity_title == "FitTrack for Gen Z"
    assert opportunity.potential_score == 50


def _with_market_size(literal: str) -> str:
    payload = research_payload()
    payload["market_overview"]["market_size_usd"] = 0
    return json.dumps(payload).replace('"market_size_usd": 0', f'"market_size_usd": {literal}')


@pytest.mark.parametrize("reply", [
    "Fitness apps are a crowded but growing space.",
    '```json\n{"market_overview": {"market_size_usd": \n```',
    json.dumps({"industry_trends": []}),
    _with_market_size("NaN"),
    _with_market_size("Infinity"),
    _with_market_size("1e999"),
])
def test_unusable_reply_falls_back(client, fake_llm, rows, reply):
    fake_llm.reply = reply

    response = client.post("/api/market-research", json=PROJECT)

    assert response.status_code == 200
    result = response.json()["result"]
    ResearchResult.model_validate(result)
    assert isinstance(result["market_overview"]["market_size_usd"], (int, float))
    [project] = rows(MarketResearchDB)
    assert project.is_fallback is True
    assert project.research_result == result


def test_prompt_uses_defaults_for_optional_fields(client, fake_llm):
    fake_llm.reply = fenced(research_payload())
    client.post("/api/market-research", json=PROJECT)
    [(_, prompt)] = fake_llm.calls
    assert "Global" in prompt
    assert "Comprehensive market analysis" in prompt


@pytest.mark.parametrize("missing", ["project_title", "industry_sector", "target_market"])
def test_missing_required_field(client, fake_llm, rows, missing):
    payload = {k: v for k, v in PROJECT.items() if k != missing}
    response = client.post("/api/market-research", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert fake_llm.calls == []
    assert rows(MarketResearchDB) == []


def test_failed_child_insert_returns_500(client, fake_llm, monkeypatch):
    async def failing_append(self, kind, parent_id, items):
        raise PersistenceError("append_child_records failed")

    monkeypatch.setattr(Repository, "append_child_records", failing_append)
    fake_llm.reply = fenced(research_payload())

    response = client.post("/api/market-research", json=PROJECT)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to save results"}


class TestListing:
    def test_projects_and_trends(self, client, fake_llm):
        fake_llm.reply = fenced(research_payload())
        research_id = client.post("/api/market-research", json=PROJECT).json()["research_id"]
        fake_llm.reply = "no json"
        other_id = client.post("/api/market-research", json=dict(PROJECT, project_title="Other")).json()["research_id"]

        projects = client.get("/api/market-research", params={"user_id": "user-1"}).json()["research_projects"]
        assert {p["id"] for p in projects} == {research_id, other_id}

        trends = client.get("/api/market-trends", params={"user_id": "user-1", "research_id": research_id}).json()["trends"]
        assert [t["impact_score"] for t in trends] == [80, 60, 40]
        assert trends[0]["trend_data"]["trend_name"] == "Wearables"

        all_trends = client.get("/api/market-trends", params={"user_id": "user-1"}).json()["trends"]
        assert len(all_trends) == 5

    @pytest.mark.parametrize("path", ["/api/market-research", "/api/market-trends"])
    def test_user_id_is_required(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing user_id"}


class TestChildRecords:
    def test_unknown_impact_level_scores_low(self):
        result = {"industry_trends": [{"trend_name": "X", "impact_level": "Unknown"}]}
        assert trend_records("u1", result)[0]["impact_score"] == 40

    def test_opportunity_score_is_success_probability(self):
        result = {"market_opportunities": [{"opportunity_title": "X", "success_probability": 72.5}]}
        assert opportunity_records("u1", result)[0]["potential_score"] == 72.5

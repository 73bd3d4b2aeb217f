"""Shared test fixtures and helpers.

Every API test runs against a fresh SQLite file and a scripted completion
client, injected through FastAPI dependency overrides.
"""

import copy
import json
import os

# Must be set before the application modules read their configuration
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from database import Base, get_db, make_session_factory
from helper.fallbacks import fallback_market_research, fallback_pitch, fallback_validation
from main import app, get_completion_client
import repository  # noqa: F401  registers every ORM model on Base.metadata


class FakeCompletionClient:
    """Stands in for CompletionClient; records calls and replays scripted text."""

    def __init__(self):
        self.reply = ""
        self.error = None
        self.calls = []

    def complete(self, system_instruction: str, prompt: str) -> str:
        self.calls.append((system_instruction, prompt))
        if self.error is not None:
            raise self.error
        if callable(self.reply):
            return self.reply(system_instruction, prompt)
        return self.reply


@pytest.fixture
def fake_llm():
    return FakeCompletionClient()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "foundrbox-test.db"


@pytest.fixture
def sync_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sync_engine, db_path):
    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return make_session_factory(async_engine)


@pytest.fixture
def client(session_factory, fake_llm):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: fake_llm
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def rows(sync_engine):
    """rows(Model, **filters) -> list of ORM rows read back synchronously."""
    def _rows(model, **filters):
        with Session(sync_engine) as session:
            statement = select(model).filter_by(**filters)
            return list(session.scalars(statement).all())
    return _rows


# ---------------------------------------------------------------------------
# Schema-valid model outputs
# ---------------------------------------------------------------------------

def validation_payload(overall_score: int = 72) -> dict:
    payload = copy.deepcopy(fallback_validation("Meal planner", "Plans meals"))
    payload["overall_score"] = overall_score
    payload["success_likelihood"] = "High"
    payload["innovation_level"] = "Significant"
    return payload


def research_payload() -> dict:
    payload = copy.deepcopy(fallback_market_research("FitTrack", "Fitness", "Gen Z"))
    payload["industry_trends"] = [
        {
            "trend_name": name,
            "description": f"{name} is growing",
            "impact_level": level,
            "time_horizon": "Short-term",
            "opportunities": ["Opportunity"],
        }
        for name, level in (("Wearables", "High"), ("Home workouts", "Medium"), ("Gym apps", "Low"))
    ]
    payload["competitive_landscape"]["key_players"] = [
        {
            "company_name": "Strava",
            "market_share": 12.5,
            "strengths": ["Community"],
            "weaknesses": ["Price"],
            "threat_level": "High",
        }
    ]
    payload["market_opportunities"][0]["success_probability"] = 65
    return payload


def pitch_payload() -> dict:
    payload = copy.deepcopy(fallback_pitch("Meal planner", "Plans meals"))
    payload["executive_summary"]["pitch_theme"] = "Dinner, solved"
    payload["success_metrics"]["pitch_effectiveness_score"] = 82
    return payload


def fenced(payload: dict) -> str:
    return f"Here is the analysis you asked for:\n```json\n{json.dumps(payload)}\n```\nGood luck!"

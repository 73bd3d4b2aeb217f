from typing import Any, Dict, List

from fastapi import HTTPException, status

from logger import get_logger
from models.IdeaValidationModel import IdeaValidationRequest
from models.MarketResearchModel import MarketResearchRequest
from models.PitchModel import PitchGenerationRequest
from pipeline import GenerationPipeline, MARKET_RESEARCH_SPEC, PITCH_SPEC, VALIDATION_SPEC
from repository import PersistenceError, Repository

logger = get_logger(__name__)

IMPACT_SCORES = {"High": 80, "Medium": 60, "Low": 40}


def _server_error(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# ========== Idea Validation ==========

async def validate_idea(
    payload: IdeaValidationRequest,
    pipeline: GenerationPipeline,
    repo: Repository,
) -> Dict[str, Any]:
    try:
        validation_id = await repo.create_record("idea_validations", {
            "user_id": payload.user_id,
            "idea_title": payload.idea_title,
            "idea_description": payload.idea_description,
            "target_audience": payload.target_audience,
            "problem_solving": payload.problem_solving,
            "unique_value_proposition": payload.unique_value_proposition,
            "business_model": payload.business_model,
            "technical_feasibility": payload.technical_feasibility,
            "resource_requirements": payload.resource_requirements,
            "validation_result": {},
            "overall_score": 0,
            "status": "processing",
        })
    except PersistenceError:
        raise _server_error("Failed to save idea")

    outcome = await pipeline.generate(VALIDATION_SPEC, payload)

    try:
        await repo.update_record("idea_validations", validation_id, {
            "validation_result": outcome.result,
            "overall_score": outcome.result["overall_score"],
            "status": "completed",
            "is_fallback": outcome.used_fallback,
        })
    except PersistenceError:
        raise _server_error("Failed to save results")

    return {"success": True, "validation_id": validation_id, "result": outcome.result}


# ========== Market Research ==========

def trend_records(user_id: str, result: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [
        {
            "user_id": user_id,
            "trend_name": trend["trend_name"],
            "trend_data": trend,
            "impact_score": IMPACT_SCORES.get(trend["impact_level"], IMPACT_SCORES["Low"]),
        }
        for trend in result.get("industry_trends", [])
    ]


def competitor_records(user_id: str, result: Dict[str, Any]) -> List[Dict[str, Any]]:
    players = result.get("competitive_landscape", {}).get("key_players", [])
    return [
        {
            "user_id": user_id,
            "competitor_name": player["company_name"],
            "competitor_data": player,
            "threat_level": player["threat_level"],
        }
        for player in players
    ]


def opportunity_records(user_id: str, result: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [
        {
            "user_id": user_id,
            "opportunity_title": opportunity["opportunity_title"],
            "opportunity_data": opportunity,
            "potential_score": opportunity["success_probability"],
        }
        for opportunity in result.get("market_opportunities", [])
    ]


async def run_market_research(
    payload: MarketResearchRequest,
    pipeline: GenerationPipeline,
    repo: Repository,
) -> Dict[str, Any]:
    try:
        research_id = await repo.create_record("market_research", {
            "user_id": payload.user_id,
            "project_title": payload.project_title,
            "industry_sector": payload.industry_sector,
            "target_market": payload.target_market,
            "geographic_focus": payload.geographic_focus,
            "research_goals": payload.research_goals,
            "research_result": {},
            "status": "processing",
        })
    except PersistenceError:
        raise _server_error("Failed to save research project")

    outcome = await pipeline.generate(MARKET_RESEARCH_SPEC, payload)
    result = outcome.result

    try:
        await repo.update_record("market_research", research_id, {
            "research_result": result,
            "status": "completed",
            "is_fallback": outcome.used_fallback,
        })
        await repo.append_child_records("market_trends", research_id, trend_records(payload.user_id, result))
        await repo.append_child_records("competitor_analysis", research_id, competitor_records(payload.user_id, result))
        await repo.append_child_records("market_opportunities", research_id, opportunity_records(payload.user_id, result))
    except PersistenceError:
        raise _server_error("Failed to save results")

    return {"success": True, "research_id": research_id, "result": result}


# ========== Pitch Generation ==========

async def generate_pitch(
    payload: PitchGenerationRequest,
    pipeline: GenerationPipeline,
    repo: Repository,
) -> Dict[str, Any]:
    outcome = await pipeline.generate(PITCH_SPEC, payload)

    try:
        pitch_id = await repo.create_record("pitch_assistant", {
            "user_id": payload.user_id,
            "idea_source": payload.idea_source,
            "idea_id": payload.idea_id or None,
            "idea_title": payload.idea_title,
            "idea_description": payload.idea_description or "",
            "pitch_content": outcome.result,
            "is_fallback": outcome.used_fallback,
        })
    except PersistenceError:
        raise _server_error("Failed to save pitch")

    return {"success": True, "pitch_id": pitch_id, "pitch_content": outcome.result}

import pytest

from helper.fallbacks import (
    FALLBACK_CHAT_REPLY,
    fallback_market_research,
    fallback_pitch,
    fallback_validation,
)
from models.IdeaValidationModel import ValidationResult
from models.MarketResearchModel import ResearchResult
from models.PitchModel import PitchContent


@pytest.mark.parametrize("builder, args, model", [
    (fallback_validation, ("Meal planner", "Plans weekly meals"), ValidationResult),
    (fallback_market_research, ("FitTrack", "Fitness", "Gen Z"), ResearchResult),
    (fallback_pitch, ("Meal planner", "Plans weekly meals"), PitchContent),
])
class TestFallbackResults:
    def test_validates_against_result_model(self, builder, args, model):
        model.model_validate(builder(*args))

    def test_is_deterministic(self, builder, args, model):
        assert builder(*args) == builder(*args)

    def test_validates_with_empty_description_fields(self, builder, args, model):
        model.model_validate(builder(*("" for _ in args)))


def test_validation_fallback_scores():
    result = fallback_validation("Meal planner", "Plans weekly meals")
    assert result["overall_score"] == 70
    assert set(result["category_scores"].values()) == {70}
    assert result["success_likelihood"] == "Medium"
    assert result["innovation_level"] == "Incremental"


def test_market_research_fallback_mentions_the_request():
    result = fallback_market_research("FitTrack", "Fitness", "Gen Z")
    assert [t["impact_level"] for t in result["industry_trends"]] == ["High", "Medium"]
    assert result["competitive_landscape"]["key_players"] == []
    assert result["market_opportunities"][0]["opportunity_title"] == "FitTrack for Gen Z"
    assert result["market_opportunities"][0]["success_probability"] == 50


def test_pitch_fallback_theme_uses_idea_title():
    result = fallback_pitch("Meal planner", "")
    assert result["executive_summary"]["pitch_theme"] == "Investor presentation for Meal planner"
    assert result["success_metrics"]["pitch_effectiveness_score"] == 70


def test_chat_fallback_is_plain_text():
    assert FALLBACK_CHAT_REPLY.strip()
    assert "{" not in FALLBACK_CHAT_REPLY
